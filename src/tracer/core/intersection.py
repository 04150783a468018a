"""Intersection records, sorted intersection lists, and shading inputs.

An Intersection pairs a ray parameter t with the shape that produced it.
Intersections keeps its records sorted ascending by t at all times; records
with equal t keep the order in which they were inserted. The hit is the first
record with a non-negative t, i.e. the nearest surface in front of the ray
origin.

Example:
    >>> from src.tracer.core.intersection import Intersection, Intersections
    >>> from src.tracer.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = Intersections([Intersection(5, s), Intersection(-3, s), Intersection(2, s)])
    >>> xs.hit().t
    2.0
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, overload

from src.tracer.core.epsilon import approx_eq
from src.tracer.core.ray import Ray
from src.tracer.core.tuple import Tuple

if TYPE_CHECKING:
    from src.tracer.geometry.variants import Shape


@dataclass(frozen=True, eq=False)
class Intersection:
    """A ray parameter t and the shape hit at that parameter.

    Equality and ordering consider t only.

    Attributes:
        t: Distance along the ray, in units of the ray's direction length.
        object: The shape that was intersected.
    """

    t: float
    object: Shape = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "t", float(self.t))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return approx_eq(self.t, other.t)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Intersection) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t < other.t

    def prepare_computations(self, ray: Ray) -> Computations:
        """Derive the geometric inputs needed to shade this intersection.

        Args:
            ray: The ray that produced this intersection.

        Returns:
            Computations holding t, the object, the world-space hit point,
            the eye vector and the surface normal at the hit point.
        """
        # geometry imports this module, so dispatch is resolved at call time
        from src.tracer.geometry.variants import normal_at_shape

        point = ray.position(self.t)
        return Computations(
            t=self.t,
            object=self.object,
            point=point,
            eye_v=-ray.direction,
            normal_v=normal_at_shape(self.object, point),
        )


@dataclass(frozen=True)
class Computations:
    """Precomputed shading inputs for one intersection.

    Attributes:
        t: Ray parameter of the intersection.
        object: The shape that was hit.
        point: World-space hit point.
        eye_v: Vector from the hit point back toward the eye (-ray.direction).
        normal_v: World-space unit surface normal at point.
    """

    t: float
    object: Shape = field(repr=False)
    point: Tuple
    eye_v: Tuple
    normal_v: Tuple


class Intersections(Sequence[Intersection]):
    """Intersection records kept sorted ascending by t.

    Args:
        intersections: Optional initial records, in any order.
    """

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items: list[Intersection] = []
        self.extend(intersections)

    def add(self, intersection: Intersection) -> None:
        """Insert one record, after any existing records with the same t."""
        bisect.insort_right(self._items, intersection, key=_t_key)

    def extend(self, intersections: Iterable[Intersection]) -> None:
        for intersection in intersections:
            self.add(intersection)

    def hit(self) -> Intersection | None:
        """Return the record with the lowest non-negative t, or None."""
        for intersection in self._items:
            if intersection.t >= 0.0:
                return intersection
        return None

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> list[Intersection]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({[i.t for i in self._items]})"


def _t_key(intersection: Intersection) -> float:
    return intersection.t


__all__ = ["Computations", "Intersection", "Intersections"]
