"""Square matrices with cofactor-expansion determinant and inverse.

The tracer works with 4x4 matrices; 3x3 and 2x2 matrices appear as the
submatrices produced during cofactor expansion. Values are stored in a
read-only float64 NumPy array, so a Matrix is an immutable value that can be
shared freely between threads.

The determinant is computed by cofactor expansion along the first row,
bottoming out at the closed-form 2x2 determinant ad - bc. The inverse is the
transposed cofactor matrix divided by the determinant, filled in a single pass
as result[col, row] = cofactor(row, col) / det.

A matrix whose determinant is within EPSILON of zero has no inverse:
inverse() returns None rather than raising. Callers decide what a missing
inverse means for them (a degenerate shape simply cannot be hit).

Example:
    >>> from src.tracer.core.matrix import Matrix
    >>> from src.tracer.core.tuple import point
    >>> m = Matrix([[1, 0, 0, 5], [0, 1, 0, -3], [0, 0, 1, 2], [0, 0, 0, 1]])
    >>> m @ point(-3, 4, 5)
    Tuple(x=2.0, y=1.0, z=7.0, w=1.0)
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import overload

import numpy as np
import numpy.typing as npt

from src.tracer.core.epsilon import EPSILON, approx_zero
from src.tracer.core.tuple import Tuple


class Matrix:
    """An immutable square matrix of 64-bit floats.

    Args:
        rows: Row-major values, either nested sequences or a 2D array.

    Raises:
        ValueError: If the values do not form a square matrix of size >= 2.
    """

    def __init__(self, rows: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        if data.shape[0] < 2:
            raise ValueError(f"Matrix must be at least 2x2, got {data.shape[0]}x{data.shape[0]}")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Return the size x size identity matrix."""
        return cls(np.identity(size, dtype=np.float64))

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def rows(self) -> tuple[tuple[float, ...], ...]:
        """Return the values as nested Python tuples."""
        return tuple(tuple(float(v) for v in row) for row in self._data)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None  # type: ignore[assignment]

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Tuple) -> Tuple: ...

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(
                    f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError(f"Only 4x4 matrices transform tuples, got {self.size}x{self.size}")
            x, y, z, w = self._data @ np.array(other.to_tuple(), dtype=np.float64)
            return Tuple(float(x), float(y), float(z), float(w))
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (row, col), negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        return self._determinant

    @cached_property
    def _determinant(self) -> float:
        if self.size == 2:
            a, b = self._data[0]
            c, d = self._data[1]
            return float(a * d - b * c)
        return float(
            sum(self._data[0, col] * self.cofactor(0, col) for col in range(self.size))
        )

    def is_invertible(self) -> bool:
        return not approx_zero(self.determinant(), EPSILON)

    def inverse(self) -> Matrix | None:
        """Return the inverse, or None if the matrix is singular.

        The result is computed once per instance and reused.
        """
        return self._inverse

    @cached_property
    def _inverse(self) -> Matrix | None:
        det = self.determinant()
        if approx_zero(det, EPSILON):
            return None

        result = np.zeros_like(self._data)
        for row in range(self.size):
            for col in range(self.size):
                # Transposed assignment folds the adjugate transpose into this pass
                result[col, row] = self.cofactor(row, col) / det
        return Matrix(result)

    def __repr__(self) -> str:
        body = ", ".join(
            "[" + ", ".join(f"{float(v):g}" for v in row) + "]" for row in self._data
        )
        return f"Matrix([{body}])"


IDENTITY = Matrix.identity(4)

__all__ = ["IDENTITY", "Matrix"]
