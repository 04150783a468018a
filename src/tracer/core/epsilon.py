"""Tolerances for approximate floating-point comparison.

Every value type in the tracer compares approximately: chained matrix
multiplications accumulate rounding error, so exact equality would make
otherwise identical points, vectors and matrices compare unequal.
"""

import math

# Tolerance for tuples, matrices and the singular-matrix test
EPSILON = 1e-5

# Looser tolerance for colors; reference shading values carry four decimals
COLOR_EPSILON = 1e-4


def approx_eq(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Return True if a and b differ by less than epsilon."""
    return math.isclose(a, b, rel_tol=0.0, abs_tol=epsilon)


def approx_zero(value: float, epsilon: float = EPSILON) -> bool:
    """Return True if value is within epsilon of zero."""
    return abs(value) < epsilon
