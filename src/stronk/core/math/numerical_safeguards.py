"""
Numerical Safeguards — Float Comparison and Validation Primitives

Every table lookup compares a creature statistic against reference values that
were read from JSON and, for damage tables, computed from dice averages. This
module keeps those comparisons tolerant and the inputs finite:

- Epsilon comparison of floats (exact table matches)
- NaN/Inf detection
- Validation of strictly positive inputs (damage totals, builder targets)

CRITICAL INVARIANTS:
1. Two values closer than EPS_FLOAT_EQ are the same table entry
2. NaN/Inf never reach the scaling engine
3. All operations are deterministic and reproducible
"""

import math
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Absolute tolerance for "this value is that table entry"
EPS_FLOAT_EQ: Final[float] = 1e-6


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is usable (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite, False for NaN or Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def float_eq(a: float, b: float, tol: float = EPS_FLOAT_EQ) -> bool:
    """
    Absolute-tolerance float equality.

    Algorithm:
        abs(b - a) < tol

    Args:
        a: First value
        b: Second value
        tol: Absolute tolerance (default: EPS_FLOAT_EQ)

    Returns:
        True if the values differ by less than tol

    Examples:
        >>> float_eq(4.5, 4.5000001)
        True
        >>> float_eq(4.5, 4.51)
        False
    """
    return abs(b - a) < tol


# =============================================================================
# VALIDATION
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Validate that a value is a finite float.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value is NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Validate that a value is strictly positive.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value <= 0 or NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
