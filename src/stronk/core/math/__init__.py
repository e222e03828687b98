"""
Core math modules for stronk

Numeric primitives for table lookups: tolerant comparisons and the
interpolation/extrapolation contracts.
"""

# Numerical Safeguards
from stronk.core.math.numerical_safeguards import (
    EPS_FLOAT_EQ,
    float_eq,
    is_valid_float,
    validate_finite,
    validate_positive,
)

# Interpolation
from stronk.core.math.interpolation import (
    ScalingContractViolation,
    extrapolate,
    interpolate,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_EQ",
    # Numerical Safeguards: Comparisons
    "float_eq",
    "is_valid_float",
    # Numerical Safeguards: Validation
    "validate_finite",
    "validate_positive",
    # Interpolation: Exceptions
    "ScalingContractViolation",
    # Interpolation: Functions
    "extrapolate",
    "interpolate",
]
