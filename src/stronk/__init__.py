"""
stronk: rescale creature statistics from one level to another.

Each statistic is located in the current-level row of its reference table
and mapped to the target-level row, exactly, by linear interpolation, or by
extrapolation from the nearest edge. Damage is parsed from dice text,
rescaled as a total and rebuilt as dice expressions.
"""

from stronk.core.domain import (
    Damage,
    DamageComponent,
    Levels,
    Proficiency,
    ScaleMethod,
    ScaleResult,
    Statistic,
    StatTable,
    StatType,
)
from stronk.core.math import ScalingContractViolation
from stronk.damage import (
    DamageParseError,
    build_damage_expression,
    parse_damage,
    parse_damage_expression,
)
from stronk.scaling import scale_damage_components, scale_statistic
from stronk.tables import get_table_for_statistic

__version__ = "0.3.0"

__all__ = [
    "Damage",
    "DamageComponent",
    "Levels",
    "Proficiency",
    "ScaleMethod",
    "ScaleResult",
    "Statistic",
    "StatTable",
    "StatType",
    "ScalingContractViolation",
    "DamageParseError",
    "build_damage_expression",
    "parse_damage",
    "parse_damage_expression",
    "scale_damage_components",
    "scale_statistic",
    "get_table_for_statistic",
]
