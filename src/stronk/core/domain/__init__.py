"""
Domain models and value objects.

Contains the value objects exchanged by the scaling engine: Levels,
Statistic, Proficiency, Damage, StatTable and ScaleResult.
"""

from stronk.core.domain.damage import Damage, DamageComponent
from stronk.core.domain.levels import (
    MAX_LEVEL,
    MIN_LEVEL,
    Levels,
    is_valid_level,
    level_to_row,
    num_levels,
)
from stronk.core.domain.proficiency import Proficiency
from stronk.core.domain.scale_result import ScaleMethod, ScaleResult
from stronk.core.domain.stat_table import StatTable
from stronk.core.domain.statistic import (
    BONUS_TYPES,
    DAMAGE_TYPES,
    STAT_ALIASES,
    Statistic,
    StatType,
    stat_type_from_alias,
)

__all__ = [
    # Levels module
    "MIN_LEVEL",
    "MAX_LEVEL",
    "Levels",
    "is_valid_level",
    "level_to_row",
    "num_levels",
    # Proficiency
    "Proficiency",
    # Statistic model
    "Statistic",
    "StatType",
    "BONUS_TYPES",
    "DAMAGE_TYPES",
    "STAT_ALIASES",
    "stat_type_from_alias",
    # Damage models
    "Damage",
    "DamageComponent",
    # Tables and results
    "StatTable",
    "ScaleMethod",
    "ScaleResult",
]
