"""
Damage expressions: parsing text into expected values and building dice
expressions back from expected values.
"""

from stronk.damage.builder import (
    ALL_DIE_SIZES,
    DICE_PREFERENCES,
    MAX_DICE_COUNT,
    DiceCandidate,
    best_candidate,
    build_damage_expression,
)
from stronk.damage.parser import (
    DIE_AVERAGES,
    DamageParseError,
    parse_damage,
    parse_damage_component,
    parse_damage_expression,
    parse_dice_term,
    parse_flat_modifier,
)

__all__ = [
    # Parser
    "DIE_AVERAGES",
    "DamageParseError",
    "parse_damage",
    "parse_damage_component",
    "parse_damage_expression",
    "parse_dice_term",
    "parse_flat_modifier",
    # Builder
    "ALL_DIE_SIZES",
    "DICE_PREFERENCES",
    "MAX_DICE_COUNT",
    "DiceCandidate",
    "best_candidate",
    "build_damage_expression",
]
