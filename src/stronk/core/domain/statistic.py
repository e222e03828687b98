"""
Statistic — A creature statistic and the kind that selects its table

Immutable Pydantic model pairing a StatType with its numeric value.

The kind decides:
- which reference table is used (see stronk.tables.registry)
- whether the value is a plain number or an aggregate damage average
- whether the value is displayed with an explicit sign (bonuses)
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from stronk.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# ENUMS
# =============================================================================


class StatType(str, Enum):
    """Statistic kind; the value is the canonical prompt name."""

    PERCEPTION = "perception"
    SKILL = "skill"
    ARMOR_CLASS = "ac"
    SAVING_THROW = "save"
    HIT_POINTS = "hp"
    RESISTANCE = "resistance"
    WEAKNESS = "weakness"
    STRIKE_ATTACK_BONUS = "strike-attack"
    STRIKE_DAMAGE = "strike-damage"
    SPELL_DC = "spell-dc"
    SPELL_ATTACK_BONUS = "spell-attack"
    UNLIMITED_AREA_DAMAGE = "unlimited-area-damage"
    LIMITED_AREA_DAMAGE = "limited-area-damage"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    @property
    def is_bonus(self) -> bool:
        return self in BONUS_TYPES

    @property
    def is_damage(self) -> bool:
        return self in DAMAGE_TYPES

    def __str__(self) -> str:
        return self.display_name


# =============================================================================
# CLASSIFICATION
# =============================================================================

DISPLAY_NAMES: Final[dict[StatType, str]] = {
    StatType.PERCEPTION: "Perception",
    StatType.SKILL: "Skill",
    StatType.ARMOR_CLASS: "AC",
    StatType.SAVING_THROW: "Saving Throw",
    StatType.HIT_POINTS: "HP",
    StatType.RESISTANCE: "Resistance",
    StatType.WEAKNESS: "Weakness",
    StatType.STRIKE_ATTACK_BONUS: "Strike Attack Bonus",
    StatType.STRIKE_DAMAGE: "Strike Damage",
    StatType.SPELL_DC: "Spell DC",
    StatType.SPELL_ATTACK_BONUS: "Spell Attack Bonus",
    StatType.UNLIMITED_AREA_DAMAGE: "Unlimited Area Damage",
    StatType.LIMITED_AREA_DAMAGE: "Limited Area Damage",
}

# Displayed with an explicit sign ("+13")
BONUS_TYPES: Final[frozenset[StatType]] = frozenset(
    {
        StatType.PERCEPTION,
        StatType.SKILL,
        StatType.SAVING_THROW,
        StatType.STRIKE_ATTACK_BONUS,
        StatType.SPELL_ATTACK_BONUS,
    }
)

# Value is the total of a damage specification ("2d8+11 piercing plus 1d6 fire")
DAMAGE_TYPES: Final[frozenset[StatType]] = frozenset(
    {
        StatType.STRIKE_DAMAGE,
        StatType.UNLIMITED_AREA_DAMAGE,
        StatType.LIMITED_AREA_DAMAGE,
    }
)

# Prompt name → kind
STAT_ALIASES: Final[dict[str, StatType]] = {
    "perception": StatType.PERCEPTION,
    "per": StatType.PERCEPTION,
    "skill": StatType.SKILL,
    "ac": StatType.ARMOR_CLASS,
    "save": StatType.SAVING_THROW,
    "fortitude": StatType.SAVING_THROW,
    "fort": StatType.SAVING_THROW,
    "reflex": StatType.SAVING_THROW,
    "ref": StatType.SAVING_THROW,
    "will": StatType.SAVING_THROW,
    "hp": StatType.HIT_POINTS,
    "resistance": StatType.RESISTANCE,
    "weakness": StatType.WEAKNESS,
    "strike-attack": StatType.STRIKE_ATTACK_BONUS,
    "att": StatType.STRIKE_ATTACK_BONUS,
    "strike-damage": StatType.STRIKE_DAMAGE,
    "dmg": StatType.STRIKE_DAMAGE,
    "spell-dc": StatType.SPELL_DC,
    "spell-attack": StatType.SPELL_ATTACK_BONUS,
    "unlimited-area-damage": StatType.UNLIMITED_AREA_DAMAGE,
    "limited-area-damage": StatType.LIMITED_AREA_DAMAGE,
}


def stat_type_from_alias(alias: str) -> StatType | None:
    """Resolve a prompt name ("fort", "dmg", ...) to its kind, or None."""
    return STAT_ALIASES.get(alias.strip().lower())


# =============================================================================
# STATISTIC MODEL
# =============================================================================


class Statistic(BaseModel):
    """
    A statistic value of a given kind.

    Immutable model (frozen=True). For damage kinds the value is the total
    expected damage of all components.
    """

    kind: StatType = Field(..., description="Statistic kind")
    value: float = Field(..., description="Statistic value (expected value for damage)")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value_finite(cls, v: float) -> float:
        if not is_valid_float(v):
            raise ValueError(f"statistic value must be finite, got {v}")
        return v
