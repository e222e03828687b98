"""
Levels — Current/target creature level pair

Immutable Pydantic model holding the level a statistic is valid at and the
level it should be rescaled to. Both levels index rows of every reference
table, so they must lie in [MIN_LEVEL, MAX_LEVEL].

Level -1 is the lowest row of the tables; there is no row for creatures
weaker than that.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_LEVEL: Final[int] = -1
MAX_LEVEL: Final[int] = 24


def num_levels() -> int:
    """Number of rows every reference table must have."""
    return MAX_LEVEL - MIN_LEVEL + 1


def is_valid_level(level: int) -> bool:
    return MIN_LEVEL <= level <= MAX_LEVEL


def level_to_row(level: int) -> int:
    """
    Row index of a level in a reference table.

    Raises:
        ValueError: If the level is out of range
    """
    if not is_valid_level(level):
        raise ValueError(f"level {level} out of range [{MIN_LEVEL}, {MAX_LEVEL}]")
    return level - MIN_LEVEL


# =============================================================================
# LEVELS MODEL
# =============================================================================


class Levels(BaseModel):
    """
    Validated (current, target) level pair.

    Immutable model (frozen=True); construction fails with a ValidationError
    naming the level that is out of range.
    """

    current: int = Field(..., strict=True, description="Level the statistic is valid at")
    target: int = Field(..., strict=True, description="Level to rescale the statistic to")

    model_config = {"frozen": True}

    @field_validator("current", "target")
    @classmethod
    def validate_level_range(cls, v: int, info) -> int:
        """Both levels must lie in [MIN_LEVEL, MAX_LEVEL]."""
        if v < MIN_LEVEL:
            raise ValueError(
                f"{info.field_name} level {v} out of range [{MIN_LEVEL}, {MAX_LEVEL}]: "
                f"below minimum {MIN_LEVEL}"
            )
        if v > MAX_LEVEL:
            raise ValueError(
                f"{info.field_name} level {v} out of range [{MIN_LEVEL}, {MAX_LEVEL}]: "
                f"above maximum {MAX_LEVEL}"
            )
        return v

    def current_row(self) -> int:
        return level_to_row(self.current)

    def target_row(self) -> int:
        return level_to_row(self.target)
