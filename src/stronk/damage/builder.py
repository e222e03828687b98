"""
Damage Expression Builder — inverse of the parser

Given a target expected damage and a proficiency rank, find the dice
expression whose expected value is as close to the target as possible
WITHOUT exceeding it.

SEARCH SPACE:
    die size ∈ preferred sizes of the proficiency (then every size)
    dice count ∈ 1..MAX_DICE_COUNT
    flat modifier = floor(target - dice_avg)

RANKING (lexicographic, smaller is better):
    1. gap        = target - (dice_avg + flat)
    2. balance    = |flat - dice_avg|      (the flat part should not dominate)
    3. preference = index of the die size in the preference list

FALLBACKS:
    no preferred size fits → retry with ALL_DIE_SIZES (largest first)
    nothing fits (target < 2.5) → bare integer floor(target)
"""

import math
from dataclasses import dataclass
from typing import Final

from stronk.core.domain.proficiency import Proficiency
from stronk.core.math.interpolation import ScalingContractViolation
from stronk.core.math.numerical_safeguards import validate_positive
from stronk.damage.parser import DIE_AVERAGES


# =============================================================================
# CONSTANTS
# =============================================================================

MAX_DICE_COUNT: Final[int] = 4

# Every supported die size, largest first
ALL_DIE_SIZES: Final[tuple[int, ...]] = (12, 10, 8, 6, 4)

# Die sizes each proficiency rank reaches for in strike damage, most typical first
DICE_PREFERENCES: Final[dict[Proficiency, tuple[int, ...]]] = {
    Proficiency.LOW: (4, 6),
    Proficiency.MODERATE: (6, 8),
    Proficiency.HIGH: (8, 10),
    Proficiency.EXTREME: (12, 10),
}


# =============================================================================
# CANDIDATES
# =============================================================================


@dataclass(frozen=True)
class DiceCandidate:
    """One (count, size, flat) combination and its ranking keys."""

    count: int
    size: int
    flat_modifier: int
    gap: float
    balance: float
    preference: int

    def ranking_key(self) -> tuple[float, float, int]:
        return (self.gap, self.balance, self.preference)

    def expected_value(self) -> float:
        return self.count * DIE_AVERAGES[str(self.size)] + self.flat_modifier

    def to_expression(self) -> str:
        dice = f"{self.count}d{self.size}"
        if self.flat_modifier == 0:
            return dice
        return f"{dice}+{self.flat_modifier}"


def _candidates(target: float, sizes: tuple[int, ...]) -> list[DiceCandidate]:
    candidates = []

    for preference, size in enumerate(sizes):
        for count in range(1, MAX_DICE_COUNT + 1):
            dice_avg = count * DIE_AVERAGES[str(size)]
            if dice_avg > target:
                continue

            flat = math.floor(target - dice_avg)
            candidates.append(
                DiceCandidate(
                    count=count,
                    size=size,
                    flat_modifier=flat,
                    gap=target - (dice_avg + flat),
                    balance=abs(flat - dice_avg),
                    preference=preference,
                )
            )

    return candidates


def best_candidate(target: float, sizes: tuple[int, ...]) -> DiceCandidate | None:
    """Lexicographically best candidate over the given sizes, or None if none fits."""
    candidates = _candidates(target, sizes)
    if not candidates:
        return None
    return min(candidates, key=DiceCandidate.ranking_key)


# =============================================================================
# BUILD
# =============================================================================


def build_damage_expression(average_value: float, proficiency: Proficiency) -> str:
    """
    Dice expression approximating average_value from below.

    Args:
        average_value: Target expected damage, > 0
        proficiency: Proficiency rank selecting the preferred die sizes

    Returns:
        "NdS", "NdS+F", or a bare integer when no die fits

    Raises:
        ValueError: If average_value <= 0
        ScalingContractViolation: If the proficiency has no dice preference

    Examples:
        >>> build_damage_expression(20.0, Proficiency.HIGH)
        '2d8+11'
        >>> build_damage_expression(2.0, Proficiency.LOW)
        '2'
    """
    validate_positive(average_value, "average_value")

    preferred = DICE_PREFERENCES.get(proficiency)
    if preferred is None:
        raise ScalingContractViolation(
            f"no strike damage dice preference for proficiency {proficiency.label}"
        )

    candidate = best_candidate(average_value, preferred)
    if candidate is None:
        candidate = best_candidate(average_value, ALL_DIE_SIZES)

    if candidate is None:
        return str(math.floor(average_value))

    return candidate.to_expression()
