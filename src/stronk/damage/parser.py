"""
Damage Expression Parser

Turns textual damage into expected values.

GRAMMAR:
    damage      := component ("plus" component)*         (case-insensitive)
    component   := expression " " damage_type            (split at the LAST space)
    expression  := term ("+" term)*                      (spaces around "+" allowed)
    term        := dice | flat
    dice        := COUNT "d" SIZE                        (no inner whitespace)
    flat        := DIGITS                                (non-negative integer)

    COUNT is a positive integer, SIZE one of 4, 6, 8, 10, 12.

EVALUATION:
    dice → COUNT × DIE_AVERAGES[SIZE]
    flat → its integer value
    expression → sum of its terms

Parsing is all-or-nothing: any malformed term fails the whole input with a
DamageParseError and no partial Damage is ever returned. Subtraction is not
part of the grammar, so "1d8 - 3" is rejected rather than misread.
"""

import re
from typing import Final

from stronk.core.domain.damage import Damage, DamageComponent
from stronk.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# CONSTANTS
# =============================================================================

# Expected value of one die, by size. Fixed values instead of S/2 + 0.5.
DIE_AVERAGES: Final[dict[str, float]] = {
    "4": 2.5,
    "6": 3.5,
    "8": 4.5,
    "10": 5.5,
    "12": 6.5,
}

COMPONENT_SEPARATOR: Final[str] = "plus"

_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_NEGATIVE_DIGITS: Final[re.Pattern[str]] = re.compile(r"-[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DamageParseError(ValueError):
    """Malformed damage text. Recoverable: the caller may ask again."""
    pass


# =============================================================================
# TERMS
# =============================================================================


def parse_dice_term(dice: str) -> float:
    """
    Expected value of a dice term such as "3d8".

    Raises:
        DamageParseError: wrong number of "d" parts, non-integer, zero or
            oversized count, unsupported die size
    """
    parts = dice.split("d")

    if len(parts) != 2:
        raise DamageParseError(f"invalid dice expression: {dice}")

    count, size = parts

    if not _DIGITS.fullmatch(count):
        raise DamageParseError(f"number of dice is not a valid integer: {count}")

    if size not in DIE_AVERAGES:
        raise DamageParseError(f"unknown die size: {size}")

    try:
        num_dice = int(count)
        average = num_dice * DIE_AVERAGES[size]
    except (OverflowError, ValueError) as e:
        raise DamageParseError(f"number of dice is too large: {dice}") from e

    if not is_valid_float(average):
        raise DamageParseError(f"number of dice is too large: {dice}")

    if num_dice == 0:
        raise DamageParseError(f"number of dice must be positive: {dice}")

    return average


def parse_flat_modifier(modifier: str) -> float:
    """
    Value of a flat modifier such as "11".

    Negative modifiers are rejected: with "+" as the only operator they could
    only be written as "1d4 + -1".

    Raises:
        DamageParseError: empty, non-integer, negative or oversized modifier
    """
    if _NEGATIVE_DIGITS.fullmatch(modifier):
        raise DamageParseError(f"flat modifier must not be negative: {modifier}")

    if not _DIGITS.fullmatch(modifier):
        raise DamageParseError(f"flat modifier is not a valid integer: {modifier}")

    try:
        return float(int(modifier))
    except (OverflowError, ValueError) as e:
        raise DamageParseError(f"flat modifier is too large: {modifier}") from e


# =============================================================================
# EXPRESSIONS
# =============================================================================


def parse_damage_expression(expression: str) -> float:
    """
    Expected value of a damage expression such as "3d8 + 1d4 + 15".

    Args:
        expression: Terms separated by "+"

    Returns:
        Sum of the terms' expected values

    Raises:
        DamageParseError: If any term is malformed

    Examples:
        >>> parse_damage_expression("2d6+7")
        14.0
        >>> parse_damage_expression("3d8 + 1d4 + 15")
        31.0
    """
    total = 0.0

    for part in expression.split("+"):
        term = part.strip()

        if "d" in term:
            total += parse_dice_term(term)
        else:
            total += parse_flat_modifier(term)

    if not is_valid_float(total):
        raise DamageParseError(f"damage expression is too large: {expression}")

    return total


def parse_damage_component(component: str) -> DamageComponent:
    """
    Parse "<expression> <damage type>", splitting at the last space.

    Damage types are single words: "3d6 + 2 persistent fire" fails because
    "3d6 + 2 persistent" is not an expression.

    Raises:
        DamageParseError: No space to split at, or the expression is malformed
    """
    damage, sep, damage_type = component.rpartition(" ")

    if not sep:
        raise DamageParseError(
            "failed to parse damage component: "
            f"expected <dice_expression> <damage_type>, got {component}"
        )

    average_damage = parse_damage_expression(damage)

    return DamageComponent(average_value=average_damage, damage_type=damage_type)


def parse_damage(expression: str) -> Damage:
    """
    Parse a full damage specification.

    Args:
        expression: Components joined by "plus", e.g.
            "2d8+11 piercing plus 1d6 fire"

    Returns:
        Damage with one component per "plus"-separated part, in input order

    Raises:
        DamageParseError: If any component fails to parse

    Examples:
        >>> parse_damage("2d8+11 piercing plus 1d6 fire").total_average_value()
        23.5
    """
    normalized = expression.strip().lower()

    components = [
        parse_damage_component(part.strip())
        for part in normalized.split(COMPONENT_SEPARATOR)
    ]

    return Damage(components=tuple(components))
