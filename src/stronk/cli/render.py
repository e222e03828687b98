"""
Terminal rendering of scaling results.

ANSI SGR foreground colors: normal colors are 30-37, bright colors 90-97.
Every colored span is closed with a reset (0).

Output lines:
    <Kind> <value> [(<exact value>)] [<Proficiency>] [<Method>]
    <Kind> <expr> (<avg>) <type> [plus <expr> (<avg>) <type>]... [<Proficiency>] [<Method>]
"""

import math
from enum import Enum

from stronk.core.domain.damage import Damage
from stronk.core.domain.scale_result import ScaleMethod, ScaleResult
from stronk.damage.builder import build_damage_expression


class Color(Enum):
    """Foreground color: (SGR color digit, bright)."""

    BLACK = (0, False)
    RED = (1, False)
    GREEN = (2, False)
    YELLOW = (3, False)
    BLUE = (4, False)
    MAGENTA = (5, False)
    CYAN = (6, False)
    WHITE = (7, False)
    BRIGHT_BLACK = (0, True)
    BRIGHT_RED = (1, True)
    BRIGHT_GREEN = (2, True)
    BRIGHT_YELLOW = (3, True)
    BRIGHT_BLUE = (4, True)
    BRIGHT_MAGENTA = (5, True)
    BRIGHT_CYAN = (6, True)
    BRIGHT_WHITE = (7, True)

    @property
    def sgr(self) -> str:
        digit, bright = self.value
        return f"{9 if bright else 3}{digit}"


RESET = "\x1b[0m"

METHOD_COLORS = {
    ScaleMethod.EXACT: Color.GREEN,
    ScaleMethod.INTERPOLATED: Color.GREEN,
    ScaleMethod.EXTRAPOLATED: Color.BRIGHT_YELLOW,
}

VALUE_COLOR = Color.BRIGHT_CYAN


def color_text(text: str, color: Color, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"\x1b[{color.sgr}m{text}{RESET}"


def format_scale_details(result: ScaleResult, color: bool = False) -> str:
    method = color_text(str(result.method), METHOD_COLORS[result.method], color)
    return f"[{result.proficiency.label}] [{method}]"


def format_result(result: ScaleResult, color: bool = False) -> str:
    """One output line for a non-damage statistic."""
    rounded = math.floor(result.stat.value)
    value = f"{rounded:+d}" if result.stat.kind.is_bonus else f"{rounded}"

    parts = [result.stat.kind.display_name, color_text(value, VALUE_COLOR, color)]

    if result.method != ScaleMethod.EXACT:
        parts.append(f"({result.stat.value:.2f})")

    parts.append(format_scale_details(result, color))
    return " ".join(parts)


def format_damage(damage: Damage, result: ScaleResult, color: bool = False) -> str:
    """
    One output line for a damage statistic: every rescaled component rebuilt
    as a dice expression using the dice preferences of the result's proficiency.
    """
    components = []
    for component in damage.components:
        expression = build_damage_expression(component.average_value, result.proficiency)
        components.append(
            f"{color_text(expression, VALUE_COLOR, color)} "
            f"({component.average_value:.2f}) {component.damage_type}"
        )

    details = format_scale_details(result, color)
    return f"{result.stat.kind.display_name} {' plus '.join(components)} {details}"
