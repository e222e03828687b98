"""
stronk command line tool

    stronk <current_level> <target_level> [input_file]

Without an input file, prompts are read from stdin until EOF. Each prompt is
"<statistic> <value>", e.g. "ac 18", "perception +29" or
"strike-damage 2d8+11 piercing plus 1d6 fire", and prints the statistic
rescaled to the target level.

Input files hold one prompt per line. Blank lines and lines starting with
"#" or "//" are echoed unchanged. Processing stops at the first bad prompt.
"""

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Sequence, TextIO

from pydantic import ValidationError

from stronk.cli.config import CliConfig, config_from_env
from stronk.cli.logs import configure_logging
from stronk.cli.render import format_damage, format_result
from stronk.core.domain.levels import Levels
from stronk.core.domain.scale_result import ScaleResult
from stronk.core.domain.statistic import StatType, Statistic, stat_type_from_alias
from stronk.core.math.numerical_safeguards import is_valid_float
from stronk.damage.parser import DamageParseError, parse_damage
from stronk.scaling.components import scale_damage_components
from stronk.scaling.engine import scale_statistic

logger = logging.getLogger(__name__)

USAGE: Final[str] = "usage: stronk <current_level> <target_level> [input_file]"
PROMPT_USAGE: Final[str] = "usage: <statistic> <current_value>"

COMMENT_PREFIXES: Final[tuple[str, ...]] = ("#", "//")

_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PromptError(ValueError):
    """Malformed prompt line. Recoverable: the next prompt is independent."""
    pass


class _UsageError(Exception):
    pass


# =============================================================================
# ARGUMENTS
# =============================================================================


@dataclass(frozen=True)
class Arguments:
    levels: Levels
    input_file: Path | None = None


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _level(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise argparse.ArgumentTypeError(f"level is not a valid integer: {value}")
    return int(value)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="stronk",
        description="Rescale creature statistics from one level to another",
    )
    parser.add_argument("current_level", type=_level, help="Level the statistics are valid at (-1..24)")
    parser.add_argument("target_level", type=_level, help="Level to rescale to (-1..24)")
    parser.add_argument("input_file", nargs="?", type=Path, default=None, help="File of prompts")
    return parser


def parse_args(argv: Sequence[str]) -> Arguments | None:
    """
    Parse command line arguments (without the program name).

    Returns None, after printing usage or logging the problem, when the
    arguments are not two levels in range plus an optional input file.
    """
    try:
        namespace = _build_parser().parse_args(list(argv))
    except _UsageError as e:
        logger.error("%s", e)
        print(USAGE, file=sys.stderr)
        return None

    try:
        levels = Levels(current=namespace.current_level, target=namespace.target_level)
    except ValidationError as e:
        for error in e.errors():
            logger.error("%s", error["msg"].removeprefix("Value error, "))
        return None

    return Arguments(levels=levels, input_file=namespace.input_file)


# =============================================================================
# PROMPTS
# =============================================================================


def _parse_integer_value(kind: StatType, value: str) -> float:
    if not _INTEGER.fullmatch(value):
        raise PromptError(f"{kind.display_name} value is not a valid integer: {value}")

    try:
        return float(int(value))
    except (OverflowError, ValueError) as e:
        raise PromptError(f"{kind.display_name} value is too large: {value}") from e


def _handle_damage_prompt(levels: Levels, kind: StatType, value: str, color: bool) -> ScaleResult:
    damage = parse_damage(value)

    for component in damage.components:
        if component.average_value <= 0:
            raise PromptError(f"{component.damage_type} damage must be positive: {value}")

    total = damage.total_average_value()
    if not is_valid_float(total):
        raise PromptError(f"{kind.display_name} total is too large: {value}")

    result = scale_statistic(levels, Statistic(kind=kind, value=total))

    if result.stat.value <= 0:
        raise PromptError(
            f"{kind.display_name} scales to {result.stat.value:.2f} at level "
            f"{levels.target}: nothing left to distribute"
        )

    scaled = scale_damage_components(damage, result.stat.value)
    print(format_damage(scaled, result, color=color))

    return result


def handle_prompt(levels: Levels, line: str, color: bool = False) -> ScaleResult:
    """
    Rescale the statistic of one prompt line and print the result.

    Args:
        levels: Current and target levels
        line: "<statistic> <value>", case-insensitive
        color: Color the printed values

    Returns:
        ScaleResult of the statistic (the damage total for damage kinds)

    Raises:
        PromptError: Missing value, unknown statistic, non-integer value
        DamageParseError: Malformed damage specification
    """
    prompt = line.strip().lower()

    name, sep, value = prompt.partition(" ")
    if not sep:
        raise PromptError(f"invalid prompt: {prompt!r} ({PROMPT_USAGE})")

    name = name.strip()
    value = value.strip()

    kind = stat_type_from_alias(name)
    if kind is None:
        raise PromptError(f"invalid prompt: unknown statistic: {name}")

    if kind.is_damage:
        return _handle_damage_prompt(levels, kind, value, color)

    stat = Statistic(kind=kind, value=_parse_integer_value(kind, value))
    result = scale_statistic(levels, stat)
    print(format_result(result, color=color))

    return result


# =============================================================================
# INPUT
# =============================================================================


def process_input_file(levels: Levels, path: Path, color: bool = False) -> bool:
    """
    Handle every prompt of an input file.

    Returns:
        False if the file cannot be read or a prompt fails, True otherwise
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("failed to read input file: %s", e)
        return False

    for line in contents.splitlines():
        if not line or line.startswith(COMMENT_PREFIXES):
            print(line)
            continue

        try:
            handle_prompt(levels, line, color=color)
        except (PromptError, DamageParseError) as e:
            logger.error("%s", e)
            logger.error("failed to process input file")
            return False

    return True


def run_interactive(levels: Levels, stream: TextIO, color: bool = False) -> None:
    """Handle prompts read from stream until EOF; bad prompts are logged and skipped."""
    for line in stream:
        if not line.strip():
            continue

        try:
            handle_prompt(levels, line, color=color)
        except (PromptError, DamageParseError) as e:
            logger.error("%s", e)


# =============================================================================
# ENTRY POINT
# =============================================================================


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = config_from_env()
    except ValueError as e:
        configure_logging(CliConfig())
        logger.error("%s", e)
        return 1

    configure_logging(config)

    args = parse_args(argv)
    if args is None:
        return 1

    color = config.color_enabled(sys.stdout)

    if args.input_file is not None:
        return 0 if process_input_file(args.levels, args.input_file, color=color) else 1

    run_interactive(args.levels, sys.stdin, color=color)
    return 0
