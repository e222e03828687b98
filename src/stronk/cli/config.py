from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Final, TextIO

from dotenv import load_dotenv


DEFAULT_LOG_LEVEL: Final[str] = "INFO"

LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class CliConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    color: ColorMode = ColorMode.AUTO

    def color_enabled(self, stream: TextIO) -> bool:
        """Whether ANSI colors should be written to stream."""
        if self.color is ColorMode.ALWAYS:
            return True
        if self.color is ColorMode.NEVER:
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())


def config_from_env() -> CliConfig:
    """
    Build the CLI configuration from the environment, after loading .env.

    STRONK_LOG_LEVEL: DEBUG, INFO (default), WARNING, ERROR or CRITICAL
    STRONK_COLOR: auto (default), always or never; NO_COLOR forces never

    Raises:
        ValueError: If a variable holds an unknown value
    """
    load_dotenv()

    log_level = os.environ.get("STRONK_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"STRONK_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level}")

    color_value = os.environ.get("STRONK_COLOR", ColorMode.AUTO.value).strip().lower()
    try:
        color = ColorMode(color_value)
    except ValueError as e:
        raise ValueError(
            f"STRONK_COLOR must be one of {[m.value for m in ColorMode]}, got {color_value}"
        ) from e

    if os.environ.get("NO_COLOR"):
        color = ColorMode.NEVER

    return CliConfig(log_level=log_level, color=color)
