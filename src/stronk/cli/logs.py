"""Console logging for the command line tool."""

import logging
import sys
from typing import TextIO

from stronk.cli.config import CliConfig
from stronk.cli.render import Color, color_text

PACKAGE_LOGGER = "stronk"


class PrefixFormatter(logging.Formatter):
    """
    INFO and below render bare; WARNING and ERROR get a "warning: " /
    "error: " prefix, colored when color is enabled.
    """

    def __init__(self, color: bool = False) -> None:
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        if record.levelno >= logging.ERROR:
            prefix = color_text("error", Color.BRIGHT_RED, self.color)
        elif record.levelno >= logging.WARNING:
            prefix = color_text("warning", Color.BRIGHT_YELLOW, self.color)
        else:
            return message

        return f"{prefix}: {message}"


def configure_logging(config: CliConfig, stream: TextIO | None = None) -> logging.Handler:
    """
    Attach a single stderr handler to the package logger.

    Calling again replaces the handler installed by the previous call.
    """
    if stream is None:
        stream = sys.stderr

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, PrefixFormatter):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(PrefixFormatter(color=config.color_enabled(stream)))
    logger.addHandler(handler)
    logger.setLevel(config.log_level)

    return handler
