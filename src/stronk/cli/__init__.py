"""Command line interface."""

from stronk.cli.app import (
    Arguments,
    PromptError,
    handle_prompt,
    main,
    parse_args,
    process_input_file,
    run_interactive,
)
from stronk.cli.config import CliConfig, ColorMode, config_from_env
from stronk.cli.logs import configure_logging

__all__ = [
    "Arguments",
    "PromptError",
    "handle_prompt",
    "main",
    "parse_args",
    "process_input_file",
    "run_interactive",
    "CliConfig",
    "ColorMode",
    "config_from_env",
    "configure_logging",
]
