"""
Tests for the command line tool

Covers argument parsing, prompt handling and rendering, input files, the
interactive loop, logging setup, configuration and the main entry point.
"""

import io
import logging
from pathlib import Path

import pytest

from stronk.cli import (
    CliConfig,
    ColorMode,
    PromptError,
    config_from_env,
    configure_logging,
    handle_prompt,
    main,
    parse_args,
    process_input_file,
    run_interactive,
)
from stronk.cli.logs import PACKAGE_LOGGER, PrefixFormatter
from stronk.cli.render import Color, color_text
from stronk.core.domain import Levels, Proficiency, ScaleMethod, StatType
from stronk.core.math import float_eq
from stronk.damage import DamageParseError


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Drop handlers installed by configure_logging during a test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def plain_env(monkeypatch):
    monkeypatch.setenv("STRONK_COLOR", "never")
    monkeypatch.delenv("STRONK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def levels() -> Levels:
    return Levels(current=1, target=2)


VALID_INPUT = """\
# Level 9 brute
// scaled to level 15

perception +18
ac 28
fort +21
hp 150
strike-attack +20
dmg 2d10+11 slashing plus 1d6 fire
"""

INVALID_INPUT = """\
# Level 9 brute
ac 28
ac twenty
hp 150
"""


# =============================================================================
# ARGUMENTS
# =============================================================================


class TestParseArgs:
    """Tests for parse_args"""

    def test_levels(self) -> None:
        args = parse_args(["1", "2"])
        assert args is not None
        assert args.levels.current == 1
        assert args.levels.target == 2
        assert args.input_file is None

    @pytest.mark.parametrize(
        "argv",
        [["2", "1"], ["1", "1"], ["-1", "24"], ["24", "-1"], ["+3", "4"]],
    )
    def test_valid(self, argv: list[str]) -> None:
        assert parse_args(argv) is not None

    def test_input_file(self) -> None:
        args = parse_args(["1", "2", "input.txt"])
        assert args is not None
        assert args.input_file == Path("input.txt")

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["1"],
            ["1", "x"],
            ["x", "1"],
            ["x", "x"],
            ["1", "2.345"],
            ["1", "2", "input.txt", "4"],
        ],
    )
    def test_usage_errors(self, argv: list[str], capsys) -> None:
        assert parse_args(argv) is None
        assert "usage: stronk <current_level> <target_level> [input_file]" in capsys.readouterr().err

    def test_non_integer_level_logged(self, caplog) -> None:
        assert parse_args(["1", "x"]) is None
        assert "level is not a valid integer: x" in caplog.text

    @pytest.mark.parametrize("argv", [["-2", "2"], ["1", "25"]])
    def test_out_of_range(self, argv: list[str], caplog) -> None:
        assert parse_args(argv) is None
        assert "out of range [-1, 24]" in caplog.text


# =============================================================================
# PROMPTS
# =============================================================================


class TestHandlePrompt:
    """Tests for handle_prompt"""

    @pytest.mark.parametrize(
        "prompt",
        [
            "ac 12",
            "AC 12",
            "   ac   12    ",
            "AC 120",
            "ac 0",
            "ac -1",
            "ac -34",
            "strike-damage 2d12+11 bludgeoning",
            "strike-damage 3d10 + 17 slashing plus 2d6+6 cold plus 1d4 acid plus 2 vitality",
        ],
    )
    def test_valid_syntax(self, levels: Levels, prompt: str) -> None:
        assert handle_prompt(levels, prompt) is not None

    @pytest.mark.parametrize(
        "prompt",
        [
            "",
            "ac",
            "invalid",
            "ac x",
            "invalid 12",
            "invalid x",
            "ac 12 34",
            "ac 12.34",
            "ac 2d6+1 fire",
            "damage 1d4+1",
            "1d6+2",
        ],
    )
    def test_invalid_syntax(self, levels: Levels, prompt: str) -> None:
        with pytest.raises(PromptError):
            handle_prompt(levels, prompt)

    def test_unknown_statistic_message(self, levels: Levels) -> None:
        with pytest.raises(PromptError, match="unknown statistic: damage"):
            handle_prompt(levels, "damage 1d4+1")

    def test_non_integer_message(self, levels: Levels) -> None:
        with pytest.raises(PromptError, match="AC value is not a valid integer: 12.34"):
            handle_prompt(levels, "ac 12.34")

    def test_malformed_damage(self, levels: Levels) -> None:
        with pytest.raises(DamageParseError):
            handle_prompt(levels, "dmg 1d4")

    def test_zero_damage_component(self, levels: Levels) -> None:
        with pytest.raises(PromptError, match="fire damage must be positive"):
            handle_prompt(levels, "dmg 2d6 slashing plus 0 fire")

    def test_damage_scaled_to_nothing(self) -> None:
        with pytest.raises(PromptError, match="nothing left to distribute"):
            handle_prompt(Levels(current=24, target=-1), "dmg 1d4 fire")

    @pytest.mark.parametrize(
        "current, target, prompt, kind, value, proficiency",
        [
            (19, 15, "perception +29", StatType.PERCEPTION, 23.0, Proficiency.LOW),
            (3, 4, "skill +13", StatType.SKILL, 15.0, Proficiency.EXTREME),
            (3, 14, "ac 18", StatType.ARMOR_CLASS, 35.0, Proficiency.MODERATE),
            (6, 0, "save +11", StatType.SAVING_THROW, 3.0, Proficiency.LOW),
            (24, 10, "hp 367", StatType.HIT_POINTS, 127.0, Proficiency.LOW),
            (7, 12, "resistance 10", StatType.RESISTANCE, 15.0, Proficiency.HIGH),
            (8, 23, "weakness 6", StatType.WEAKNESS, 13.0, Proficiency.LOW),
            (11, 19, "strike-attack +24", StatType.STRIKE_ATTACK_BONUS, 36.0, Proficiency.HIGH),
            (7, 17, "strike-damage 2d12+12 piercing", StatType.STRIKE_DAMAGE, 50.0, Proficiency.EXTREME),
            (22, 20, "spell-dc 50", StatType.SPELL_DC, 47.0, Proficiency.EXTREME),
            (12, 5, "spell-attack +21", StatType.SPELL_ATTACK_BONUS, 11.0, Proficiency.MODERATE),
            (6, 14, "unlimited-area-damage 4d6 fire", StatType.UNLIMITED_AREA_DAMAGE, 26.0, Proficiency.MODERATE),
            (17, 12, "limited-area-damage 18d6 cold", StatType.LIMITED_AREA_DAMAGE, 46.0, Proficiency.MODERATE),
        ],
    )
    def test_scale_each_statistic(
        self,
        current: int,
        target: int,
        prompt: str,
        kind: StatType,
        value: float,
        proficiency: Proficiency,
    ) -> None:
        result = handle_prompt(Levels(current=current, target=target), prompt)
        assert result.stat.kind is kind
        assert float_eq(result.stat.value, value)
        assert result.proficiency is proficiency
        assert result.method is ScaleMethod.EXACT


# =============================================================================
# RENDERING
# =============================================================================


class TestRendering:
    """Printed output of handle_prompt"""

    def test_exact(self, capsys) -> None:
        handle_prompt(Levels(current=3, target=14), "ac 18")
        assert capsys.readouterr().out == "AC 35 [Moderate] [Exact]\n"

    def test_bonus_sign(self, capsys) -> None:
        handle_prompt(Levels(current=19, target=15), "perception +29")
        assert capsys.readouterr().out == "Perception +23 [Low] [Exact]\n"

    def test_interpolated_shows_exact_value(self, capsys) -> None:
        handle_prompt(Levels(current=11, target=2), "ac 32")
        assert capsys.readouterr().out == "AC 19 (19.00) [High] [Interpolated]\n"

    def test_damage(self, capsys) -> None:
        handle_prompt(Levels(current=6, target=14), "unlimited-area-damage 4d6 fire")
        assert capsys.readouterr().out == (
            "Unlimited Area Damage 4d6+12 (26.00) fire [Moderate] [Exact]\n"
        )

    def test_damage_components_joined_with_plus(self, capsys) -> None:
        handle_prompt(Levels(current=8, target=8), "dmg 2d8+9 piercing plus 1d6 fire")
        assert capsys.readouterr().out == (
            "Strike Damage 2d8+9 (18.00) piercing plus 1d6 (3.50) fire [Moderate] [Interpolated]\n"
        )

    def test_color(self, capsys) -> None:
        handle_prompt(Levels(current=3, target=14), "ac 18", color=True)
        out = capsys.readouterr().out
        assert color_text("35", Color.BRIGHT_CYAN) in out
        assert color_text("Exact", Color.GREEN) in out

    def test_color_codes(self) -> None:
        assert color_text("x", Color.GREEN) == "\x1b[32mx\x1b[0m"
        assert color_text("x", Color.BRIGHT_YELLOW) == "\x1b[93mx\x1b[0m"
        assert color_text("x", Color.BRIGHT_RED, enabled=False) == "x"


# =============================================================================
# INPUT
# =============================================================================


class TestProcessInputFile:
    """Tests for process_input_file"""

    def test_valid_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "valid_input_file.txt"
        path.write_text(VALID_INPUT, encoding="utf-8")

        assert process_input_file(Levels(current=9, target=15), path)

        out = capsys.readouterr().out.splitlines()
        assert out[:3] == ["# Level 9 brute", "// scaled to level 15", ""]
        assert len(out) == 9

    def test_invalid_file(self, tmp_path: Path, capsys, caplog) -> None:
        path = tmp_path / "invalid_input_file.txt"
        path.write_text(INVALID_INPUT, encoding="utf-8")

        assert not process_input_file(Levels(current=9, target=15), path)

        # stops at the bad prompt
        assert "HP" not in capsys.readouterr().out
        assert "failed to process input file" in caplog.text

    def test_nonexistent_file(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "nonexistent_input_file.txt"
        assert not process_input_file(Levels(current=9, target=15), path)
        assert "failed to read input file" in caplog.text


class TestRunInteractive:
    """Tests for run_interactive"""

    def test_reads_until_eof(self, capsys, caplog) -> None:
        stream = io.StringIO("ac 18\n\nbogus\nperception +29\n")
        run_interactive(Levels(current=3, target=14), stream)

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "AC 35 [Moderate] [Exact]"
        assert len(out) == 2
        assert "invalid prompt" in caplog.text


# =============================================================================
# CONFIGURATION AND LOGGING
# =============================================================================


class TestConfig:
    """Tests for config_from_env"""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("STRONK_LOG_LEVEL", "STRONK_COLOR", "NO_COLOR"):
            monkeypatch.delenv(name, raising=False)
        assert config_from_env() == CliConfig(log_level="INFO", color=ColorMode.AUTO)

    def test_values(self, monkeypatch) -> None:
        monkeypatch.setenv("STRONK_LOG_LEVEL", "warning")
        monkeypatch.setenv("STRONK_COLOR", "Always")
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert config_from_env() == CliConfig(log_level="WARNING", color=ColorMode.ALWAYS)

    def test_no_color_wins(self, monkeypatch) -> None:
        monkeypatch.setenv("STRONK_COLOR", "always")
        monkeypatch.setenv("NO_COLOR", "1")
        assert config_from_env().color is ColorMode.NEVER

    def test_invalid_log_level(self, monkeypatch) -> None:
        monkeypatch.setenv("STRONK_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="STRONK_LOG_LEVEL"):
            config_from_env()

    def test_invalid_color(self, monkeypatch) -> None:
        monkeypatch.delenv("STRONK_LOG_LEVEL", raising=False)
        monkeypatch.setenv("STRONK_COLOR", "sometimes")
        with pytest.raises(ValueError, match="STRONK_COLOR"):
            config_from_env()

    def test_color_enabled(self) -> None:
        stream = io.StringIO()
        assert not CliConfig(color=ColorMode.AUTO).color_enabled(stream)
        assert CliConfig(color=ColorMode.ALWAYS).color_enabled(stream)
        assert not CliConfig(color=ColorMode.NEVER).color_enabled(stream)


class TestConfigureLogging:
    """Tests for configure_logging"""

    def test_prefixes(self) -> None:
        stream = io.StringIO()
        configure_logging(CliConfig(color=ColorMode.NEVER), stream=stream)

        logger = logging.getLogger("stronk.tests")
        logger.info("plain")
        logger.warning("careful")
        logger.error("broken")

        assert stream.getvalue().splitlines() == ["plain", "warning: careful", "error: broken"]

    def test_colored_prefix(self) -> None:
        stream = io.StringIO()
        configure_logging(CliConfig(color=ColorMode.ALWAYS), stream=stream)
        logging.getLogger("stronk.tests").error("broken")
        assert stream.getvalue() == f"{color_text('error', Color.BRIGHT_RED)}: broken\n"

    def test_level_filters(self) -> None:
        stream = io.StringIO()
        configure_logging(CliConfig(log_level="ERROR", color=ColorMode.NEVER), stream=stream)
        logging.getLogger("stronk.tests").warning("careful")
        assert stream.getvalue() == ""

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(CliConfig(), stream=io.StringIO())
        configure_logging(CliConfig(), stream=io.StringIO())

        logger = logging.getLogger(PACKAGE_LOGGER)
        ours = [h for h in logger.handlers if isinstance(h.formatter, PrefixFormatter)]
        assert len(ours) == 1


# =============================================================================
# ENTRY POINT
# =============================================================================


class TestMain:
    """Tests for main"""

    def test_bad_arguments(self, plain_env, capsys) -> None:
        assert main(["1"]) == 1
        assert "usage: stronk" in capsys.readouterr().err

    def test_input_file(self, plain_env, tmp_path: Path, capsys) -> None:
        path = tmp_path / "input.txt"
        path.write_text(VALID_INPUT, encoding="utf-8")
        assert main(["9", "15", str(path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("# Level 9 brute\n")
        assert "Strike Damage" in out

    def test_bad_input_file(self, plain_env, tmp_path: Path, capsys) -> None:
        path = tmp_path / "input.txt"
        path.write_text(INVALID_INPUT, encoding="utf-8")
        assert main(["9", "15", str(path)]) == 1
        assert "error: failed to process input file" in capsys.readouterr().err

    def test_interactive(self, plain_env, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("ac 18\n"))
        assert main(["3", "14"]) == 0
        assert capsys.readouterr().out == "AC 35 [Moderate] [Exact]\n"

    def test_bad_config(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("STRONK_LOG_LEVEL", "LOUD")
        assert main(["3", "14"]) == 1
        assert "STRONK_LOG_LEVEL" in capsys.readouterr().err


# =============================================================================
# OVERSIZED VALUES
# =============================================================================


class TestOversizedValues:
    """Numbers too large for a float are rejected like any bad prompt"""

    def test_huge_integer_value(self, levels: Levels) -> None:
        with pytest.raises(PromptError, match="AC value is too large"):
            handle_prompt(levels, "ac " + "9" * 400)

    def test_enormous_integer_value(self, levels: Levels) -> None:
        with pytest.raises(PromptError, match="value is too large"):
            handle_prompt(levels, "hp " + "9" * 5000)

    def test_huge_damage(self, levels: Levels) -> None:
        with pytest.raises(DamageParseError):
            handle_prompt(levels, "dmg " + "1" + "0" * 400 + "d6 fire")

    def test_damage_total_overflowing(self, levels: Levels) -> None:
        big = "1" + "0" * 308
        with pytest.raises(PromptError, match="Strike Damage total is too large"):
            handle_prompt(levels, f"dmg {big} fire plus {big} cold")

    def test_interactive_loop_survives(self, capsys, caplog) -> None:
        stream = io.StringIO("ac " + "9" * 400 + "\nac 18\n")
        run_interactive(Levels(current=3, target=14), stream)

        assert capsys.readouterr().out == "AC 35 [Moderate] [Exact]\n"
        assert "AC value is too large" in caplog.text

    def test_input_file_stops(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "input.txt"
        path.write_text("dmg " + "1" + "0" * 400 + " fire\n", encoding="utf-8")

        assert not process_input_file(Levels(current=3, target=14), path)
        assert "failed to process input file" in caplog.text
