"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_stream import __init__conf__
from lib_log_stream import cli as cli_mod
from lib_log_stream.cli import summary_info
from lib_log_stream.domain import LogCategory, LogGroup
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, env: dict[str, str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click command with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command, env=env)
    return result.exit_code, result.output, result.exception


@pytest.fixture(autouse=True)
def _plain_environment(clean_colour_env: None) -> None:
    return None


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()
    assert "Info for lib_log_stream" in stdout


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_demo_without_colour_is_plain_text() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--no-color"])

    assert exit_code == 0
    assert "\x1b[" not in stdout
    assert "=== Theme: classic (category) on" in stdout
    for category in LogCategory:
        assert f"{category.label}: sample {category.name.lower()} event\n" in stdout


def test_cli_demo_with_colour_decorates_events() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--color", "--theme", "classic"])

    assert exit_code == 0
    assert "\x1b[31m-- ERROR --: sample error event\x1b[0m\n" in stdout
    assert stdout.startswith("=== Theme: classic")


def test_cli_demo_group_mode_lists_every_group() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--mode", "group", "--color", "--theme", "neon"])

    assert exit_code == 0
    plain = strip_ansi(stdout)
    assert "=== Theme: neon (group) on" in plain
    for group in LogGroup:
        assert f"{group.label}: sample event" in plain


def test_cli_demo_reads_environment_defaults() -> None:
    exit_code, stdout, _ = run_cli(["demo"], env={"LOG_STREAM_COLOR": "always", "LOG_STREAM_THEME": "pastel"})

    assert exit_code == 0
    assert "=== Theme: pastel" in stdout
    assert "\x1b[" in stdout


def test_cli_demo_rejects_unknown_theme() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--theme", "sepia"])

    assert exit_code != 0
    assert "sepia" in stdout


def test_cli_generate_constants_defaults_to_builtin_namespaces() -> None:
    exit_code, stdout, _ = run_cli(["generate-constants", "--version-token", "7.0"])

    assert exit_code == 0
    assert "class LogGroup(Enum):" in stdout
    assert "class LogCategory(Enum):" in stdout
    assert "VERSION = '7.0'" in stdout
    assert f"# Generated by {__init__conf__.shell_command}" in stdout


def test_cli_generate_constants_from_file_to_output(tmp_path: Path) -> None:
    source = tmp_path / "constants.toml"
    source.write_text(
        '[constants.Status]\nUNSET = 0\nCONFIG = 1\n\n[[namespace]]\nname = "Status"\nmembers = [["UNSET", "UNSET"], ["CONFIG", "CONFIG"]]\n',
        encoding="utf-8",
    )
    target = tmp_path / "constants.py"

    first_code, _, _ = run_cli(["generate-constants", str(source), "--output", str(target)])
    first = target.read_text(encoding="utf-8")
    second_code, stdout, _ = run_cli(["generate-constants", str(source)])

    assert first_code == second_code == 0
    assert "class Status(Enum):\n    UNSET = 0\n    CONFIG = 1\n" in first
    assert stdout == first


def test_cli_generate_constants_surfaces_undefined_constants(tmp_path: Path) -> None:
    source = tmp_path / "constants.toml"
    source.write_text('[[namespace]]\nname = "Status"\nmembers = [["UNSET", "MISSING"]]\n', encoding="utf-8")

    exit_code, _stdout, exception = run_cli(["generate-constants", str(source)])

    assert exit_code != 0
    assert isinstance(exception, ValueError)
    assert "undefined constant 'MISSING'" in str(exception)


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "traceback_force_color": True}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_runs_the_real_cli(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main(["info"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Info for lib_log_stream" in captured.out
