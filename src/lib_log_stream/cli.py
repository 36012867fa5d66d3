"""Click command group exposing metadata, a colour demo and the generator.

Purpose
-------
Give operators a console entry point (``lib_log_stream`` or
``python -m lib_log_stream``) that previews colour themes and regenerates the
mirrored constant module during builds.

Contents
--------
* :func:`cli` - root group handling traceback and ``.env`` switches.
* :func:`cli_info`, :func:`cli_demo`, :func:`cli_generate_constants` -
  subcommands.
* :func:`main` - entry point delegating exit-code handling to
  :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as writer_config
from .adapters.colour import COLOUR_THEMES, ColourMode
from .adapters.namespace_loader import load_namespaces
from .adapters.stream import ColourStreamWriter
from .application.use_cases.generate_constants import builtin_namespaces, render_python_constants
from .domain import LogCategory, LogGroup

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(prog)s version %(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading settings (default: ${writer_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None) -> None:
    """Root command storing global switches on the context."""
    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if writer_config.dotenv_requested(use_dotenv):
        writer_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""
    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--mode", type=click.Choice([mode.value for mode in ColourMode]), default=None, help="Colour by category or by group.")
@click.option("--theme", type=click.Choice(sorted(COLOUR_THEMES)), default=None, help="Colour palette to preview.")
@click.option("--color/--no-color", "color", default=None, help="Force colour on or off (default: auto-detect).")
def cli_demo(mode: str | None, theme: str | None, color: bool | None) -> None:
    """Write one sample event per category (or group) to stdout."""
    settings = writer_config.load_writer_config(
        mode=mode,
        theme=theme,
        color=None if color is None else ("always" if color else "never"),
    )
    stream = click.get_text_stream("stdout")
    writer = ColourStreamWriter(stream, settings.build_policy(stream))
    writer.write(f"=== Theme: {settings.theme} ({settings.mode.value}) on {writer.info()} ===\n")
    if settings.mode is ColourMode.BY_CATEGORY:
        for category in LogCategory:
            writer.write_event(LogGroup.LOGGER, category, f"{category.label}: sample {category.name.lower()} event")
            writer.write("\n")
    else:
        for group in LogGroup:
            writer.write_event(group, LogCategory.INFO, f"{group.label}: sample event")
            writer.write("\n")


@cli.command("generate-constants", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("namespaces_file", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True, path_type=Path), default=None, help="Write to a file instead of stdout.")
@click.option("--version-token", default=__init__conf__.version, show_default=True, help="Value emitted as VERSION.")
def cli_generate_constants(namespaces_file: Path | None, output: Path | None, version_token: str) -> None:
    """Render constant namespaces as Python enumerations.

    Without NAMESPACES_FILE the package's own LogGroup and LogCategory are
    mirrored.
    """
    namespaces = load_namespaces(namespaces_file) if namespaces_file is not None else builtin_namespaces()
    text = render_python_constants(namespaces, version=version_token, generated_by=__init__conf__.shell_command)
    if output is None:
        click.echo(text, nl=False)
    else:
        output.write_text(text, encoding="utf-8")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
