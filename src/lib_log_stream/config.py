"""Environment-driven configuration for writers and the CLI.

Purpose
-------
Resolve colour preferences from environment variables (optionally seeded from a
``.env`` file) so host programs and the CLI agree on one set of switches.

Contents
--------
* :class:`WriterConfig` - resolved colour settings.
* :func:`load_writer_config` - build a config from ``os.environ``.
* :func:`enable_dotenv` - load the nearest ``.env`` without overriding
  variables that are already set.

Environment
-----------
``LOG_STREAM_COLOR``         ``auto`` (default), ``always`` or ``never``.
``LOG_STREAM_COLOR_MODE``    ``category`` (default) or ``group``.
``LOG_STREAM_THEME``         palette name from :data:`COLOUR_THEMES`.
``LOG_STREAM_COLOR_SYSTEM``  ``standard`` (default), ``256`` or ``truecolor``.
``NO_COLOR`` / ``FORCE_COLOR`` are honoured when ``LOG_STREAM_COLOR=auto``.
``LOG_STREAM_USE_DOTENV``    truthy value enables ``.env`` loading in the CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from lib_log_stream.adapters.colour import COLOUR_THEMES, AnsiColourPolicy, ColourMode, NullColourPolicy
from lib_log_stream.application.ports.colour import ColourPolicyPort

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_STREAM_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}
_COLOR_CHOICES = ("auto", "always", "never")
_COLOR_SYSTEM_CHOICES = ("standard", "256", "truecolor")

_DOTENV_LOADED: Path | None = None


@dataclass(slots=True, frozen=True)
class WriterConfig:
    """Colour settings applied when building a decorated writer."""

    color: str = "auto"
    mode: ColourMode = ColourMode.BY_CATEGORY
    theme: str = "classic"
    color_system: str = "standard"
    no_color_env: bool = False
    force_color_env: bool = False

    def colour_enabled(self, sink: object) -> bool:
        """Return ``True`` when output to ``sink`` should carry colour."""

        if self.color == "always":
            return True
        if self.color == "never":
            return False
        if self.force_color_env:
            return True
        if self.no_color_env:
            return False
        isatty = getattr(sink, "isatty", None)
        try:
            return bool(isatty()) if isatty is not None else False
        except ValueError:  # closed stream
            return False

    def build_policy(self, sink: object) -> ColourPolicyPort:
        """Return the colour policy matching this configuration for ``sink``."""

        if not self.colour_enabled(sink):
            return NullColourPolicy()
        return AnsiColourPolicy(mode=self.mode, theme=self.theme, color_system=self.color_system)


def load_writer_config(environ: Mapping[str, str] | None = None, **overrides: object) -> WriterConfig:
    """Resolve a :class:`WriterConfig` from ``environ`` plus keyword overrides.

    Keyword overrides that are ``None`` are ignored, so CLI options can be
    passed through unconditionally.

    Raises
    ------
    ValueError
        When a variable holds an unsupported value; the message names it.

    Examples
    --------
    >>> load_writer_config({"LOG_STREAM_COLOR_MODE": "group"}).mode
    <ColourMode.BY_GROUP: 'group'>
    >>> load_writer_config({}, theme="neon").theme
    'neon'
    """
    env = os.environ if environ is None else environ
    values: dict[str, object] = {
        "color": _choice(env, "LOG_STREAM_COLOR", _COLOR_CHOICES, "auto"),
        "mode": _mode(env.get("LOG_STREAM_COLOR_MODE")),
        "theme": _theme(env.get("LOG_STREAM_THEME")),
        "color_system": _choice(env, "LOG_STREAM_COLOR_SYSTEM", _COLOR_SYSTEM_CHOICES, "standard"),
        "no_color_env": "NO_COLOR" in env,
        "force_color_env": _flag(env.get("FORCE_COLOR")),
    }
    for key, value in overrides.items():
        if value is None:
            continue
        if key not in values:
            raise TypeError(f"Unknown writer setting: {key}")
        if key == "mode" and isinstance(value, str):
            value = _mode(value)
        if key == "theme":
            value = _theme(str(value))
        values[key] = value
    return WriterConfig(**values)  # type: ignore[arg-type]


def _choice(env: Mapping[str, str], name: str, choices: tuple[str, ...], default: str) -> str:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}; got {raw!r}")
    return value


def _mode(raw: str | None) -> ColourMode:
    if raw is None or not raw.strip():
        return ColourMode.BY_CATEGORY
    try:
        return ColourMode.from_name(raw)
    except ValueError as exc:
        raise ValueError(f"LOG_STREAM_COLOR_MODE must be 'category' or 'group'; got {raw!r}") from exc


def _theme(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return "classic"
    theme = raw.strip().lower()
    if theme not in COLOUR_THEMES:
        raise ValueError(f"LOG_STREAM_THEME must be one of {', '.join(sorted(COLOUR_THEMES))}; got {raw!r}")
    return theme


def _flag(raw: str | None) -> bool:
    if raw is None:
        return False
    value = raw.strip().lower()
    return bool(value) and value not in _FALSY


def dotenv_requested(explicit: bool | None, environ: Mapping[str, str] | None = None) -> bool:
    """Return whether ``.env`` loading is enabled; ``explicit`` wins over the environment."""

    if explicit is not None:
        return explicit
    env = os.environ if environ is None else environ
    return env.get(DOTENV_ENV_VAR, "").strip().lower() in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file into ``os.environ``.

    The search walks upward from ``search_from`` (default: the current working
    directory). Variables that already exist keep their values. Returns the
    resolved path of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    start = (search_from or Path.cwd()).resolve()
    candidate = _search_upwards(start)
    if candidate is None:
        logger.debug("No .env file found above %s", start)
        return None
    load_dotenv(candidate, override=False)
    _DOTENV_LOADED = candidate
    logger.debug("Loaded environment from %s", candidate)
    return candidate


def _search_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def _reset_dotenv_state_for_testing() -> None:
    """Forget which ``.env`` file was loaded (test helper)."""

    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "WriterConfig",
    "dotenv_requested",
    "enable_dotenv",
    "load_writer_config",
]
