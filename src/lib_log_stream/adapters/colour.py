"""Colour policies implementing :class:`ColourPolicyPort`.

Purpose
-------
Decide which terminal escape sequences wrap a structured event. Styles are
written as Rich style strings and rendered to raw ANSI sequences once, when the
policy is built.

Contents
--------
* :class:`ColourMode` - colour by category or by group.
* :data:`COLOUR_THEMES` - built-in palettes keyed by theme name.
* :class:`NullColourPolicy` - never decorates.
* :class:`AnsiColourPolicy` - static table lookup producing ANSI decorations.

System Role
-----------
Used by :class:`lib_log_stream.adapters.stream.ColourStreamWriter` and wired by
:func:`lib_log_stream.create_writer` from :class:`lib_log_stream.config.WriterConfig`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from lib_log_stream.application.ports.colour import ColourPolicyPort
from lib_log_stream.domain.categories import LogCategory
from lib_log_stream.domain.decoration import Decoration
from lib_log_stream.domain.groups import LogGroup


class ColourMode(Enum):
    """Which half of the (group, category) pair selects the colour."""

    BY_CATEGORY = "category"
    BY_GROUP = "group"

    @classmethod
    def from_name(cls, name: str) -> "ColourMode":
        normalized = name.strip().lower()
        for mode in cls:
            if normalized in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown colour mode: {name!r}")


COLOUR_THEMES: dict[str, dict[ColourMode, dict[str, str]]] = {
    "classic": {
        ColourMode.BY_CATEGORY: {
            "DEBUG": "blue",
            "VERB2": "bright_blue",
            "VERB1": "cyan",
            "INFO": "bright_white",
            "WARN": "bright_yellow",
            "ERROR": "red",
            "CRIT": "bold white on red",
            "FATAL": "bold yellow on red",
        },
        ColourMode.BY_GROUP: {
            "MASTERPROC": "bright_blue",
            "CONFIGMGR": "blue",
            "SESSIONMGR": "bright_magenta",
            "BACKENDSTART": "bright_cyan",
            "LOGGER": "green",
            "BACKENDPROC": "cyan",
            "CLIENT": "bright_yellow",
            "NETCFG": "magenta",
            "EXTSERVICE": "bright_green",
        },
    },
    "dark": {
        ColourMode.BY_CATEGORY: {
            "DEBUG": "grey42",
            "VERB2": "grey50",
            "VERB1": "grey62",
            "INFO": "bright_white",
            "WARN": "bold gold3",
            "ERROR": "bold red3",
            "CRIT": "bold white on red3",
            "FATAL": "bold yellow on red3",
        },
        ColourMode.BY_GROUP: {
            "MASTERPROC": "steel_blue",
            "CONFIGMGR": "slate_blue1",
            "SESSIONMGR": "medium_purple",
            "BACKENDSTART": "dark_cyan",
            "LOGGER": "dark_sea_green",
            "BACKENDPROC": "cadet_blue",
            "CLIENT": "gold3",
            "NETCFG": "orchid",
            "EXTSERVICE": "sea_green3",
        },
    },
    "neon": {
        ColourMode.BY_CATEGORY: {
            "DEBUG": "#00ffd5",
            "VERB2": "#00c8ff",
            "VERB1": "#7df9ff",
            "INFO": "#39ff14",
            "WARN": "#fff700",
            "ERROR": "#ff073a",
            "CRIT": "bold #ff00ff on black",
            "FATAL": "bold #ffffff on #ff073a",
        },
        ColourMode.BY_GROUP: {
            "MASTERPROC": "#00ffd5",
            "CONFIGMGR": "#7df9ff",
            "SESSIONMGR": "#ff00ff",
            "BACKENDSTART": "#00c8ff",
            "LOGGER": "#39ff14",
            "BACKENDPROC": "#fff700",
            "CLIENT": "#ff9900",
            "NETCFG": "#bc13fe",
            "EXTSERVICE": "#ccff00",
        },
    },
    "pastel": {
        ColourMode.BY_CATEGORY: {
            "DEBUG": "aquamarine1",
            "VERB2": "pale_turquoise1",
            "VERB1": "light_cyan1",
            "INFO": "light_sky_blue1",
            "WARN": "khaki1",
            "ERROR": "light_salmon1",
            "CRIT": "bold plum1",
            "FATAL": "bold pink1",
        },
        ColourMode.BY_GROUP: {
            "MASTERPROC": "light_sky_blue1",
            "CONFIGMGR": "light_steel_blue1",
            "SESSIONMGR": "plum1",
            "BACKENDSTART": "pale_turquoise1",
            "LOGGER": "honeydew2",
            "BACKENDPROC": "aquamarine1",
            "CLIENT": "khaki1",
            "NETCFG": "thistle1",
            "EXTSERVICE": "dark_sea_green1",
        },
    },
}
"""Built-in palettes keyed by theme name, then by :class:`ColourMode`.

Entries are Rich style strings keyed by enum member name; members without an
entry (``UNDEFINED``) stay undecorated.
"""

_COLOR_SYSTEMS: Mapping[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}

_MARKER = "\x00"


class NullColourPolicy(ColourPolicyPort):
    """Policy that never decorates; writers behave like plain writers.

    Examples
    --------
    >>> NullColourPolicy().decorate(LogGroup.CLIENT, LogCategory.FATAL)
    Decoration(prefix='', suffix='')
    """

    def decorate(self, group: LogGroup, category: LogCategory) -> Decoration:
        return Decoration.EMPTY


class AnsiColourPolicy(ColourPolicyPort):
    """Decorate events with ANSI escape sequences from a static table.

    The table is rendered once during construction and never mutated, so
    lookups are safe from any number of threads.

    Examples
    --------
    >>> policy = AnsiColourPolicy()
    >>> policy.decorate(LogGroup.BACKENDPROC, LogCategory.ERROR)
    Decoration(prefix='\\x1b[31m', suffix='\\x1b[0m')
    >>> policy.decorate(LogGroup.BACKENDPROC, LogCategory.UNDEFINED)
    Decoration(prefix='', suffix='')
    """

    def __init__(
        self,
        *,
        mode: ColourMode | str = ColourMode.BY_CATEGORY,
        theme: str = "classic",
        styles: Mapping[LogCategory | LogGroup | str, str] | None = None,
        color_system: str = "standard",
    ) -> None:
        """Resolve the theme, apply ``styles`` overrides and pre-render the table."""
        self._mode = ColourMode.from_name(mode) if isinstance(mode, str) else mode
        key_type: type[LogCategory] | type[LogGroup] = LogCategory if self._mode is ColourMode.BY_CATEGORY else LogGroup
        try:
            palette = COLOUR_THEMES[theme.strip().lower()][self._mode]
        except KeyError as exc:
            raise ValueError(f"Unknown colour theme: {theme!r}") from exc
        try:
            system = _COLOR_SYSTEMS[color_system.strip().lower()]
        except KeyError as exc:
            raise ValueError(f"Unknown color system: {color_system!r}") from exc

        merged: dict[LogCategory | LogGroup, str] = {key_type[name]: style for name, style in palette.items()}
        for key, style in (styles or {}).items():
            member = key_type.from_name(key) if isinstance(key, str) else key
            if not isinstance(member, key_type):
                raise ValueError(f"Style key {key!r} does not match colour mode {self._mode.value}")
            merged[member] = style

        self._theme = theme
        self._table: Mapping[LogCategory | LogGroup, Decoration] = MappingProxyType(
            {member: _render_decoration(style, system) for member, style in merged.items()}
        )

    @property
    def mode(self) -> ColourMode:
        return self._mode

    @property
    def theme(self) -> str:
        return self._theme

    def decorate(self, group: LogGroup, category: LogCategory) -> Decoration:
        """Return the pre-rendered decoration, or :attr:`Decoration.EMPTY` when unmapped."""
        key = category if self._mode is ColourMode.BY_CATEGORY else group
        return self._table.get(key, Decoration.EMPTY)


def _render_decoration(style_text: str, color_system: ColorSystem) -> Decoration:
    """Render ``style_text`` into the escape sequences around a message.

    Examples
    --------
    >>> _render_decoration("bold red", ColorSystem.STANDARD)
    Decoration(prefix='\\x1b[1;31m', suffix='\\x1b[0m')
    >>> _render_decoration("", ColorSystem.STANDARD)
    Decoration(prefix='', suffix='')
    """
    try:
        parsed = Style.parse(style_text)
    except StyleSyntaxError as exc:
        raise ValueError(f"Invalid style {style_text!r}: {exc}") from exc
    # Parsed styles are shared and memoise their SGR codes for the first colour
    # system they render with; a fresh instance keeps each policy independent.
    style = Style(
        color=parsed.color,
        bgcolor=parsed.bgcolor,
        bold=parsed.bold,
        dim=parsed.dim,
        italic=parsed.italic,
        underline=parsed.underline,
        blink=parsed.blink,
        blink2=parsed.blink2,
        reverse=parsed.reverse,
        conceal=parsed.conceal,
        strike=parsed.strike,
        underline2=parsed.underline2,
        frame=parsed.frame,
        encircle=parsed.encircle,
        overline=parsed.overline,
    )
    rendered = style.render(_MARKER, color_system=color_system)
    prefix, _, suffix = rendered.partition(_MARKER)
    return Decoration(prefix, suffix)


__all__ = ["COLOUR_THEMES", "AnsiColourPolicy", "ColourMode", "NullColourPolicy"]
