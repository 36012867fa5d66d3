"""Severity categories for structured log events.

Purpose
-------
Classify events by severity/kind so colour policies can highlight warnings and
failures while verbose chatter stays muted.

Contents
--------
* :class:`LogCategory` enum with conversion helpers.
* ``_PYTHON_LEVELS`` constant mapping categories onto :mod:`logging` levels.

System Role
-----------
Domain vocabulary consumed by :class:`lib_log_stream.adapters.colour.AnsiColourPolicy`
and mirrored into generated constants.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogCategory(Enum):
    """Enumerated severity categories, ordered from least to most severe."""

    UNDEFINED = 0
    DEBUG = 1
    VERB2 = 2
    VERB1 = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    CRIT = 7
    FATAL = 8

    @property
    def label(self) -> str:
        """Return the human-facing category label."""

        return _LABELS[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level closest to this category.

        Examples
        --------
        >>> LogCategory.WARN.to_python_level() == logging.WARNING
        True
        """

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogCategory":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log category: {name!r}") from exc


_LABELS = {
    LogCategory.UNDEFINED: "[[UNDEFINED]]",
    LogCategory.DEBUG: "DEBUG",
    LogCategory.VERB2: "VERB2",
    LogCategory.VERB1: "VERB1",
    LogCategory.INFO: "INFO",
    LogCategory.WARN: "WARNING",
    LogCategory.ERROR: "-- ERROR --",
    LogCategory.CRIT: "!! CRITICAL !!",
    LogCategory.FATAL: "**!! FATAL !!**",
}

_PYTHON_LEVELS = {
    LogCategory.UNDEFINED: logging.NOTSET,
    LogCategory.DEBUG: logging.DEBUG,
    LogCategory.VERB2: logging.DEBUG,
    LogCategory.VERB1: logging.INFO,
    LogCategory.INFO: logging.INFO,
    LogCategory.WARN: logging.WARNING,
    LogCategory.ERROR: logging.ERROR,
    LogCategory.CRIT: logging.CRITICAL,
    LogCategory.FATAL: logging.CRITICAL,
}


__all__ = ["LogCategory"]
