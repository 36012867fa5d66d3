"""Writer port shared by plain and decorated writers.

Purpose
-------
Give plain and decorated writers one capability interface so they can be
substituted for each other anywhere a writer is expected.

Contents
--------
* :class:`LogWriterPort` - ``write``, ``write_event`` and ``info``.

System Role
-----------
The two write forms carry distinct names: ``write`` handles raw text while
``write_event`` handles structured events, so a call site always states which
one it means.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_stream.domain.categories import LogCategory
from lib_log_stream.domain.groups import LogGroup


@runtime_checkable
class LogWriterPort(Protocol):
    """Render text or structured events onto a single sink."""

    def write(self, message: str, prefix: str = "", suffix: str = "") -> None:
        """Write ``prefix + message + suffix`` as one unit."""

    def write_event(self, group: LogGroup, category: LogCategory, message: str) -> None:
        """Write a structured event, decorated as the writer sees fit."""

    def info(self) -> str:
        """Return a stable descriptor of the bound sink."""


__all__ = ["LogWriterPort"]
