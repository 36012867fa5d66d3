"""Transient structured log event.

Purpose
-------
Give call sites an optional value object for the (group, category, message)
triple when passing the three arguments separately is inconvenient.

Contents
--------
* :class:`LogEvent` frozen dataclass.

System Role
-----------
Events are built at the call site and consumed synchronously by a writer; they
are never stored or queued.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .categories import LogCategory
from .groups import LogGroup

if TYPE_CHECKING:  # pragma: no cover
    from lib_log_stream.application.ports.writer import LogWriterPort


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Structured log event tagged with its group and category.

    Attributes
    ----------
    group:
        :class:`LogGroup` of the emitting subsystem.
    category:
        :class:`LogCategory` severity of the event.
    message:
        Rendered message text; framing (newlines) is the caller's concern.
    """

    group: LogGroup
    category: LogCategory
    message: str

    def write_to(self, writer: "LogWriterPort") -> None:
        """Hand the event to ``writer`` as a structured write."""

        writer.write_event(self.group, self.category, self.message)


__all__ = ["LogEvent"]
