"""Sink protocol describing the destination a writer is bound to."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Minimal text stream contract (``sys.stdout``, open files, ``StringIO``)."""

    def write(self, text: str, /) -> object:
        """Accept ``text``; the return value is ignored."""


__all__ = ["TextSink"]
