"""Adapter implementations for the writer ports."""

from __future__ import annotations

from .colour import COLOUR_THEMES, AnsiColourPolicy, ColourMode, NullColourPolicy
from .namespace_loader import load_namespaces
from .stream import ColourStreamWriter, StreamLogWriter

__all__ = [
    "COLOUR_THEMES",
    "AnsiColourPolicy",
    "ColourMode",
    "ColourStreamWriter",
    "NullColourPolicy",
    "StreamLogWriter",
    "load_namespaces",
]
