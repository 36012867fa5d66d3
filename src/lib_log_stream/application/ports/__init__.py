"""Protocols describing the boundaries of the writer subsystem."""

from __future__ import annotations

from .colour import ColourPolicyPort
from .sink import TextSink
from .writer import LogWriterPort

__all__ = ["ColourPolicyPort", "LogWriterPort", "TextSink"]
