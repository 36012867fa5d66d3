"""Domain entities and value objects used by the log writers."""

from __future__ import annotations

from .categories import LogCategory
from .constants import ConstantGenerationError, ConstantMember, ConstantNamespace
from .decoration import Decoration
from .events import LogEvent
from .groups import LogGroup

__all__ = [
    "ConstantGenerationError",
    "ConstantMember",
    "ConstantNamespace",
    "Decoration",
    "LogCategory",
    "LogEvent",
    "LogGroup",
]
