"""Colour policy port describing decoration lookups.

Purpose
-------
Define the abstraction that maps a (group, category) pair onto the decoration a
writer wraps around the message.

Contents
--------
* :class:`ColourPolicyPort` - runtime-checkable protocol with ``decorate``.

System Role
-----------
Lets :class:`lib_log_stream.adapters.stream.ColourStreamWriter` stay ignorant
of how colours are chosen; ANSI and null policies plug in interchangeably.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_stream.domain.categories import LogCategory
from lib_log_stream.domain.decoration import Decoration
from lib_log_stream.domain.groups import LogGroup


@runtime_checkable
class ColourPolicyPort(Protocol):
    """Map a group/category pair onto a decoration.

    Implementations must be total (unmapped pairs yield
    :attr:`Decoration.EMPTY`) and safe to call from several threads.
    """

    def decorate(self, group: LogGroup, category: LogCategory) -> Decoration:
        """Return the decoration for ``group``/``category``."""


__all__ = ["ColourPolicyPort"]
