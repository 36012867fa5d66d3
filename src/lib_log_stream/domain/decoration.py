"""Decoration value object produced by colour policies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(slots=True, frozen=True)
class Decoration:
    """Prefix/suffix pair wrapped around a rendered message.

    Empty strings mean "no visual effect". A non-empty prefix always travels
    with its suffix so a writer can never emit one without the other.

    Examples
    --------
    >>> Decoration("[", "]").wrap("x")
    '[x]'
    >>> Decoration.EMPTY.wrap("x")
    'x'
    """

    prefix: str = ""
    suffix: str = ""

    EMPTY: ClassVar["Decoration"]

    def __bool__(self) -> bool:
        return bool(self.prefix or self.suffix)

    def wrap(self, message: str) -> str:
        """Return ``message`` bracketed by this decoration."""

        return f"{self.prefix}{message}{self.suffix}"


Decoration.EMPTY = Decoration()


__all__ = ["Decoration"]
