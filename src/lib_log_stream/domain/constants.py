"""Constant namespaces mirrored by the build-time generator.

Purpose
-------
Describe "what constants exist" independently from how they are rendered, so a
single emitter can serve every namespace.

Contents
--------
* :class:`ConstantMember` - one (name, value) pair.
* :class:`ConstantNamespace` - named, ordered member list with a flag marker.
* :class:`ConstantGenerationError` - raised for invalid generator input.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class ConstantGenerationError(ValueError):
    """Generator input could not be turned into valid enumerations."""


@dataclass(slots=True, frozen=True)
class ConstantMember:
    """Single enumeration member with its exact integer value.

    Values must be non-negative; negative input is rejected rather than wrapped
    to an unsigned value.
    """

    name: str
    value: int

    def __post_init__(self) -> None:
        _check_name(self.name, "member name")
        if self.name.startswith("_"):
            raise ConstantGenerationError(f"member name {self.name!r} is reserved by Enum (leading underscore)")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ConstantGenerationError(f"member {self.name} must have an integer value, got {self.value!r}")
        if self.value < 0:
            raise ConstantGenerationError(f"member {self.name} must not be negative, got {self.value}")


@dataclass(slots=True, frozen=True)
class ConstantNamespace:
    """Named, ordered list of constants rendered as one enumeration.

    Examples
    --------
    >>> ns = ConstantNamespace("Status", [("UNSET", 0), ("CONFIG", 1)])
    >>> [member.name for member in ns.members]
    ['UNSET', 'CONFIG']
    """

    name: str
    members: tuple[ConstantMember, ...] = field(default_factory=tuple)
    flag: bool = False

    def __post_init__(self) -> None:
        _check_name(self.name, "namespace name")
        members = tuple(_coerce_member(item) for item in self.members)
        seen: set[str] = set()
        for member in members:
            if member.name in seen:
                raise ConstantGenerationError(f"duplicate member {member.name!r} in namespace {self.name}")
            seen.add(member.name)
        object.__setattr__(self, "members", members)

    @classmethod
    def from_enum(cls, enum_type: type[Enum], *, name: str | None = None, flag: bool = False) -> "ConstantNamespace":
        """Build a namespace mirroring the members of ``enum_type`` in definition order."""

        return cls(name or enum_type.__name__, tuple(ConstantMember(item.name, item.value) for item in enum_type), flag)


def _check_name(name: object, what: str) -> None:
    if not isinstance(name, str) or not name.isidentifier():
        raise ConstantGenerationError(f"{what} {name!r} is not a valid identifier")
    if keyword.iskeyword(name):
        raise ConstantGenerationError(f"{what} {name!r} is a Python keyword")


def _coerce_member(item: ConstantMember | Iterable[object]) -> ConstantMember:
    if isinstance(item, ConstantMember):
        return item
    try:
        name, value = tuple(item)
    except (TypeError, ValueError) as exc:
        raise ConstantGenerationError(f"members must be (name, value) pairs, got {item!r}") from exc
    return ConstantMember(str(name), value)  # type: ignore[arg-type]


__all__ = ["ConstantGenerationError", "ConstantMember", "ConstantNamespace"]
