from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from lib_log_stream.domain import Decoration, LogCategory, LogEvent, LogGroup
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


class _RecordingWriter:
    def __init__(self) -> None:
        self.calls: list[tuple[LogGroup, LogCategory, str]] = []

    def write(self, message: str, prefix: str = "", suffix: str = "") -> None:  # pragma: no cover - unused
        raise AssertionError("structured events must not use the plain form")

    def write_event(self, group: LogGroup, category: LogCategory, message: str) -> None:
        self.calls.append((group, category, message))

    def info(self) -> str:  # pragma: no cover - unused
        return "recorder"


def test_empty_decoration_is_falsy_and_transparent() -> None:
    assert not Decoration.EMPTY
    assert Decoration.EMPTY == Decoration("", "")
    assert Decoration.EMPTY.wrap("boom") == "boom"


def test_decoration_wraps_prefix_then_message_then_suffix() -> None:
    decoration = Decoration("<", ">")
    assert decoration
    assert decoration.wrap("m") == "<m>"


def test_decoration_is_immutable() -> None:
    with pytest.raises(FrozenInstanceError):
        Decoration.EMPTY.prefix = "x"  # type: ignore[misc]


def test_event_write_to_uses_structured_form() -> None:
    writer = _RecordingWriter()
    event = LogEvent(LogGroup.CLIENT, LogCategory.WARN, "careful")

    event.write_to(writer)

    assert writer.calls == [(LogGroup.CLIENT, LogCategory.WARN, "careful")]
