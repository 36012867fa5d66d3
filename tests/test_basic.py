"""Behavioural tests for the public package surface."""

from __future__ import annotations

import sys
from io import StringIO

import pytest

import lib_log_stream
from lib_log_stream import (
    AnsiColourPolicy,
    ColourStreamWriter,
    LogCategory,
    LogGroup,
    NullColourPolicy,
    StreamLogWriter,
    WriterConfig,
    create_writer,
)
from lib_log_stream.cli import summary_info
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_plain_writer_scenarios() -> None:
    hello = StringIO()
    StreamLogWriter(hello).write("hello")
    bracketed = StringIO()
    StreamLogWriter(bracketed).write("x", "[", "]")

    assert hello.getvalue() == "hello"
    assert bracketed.getvalue() == "[x]"


def test_decorated_writer_scenarios() -> None:
    coloured = StringIO()
    ColourStreamWriter(coloured, AnsiColourPolicy()).write_event(LogGroup.BACKENDPROC, LogCategory.ERROR, "boom")
    plain = StringIO()
    ColourStreamWriter(plain, NullColourPolicy()).write_event(LogGroup.BACKENDPROC, LogCategory.ERROR, "boom")

    assert coloured.getvalue() == "\x1b[31mboom\x1b[0m"
    assert plain.getvalue() == "boom"


def test_create_writer_defaults_to_stdout(capsys: pytest.CaptureFixture[str], clean_colour_env: None) -> None:
    writer = create_writer(config=WriterConfig(color="never"))
    writer.write_event(LogGroup.CLIENT, LogCategory.ERROR, "boom\n")

    assert writer.info() == "stdout"
    assert capsys.readouterr().out == "boom\n"


def test_create_writer_uses_environment(monkeypatch: pytest.MonkeyPatch, clean_colour_env: None) -> None:
    monkeypatch.setenv("LOG_STREAM_COLOR", "always")
    monkeypatch.setenv("LOG_STREAM_COLOR_MODE", "group")
    sink = StringIO()

    writer = create_writer(sink)
    writer.write_event(LogGroup.CLIENT, LogCategory.DEBUG, "x")

    assert isinstance(writer.policy, AnsiColourPolicy)
    assert sink.getvalue() == "\x1b[93mx\x1b[0m"


def test_create_writer_keeps_explicit_policy() -> None:
    policy = NullColourPolicy()
    writer = create_writer(StringIO(), policy=policy, config=WriterConfig(color="always"))
    assert writer.policy is policy


def test_create_writer_skips_colour_for_non_terminals(clean_colour_env: None) -> None:
    writer = create_writer(StringIO())
    assert isinstance(writer.policy, NullColourPolicy)


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_log_stream" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_public_names_are_exported() -> None:
    for name in lib_log_stream.__all__:
        assert hasattr(lib_log_stream, name), name


def test_module_entry_point_is_importable() -> None:
    import lib_log_stream.__main__ as entry

    assert entry.main is lib_log_stream.cli.main
    assert "lib_log_stream.__main__" in sys.modules
