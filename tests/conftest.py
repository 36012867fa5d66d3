from __future__ import annotations

from io import StringIO

import pytest

from lib_log_stream import config as writer_config
from lib_log_stream.adapters.colour import AnsiColourPolicy


class BrokenSink:
    """Sink whose destination has gone away."""

    name = "/var/log/broken.log"

    def __init__(self) -> None:
        self.attempts = 0

    def write(self, text: str) -> int:
        self.attempts += 1
        raise BrokenPipeError(32, "Broken pipe")


class FlushRecordingSink(StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def ansi_policy() -> AnsiColourPolicy:
    return AnsiColourPolicy()


@pytest.fixture
def broken_sink() -> BrokenSink:
    return BrokenSink()


@pytest.fixture
def flush_sink() -> FlushRecordingSink:
    return FlushRecordingSink()


@pytest.fixture
def clean_colour_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove colour-related variables so tests start from defaults."""

    for name in (
        "LOG_STREAM_COLOR",
        "LOG_STREAM_COLOR_MODE",
        "LOG_STREAM_THEME",
        "LOG_STREAM_COLOR_SYSTEM",
        "NO_COLOR",
        "FORCE_COLOR",
        writer_config.DOTENV_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)
