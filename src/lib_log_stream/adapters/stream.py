"""Stream-backed writers implementing :class:`LogWriterPort`.

Purpose
-------
Render text and structured events onto one text stream, with or without
colour decoration.

Contents
--------
* :class:`StreamLogWriter` - plain writer bound to a sink.
* :class:`ColourStreamWriter` - composes a plain writer with a colour policy.
* ``_describe_sink`` - stable descriptor used by ``info()``.

System Role
-----------
The human-facing output adapters. Both writers borrow their sink and policy:
they never open, close, or otherwise own them, and they do not serialise
concurrent writes. Each write reaches the sink as a single ``write`` call so
prefix, message and suffix are never split apart.
"""

from __future__ import annotations

import logging
import sys

from lib_log_stream.application.ports.colour import ColourPolicyPort
from lib_log_stream.application.ports.sink import TextSink
from lib_log_stream.application.ports.writer import LogWriterPort
from lib_log_stream.domain.categories import LogCategory
from lib_log_stream.domain.decoration import Decoration
from lib_log_stream.domain.groups import LogGroup

from .colour import NullColourPolicy


LOGGER = logging.getLogger(__name__)


class StreamLogWriter(LogWriterPort):
    """Write text verbatim to a text stream.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> writer = StreamLogWriter(buffer)
    >>> writer.write("x", "[", "]")
    >>> writer.write("hello")
    >>> buffer.getvalue()
    '[x]hello'
    """

    def __init__(self, sink: TextSink, *, autoflush: bool = False) -> None:
        """Bind the writer to ``sink`` for its whole lifetime.

        Parameters
        ----------
        sink:
            Text stream receiving the output; must outlive the writer.
        autoflush:
            Flush the sink after every write when it offers ``flush()``.
        """
        self._sink = sink
        self._autoflush = autoflush
        self._info = _describe_sink(sink)

    def info(self) -> str:
        return self._info

    def write(self, message: str, prefix: str = "", suffix: str = "") -> None:
        """Write ``prefix + message + suffix`` to the sink in one call.

        No newline is appended. Sink failures propagate to the caller.
        """
        try:
            self._sink.write(Decoration(prefix, suffix).wrap(message))
            if self._autoflush:
                flush = getattr(self._sink, "flush", None)
                if flush is not None:
                    flush()
        except (OSError, ValueError) as exc:
            LOGGER.debug("Sink %s rejected write: %s", self._info, exc)
            raise

    def write_event(self, group: LogGroup, category: LogCategory, message: str) -> None:
        """Write the message of a structured event without decoration."""
        self.write(message)


class ColourStreamWriter(LogWriterPort):
    """Decorate structured events using a colour policy.

    Raw text written through :meth:`write` behaves exactly like
    :class:`StreamLogWriter`; only :meth:`write_event` consults the policy.

    Examples
    --------
    >>> from io import StringIO
    >>> from lib_log_stream.adapters.colour import AnsiColourPolicy
    >>> buffer = StringIO()
    >>> writer = ColourStreamWriter(buffer, AnsiColourPolicy())
    >>> writer.write_event(LogGroup.BACKENDPROC, LogCategory.ERROR, "boom")
    >>> buffer.getvalue()
    '\\x1b[31mboom\\x1b[0m'
    """

    def __init__(
        self,
        sink: TextSink | StreamLogWriter,
        policy: ColourPolicyPort | None = None,
        *,
        autoflush: bool = False,
    ) -> None:
        """Wrap ``sink`` (or an existing plain writer) with ``policy``.

        The policy is borrowed and must outlive the writer; ``None`` selects
        :class:`NullColourPolicy`. ``autoflush`` only applies when a raw sink is
        given; a wrapped :class:`StreamLogWriter` keeps its own setting.

        Raises
        ------
        TypeError
            If ``autoflush`` is requested together with an existing writer.
        """
        if isinstance(sink, StreamLogWriter):
            if autoflush:
                raise TypeError("autoflush cannot be set when wrapping an existing StreamLogWriter")
            self._plain = sink
        else:
            self._plain = StreamLogWriter(sink, autoflush=autoflush)
        self._policy: ColourPolicyPort = policy if policy is not None else NullColourPolicy()

    @property
    def policy(self) -> ColourPolicyPort:
        return self._policy

    def info(self) -> str:
        return self._plain.info()

    def write(self, message: str, prefix: str = "", suffix: str = "") -> None:
        self._plain.write(message, prefix, suffix)

    def write_event(self, group: LogGroup, category: LogCategory, message: str) -> None:
        """Look up the decoration for the event and write the wrapped message."""
        decoration = self._policy.decorate(group, category)
        self._plain.write(message, decoration.prefix, decoration.suffix)


def _describe_sink(sink: object) -> str:
    """Return a human-readable descriptor for ``sink``.

    Examples
    --------
    >>> _describe_sink(sys.stdout)
    'stdout'
    >>> from io import StringIO
    >>> _describe_sink(StringIO())
    'StringIO'
    """
    if sink is sys.stdout or sink is sys.__stdout__:
        return "stdout"
    if sink is sys.stderr or sink is sys.__stderr__:
        return "stderr"
    name = getattr(sink, "name", None)
    if isinstance(name, str) and name:
        if name.startswith("<") and name.endswith(">"):
            return name[1:-1]
        return name
    if isinstance(name, int):
        return f"fd:{name}"
    return type(sink).__name__


__all__ = ["ColourStreamWriter", "StreamLogWriter"]
