"""Public package surface for the log stream writers.

Writers render log events tagged with a :class:`LogGroup` and a
:class:`LogCategory` onto one text stream. :class:`ColourStreamWriter` wraps
structured events in decoration chosen by a colour policy, while raw text goes
through untouched::

    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> writer = ColourStreamWriter(buffer, AnsiColourPolicy())
    >>> writer.write_event(LogGroup.BACKENDPROC, LogCategory.ERROR, "boom")
    >>> writer.write(" done")
    >>> buffer.getvalue()
    '\\x1b[31mboom\\x1b[0m done'
"""

from __future__ import annotations

import sys

from .adapters import AnsiColourPolicy, ColourMode, ColourStreamWriter, NullColourPolicy, StreamLogWriter
from .application.ports import ColourPolicyPort, LogWriterPort, TextSink
from .config import WriterConfig, load_writer_config
from .domain import Decoration, LogCategory, LogEvent, LogGroup


def create_writer(
    sink: TextSink | None = None,
    *,
    config: WriterConfig | None = None,
    policy: ColourPolicyPort | None = None,
    autoflush: bool = False,
) -> ColourStreamWriter:
    """Build a :class:`ColourStreamWriter` for ``sink`` (default ``sys.stdout``).

    ``policy`` wins when given; otherwise the policy is derived from ``config``
    (default: :func:`load_writer_config`), which enables ANSI colour only for
    terminals unless told otherwise. The returned writer borrows ``policy``.

    Examples
    --------
    >>> from io import StringIO
    >>> writer = create_writer(StringIO(), config=WriterConfig(color="never"))
    >>> isinstance(writer.policy, NullColourPolicy)
    True
    """
    target = sys.stdout if sink is None else sink
    if policy is None:
        resolved = config if config is not None else load_writer_config()
        policy = resolved.build_policy(target)
    return ColourStreamWriter(target, policy, autoflush=autoflush)


__all__ = [
    "AnsiColourPolicy",
    "ColourMode",
    "ColourPolicyPort",
    "ColourStreamWriter",
    "Decoration",
    "LogCategory",
    "LogEvent",
    "LogGroup",
    "LogWriterPort",
    "NullColourPolicy",
    "StreamLogWriter",
    "TextSink",
    "WriterConfig",
    "create_writer",
    "load_writer_config",
]
