"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_stream"
title = "Colour-aware log event writers for text streams"
version = "0.1.0"
author = "lib_log_stream developers"
shell_command = "lib_log_stream"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Print the metadata banner, or hand it to ``writer`` when given.

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_log_stream:
    <BLANKLINE>
        name          = lib_log_stream
    ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)
