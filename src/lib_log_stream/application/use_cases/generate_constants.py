"""Render constant namespaces as a Python module of enumerations.

Purpose
-------
Mirror integer constants into ``Enum``/``IntFlag`` classes so Python callers
share the exact values of the producing program. The emitter is generic: any
table of :class:`ConstantNamespace` descriptors goes through the same
rendering path.

Contents
--------
* :func:`render_python_constants` - deterministic module text.
* :func:`builtin_namespaces` - namespaces mirroring this package's enums.

System Role
-----------
Build-time collaborator invoked by ``lib_log_stream generate-constants``; it
has no interaction with the writers at runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lib_log_stream.domain.categories import LogCategory
from lib_log_stream.domain.constants import ConstantGenerationError, ConstantNamespace
from lib_log_stream.domain.groups import LogGroup

logger = logging.getLogger(__name__)

_HEADER = """\
#
# Generated by {generated_by}
# as part of the project build.
#
# Do not modify this file.  This file needs to be
# regenerated each time any of the mirrored
# constants are modified.
#
"""


def render_python_constants(
    namespaces: Iterable[ConstantNamespace],
    *,
    version: str,
    generated_by: str = "lib_log_stream",
) -> str:
    """Return Python source declaring one enumeration per namespace.

    Member order and integer values are preserved verbatim. The same input
    always yields byte-identical output.

    Parameters
    ----------
    namespaces:
        Ordered namespace descriptors; flagged namespaces become ``IntFlag``.
    version:
        Build version token emitted as ``VERSION``.
    generated_by:
        Name of the producing tool, recorded in the header comment.

    Raises
    ------
    ConstantGenerationError
        If two namespaces share a name.

    Examples
    --------
    >>> ns = ConstantNamespace("Status", [("UNSET", 0), ("CONFIG", 1)])
    >>> print(render_python_constants([ns], version="1.0").split("VERSION = '1.0'")[1].strip())
    class Status(Enum):
        UNSET = 0
        CONFIG = 1
    """
    ordered = list(namespaces)
    seen: set[str] = set()
    for namespace in ordered:
        if namespace.name in seen:
            raise ConstantGenerationError(f"duplicate namespace {namespace.name!r}")
        seen.add(namespace.name)

    blocks = [
        _HEADER.format(generated_by=generated_by),
        "from enum import Enum, IntFlag\n",
        f"VERSION = {version!r}\n",
    ]
    blocks.extend(_render_namespace(namespace) for namespace in ordered)
    logger.debug("Rendered %d constant namespaces for version %s", len(ordered), version)
    head = "\n".join(blocks[:3])
    if len(blocks) == 3:
        return head
    return head + "\n\n" + "\n\n".join(blocks[3:])


def _render_namespace(namespace: ConstantNamespace) -> str:
    base = "IntFlag" if namespace.flag else "Enum"
    lines = [f"class {namespace.name}({base}):"]
    if namespace.members:
        lines.extend(f"    {member.name} = {member.value}" for member in namespace.members)
    else:
        lines.append("    pass")
    return "\n".join(lines) + "\n"


def builtin_namespaces() -> list[ConstantNamespace]:
    """Return namespaces mirroring :class:`LogGroup` and :class:`LogCategory`."""

    return [
        ConstantNamespace.from_enum(LogGroup),
        ConstantNamespace.from_enum(LogCategory),
    ]


__all__ = ["builtin_namespaces", "render_python_constants"]
