"""Load constant namespaces from a TOML table.

The file holds the source constants and the namespaces that mirror them::

    [constants.StatusMajor]
    UNSET = 0
    CONFIG = 1

    [[namespace]]
    name = "StatusMajor"
    members = [["UNSET", "UNSET"], ["CFG_ERROR", "CONFIG"]]

``source`` defaults to the namespace name, ``flag`` to ``false``. Each member
reference is either an integer literal or the name of a constant in the
source table.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover
    import tomli as tomllib

from lib_log_stream.domain.constants import ConstantGenerationError, ConstantMember, ConstantNamespace


def load_namespaces(path: Path | str) -> list[ConstantNamespace]:
    """Parse ``path`` and return its namespaces in file order."""

    source = Path(path)
    try:
        with source.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConstantGenerationError(f"{source}: invalid TOML: {exc}") from exc
    return parse_namespaces(document, origin=str(source))


def parse_namespaces(document: Mapping[str, Any], *, origin: str = "<memory>") -> list[ConstantNamespace]:
    """Resolve the namespaces described by an already-parsed document.

    Examples
    --------
    >>> doc = {"constants": {"S": {"CONFIG": 1}}, "namespace": [{"name": "S", "members": [["UNSET", 0], ["CFG", "CONFIG"]]}]}
    >>> [(m.name, m.value) for m in parse_namespaces(doc)[0].members]
    [('UNSET', 0), ('CFG', 1)]
    """
    constants = document.get("constants", {})
    entries = document.get("namespace", [])
    if not isinstance(constants, Mapping) or not isinstance(entries, list):
        raise ConstantGenerationError(f"{origin}: expected a [constants] table and [[namespace]] array")

    namespaces: list[ConstantNamespace] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ConstantGenerationError(f"{origin}: namespace entries must be tables, got {entry!r}")
        if "name" not in entry:
            raise ConstantGenerationError(f"{origin}: namespace entry without a name")
        name = entry["name"]
        if not isinstance(name, str):
            raise ConstantGenerationError(f"{origin}: namespace name must be a string, got {name!r}")
        source = entry.get("source", name)
        table = constants.get(source, {}) if isinstance(source, str) else None
        if not isinstance(table, Mapping):
            raise ConstantGenerationError(f"{origin}: constants source {source!r} for {name} must be a table")
        raw_members = entry.get("members", [])
        if not isinstance(raw_members, list):
            raise ConstantGenerationError(f"{origin}: {name} members must be a list, got {raw_members!r}")
        members = [_resolve_member(item, table, namespace=name, origin=origin) for item in raw_members]
        namespaces.append(ConstantNamespace(name, tuple(members), bool(entry.get("flag", False))))
    return namespaces


def _resolve_member(item: Any, table: Mapping[str, Any], *, namespace: str, origin: str) -> ConstantMember:
    if not isinstance(item, (list, tuple)) or len(item) != 2:
        raise ConstantGenerationError(f"{origin}: {namespace} members must be [name, value] pairs, got {item!r}")
    member_name, reference = item
    if isinstance(reference, str):
        if reference not in table:
            raise ConstantGenerationError(f"{origin}: {namespace}.{member_name} references undefined constant {reference!r}")
        reference = table[reference]
    return ConstantMember(str(member_name), reference)


__all__ = ["load_namespaces", "parse_namespaces"]
