"""Subsystem tags attached to every structured log event.

Purpose
-------
Identify which component of the host program emitted an event so writers and
colour policies can treat subsystems differently.

Contents
--------
* :class:`LogGroup` enum with name lookup helpers.

System Role
-----------
Closed vocabulary shared by the colour policies, the writers, and the constant
mirror generator (:func:`lib_log_stream.application.use_cases.generate_constants.builtin_namespaces`).
"""

from __future__ import annotations

from enum import Enum


class LogGroup(Enum):
    """Enumerated subsystem groups that may emit log events."""

    UNDEFINED = 0
    MASTERPROC = 1
    CONFIGMGR = 2
    SESSIONMGR = 3
    BACKENDSTART = 4
    LOGGER = 5
    BACKENDPROC = 6
    CLIENT = 7
    NETCFG = 8
    EXTSERVICE = 9

    @property
    def label(self) -> str:
        """Return the lowercase group name used in diagnostics."""

        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "LogGroup":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log group: {name!r}") from exc


__all__ = ["LogGroup"]
