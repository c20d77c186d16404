"""Application-layer ports describing host collaborator responsibilities.

Purpose
-------
Define the structural contracts the runner talks to so it never depends on a
concrete host. Production wiring uses the environment reader and the workflow
command writer; tests use :class:`action_template_py.testing.RecordingHost`.

Contents
--------
* :class:`InputSource` – keyed lookup of invocation parameters.
* :class:`DiagnosticSink` – debug channel whose visibility the host controls.
* :class:`FailureSink` – marks the invocation failed with a message.

System Role
-----------
These protocols enforce Dependency Inversion (DIP). Each adapter implements one
or more protocol so the application layer requests behaviour via abstraction.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class InputSource(Protocol):
    """Resolve named inputs supplied by the host for this invocation.

    Why
    ----
    Whether an input is required, trimmed or case-folded is the host's
    contract, not the runner's.
    """

    def get_input(self, name: str) -> str:
        """Return the value for *name* or raise when the host refuses it."""


@runtime_checkable
class DiagnosticSink(Protocol):
    """Accept debug messages that are only shown in verbose runs."""

    def debug(self, message: str) -> None:
        """Emit *message* on the debug channel."""


@runtime_checkable
class FailureSink(Protocol):
    """Record the terminal failure of the invocation.

    Implementations must not raise and must not stop the process; they only
    flip the outcome to failed and keep *message* for the log.
    """

    def set_failed(self, message: str) -> None:
        """Mark the invocation failed with *message*."""
