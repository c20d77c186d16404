"""Application-layer step logic.

Purpose
-------
Run the single operation of the action: read the ``name`` input, announce it
on the debug channel, and turn any recognised error into a failure report. The
module performs no I/O of its own; collaborators arrive through the ports in
:mod:`action_template_py.application.ports`.

Contents
    - ``INPUT_KEY`` / ``DEBUG_TEMPLATE``: the fixed lookup key and message shape.
    - ``run_action``: the step body.
    - ``format_debug_message``: renders the diagnostic line.

System Role
-----------
Called by :func:`action_template_py.core.run`, which supplies host adapters when
the caller does not inject its own.
"""

from __future__ import annotations

from typing import Final

from ..observability import log_debug, log_error, make_event
from .ports import DiagnosticSink, FailureSink, InputSource

INPUT_KEY: Final[str] = "name"
DEBUG_TEMPLATE: Final[str] = "The passed name is {name}."


def format_debug_message(value: str) -> str:
    """Render the diagnostic line for *value* without altering it.

    Examples
    --------
    >>> format_debug_message("Mona")
    'The passed name is Mona.'
    >>> format_debug_message("")
    'The passed name is .'
    """

    return DEBUG_TEMPLATE.format(name=value)


def run_action(inputs: InputSource, diagnostics: DiagnosticSink, failures: FailureSink) -> None:
    """Execute the step against the supplied collaborators.

    Why
    ----
    The hosted runner decides the step outcome from the failure sink, not from
    an exception escaping the process, so recognised errors are reported rather
    than raised.

    What
    ----
    Reads :data:`INPUT_KEY`, sends :func:`format_debug_message` to
    ``diagnostics`` and returns ``None``. An :class:`Exception` raised by either
    collaborator is forwarded to ``failures`` as ``str(exc)``. Anything outside
    the :class:`Exception` hierarchy (``KeyboardInterrupt``, ``SystemExit``)
    reaches neither sink and propagates to the caller.

    Side Effects
    ------------
    At most one debug emission and at most one failure report per call. No
    state is kept between calls.

    Examples
    --------
    >>> from action_template_py.testing import RecordingHost
    >>> host = RecordingHost({"name": "Mona"})
    >>> run_action(host, host, host)
    >>> host.debug_messages
    ['The passed name is Mona.']
    >>> host.failures
    []
    """

    try:
        value = inputs.get_input(INPUT_KEY)
        diagnostics.debug(format_debug_message(value))
    except Exception as exc:
        log_error("step_failed", **make_event("failure", INPUT_KEY, {"error": type(exc).__name__}))
        failures.set_failed(str(exc))
        return
    log_debug("step_completed", **make_event("debug", INPUT_KEY))
