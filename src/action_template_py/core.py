"""Composition root for ``action_template_py``.

Purpose
-------
Provide the entry points that wire the host adapters (environment inputs,
workflow commands) into the step logic. Everything else in the package is
reachable from here.

Contents
--------
* :func:`run` – the step itself, with injectable collaborators.
* :func:`process_exit_code` – exit status left by default-wired runs.
* :func:`run_step` – runs the step against a fresh command writer and returns
  the process exit code.

System Role
-----------
Connects :mod:`action_template_py.adapters` with
:mod:`action_template_py.application.runner` while emitting structured
observability signals. It is the place to swap adapters when the step runs
under a different host.
"""

from __future__ import annotations

from typing import Mapping, TextIO

from .adapters.commands.default import (
    WorkflowCommandWriter,
    escape_data,
    format_command,
    process_exit_code,
    process_writer,
    reset_process_writer,
)
from .adapters.env.default import DefaultInputReader, input_env_key
from .application.ports import DiagnosticSink, FailureSink, InputSource
from .application.runner import DEBUG_TEMPLATE, INPUT_KEY, format_debug_message, run_action
from .domain.errors import ActionError, InputRequiredError
from .observability import bind_trace_id, log_info, make_event


def run(
    *,
    inputs: InputSource | None = None,
    diagnostics: DiagnosticSink | None = None,
    failures: FailureSink | None = None,
) -> None:
    """Read the ``name`` input and announce it on the debug channel.

    Why
    ----
    Callers embedding the step (and tests) need to replace any of the three
    host collaborators without rebuilding the others.

    What
    ----
    Fills missing collaborators with :class:`DefaultInputReader` and the
    process-wide writer from :func:`process_writer`, clears the trace
    identifier and delegates to :func:`run_action`. Recognised errors end up on
    ``failures``; nothing is returned. A failure reported through the default
    writer is visible afterwards as :func:`process_exit_code`, which entry
    points pass to :class:`SystemExit`.

    Examples
    --------
    >>> from action_template_py.testing import RecordingHost
    >>> host = RecordingHost({"name": ""})
    >>> run(inputs=host, diagnostics=host, failures=host)
    >>> host.debug_messages
    ['The passed name is .']
    """

    bind_trace_id(None)
    log_info("step_started", **make_event("input", INPUT_KEY))
    run_action(
        inputs if inputs is not None else DefaultInputReader(),
        diagnostics if diagnostics is not None else process_writer(),
        failures if failures is not None else process_writer(),
    )


def run_step(*, environ: Mapping[str, str] | None = None, stream: TextIO | None = None) -> int:
    """Run the step against the runner protocol and return the exit code.

    What
    ----
    Uses one :class:`WorkflowCommandWriter` as both diagnostic and failure sink
    so its :attr:`~WorkflowCommandWriter.exit_code` reflects the outcome.

    Examples
    --------
    >>> import io
    >>> out = io.StringIO()
    >>> run_step(environ={"INPUT_NAME": "Mona"}, stream=out)
    0
    >>> out.getvalue()
    '::debug::The passed name is Mona.\\n'
    """

    writer = WorkflowCommandWriter(stream=stream, environ=environ)
    run(inputs=DefaultInputReader(environ=environ), diagnostics=writer, failures=writer)
    return writer.exit_code


__all__ = [
    "ActionError",
    "InputRequiredError",
    "DEBUG_TEMPLATE",
    "INPUT_KEY",
    "DefaultInputReader",
    "WorkflowCommandWriter",
    "escape_data",
    "format_command",
    "format_debug_message",
    "input_env_key",
    "process_exit_code",
    "process_writer",
    "reset_process_writer",
    "run",
    "run_step",
]
