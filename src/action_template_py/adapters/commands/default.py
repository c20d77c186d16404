"""Workflow command adapter.

Purpose
-------
Talk back to the hosted runner through workflow commands written on stdout
(``::debug::message``, ``::error::message``). The runner hides ``debug`` lines
unless step debugging is enabled for the repository, and turns ``error`` lines
into annotations.

Key behaviours
--------------
* ``escape_data`` encodes ``%``, CR and LF so a message always stays on one
  command line.
* ``set_failed`` never raises; it flips :attr:`WorkflowCommandWriter.exit_code`
  to ``1`` and emits the error command. The caller decides when to exit.
* ``process_writer`` holds the writer default-wired steps share; entry points
  exit with ``process_exit_code()``.
* Each emitted command is mirrored to the package logger.
"""

from __future__ import annotations

import os
import sys
from typing import Final, Mapping, TextIO

from ...observability import log_debug, log_error, make_event

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

_ESCAPES: Final[tuple[tuple[str, str], ...]] = (
    ("%", "%25"),
    ("\r", "%0D"),
    ("\n", "%0A"),
)


def escape_data(text: str) -> str:
    """Encode characters the runner would otherwise treat as command syntax.

    ``%`` goes first so the other replacements are not double-encoded.

    Examples
    --------
    >>> escape_data('50%\\ndone')
    '50%25%0Adone'
    """

    for raw, encoded in _ESCAPES:
        text = text.replace(raw, encoded)
    return text


def format_command(command: str, message: str) -> str:
    """Return a single workflow command line (without the trailing newline).

    Examples
    --------
    >>> format_command('debug', 'The passed name is Mona.')
    '::debug::The passed name is Mona.'
    """

    return f"::{command}::{escape_data(message)}"


class WorkflowCommandWriter:
    """Diagnostic and failure sink speaking the runner's command protocol."""

    def __init__(self, *, stream: TextIO | None = None, environ: Mapping[str, str] | None = None) -> None:
        """Bind the writer to an output ``stream`` and an ``environ`` mapping.

        Both default to the live process values (resolved lazily for
        ``stream`` so pytest's capture replaces it cleanly).
        """

        self._stream = stream
        self._environ = os.environ if environ is None else environ
        self.exit_code = EXIT_SUCCESS

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def is_debug(self) -> bool:
        """Return ``True`` when the runner has step debugging switched on.

        Examples
        --------
        >>> WorkflowCommandWriter(environ={'RUNNER_DEBUG': '1'}).is_debug()
        True
        >>> WorkflowCommandWriter(environ={}).is_debug()
        False
        """

        return self._environ.get("RUNNER_DEBUG") == "1"

    def debug(self, message: str) -> None:
        """Emit a ``::debug::`` command carrying *message*."""

        self._issue("debug", message)
        log_debug("command_issued", **make_event("debug", "debug"))

    def error(self, message: str) -> None:
        """Emit an ``::error::`` command carrying *message*."""

        self._issue("error", message)
        log_error("command_issued", **make_event("failure", "error"))

    def set_failed(self, message: str) -> None:
        """Mark the step failed and report *message* as an error annotation.

        Examples
        --------
        >>> import io
        >>> buffer = io.StringIO()
        >>> writer = WorkflowCommandWriter(stream=buffer, environ={})
        >>> writer.set_failed('missing input')
        >>> writer.exit_code
        1
        >>> buffer.getvalue()
        '::error::missing input\\n'
        """

        self.exit_code = EXIT_FAILURE
        self.error(message)

    def _issue(self, command: str, message: str) -> None:
        stream = self.stream
        stream.write(format_command(command, message) + "\n")
        stream.flush()


_PROCESS_WRITER: WorkflowCommandWriter | None = None


def process_writer() -> WorkflowCommandWriter:
    """Return the writer shared by every default-wired step in this process.

    Its :attr:`~WorkflowCommandWriter.exit_code` plays the role of the process
    exit status: once a step reports a failure it stays ``1`` until
    :func:`reset_process_writer` runs.
    """

    global _PROCESS_WRITER
    if _PROCESS_WRITER is None:
        _PROCESS_WRITER = WorkflowCommandWriter()
    return _PROCESS_WRITER


def process_exit_code() -> int:
    """Return the exit code the process should end with."""

    return process_writer().exit_code


def reset_process_writer() -> None:
    """Drop the shared writer so the next step starts from a clean status."""

    global _PROCESS_WRITER
    _PROCESS_WRITER = None
