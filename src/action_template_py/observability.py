"""Structured logging for embedding applications.

Workflow commands on stdout are what the runner shows to users. The records
emitted here are for code that embeds the step and wants to observe it: every
record goes to the ``action_template_py`` logger (silent until a handler is
attached) and carries a ``context`` attribute holding the bound trace id plus
the event fields built by :func:`make_event`.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("action_template_py_trace_id", default=None)

_LOGGER: Final[logging.Logger] = logging.getLogger("action_template_py")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Correlate subsequent records with *trace_id*; ``None`` clears it.

    Examples
    --------
    >>> bind_trace_id('run-42')
    >>> TRACE_ID.get()
    'run-42'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(event: str, **fields: Any) -> None:
    _LOGGER.debug(event, extra={"context": _context(fields)})


def log_info(event: str, **fields: Any) -> None:
    _LOGGER.info(event, extra={"context": _context(fields)})


def log_error(event: str, **fields: Any) -> None:
    _LOGGER.error(event, extra={"context": _context(fields)})


def make_event(channel: str, key: str | None, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Return the fields of a step event.

    ``channel`` names the host channel involved (``input``, ``debug`` or
    ``failure``) and ``key`` the input or command it concerns; ``payload`` adds
    event-specific detail.

    Examples
    --------
    >>> make_event('input', 'INPUT_NAME', {'required': False})
    {'channel': 'input', 'key': 'INPUT_NAME', 'required': False}
    """

    return {"channel": channel, "key": key, **(payload or {})}


def _context(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {"trace_id": TRACE_ID.get(), **fields}
