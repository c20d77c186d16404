"""Public package surface for the template action step.

``import action_template_py`` exposes the step (:func:`run`, :func:`run_step`),
the exit status of default-wired runs (:func:`process_exit_code`), the host
adapters, the error taxonomy and the logging hooks. ``python -m
action_template_py run`` is the process entry point used by ``action.yml``.
"""

from __future__ import annotations

from .core import (
    DEBUG_TEMPLATE,
    INPUT_KEY,
    ActionError,
    DefaultInputReader,
    InputRequiredError,
    WorkflowCommandWriter,
    input_env_key,
    process_exit_code,
    run,
    run_step,
)
from .observability import bind_trace_id, get_logger
from .testing import RecordingHost

__all__ = [
    "DEBUG_TEMPLATE",
    "INPUT_KEY",
    "ActionError",
    "DefaultInputReader",
    "InputRequiredError",
    "RecordingHost",
    "WorkflowCommandWriter",
    "bind_trace_id",
    "get_logger",
    "input_env_key",
    "process_exit_code",
    "run",
    "run_step",
]
