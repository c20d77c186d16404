"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the host adapters and the runner. Every
type here subclasses :class:`Exception`, so the runner treats each of them as a
recognised error whose message becomes the step's failure report.

Contents
--------
* :class:`ActionError` – umbrella base class for all step errors.
* :class:`InputRequiredError` – a required input was empty or absent.
"""

from __future__ import annotations


class ActionError(Exception):
    """Base type for all exceptions emitted by ``action_template_py``.

    Why
    ----
    Provide a single catch-all type for callers that do not need fine-grained
    handling.
    """


class InputRequiredError(ActionError):
    """Raised when an input flagged as required resolves to an empty value.

    The message matches the wording the hosted runner toolkit uses
    (``Input required and not supplied: <name>``) so workflow logs look the same
    regardless of which implementation produced them.
    """
