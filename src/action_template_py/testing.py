"""Fake host for exercising the step without a runner.

``RecordingHost`` implements every port in
:mod:`action_template_py.application.ports` and keeps each call, so tests and
doctests can assert on what the step read, logged and reported.
"""

from __future__ import annotations

from typing import Mapping


class RecordingHost:
    """In-memory stand-in for the runner that records debug and failure calls.

    ``inputs`` maps input names to values; an entry holding a
    :class:`BaseException` instance is raised on lookup instead, which lets
    tests script errors coming from the configuration surface. Names without
    an entry read as the empty string.

    Examples
    --------
    >>> host = RecordingHost({"name": ValueError("missing input")})
    >>> host.get_input("name")
    Traceback (most recent call last):
    ...
    ValueError: missing input
    >>> host.get_input("other")
    ''
    """

    def __init__(self, inputs: Mapping[str, object] | None = None) -> None:
        self.inputs: dict[str, object] = dict(inputs or {})
        self.lookups: list[str] = []
        self.debug_messages: list[str] = []
        self.failures: list[str] = []

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def get_input(self, name: str) -> str:
        self.lookups.append(name)
        value = self.inputs.get(name, "")
        if isinstance(value, BaseException):
            raise value
        return str(value)

    def debug(self, message: str) -> None:
        self.debug_messages.append(message)

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
