"""Workflow command writer tests covering escaping and the failure contract."""

from __future__ import annotations

import io

import pytest

from action_template_py.adapters.commands.default import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    WorkflowCommandWriter,
    escape_data,
    format_command,
    process_exit_code,
    process_writer,
    reset_process_writer,
)


def _writer(environ: dict[str, str] | None = None) -> tuple[WorkflowCommandWriter, io.StringIO]:
    buffer = io.StringIO()
    return WorkflowCommandWriter(stream=buffer, environ=environ or {}), buffer


@pytest.mark.parametrize(
    ("raw", "escaped"),
    [
        ("plain", "plain"),
        ("100%", "100%25"),
        ("line one\nline two", "line one%0Aline two"),
        ("crlf\r\n", "crlf%0D%0A"),
        ("%0A", "%250A"),
    ],
)
def test_escape_data(raw: str, escaped: str) -> None:
    assert escape_data(raw) == escaped


def test_format_command_shape() -> None:
    assert format_command("error", "missing input") == "::error::missing input"


def test_debug_writes_one_command_line() -> None:
    writer, buffer = _writer()
    writer.debug("The passed name is Mona.")
    assert buffer.getvalue() == "::debug::The passed name is Mona.\n"
    assert writer.exit_code == EXIT_SUCCESS


def test_multiline_message_stays_on_one_line() -> None:
    writer, buffer = _writer()
    writer.debug("a\nb")
    assert buffer.getvalue().splitlines() == ["::debug::a%0Ab"]


def test_set_failed_flags_exit_code_without_raising() -> None:
    writer, buffer = _writer()
    writer.set_failed("missing input")
    assert writer.exit_code == EXIT_FAILURE
    assert buffer.getvalue() == "::error::missing input\n"


def test_error_alone_does_not_fail_the_step() -> None:
    writer, _ = _writer()
    writer.error("annotation only")
    assert writer.exit_code == EXIT_SUCCESS


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("0", False), ("true", False)])
def test_is_debug_reads_runner_flag(value: str, expected: bool) -> None:
    writer, _ = _writer({"RUNNER_DEBUG": value})
    assert writer.is_debug() is expected


def test_writer_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    WorkflowCommandWriter(environ={}).debug("to stdout")
    assert capsys.readouterr().out == "::debug::to stdout\n"


def test_process_writer_is_shared_until_reset() -> None:
    writer = process_writer()
    assert process_writer() is writer
    writer.set_failed("boom")
    assert process_exit_code() == EXIT_FAILURE
    reset_process_writer()
    assert process_writer() is not writer
    assert process_exit_code() == EXIT_SUCCESS
