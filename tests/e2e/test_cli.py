"""End-to-end CLI coverage for the commands exposed by action_template_py.

These tests drive the documented entry point (``python -m action_template_py
run``) and the developer helpers through Click's runner.
"""

from __future__ import annotations

from click.testing import CliRunner

import lib_cli_exit_tools

from action_template_py import cli
from action_template_py.adapters.commands.default import WorkflowCommandWriter


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def test_cli_run_emits_debug_command() -> None:
    result = _runner().invoke(cli.cli, ["run"], env={"INPUT_NAME": "Mona"})
    assert result.exit_code == 0
    assert result.output == "::debug::The passed name is Mona.\n"


def test_cli_run_with_missing_input_succeeds() -> None:
    result = _runner().invoke(cli.cli, ["run"], env={"INPUT_NAME": None})
    assert result.exit_code == 0
    assert result.output == "::debug::The passed name is .\n"


def test_cli_run_reports_failure_through_exit_code(monkeypatch) -> None:
    def _broken_debug(self, message: str) -> None:
        raise ValueError("missing input")

    monkeypatch.setattr(WorkflowCommandWriter, "debug", _broken_debug)
    result = _runner().invoke(cli.cli, ["run"], env={"INPUT_NAME": "Mona"})
    assert result.exit_code == 1
    assert result.output == "::error::missing input\n"


def test_cli_input_key_command() -> None:
    result = _runner().invoke(cli.cli, ["input-key", "who to greet"])
    assert result.exit_code == 0
    assert result.output.strip() == "INPUT_WHO_TO_GREET"


def test_cli_info_handles_missing_metadata(monkeypatch) -> None:
    """`cli info` must degrade gracefully when package metadata is unavailable."""

    def _raise_pkg_not_found(*_args, **_kwargs):
        raise cli.metadata.PackageNotFoundError()

    monkeypatch.setattr(cli.metadata, "metadata", _raise_pkg_not_found)
    result = _runner().invoke(cli.cli, ["info"])
    assert result.exit_code == 0
    assert "metadata unavailable" in result.output


def test_cli_main_restores_traceback_flag() -> None:
    """`cli main` should restore lib_cli_exit_tools tracebacks after execution."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    exit_code = cli.main(["--traceback", "input-key", "name"], restore_traceback=True)
    assert exit_code == 0
    assert getattr(lib_cli_exit_tools.config, "traceback", False) == previous_traceback


def test_cli_main_returns_failed_status(monkeypatch) -> None:
    """`cli main run` should end with exit code 1 when the step reported a failure."""

    def _broken_debug(self, message: str) -> None:
        raise ValueError("missing input")

    monkeypatch.setattr(WorkflowCommandWriter, "debug", _broken_debug)
    monkeypatch.setenv("INPUT_NAME", "Mona")
    assert cli.main(["run"]) == 1
