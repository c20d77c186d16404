"""CLI adapter for ``action_template_py`` built on ``lib_cli_exit_tools``.

Purpose
-------
Give the action a process entry point: ``action.yml`` runs
``python -m action_template_py run``. The command runs the step against the
real environment and ends the process with the status the step left behind.

Contents
--------
* :func:`cli` – root group; stores the traceback preference for
  ``lib_cli_exit_tools``.
* :func:`cli_run` – runs the step and exits with :func:`process_exit_code`.
* :func:`cli_info` – prints name and version of the installed distribution.
* :func:`cli_input_key` – prints the environment variable behind an input.
* :func:`main` – console script / ``__main__`` entry point.

System Role
-----------
Outermost layer. Unexpected exceptions are rendered and mapped to exit codes by
``lib_cli_exit_tools``; failures the step reports itself come back through the
process-wide command writer.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import input_env_key, process_exit_code, run

DISTRIBUTION: Final[str] = "action_template_py"
CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _installed_version() -> str:
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Template action step: reads the `name` input and logs it at debug level",
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(version=_installed_version(), prog_name=DISTRIBUTION)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python traceback on errors",
)
def cli(traceback: bool) -> None:
    """Record the traceback preference before any subcommand runs."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_run(ctx: click.Context) -> None:
    """Run the step against the current environment.

    Inputs come from ``INPUT_*`` variables; results are written as workflow
    commands on stdout. Exits with ``1`` once the step reported a failure.
    """

    run()
    ctx.exit(process_exit_code())


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the installed distribution name and version."""

    try:
        meta = metadata.metadata(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        click.echo(f"{DISTRIBUTION} (metadata unavailable)")
        return
    click.echo(f"{meta.get('Name', DISTRIBUTION)} {meta.get('Version', _installed_version())}")


@cli.command("input-key", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
def cli_input_key(name: str) -> None:
    """Print the environment variable that carries input *NAME*.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> CliRunner().invoke(cli, ["input-key", "who to greet"]).output.strip()
    'INPUT_WHO_TO_GREET'
    """

    click.echo(input_env_key(name))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    config = lib_cli_exit_tools.config
    saved = (getattr(config, "traceback", False), getattr(config, "traceback_force_color", False))
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=DISTRIBUTION,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            verbose = lib_cli_exit_tools.config.traceback
            lib_cli_exit_tools.print_exception_message(
                trace_back=verbose,
                length_limit=_TRACEBACK_VERBOSE_LIMIT if verbose else _TRACEBACK_SUMMARY_LIMIT,
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
