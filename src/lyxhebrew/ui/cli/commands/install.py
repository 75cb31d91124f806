"""Implementation of the ``lyx-hebrew`` command."""

from __future__ import annotations

from typing import Annotated

import click
import typer

from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.settings import InstallerSettings
from lyxhebrew.installer import run_installer
from lyxhebrew.version import get_version

from ..diagnostics import CliEmitter
from ..presenter import present_banner, present_completion, present_section, present_warnings
from ..state import configure_logging, set_cli_state


DIAGNOSTICS_PANEL = "Diagnostics"


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"lyx-hebrew {get_version()}")
        raise typer.Exit()


def install(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Show full tracebacks when an unexpected error occurs.",
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Print the version and exit.",
        ),
    ] = False,
) -> None:
    """Install LyX with Hebrew and XeLaTeX support on macOS."""

    ctx = click.get_current_context(silent=True)
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    configure_logging(state)

    present_banner(state)
    context = InstallContext(settings=InstallerSettings(), emitter=CliEmitter(state))
    summary = run_installer(
        context,
        on_section=lambda title: present_section(state, title),
    )

    present_warnings(state, summary)
    if summary.aborted:
        raise typer.Exit(code=summary.exit_code)
    present_completion(state)


__all__ = ["install"]
