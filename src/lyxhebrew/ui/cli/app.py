"""Typer application wiring for the lyx-hebrew CLI."""

from __future__ import annotations

import typer

from lyxhebrew.ui.cli.commands.install import install

from .state import debug_enabled, emit_error


app = typer.Typer(
    help="Configure LyX on macOS for Hebrew right-to-left typesetting.",
    context_settings={"help_option_names": ["--help"]},
    add_completion=False,
    pretty_exceptions_enable=False,
)


app.command()(install)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise SystemExit(1) from exc
    except SystemExit:
        raise
    except Exception as exc:
        from .state import get_cli_state

        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise SystemExit(1) from exc


__all__ = ["app", "main"]
