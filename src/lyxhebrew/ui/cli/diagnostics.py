"""Status emitter bridging the installer steps with CLI rendering utilities."""

from __future__ import annotations

from .state import CLIState, emit_error, emit_warning, get_cli_state, render_message


class CliEmitter:
    """Emit status lines using the rich-enabled CLI helpers."""

    def __init__(self, state: CLIState | None = None, *, debug_enabled: bool | None = None) -> None:
        self._state = state or get_cli_state()
        if debug_enabled is None:
            debug_enabled = self._state.show_tracebacks
        self.debug_enabled = bool(debug_enabled)

    def info(self, message: str) -> None:
        render_message("info", message)

    def ok(self, message: str) -> None:
        render_message("ok", message)

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)


__all__ = ["CliEmitter"]
