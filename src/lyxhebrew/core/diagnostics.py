"""Status emitters shared by the installer steps."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class StatusEmitter(Protocol):
    """Interface used to surface advisory status lines."""

    debug_enabled: bool

    def info(self, message: str) -> None: ...

    def ok(self, message: str) -> None: ...

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...


class NullEmitter:
    """Emitter that ignores every status line."""

    debug_enabled: bool = False

    def info(self, message: str) -> None:
        return

    def ok(self, message: str) -> None:
        return

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards status lines to the standard logging module."""

    def __init__(
        self, *, logger_obj: logging.Logger | None = None, debug_enabled: bool = False
    ) -> None:
        self._logger = logger_obj or logger
        self.debug_enabled = debug_enabled

    def info(self, message: str) -> None:
        self._logger.info(message)

    def ok(self, message: str) -> None:
        self._logger.info("OK %s", message)

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.warning(message, exc_info=exc)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.error(message, exc_info=exc)
        else:
            self._logger.error(message)


__all__ = ["LoggingEmitter", "NullEmitter", "StatusEmitter"]
