"""Custom exception hierarchy for the installer pipeline."""

from __future__ import annotations

from collections.abc import Sequence


class InstallerError(RuntimeError):
    """Base exception for installer failures."""


class CommandNotFoundError(InstallerError):
    """Raised when an external executable cannot be located."""

    def __init__(self, binary: str) -> None:
        super().__init__(f"Executable '{binary}' could not be located.")
        self.binary = binary


class CommandFailedError(InstallerError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int, detail: str = "") -> None:
        message = f"Command '{' '.join(argv)}' failed with exit code {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode


class DownloadError(InstallerError):
    """Raised when a remote asset cannot be fetched or unpacked."""


__all__ = [
    "CommandFailedError",
    "CommandNotFoundError",
    "DownloadError",
    "InstallerError",
]
