"""Thin subprocess wrapper used by every external tool adapter."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
import shlex
import subprocess

from lyxhebrew.core.exceptions import CommandFailedError, CommandNotFoundError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of an external command."""

    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def first_line(self) -> str:
        """Return the first non-empty output line, used for version strings."""
        for line in (self.stdout or "").splitlines():
            if line.strip():
                return line.strip()
        return ""


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(arg) for arg in argv)


def run_command(
    argv: Sequence[str | Path],
    *,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Run ``argv`` and capture its output without raising on failure."""
    argv_list = [str(arg) for arg in argv]
    logger.debug("CMD %s", _fmt_argv(argv_list))
    try:
        process = subprocess.run(
            argv_list,
            check=False,
            capture_output=True,
            text=True,
            cwd=cwd,
            env=env,
        )
    except FileNotFoundError as exc:
        raise CommandNotFoundError(argv_list[0]) from exc

    if process.stdout:
        logger.debug("STDOUT %s", process.stdout.strip())
    if process.stderr:
        logger.debug("STDERR %s", process.stderr.strip())

    return CommandResult(
        argv=argv_list,
        returncode=process.returncode,
        stdout=process.stdout or "",
        stderr=process.stderr or "",
    )


def check_command(argv: Sequence[str | Path], **kwargs: object) -> CommandResult:
    """Run ``argv`` and raise :class:`CommandFailedError` on a non-zero exit."""
    result = run_command(argv, **kwargs)  # type: ignore[arg-type]
    if not result.ok:
        detail = result.stderr.strip() or result.stdout.strip()
        raise CommandFailedError(result.argv, result.returncode, detail)
    return result


__all__ = ["CommandResult", "check_command", "run_command"]
