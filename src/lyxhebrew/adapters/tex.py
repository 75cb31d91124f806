"""Helpers for locating and exercising the XeLaTeX toolchain."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import re
import shutil
import tempfile

from lyxhebrew.core.exceptions import CommandNotFoundError
from lyxhebrew.core.settings import InstallerSettings

from .command import run_command


logger = logging.getLogger(__name__)

XELATEX = "xelatex"
KPSEWHICH = "kpsewhich"

_PATH_ASSIGNMENT = re.compile(r'(?:^|[\s;])PATH="(?P<value>[^"]*)"', re.MULTILINE)

SMOKE_TEST_DOCUMENT = r"""\documentclass{article}
\usepackage{polyglossia}
\setdefaultlanguage{hebrew}
\setotherlanguage{english}
\setmainfont{David CLM}
\newfontfamily\hebrewfont[Script=Hebrew]{David CLM}
\begin{document}
\begin{hebrew}
שלום עולם!
\end{hebrew}
\end{document}
"""


@dataclass(frozen=True, slots=True)
class SmokeTestResult:
    """Outcome of the Hebrew compilation smoke test."""

    passed: bool
    returncode: int
    output: str = ""


def find_xelatex(settings: InstallerSettings) -> Path | None:
    """Return the ``xelatex`` binary from PATH or the MacTeX bin directory."""
    located = shutil.which(XELATEX)
    if located is not None:
        return Path(located)
    if settings.xelatex_fallback.is_file():
        return settings.xelatex_fallback
    return None


def xelatex_version(binary: Path | str) -> str:
    """Return the first line of ``xelatex --version`` or an empty string."""
    try:
        result = run_command([binary, "--version"])
    except CommandNotFoundError:
        return ""
    return result.first_line


def parse_path_helper(output: str) -> str | None:
    """Extract the ``PATH`` value from ``path_helper -s`` output."""
    match = _PATH_ASSIGNMENT.search(output)
    if match is None:
        return None
    return match.group("value")


def refresh_path(settings: InstallerSettings) -> bool:
    """Reload ``PATH`` from ``path_helper`` the way a login shell would.

    Returns True when ``PATH`` was updated.
    """
    helper = settings.path_helper
    if not helper.is_file():
        return False
    try:
        result = run_command([helper, "-s"])
    except (CommandNotFoundError, PermissionError):
        return False
    if not result.ok:
        return False
    value = parse_path_helper(result.stdout)
    if not value:
        return False
    os.environ["PATH"] = value
    logger.debug("PATH refreshed from %s", helper)
    return True


def prepend_texbin(settings: InstallerSettings) -> None:
    """Put the MacTeX bin directory first on ``PATH``."""
    texbin = str(settings.texbin_dir)
    current = os.environ.get("PATH", "")
    os.environ["PATH"] = os.pathsep.join([texbin, current]) if current else texbin


def kpsewhich_available() -> bool:
    return shutil.which(KPSEWHICH) is not None


def kpsewhich(name: str) -> bool:
    """Return True when ``kpsewhich`` resolves the TeX support file ``name``."""
    try:
        return run_command([KPSEWHICH, name]).ok
    except CommandNotFoundError:
        return False


def compile_smoke_test(binary: Path | str) -> SmokeTestResult:
    """Compile a short Hebrew document inside a throwaway directory."""
    with tempfile.TemporaryDirectory(prefix="lyxhebrew-smoke-") as tmpdir:
        workdir = Path(tmpdir)
        source = workdir / "test.tex"
        source.write_text(SMOKE_TEST_DOCUMENT, encoding="utf-8")
        try:
            result = run_command(
                [
                    binary,
                    "-interaction=nonstopmode",
                    f"-output-directory={workdir}",
                    source,
                ]
            )
        except CommandNotFoundError:
            return SmokeTestResult(passed=False, returncode=127)
        return SmokeTestResult(
            passed=result.ok,
            returncode=result.returncode,
            output=result.stdout,
        )


__all__ = [
    "KPSEWHICH",
    "SMOKE_TEST_DOCUMENT",
    "XELATEX",
    "SmokeTestResult",
    "compile_smoke_test",
    "find_xelatex",
    "kpsewhich",
    "kpsewhich_available",
    "parse_path_helper",
    "prepend_texbin",
    "refresh_path",
    "xelatex_version",
]
