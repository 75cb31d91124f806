"""Configure LyX on macOS for Hebrew right-to-left typesetting."""

from __future__ import annotations

from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.diagnostics import LoggingEmitter, NullEmitter, StatusEmitter
from lyxhebrew.core.exceptions import InstallerError
from lyxhebrew.core.pipeline import RunSummary, StepResult, StepStatus, run_steps
from lyxhebrew.core.settings import InstallerSettings
from lyxhebrew.installer import run_installer
from lyxhebrew.version import get_version


__version__ = get_version()

__all__ = [
    "InstallContext",
    "InstallerError",
    "InstallerSettings",
    "LoggingEmitter",
    "NullEmitter",
    "RunSummary",
    "StatusEmitter",
    "StepResult",
    "StepStatus",
    "__version__",
    "run_installer",
    "run_steps",
]
