"""Checks that must hold before anything is installed."""

from __future__ import annotations

import shutil

from lyxhebrew.adapters import homebrew
from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.pipeline import StepResult


class CheckPrerequisitesStep:
    """Abort unless Homebrew is reachable; warn when ``python3`` is missing."""

    step_id = "check-prerequisites"
    title = "Checking prerequisites"

    def run(self, context: InstallContext) -> StepResult:
        if not homebrew.is_available():
            return StepResult.hard_failure(
                self.step_id,
                f"Homebrew is not installed. Install it from {homebrew.INSTALL_URL}",
            )
        if shutil.which("python3") is None:
            context.emitter.ok("Homebrew found")
            return StepResult.soft_failure(
                self.step_id,
                "Python3 not found. LyX needs Python for some operations.",
                details=["Install it with: xcode-select --install"],
            )
        return StepResult.satisfied(self.step_id, "Homebrew found")


__all__ = ["CheckPrerequisitesStep"]
