"""Install MacTeX and LyX through Homebrew casks."""

from __future__ import annotations

from lyxhebrew.adapters import homebrew, tex
from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.pipeline import StepResult


class InstallMacTeXStep:
    """Install the MacTeX distribution unless XeLaTeX is already present."""

    step_id = "install-mactex"
    title = "Installing MacTeX"
    cask = "mactex"

    def run(self, context: InstallContext) -> StepResult:
        settings = context.settings
        binary = tex.find_xelatex(settings)
        if binary is not None:
            version = tex.xelatex_version(binary) or str(binary)
            return StepResult.satisfied(
                self.step_id, f"MacTeX/XeLaTeX already installed: {version}"
            )

        context.emitter.info("Installing MacTeX (this is ~5 GB and may take a while)...")
        homebrew.install_cask(self.cask)
        tex.refresh_path(settings)

        if tex.find_xelatex(settings) is not None:
            return StepResult.performed(self.step_id, "MacTeX installed successfully")
        return StepResult.soft_failure(
            self.step_id,
            "MacTeX installed but xelatex not yet on PATH.",
            details=[
                "You may need to restart your terminal or run: "
                f'eval "$({settings.path_helper})"'
            ],
        )


class InstallLyXStep:
    """Install the LyX application bundle; its absence afterwards is fatal."""

    step_id = "install-lyx"
    title = "Installing LyX"
    cask = "lyx"

    def run(self, context: InstallContext) -> StepResult:
        app = context.settings.lyx_app
        if app.is_dir():
            return StepResult.satisfied(self.step_id, f"LyX already installed at {app}")

        homebrew.install_cask(self.cask)

        if app.is_dir():
            return StepResult.performed(self.step_id, "LyX installed successfully")
        return StepResult.hard_failure(self.step_id, "LyX installation failed")


__all__ = ["InstallLyXStep", "InstallMacTeXStep"]
