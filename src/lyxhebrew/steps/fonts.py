"""Install the Hebrew font family LyX documents are configured with."""

from __future__ import annotations

from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.exceptions import DownloadError
from lyxhebrew.core.pipeline import StepResult
from lyxhebrew.fonts import count_installed, has_family, install_archive


class InstallFontsStep:
    """Download the Culmus archive unless its marker family is registered.

    Download, extraction and copy problems are reported as warnings, as is an
    archive in which none of the expected font files were found.
    """

    step_id = "install-fonts"
    title = "Installing Culmus Hebrew fonts"

    def run(self, context: InstallContext) -> StepResult:
        archive = context.font_archive
        fonts_dir = context.settings.fonts_dir

        if has_family(archive.marker_family):
            return StepResult.satisfied(self.step_id, f"{archive.name} fonts already installed")

        context.emitter.info(f"Downloading {archive.label} fonts...")
        try:
            copied = install_archive(archive, fonts_dir)
        except (DownloadError, OSError) as exc:
            return StepResult.soft_failure(
                self.step_id, f"Could not install {archive.name} fonts: {exc}"
            )

        if not copied:
            return StepResult.soft_failure(
                self.step_id,
                f"No {archive.name} font files matched in the downloaded archive",
                details=[f"Expected patterns: {', '.join(archive.patterns)}"],
            )

        count = count_installed(fonts_dir, archive.count_pattern)
        return StepResult.performed(self.step_id, f"Installed {count} {archive.name} font files")


__all__ = ["InstallFontsStep"]
