"""Materialize the LyX per-user configuration."""

from __future__ import annotations

from lyxhebrew.core.backup import write_with_backup
from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.pipeline import StepResult
from lyxhebrew.lyx import PREFERENCES, USER_BIND


class PrepareConfigDirStep:
    """Create the LyX configuration tree when LyX has not done so yet."""

    step_id = "prepare-config-dir"
    title = "Setting up LyX configuration directory"
    subdirectories = ("bind", "templates")

    def run(self, context: InstallContext) -> StepResult:
        config_dir = context.settings.config_dir
        existed = config_dir.is_dir()
        if not existed:
            context.emitter.warning("LyX config directory not found. Creating it...")
            config_dir.mkdir(parents=True, exist_ok=True)

        missing = [name for name in self.subdirectories if not (config_dir / name).is_dir()]
        for name in missing:
            (config_dir / name).mkdir(parents=True, exist_ok=True)

        message = f"Config directory ready: {config_dir}"
        if existed and not missing:
            return StepResult.satisfied(self.step_id, message)
        return StepResult.performed(self.step_id, message)


class WritePreferencesStep:
    """Replace ``preferences`` after backing up any previous version."""

    step_id = "write-preferences"
    title = "Writing LyX preferences"

    def run(self, context: InstallContext) -> StepResult:
        backup = write_with_backup(context.settings.preferences_path, PREFERENCES)
        if backup is not None:
            context.emitter.warning("Existing preferences backed up")
        return StepResult.performed(self.step_id, "Preferences written")


class WriteKeybindingsStep:
    """Replace ``bind/user.bind`` after backing up any previous version."""

    step_id = "write-keybindings"
    title = "Writing LyX keybindings"

    def run(self, context: InstallContext) -> StepResult:
        write_with_backup(context.settings.bind_path, USER_BIND)
        return StepResult.performed(
            self.step_id, "Keybindings written (F12 = Hebrew, Shift+F12 = English)"
        )


__all__ = ["PrepareConfigDirStep", "WriteKeybindingsStep", "WritePreferencesStep"]
