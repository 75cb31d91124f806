"""Installation settings shared by every step.

InstallerSettings

`home` (`Path`)
: Home directory of the user being provisioned. Per-user LyX configuration
  and fonts are written below it.

`applications_dir` (`Path`)
: Directory holding macOS application bundles. `LyX.app` is expected there
  once the cask is installed.

`texbin_dir` (`Path`)
: MacTeX binary directory. It is prepended to `PATH` during verification and
  used as a fallback location for `xelatex`.

`path_helper` (`Path`)
: The macOS `path_helper` utility used to refresh `PATH` after MacTeX lands.

`lyx_version` (`str`)
: LyX release series whose configuration directory is targeted.

The paths are not exposed on the command line: the installer always targets
the current user's standard macOS locations.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class InstallerSettings(BaseModel):
    """Fixed locations used by the installer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    home: Path = Field(default_factory=Path.home)
    applications_dir: Path = Path("/Applications")
    texbin_dir: Path = Path("/Library/TeX/texbin")
    path_helper: Path = Path("/usr/libexec/path_helper")
    lyx_version: str = "2.4"

    @property
    def config_dir(self) -> Path:
        """Per-user LyX configuration directory."""
        return self.home / "Library" / "Application Support" / f"LyX-{self.lyx_version}"

    @property
    def fonts_dir(self) -> Path:
        return self.home / "Library" / "Fonts"

    @property
    def lyx_app(self) -> Path:
        return self.applications_dir / "LyX.app"

    @property
    def xelatex_fallback(self) -> Path:
        return self.texbin_dir / "xelatex"

    @property
    def preferences_path(self) -> Path:
        return self.config_dir / "preferences"

    @property
    def bind_path(self) -> Path:
        return self.config_dir / "bind" / "user.bind"

    @property
    def templates_dir(self) -> Path:
        return self.config_dir / "templates"

    def config_files(self) -> list[Path]:
        """Return the configuration files a complete run leaves behind."""
        return [
            self.preferences_path,
            self.bind_path,
            self.templates_dir / "defaults.lyx",
            self.templates_dir / "Hebrew_Article.lyx",
        ]


__all__ = ["InstallerSettings"]
