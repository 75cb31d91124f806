from __future__ import annotations

from dataclasses import dataclass, field
import io
import os
from pathlib import Path
import shutil
import subprocess
import tarfile
from types import SimpleNamespace

import pytest

from lyxhebrew.core import http
from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.settings import InstallerSettings


CULMUS_FILES = (
    "DavidCLM-Medium.otf",
    "DavidCLM-Bold.otf",
    "FrankRuehlCLM-Medium.otf",
    "MiriamCLM-Book.otf",
    "README",
)


@dataclass
class RecordingEmitter:
    """Collect status lines as ``(level, message)`` pairs."""

    debug_enabled: bool = False
    records: list[tuple[str, str]] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def ok(self, message: str) -> None:
        self.records.append(("ok", message))

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.records.append(("warning", message))

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.records.append(("error", message))

    def messages(self, level: str) -> list[str]:
        return [message for kind, message in self.records if kind == level]


@dataclass
class FakeMachine:
    """A simulated macOS host rooted in a temporary directory."""

    root: Path
    tools: set[str] = field(default_factory=lambda: {"brew", "python3", "fc-list"})
    commands: list[list[str]] = field(default_factory=list)
    downloads: list[str] = field(default_factory=list)
    brew_fails: set[str] = field(default_factory=set)
    lyx_cask_creates_app: bool = True
    smoke_test_passes: bool = True
    archive_files: tuple[str, ...] = CULMUS_FILES

    @property
    def settings(self) -> InstallerSettings:
        return InstallerSettings(
            home=self.root / "home",
            applications_dir=self.root / "Applications",
            texbin_dir=self.root / "texbin",
            path_helper=self.root / "path_helper",
        )

    def context(self, emitter: RecordingEmitter | None = None) -> InstallContext:
        return InstallContext(settings=self.settings, emitter=emitter or RecordingEmitter())

    def install_tex(self) -> None:
        self.tools.update({"xelatex", "kpsewhich"})

    def install_lyx(self) -> None:
        self.settings.lyx_app.mkdir(parents=True, exist_ok=True)

    def install_fonts(self) -> None:
        fonts_dir = self.settings.fonts_dir
        fonts_dir.mkdir(parents=True, exist_ok=True)
        (fonts_dir / "DavidCLM-Medium.otf").write_bytes(b"font")

    def brew_calls(self) -> list[list[str]]:
        return [argv for argv in self.commands if Path(argv[0]).name == "brew"]

    def snapshot(self) -> dict[str, bytes]:
        """Return every regular file below the root keyed by relative path."""
        return {
            path.relative_to(self.root).as_posix(): path.read_bytes()
            for path in sorted(self.root.rglob("*"))
            if path.is_file()
        }

    # Patched entry points

    def which(self, name: str, *_args: object, **_kwargs: object) -> str | None:
        if name in self.tools:
            return f"/fake/bin/{name}"
        return None

    def _font_listing(self) -> str:
        fonts_dir = self.settings.fonts_dir
        if not fonts_dir.is_dir():
            return ""
        lines = []
        for path in sorted(fonts_dir.glob("DavidCLM-*")):
            lines.append(f"{path}: David CLM:style=Medium")
        return "\n".join(lines)

    def run(self, argv: list[str], **_kwargs: object) -> SimpleNamespace:
        self.commands.append(list(argv))
        name = Path(argv[0]).name
        if name not in self.tools:
            raise FileNotFoundError(argv[0])

        returncode, stdout = 0, ""
        if name == "brew":
            cask = argv[-1]
            if cask in self.brew_fails:
                return SimpleNamespace(returncode=1, stdout="", stderr=f"Error: {cask} failed")
            if cask == "mactex":
                self.install_tex()
            elif cask == "lyx" and self.lyx_cask_creates_app:
                self.install_lyx()
        elif name == "fc-list":
            stdout = self._font_listing()
        elif name == "xelatex":
            if "--version" in argv:
                stdout = "XeTeX 3.141592653-2.6-0.999996 (TeX Live 2024)\n"
            elif not self.smoke_test_passes:
                returncode = 1
        return SimpleNamespace(returncode=returncode, stdout=stdout, stderr="")

    def download(self, url: str, destination: Path) -> Path:
        self.downloads.append(url)
        destination.parent.mkdir(parents=True, exist_ok=True)
        with tarfile.open(destination, "w:gz") as archive:
            for name in self.archive_files:
                payload = name.encode()
                info = tarfile.TarInfo(f"culmus-0.140/{name}")
                info.size = len(payload)
                archive.addfile(info, io.BytesIO(payload))
        return destination


@pytest.fixture
def fake_machine(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeMachine:
    machine = FakeMachine(root=tmp_path / "machine")
    machine.root.mkdir()
    monkeypatch.setattr(shutil, "which", machine.which)
    monkeypatch.setattr(subprocess, "run", machine.run)
    monkeypatch.setattr(http, "download_file", machine.download)
    monkeypatch.setenv("PATH", os.pathsep.join(["/usr/bin", "/bin"]))
    return machine


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()
