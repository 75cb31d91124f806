"""Execution context handed to every installer step."""

from __future__ import annotations

from dataclasses import dataclass, field

from lyxhebrew.fonts.manifest import FontArchive, load_font_archive

from .diagnostics import NullEmitter, StatusEmitter
from .settings import InstallerSettings


@dataclass(slots=True)
class InstallContext:
    """Settings, status emitter and font manifest for one run."""

    settings: InstallerSettings = field(default_factory=InstallerSettings)
    emitter: StatusEmitter = field(default_factory=NullEmitter)
    font_archive: FontArchive = field(default_factory=load_font_archive)


__all__ = ["InstallContext"]
