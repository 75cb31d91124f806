"""Ordered installer steps."""

from __future__ import annotations

from lyxhebrew.core.pipeline import Step

from .config import PrepareConfigDirStep, WriteKeybindingsStep, WritePreferencesStep
from .dependencies import InstallLyXStep, InstallMacTeXStep
from .fonts import InstallFontsStep
from .prerequisites import CheckPrerequisitesStep
from .templates import WriteTemplatesStep
from .verify import VerifyStep


def build_steps() -> list[Step]:
    """Return the provisioning steps in execution order."""
    return [
        CheckPrerequisitesStep(),
        InstallMacTeXStep(),
        InstallLyXStep(),
        InstallFontsStep(),
        PrepareConfigDirStep(),
        WritePreferencesStep(),
        WriteKeybindingsStep(),
        WriteTemplatesStep(),
    ]


def build_verification_steps() -> list[Step]:
    return [VerifyStep()]


__all__ = [
    "CheckPrerequisitesStep",
    "InstallFontsStep",
    "InstallLyXStep",
    "InstallMacTeXStep",
    "PrepareConfigDirStep",
    "VerifyStep",
    "WriteKeybindingsStep",
    "WritePreferencesStep",
    "WriteTemplatesStep",
    "build_steps",
    "build_verification_steps",
]
