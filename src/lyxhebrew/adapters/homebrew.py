"""Homebrew helpers for installing prebuilt applications."""

from __future__ import annotations

import logging
import shutil

from .command import CommandResult, check_command


logger = logging.getLogger(__name__)

BREW = "brew"
INSTALL_URL = "https://brew.sh"


def is_available() -> bool:
    """Return True when the ``brew`` executable can be located."""
    return shutil.which(BREW) is not None


def install_cask(name: str) -> CommandResult:
    """Install the ``name`` cask, raising when Homebrew reports a failure."""
    logger.info("Installing Homebrew cask %s", name)
    return check_command([BREW, "install", "--cask", name])


__all__ = ["BREW", "INSTALL_URL", "install_cask", "is_available"]
