"""Hebrew font acquisition and fontconfig queries."""

from __future__ import annotations

from .fontconfig import has_family, list_fonts
from .installer import count_installed, extract_archive, install_archive, match_files
from .manifest import FontArchive, load_font_archive


__all__ = [
    "FontArchive",
    "count_installed",
    "extract_archive",
    "has_family",
    "install_archive",
    "list_fonts",
    "load_font_archive",
    "match_files",
]
