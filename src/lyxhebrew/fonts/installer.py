"""Download a font archive and copy the selected faces into a font directory."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
from pathlib import Path
import shutil
import tarfile
import tempfile
import zipfile

from lyxhebrew.core import http
from lyxhebrew.core.exceptions import DownloadError

from .manifest import FontArchive


logger = logging.getLogger(__name__)

Downloader = Callable[[str, Path], object]


def extract_archive(archive_path: Path, destination: Path) -> None:
    """Unpack a ``.zip`` or tarball into ``destination``."""
    destination.mkdir(parents=True, exist_ok=True)
    try:
        if zipfile.is_zipfile(archive_path):
            with zipfile.ZipFile(archive_path) as archive:
                archive.extractall(destination)
            return
        with tarfile.open(archive_path, "r:*") as archive:
            try:
                archive.extractall(destination, filter="data")
            except TypeError:  # Python < 3.11.4 has no filter keyword
                archive.extractall(destination)
    except (OSError, EOFError, tarfile.TarError, zipfile.BadZipFile) as exc:
        raise DownloadError(f"Unable to extract '{archive_path.name}': {exc}") from exc


def match_files(source_dir: Path, patterns: Iterable[str]) -> list[Path]:
    """Return the files under ``source_dir`` matching any of ``patterns``."""
    matched: dict[Path, None] = {}
    for pattern in patterns:
        for candidate in sorted(source_dir.glob(pattern)):
            if candidate.is_file():
                matched.setdefault(candidate, None)
    return list(matched)


def copy_fonts(files: Iterable[Path], fonts_dir: Path) -> list[Path]:
    """Copy ``files`` into ``fonts_dir`` and return the destination paths."""
    fonts_dir.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for path in files:
        target = fonts_dir / path.name
        shutil.copy2(path, target)
        copied.append(target)
    return copied


def install_archive(
    archive: FontArchive,
    fonts_dir: Path,
    *,
    downloader: Downloader | None = None,
) -> list[Path]:
    """Fetch ``archive`` and install its matching font files.

    The scratch directory is removed whether or not the install succeeds.
    """
    fetch = downloader or http.download_file
    with tempfile.TemporaryDirectory(prefix="lyxhebrew-fonts-") as tmpdir:
        scratch = Path(tmpdir)
        archive_path = scratch / f"{archive.name.lower()}.tar.gz"
        fetch(archive.url, archive_path)
        if not archive_path.is_file():
            raise DownloadError(f"Download of {archive.label} produced no file")
        extracted = scratch / "extracted"
        extract_archive(archive_path, extracted)
        files = match_files(extracted / archive.root, archive.patterns)
        logger.info("Matched %d font files in %s", len(files), archive.label)
        return copy_fonts(files, fonts_dir)


def count_installed(fonts_dir: Path, pattern: str) -> int:
    """Count the font files in ``fonts_dir`` matching ``pattern``."""
    if not fonts_dir.is_dir():
        return 0
    return sum(1 for path in fonts_dir.glob(pattern) if path.is_file())


__all__ = [
    "copy_fonts",
    "count_installed",
    "extract_archive",
    "install_archive",
    "match_files",
]
