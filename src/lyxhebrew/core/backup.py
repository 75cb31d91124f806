"""Timestamped backups for configuration files that get overwritten."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
import shutil


logger = logging.getLogger(__name__)

BACKUP_MARKER = ".backup."
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def backup_path_for(path: Path, now: datetime | None = None) -> Path:
    """Return the backup location used for ``path`` at ``now``."""
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return path.with_name(f"{path.name}{BACKUP_MARKER}{stamp}")


def backup_file(path: Path, *, now: datetime | None = None) -> Path | None:
    """Copy an existing file aside and return the backup path.

    Returns ``None`` when ``path`` does not exist. Older backups are left
    untouched and accumulate across runs.
    """
    if not path.is_file():
        return None
    target = backup_path_for(path, now)
    shutil.copy2(path, target)
    logger.info("Backed up %s to %s", path, target)
    return target


def write_with_backup(path: Path, content: str, *, now: datetime | None = None) -> Path | None:
    """Back up ``path`` if present, then replace it with ``content``."""
    backup = backup_file(path, now=now)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return backup


def list_backups(path: Path) -> list[Path]:
    """Return the existing backups of ``path`` sorted oldest first."""
    if not path.parent.exists():
        return []
    return sorted(path.parent.glob(f"{path.name}{BACKUP_MARKER}*"))


__all__ = [
    "BACKUP_MARKER",
    "TIMESTAMP_FORMAT",
    "backup_file",
    "backup_path_for",
    "list_backups",
    "write_with_backup",
]
