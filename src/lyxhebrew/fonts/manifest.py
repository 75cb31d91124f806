"""Packaged description of the Hebrew font archive."""

from __future__ import annotations

from importlib import resources

from pydantic import BaseModel, ConfigDict, Field
import yaml


_DATA_PACKAGE = "lyxhebrew.fonts.data"
DEFAULT_MANIFEST = "culmus.yaml"


class FontArchive(BaseModel):
    """Remote font archive and the files to take from it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    version: str
    url: str
    root: str = Field(description="Top-level directory inside the archive")
    marker_family: str = Field(description="Family whose presence marks the install")
    count_pattern: str = "*"
    patterns: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return f"{self.name} {self.version}"


def _resource_text(name: str) -> str:
    resource = resources.files(_DATA_PACKAGE) / name
    return resource.read_text(encoding="utf-8")


def load_font_archive(name: str = DEFAULT_MANIFEST) -> FontArchive:
    """Load and validate a packaged font archive manifest."""
    data = yaml.safe_load(_resource_text(name))
    return FontArchive.model_validate(data)


__all__ = ["DEFAULT_MANIFEST", "FontArchive", "load_font_archive"]
