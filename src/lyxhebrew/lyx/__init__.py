"""Static LyX configuration content for Hebrew typesetting."""

from __future__ import annotations

from .files import PREFERENCES, USER_BIND
from .templates import LYX_DOCUMENT_HEADER, TEMPLATES, render_document, render_templates


__all__ = [
    "LYX_DOCUMENT_HEADER",
    "PREFERENCES",
    "TEMPLATES",
    "USER_BIND",
    "render_document",
    "render_templates",
]
