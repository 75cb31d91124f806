"""Query fontconfig for registered font families."""

from __future__ import annotations

from lyxhebrew.adapters.command import run_command
from lyxhebrew.core.exceptions import CommandNotFoundError


FC_LIST = "fc-list"


def list_fonts() -> str:
    """Return the raw ``fc-list`` output, empty when fontconfig is missing."""
    try:
        result = run_command([FC_LIST])
    except CommandNotFoundError:
        return ""
    return result.stdout


def has_family(family: str) -> bool:
    """Return True when ``family`` appears in the fontconfig listing."""
    needle = family.casefold()
    return needle in list_fonts().casefold()


__all__ = ["FC_LIST", "has_family", "list_fonts"]
