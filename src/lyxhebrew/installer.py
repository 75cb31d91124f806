"""High-level entry point running the whole provisioning sequence."""

from __future__ import annotations

from collections.abc import Callable

from .core.context import InstallContext
from .core.pipeline import RunSummary, run_steps
from .steps import build_steps, build_verification_steps


def run_installer(
    context: InstallContext | None = None,
    *,
    on_section: Callable[[str], None] | None = None,
) -> RunSummary:
    """Provision the machine, then verify it unless a step failed hard.

    ``on_section`` is called with the heading of each phase before it starts.
    """
    context = context or InstallContext()
    summary = run_steps(build_steps(), context)
    if summary.aborted:
        return summary

    if on_section is not None:
        on_section("Verification")
    summary.extend(run_steps(build_verification_steps(), context))
    return summary


__all__ = ["run_installer"]
