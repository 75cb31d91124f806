"""Rich presenters for the installer banner, sections and final summary."""

from __future__ import annotations

from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from lyxhebrew.core.pipeline import RunSummary
from lyxhebrew.lyx.templates import ARTICLE_TEMPLATE

from .state import CLIState


NEXT_STEPS = (
    "Open LyX (first time: right-click > Open to bypass Gatekeeper)",
    "Run Tools > Reconfigure, then restart LyX",
    "New documents (Cmd+N) will default to Hebrew RTL with David CLM",
    "Press F12 to toggle Hebrew/English within LyX",
    "Keep your OS keyboard on English at all times",
    "File paths must not contain Hebrew characters",
)


def present_banner(state: CLIState) -> None:
    """Print the installer title."""
    state.console.print(
        Panel(
            Text.assemble(
                ("LyX Hebrew Installer for macOS", "bold"),
                "\nBased on the Madlyx guide by Kali",
            ),
            expand=False,
        )
    )


def present_section(state: CLIState, title: str) -> None:
    state.console.print(Rule(title))


def present_warnings(state: CLIState, summary: RunSummary) -> None:
    """List every soft failure collected during the run."""
    warnings = summary.warnings
    if not warnings:
        return
    text = Text()
    for index, line in enumerate(warnings):
        if index:
            text.append("\n")
        text.append(f"- {line}")
    state.console.print(Panel(text, title="Warnings", border_style="yellow", expand=False))


def present_completion(state: CLIState) -> None:
    """Print the post-install instructions."""
    text = Text()
    text.append("Next steps:\n", style="bold")
    for index, line in enumerate(NEXT_STEPS, start=1):
        text.append(f"  {index}. {line}\n")
    template_name = ARTICLE_TEMPLATE.removesuffix(".lyx")
    text.append(
        f"\nFor a Hebrew template with Title/Author: File > New from Template > {template_name}"
    )
    state.console.print(
        Panel(text, title="Installation Complete!", border_style="green", expand=False)
    )


__all__ = [
    "NEXT_STEPS",
    "present_banner",
    "present_completion",
    "present_section",
    "present_warnings",
]
