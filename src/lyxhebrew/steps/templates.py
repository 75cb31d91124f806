"""Generate the Hebrew LyX document templates."""

from __future__ import annotations

from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.pipeline import StepResult
from lyxhebrew.lyx.templates import ARTICLE_TEMPLATE, DEFAULTS_TEMPLATE, render_templates


_DESCRIPTIONS = {
    DEFAULTS_TEMPLATE: "created (new documents will default to Hebrew RTL)",
    ARTICLE_TEMPLATE: "template created",
}


class WriteTemplatesStep:
    step_id = "write-templates"
    title = "Creating Hebrew document templates"

    def run(self, context: InstallContext) -> StepResult:
        templates_dir = context.settings.templates_dir
        templates_dir.mkdir(parents=True, exist_ok=True)
        rendered = render_templates()
        for name, text in rendered.items():
            (templates_dir / name).write_text(text, encoding="utf-8")
            context.emitter.ok(f"{name} {_DESCRIPTIONS.get(name, 'written')}")
        return StepResult.performed(
            self.step_id, f"{len(rendered)} templates written to {templates_dir}"
        )


__all__ = ["WriteTemplatesStep"]
