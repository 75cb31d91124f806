"""Post-install verification, ending with a Hebrew XeTeX compilation."""

from __future__ import annotations

from dataclasses import dataclass, field

from lyxhebrew.adapters import tex
from lyxhebrew.core.context import InstallContext
from lyxhebrew.core.diagnostics import StatusEmitter
from lyxhebrew.core.pipeline import StepResult
from lyxhebrew.fonts import has_family


REQUIRED_TEX_FILES = {
    "polyglossia.sty": "polyglossia package",
    "bidi.sty": "bidi (RTL) package",
}


@dataclass(slots=True)
class _Checklist:
    """Report each check as it runs and remember the failed ones."""

    emitter: StatusEmitter
    failures: list[str] = field(default_factory=list)

    def check(self, passed: bool, ok_message: str, failure_message: str) -> bool:
        if passed:
            self.emitter.ok(ok_message)
        else:
            self.emitter.warning(failure_message)
            self.failures.append(failure_message)
        return passed


class VerifyStep:
    """Re-derive the install predicates and smoke-test the toolchain."""

    step_id = "verify"
    title = "Verifying installation"

    def run(self, context: InstallContext) -> StepResult:
        settings = context.settings
        archive = context.font_archive
        checklist = _Checklist(context.emitter)

        tex.refresh_path(settings)
        tex.prepend_texbin(settings)

        xelatex = tex.find_xelatex(settings)
        checklist.check(
            xelatex is not None,
            f"XeLaTeX: {tex.xelatex_version(xelatex) if xelatex else ''}",
            "XeLaTeX not found on PATH (restart terminal after MacTeX install)",
        )

        if tex.kpsewhich_available():
            for filename, label in REQUIRED_TEX_FILES.items():
                checklist.check(
                    tex.kpsewhich(filename),
                    f"{label}: available",
                    f"{label}: NOT FOUND",
                )

        checklist.check(
            settings.lyx_app.is_dir(),
            f"LyX: installed at {settings.lyx_app}",
            f"LyX: not found in {settings.applications_dir}",
        )

        font_present = checklist.check(
            has_family(archive.marker_family),
            f"{archive.marker_family} font: installed",
            f"{archive.marker_family} font: not detected by fc-list "
            "(may still work via Font Book)",
        )

        for path in settings.config_files():
            relative = path.relative_to(settings.config_dir).as_posix()
            checklist.check(path.is_file(), f"Config: {relative}", f"Missing: {relative}")

        if xelatex is not None and font_present:
            context.emitter.info("Running Hebrew XeTeX compilation test...")
            outcome = tex.compile_smoke_test(xelatex)
            checklist.check(
                outcome.passed,
                "Hebrew XeTeX compilation test: PASSED",
                "Hebrew XeTeX compilation test: FAILED "
                "(check XeTeX and font installation)",
            )

        if checklist.failures:
            count = len(checklist.failures)
            return StepResult.soft_failure(
                self.step_id,
                f"Verification finished with {count} warning{'s' if count != 1 else ''}",
                details=checklist.failures,
            )
        return StepResult.performed(self.step_id, "All verification checks passed")


__all__ = ["REQUIRED_TEX_FILES", "VerifyStep"]
