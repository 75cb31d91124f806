"""Ordered execution of idempotent installer steps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import TYPE_CHECKING, Protocol

from .exceptions import InstallerError


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .context import InstallContext


logger = logging.getLogger(__name__)


class StepStatus(str, Enum):
    """Outcome of a single step."""

    SATISFIED = "satisfied"
    PERFORMED = "performed"
    SOFT_FAILURE = "soft-failure"
    HARD_FAILURE = "hard-failure"


@dataclass(slots=True)
class StepResult:
    """Result reported by a step once it has run."""

    step_id: str
    status: StepStatus
    message: str
    details: list[str] = field(default_factory=list)

    @classmethod
    def satisfied(cls, step_id: str, message: str) -> StepResult:
        return cls(step_id, StepStatus.SATISFIED, message)

    @classmethod
    def performed(cls, step_id: str, message: str) -> StepResult:
        return cls(step_id, StepStatus.PERFORMED, message)

    @classmethod
    def soft_failure(
        cls, step_id: str, message: str, details: Sequence[str] = ()
    ) -> StepResult:
        return cls(step_id, StepStatus.SOFT_FAILURE, message, list(details))

    @classmethod
    def hard_failure(cls, step_id: str, message: str) -> StepResult:
        return cls(step_id, StepStatus.HARD_FAILURE, message)


class Step(Protocol):
    """A single idempotent provisioning step."""

    step_id: str
    title: str

    def run(self, context: InstallContext) -> StepResult: ...


@dataclass(slots=True)
class RunSummary:
    """Aggregated outcome of a pipeline run."""

    results: list[StepResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def warnings(self) -> list[str]:
        collected: list[str] = []
        for result in self.results:
            if result.status is not StepStatus.SOFT_FAILURE:
                continue
            collected.append(result.message)
            collected.extend(result.details)
        return collected

    @property
    def exit_code(self) -> int:
        return 1 if self.aborted else 0

    def extend(self, other: RunSummary) -> None:
        """Append the results of a later run segment."""
        self.results.extend(other.results)
        self.aborted = self.aborted or other.aborted


def run_steps(steps: Sequence[Step], context: InstallContext) -> RunSummary:
    """Run ``steps`` in order, stopping at the first hard failure."""
    emitter = context.emitter
    summary = RunSummary()
    total = len(steps)

    for index, step in enumerate(steps, start=1):
        emitter.info(f"Step {index}/{total}: {step.title}")
        logger.debug("Running step %s", step.step_id)
        try:
            result = step.run(context)
        except InstallerError as exc:
            result = StepResult.hard_failure(step.step_id, str(exc))

        summary.results.append(result)

        if result.status is StepStatus.HARD_FAILURE:
            emitter.error(result.message)
            summary.aborted = True
            logger.debug("Aborting after %s", step.step_id)
            break
        if result.status is StepStatus.SOFT_FAILURE:
            emitter.warning(result.message)
            continue
        emitter.ok(result.message)

    return summary


__all__ = ["RunSummary", "Step", "StepResult", "StepStatus", "run_steps"]
