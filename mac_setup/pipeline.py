from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .context import SetupContext
from .errors import SetupAborted

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str

    def run(self, ctx: SetupContext) -> None:
        ...


@dataclass
class PipelineResult:
    ran_steps: List[str] = field(default_factory=list)
    aborted_at: Optional[str] = None


def run_pipeline(*, ctx: SetupContext, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order.

    A step raising SetupAborted ends the run early without error; any other
    exception propagates and stops everything after it.
    """

    result = PipelineResult()

    for step in steps:
        logger.info("Running step %s", step.step_id)
        try:
            step.run(ctx)
        except SetupAborted as e:
            logger.info("Stopping at %s: %s", step.step_id, e)
            result.ran_steps.append(step.step_id)
            result.aborted_at = step.step_id
            break
        result.ran_steps.append(step.step_id)

    return result
