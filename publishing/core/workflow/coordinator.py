"""Workflow coordinator.

Moves a manuscript one step along the pipeline once its current stage
reports completion.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

from ...common.logger import get_logger
from .manuscript import Manuscript
from .stages import create_stage
from .states import (
    ManuscriptStatus,
    WorkflowState,
    get_transition_rule,
    state_for_kind,
)

logger = get_logger("publishing.coordinator")


class AdvanceOutcome(str, Enum):
    """Result of an advance attempt."""

    ADVANCED = "advanced"                  # moved to the next stage
    PUBLISHED = "published"                # approval done, manuscript published
    NOT_COMPLETE = "not_complete"          # current stage still open
    NOT_STARTED = "not_started"            # no stage attached yet
    ALREADY_PUBLISHED = "already_published"


MESSAGES: Dict[AdvanceOutcome, str] = {
    AdvanceOutcome.PUBLISHED: "Book has been published.",
    AdvanceOutcome.NOT_COMPLETE: "Current stage is not complete yet.",
    AdvanceOutcome.NOT_STARTED: "Book has not entered the workflow yet.",
    AdvanceOutcome.ALREADY_PUBLISHED: "Book has already been published.",
}


@dataclass(frozen=True)
class AdvanceResult:
    """
    Result of an advance attempt.

    Attributes:
        outcome: What happened
        from_state: Workflow state before the attempt
        to_state: Workflow state after the attempt
        message: Human-readable summary
    """
    outcome: AdvanceOutcome
    from_state: WorkflowState
    to_state: WorkflowState
    message: str

    @property
    def advanced(self) -> bool:
        return self.outcome in (AdvanceOutcome.ADVANCED, AdvanceOutcome.PUBLISHED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "from_state": self.from_state.value,
            "to_state": self.to_state.value,
            "message": self.message,
        }


class PublishingCoordinator:
    """
    Linear state machine over stage kinds.

    Review → Editing → Approval → Published, one step per ``advance`` call
    and only when the current stage is complete. Incomplete stages, missing
    stages and published manuscripts leave the manuscript untouched.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[AdvanceOutcome, list[Callable[[Manuscript, AdvanceResult], None]]] = {}

    def advance(self, manuscript: Manuscript) -> AdvanceResult:
        """
        Try to move a manuscript past its current stage.

        Args:
            manuscript: The manuscript to advance

        Returns:
            AdvanceResult describing the outcome
        """
        from_state = manuscript.workflow_state
        stage = manuscript.current_stage

        if manuscript.is_published:
            result = self._unchanged(AdvanceOutcome.ALREADY_PUBLISHED, from_state)
        elif stage is None:
            result = self._unchanged(AdvanceOutcome.NOT_STARTED, from_state)
        elif not stage.is_complete:
            result = self._unchanged(AdvanceOutcome.NOT_COMPLETE, from_state)
        else:
            rule = get_transition_rule(stage.kind)
            if rule.to_kind is None:
                manuscript.update_status(ManuscriptStatus.PUBLISHED)
                outcome = AdvanceOutcome.PUBLISHED
                message = MESSAGES[outcome]
            else:
                next_stage = create_stage(rule.to_kind)
                manuscript.set_stage(next_stage)
                outcome = AdvanceOutcome.ADVANCED
                message = f"Book moved to {next_stage.name}."
            result = AdvanceResult(
                outcome=outcome,
                from_state=from_state,
                to_state=state_for_kind(rule.to_kind),
                message=message,
            )
            logger.info(
                f"Manuscript #{manuscript.serial_number} "
                f"{from_state.value} -> {result.to_state.value}"
            )

        if not result.advanced:
            logger.debug(
                f"Manuscript #{manuscript.serial_number} not advanced: {result.outcome.value}"
            )

        self._execute_callbacks(manuscript, result)
        return result

    def register_callback(
        self,
        outcome: AdvanceOutcome,
        callback: Callable[[Manuscript, AdvanceResult], None],
    ) -> None:
        """
        Register a callback to run after an advance with the given outcome.

        Args:
            outcome: The outcome to hook
            callback: Function called with the manuscript and the result
        """
        self._callbacks.setdefault(outcome, []).append(callback)

    @staticmethod
    def _unchanged(outcome: AdvanceOutcome, state: WorkflowState) -> AdvanceResult:
        return AdvanceResult(
            outcome=outcome,
            from_state=state,
            to_state=state,
            message=MESSAGES[outcome],
        )

    def _execute_callbacks(self, manuscript: Manuscript, result: AdvanceResult) -> None:
        for callback in self._callbacks.get(result.outcome, []):
            try:
                callback(manuscript, result)
            except Exception:
                # The transition has already happened; a hook cannot undo it
                logger.exception(f"Callback error for {result.outcome.value}")
