"""Workflow stage variants.

Each stage owns its completion rule. Completion can only be reached
through the stage's own approval action and, once reached, never reverts.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from .states import StageKind


class WorkflowStage(ABC):
    """Base class for a single phase of the publishing pipeline."""

    def __init__(self) -> None:
        self._complete = False

    @property
    @abstractmethod
    def kind(self) -> StageKind:
        """Tag identifying the stage variant."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable stage name, e.g. "Review Stage"."""

    @property
    def is_complete(self) -> bool:
        """Whether the stage's completion condition has been met."""
        return self._complete

    def _mark_complete(self) -> None:
        self._complete = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "complete": self._complete,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(complete={self._complete})"


class ReviewStage(WorkflowStage):
    """Review phase, complete once enough reviewer approvals are counted."""

    def __init__(self, required_reviews: int = 2) -> None:
        if required_reviews < 1:
            raise ValueError(
                f"required_reviews must be a positive integer, got {required_reviews}"
            )
        super().__init__()
        self._required_reviews = required_reviews
        self._current_reviews = 0

    @property
    def kind(self) -> StageKind:
        return StageKind.REVIEW

    @property
    def name(self) -> str:
        return "Review Stage"

    @property
    def required_reviews(self) -> int:
        return self._required_reviews

    @property
    def current_reviews(self) -> int:
        return self._current_reviews

    @property
    def remaining_reviews(self) -> int:
        return max(self._required_reviews - self._current_reviews, 0)

    def add_approval(self) -> None:
        """Count one reviewer approval.

        Approvals past the required count are still counted and leave the
        stage complete.
        """
        self._current_reviews += 1
        if self._current_reviews >= self._required_reviews:
            self._mark_complete()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["required_reviews"] = self._required_reviews
        data["current_reviews"] = self._current_reviews
        return data

    def __repr__(self) -> str:
        return (
            f"ReviewStage(required_reviews={self._required_reviews}, "
            f"current_reviews={self._current_reviews}, complete={self._complete})"
        )


class EditingStage(WorkflowStage):
    """Editing phase, complete after a single editor approval."""

    @property
    def kind(self) -> StageKind:
        return StageKind.EDITING

    @property
    def name(self) -> str:
        return "Editing Stage"

    def approve(self) -> None:
        self._mark_complete()


class ApprovalStage(WorkflowStage):
    """Final approval phase, complete after a single editor approval."""

    @property
    def kind(self) -> StageKind:
        return StageKind.APPROVAL

    @property
    def name(self) -> str:
        return "Approval Stage"

    def approve(self) -> None:
        self._mark_complete()


STAGE_CLASSES: Dict[StageKind, type] = {
    StageKind.REVIEW: ReviewStage,
    StageKind.EDITING: EditingStage,
    StageKind.APPROVAL: ApprovalStage,
}


def create_stage(kind: StageKind, **options: Any) -> WorkflowStage:
    """Build a fresh, incomplete stage of the given kind.

    Args:
        kind: Stage variant to build
        **options: Constructor options (only ``required_reviews`` for review)

    Returns:
        New WorkflowStage instance
    """
    return STAGE_CLASSES[kind](**options)
