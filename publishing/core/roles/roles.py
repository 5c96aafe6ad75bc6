"""Workflow participants: author, reviewer and editor.

Every participant exposes ``perform_role(manuscript)``, which dispatches on
the kind of the manuscript's current stage. Actions the role is not
entitled to are silently ignored; no action reports failure.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Dict, Optional, cast

from ...common.logger import get_logger
from ..workflow.stages import ApprovalStage, EditingStage, ReviewStage, WorkflowStage
from ..workflow.states import StageKind
from .permissions import RoleKind, is_entitled

if TYPE_CHECKING:
    from ..workflow.manuscript import Manuscript

logger = get_logger("publishing.roles")


class Participant(ABC):
    """A named actor in the publishing workflow."""

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    @abstractmethod
    def role(self) -> RoleKind:
        """The role this participant plays."""

    @abstractmethod
    def perform_role(self, manuscript: "Manuscript") -> Optional[str]:
        """Act on the manuscript's current stage.

        Returns:
            A message describing what was done, or None when nothing applied
        """

    def can_act_on(self, manuscript: "Manuscript") -> bool:
        stage = manuscript.current_stage
        return stage is not None and is_entitled(self.role, stage.kind)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Author(Participant):
    """Submits the manuscript. Never changes workflow state."""

    @property
    def role(self) -> RoleKind:
        return RoleKind.AUTHOR

    def perform_role(self, manuscript: "Manuscript") -> Optional[str]:
        message = f"{self.name} submitted the book: {manuscript.title}"
        logger.info(message)
        return message


class Reviewer(Participant):
    """Adds approvals to the review stage."""

    @property
    def role(self) -> RoleKind:
        return RoleKind.REVIEWER

    def review(self, stage: ReviewStage) -> str:
        stage.add_approval()
        logger.debug(
            f"Review approvals {stage.current_reviews}/{stage.required_reviews}"
        )
        return f"{self.name} reviewed the book."

    def perform_role(self, manuscript: "Manuscript") -> Optional[str]:
        if not self.can_act_on(manuscript):
            return None
        stage = manuscript.current_stage
        if stage.kind is not StageKind.REVIEW:
            return None
        message = self.review(cast(ReviewStage, stage))
        logger.info(message)
        return message


class Editor(Participant):
    """Approves both the editing and the final approval stage."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        # Actions per stage kind; ROLE_ENTITLEMENTS decides which may run
        self._handlers: Dict[StageKind, Callable[[WorkflowStage], str]] = {
            StageKind.EDITING: lambda stage: self.edit(cast(EditingStage, stage)),
            StageKind.APPROVAL: lambda stage: self.give_final_approval(cast(ApprovalStage, stage)),
        }

    @property
    def role(self) -> RoleKind:
        return RoleKind.EDITOR

    def edit(self, stage: EditingStage) -> str:
        stage.approve()
        return f"{self.name} edited and approved the book."

    def give_final_approval(self, stage: ApprovalStage) -> str:
        stage.approve()
        return f"{self.name} gave final approval for the book."

    def perform_role(self, manuscript: "Manuscript") -> Optional[str]:
        if not self.can_act_on(manuscript):
            return None
        stage = manuscript.current_stage
        handler = self._handlers.get(stage.kind)
        if handler is None:
            return None
        message = handler(stage)
        logger.info(message)
        return message


PARTICIPANT_CLASSES: Dict[RoleKind, type] = {
    RoleKind.AUTHOR: Author,
    RoleKind.REVIEWER: Reviewer,
    RoleKind.EDITOR: Editor,
}


def create_participant(role: RoleKind, name: str) -> Participant:
    """Build a participant for a role.

    Args:
        role: Role to play (a RoleKind or its string value)
        name: Display name

    Returns:
        Participant instance
    """
    return PARTICIPANT_CLASSES[RoleKind(role)](name)
