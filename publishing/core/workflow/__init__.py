"""Publishing workflow module.

Implements the stage variants, the manuscript model and the coordinator
that moves manuscripts through Review, Editing and Approval.
"""

from .states import (
    StageKind,
    ManuscriptStatus,
    WorkflowState,
    TransitionRule,
    TRANSITION_RULES,
    TERMINAL_STATES,
)
from .stages import WorkflowStage, ReviewStage, EditingStage, ApprovalStage, create_stage
from .manuscript import Manuscript, SerialNumberAllocator
from .coordinator import PublishingCoordinator, AdvanceOutcome, AdvanceResult

__all__ = [
    "StageKind",
    "ManuscriptStatus",
    "WorkflowState",
    "TransitionRule",
    "TRANSITION_RULES",
    "TERMINAL_STATES",
    "WorkflowStage",
    "ReviewStage",
    "EditingStage",
    "ApprovalStage",
    "create_stage",
    "Manuscript",
    "SerialNumberAllocator",
    "PublishingCoordinator",
    "AdvanceOutcome",
    "AdvanceResult",
]
