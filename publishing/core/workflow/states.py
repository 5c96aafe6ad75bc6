"""Publishing workflow states and transitions.

State Machine Diagram:

    ┌──────────┐
    │  DRAFT   │ ← Manuscript created, no stage attached
    └────┬─────┘
         │ (review stage attached by the driver)
    ┌────▼─────┐
    │  REVIEW  │ ← N reviewer approvals required
    └────┬─────┘
         │
    ┌────▼─────┐
    │ EDITING  │ ← editor approval
    └────┬─────┘
         │
    ┌────▼─────┐
    │ APPROVAL │ ← editor final approval
    └────┬─────┘
         │
    ┌────▼──────┐
    │ PUBLISHED │ (terminal)
    └───────────┘

Transitions only run forward, one step at a time, and only once the
current stage reports completion.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional, Set


class StageKind(str, Enum):
    """Kinds of stage a manuscript can sit in."""

    REVIEW = "review"
    EDITING = "editing"
    APPROVAL = "approval"


class ManuscriptStatus(str, Enum):
    """Explicit manuscript status.

    In-review, in-editing and in-approval are not stored here; they are
    derived from the current stage (see WorkflowState).
    """

    DRAFT = "Draft"
    PUBLISHED = "Published"

    def __str__(self) -> str:
        return self.value


class WorkflowState(str, Enum):
    """Position of a manuscript in the pipeline."""

    DRAFT = "draft"
    REVIEW = "review"
    EDITING = "editing"
    APPROVAL = "approval"
    PUBLISHED = "published"


class TransitionRule(NamedTuple):
    """Defines a valid stage transition.

    A rule without a target stage publishes the manuscript.
    """
    from_kind: StageKind
    to_kind: Optional[StageKind]


TRANSITION_RULES: list[TransitionRule] = [
    TransitionRule(StageKind.REVIEW, StageKind.EDITING),
    TransitionRule(StageKind.EDITING, StageKind.APPROVAL),
    TransitionRule(StageKind.APPROVAL, None),
]

# Lookup table, one rule per stage kind
TRANSITION_TARGETS: Dict[StageKind, TransitionRule] = {
    rule.from_kind: rule for rule in TRANSITION_RULES
}

STAGE_STATES: Dict[StageKind, WorkflowState] = {
    StageKind.REVIEW: WorkflowState.REVIEW,
    StageKind.EDITING: WorkflowState.EDITING,
    StageKind.APPROVAL: WorkflowState.APPROVAL,
}

TERMINAL_STATES: Set[WorkflowState] = {
    WorkflowState.PUBLISHED,
}

INITIAL_STAGE: StageKind = StageKind.REVIEW


def get_transition_rule(from_kind: StageKind) -> TransitionRule:
    """Get the transition rule leaving a stage kind."""
    return TRANSITION_TARGETS[from_kind]


def get_next_kind(from_kind: StageKind) -> Optional[StageKind]:
    """Get the stage kind that follows, or None when the next step publishes."""
    return get_transition_rule(from_kind).to_kind


def state_for_kind(kind: Optional[StageKind]) -> WorkflowState:
    """Map a stage kind to its workflow state (None means publication)."""
    if kind is None:
        return WorkflowState.PUBLISHED
    return STAGE_STATES[kind]
