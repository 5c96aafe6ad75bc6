"""Role entitlements for the publishing workflow.

Each role may act on a fixed set of stage kinds:
  - author: none (submission acknowledgement only)
  - reviewer: review
  - editor: editing, approval

The editor is the sole role allowed to approve both the editing and the
approval stage. The table is fixed, not configurable.
"""

from enum import Enum
from typing import Dict, FrozenSet, List

from ..workflow.states import StageKind


class RoleKind(str, Enum):
    """Actor types taking part in the workflow."""

    AUTHOR = "author"
    REVIEWER = "reviewer"
    EDITOR = "editor"


ROLE_ENTITLEMENTS: Dict[RoleKind, FrozenSet[StageKind]] = {
    RoleKind.AUTHOR: frozenset(),
    RoleKind.REVIEWER: frozenset([StageKind.REVIEW]),
    RoleKind.EDITOR: frozenset([StageKind.EDITING, StageKind.APPROVAL]),
}


def is_entitled(role: RoleKind, stage: StageKind) -> bool:
    """Check if a role may act on a stage kind."""
    return stage in ROLE_ENTITLEMENTS.get(role, frozenset())


def get_entitled_stages(role: RoleKind) -> List[StageKind]:
    """Get the stage kinds a role may act on, in pipeline order."""
    entitled = ROLE_ENTITLEMENTS.get(role, frozenset())
    return [kind for kind in StageKind if kind in entitled]


def get_roles_for_stage(stage: StageKind) -> List[RoleKind]:
    """Get the roles entitled to act on a stage kind."""
    return [role for role in RoleKind if is_entitled(role, stage)]
