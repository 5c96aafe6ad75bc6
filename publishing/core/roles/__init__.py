"""Role module for the publishing workflow.

Defines the participants and the fixed table of which role may act on
which stage.
"""

from .permissions import RoleKind, ROLE_ENTITLEMENTS, is_entitled, get_entitled_stages, get_roles_for_stage
from .roles import Participant, Author, Reviewer, Editor, create_participant

__all__ = [
    "RoleKind",
    "ROLE_ENTITLEMENTS",
    "is_entitled",
    "get_entitled_stages",
    "get_roles_for_stage",
    "Participant",
    "Author",
    "Reviewer",
    "Editor",
    "create_participant",
]
