"""Interactive console front end for the publishing workflow."""

from .driver import WorkflowSession

__all__ = ["WorkflowSession"]
