"""Manuscript model and serial number allocation."""

import threading
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from .stages import WorkflowStage
from .states import ManuscriptStatus, WorkflowState, state_for_kind

if TYPE_CHECKING:
    from ..roles.roles import Author


class SerialNumberAllocator:
    """Hands out strictly increasing serial numbers starting at ``start``.

    Allocation is guarded by a lock so concurrent construction never
    produces duplicates.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def allocate(self) -> int:
        with self._lock:
            serial = self._next
            self._next += 1
        return serial

    @property
    def peek(self) -> int:
        """The serial number the next allocation will return."""
        return self._next


class Manuscript:
    """A book moving through the publishing pipeline.

    The setters are trusted: ``set_stage`` and ``update_status`` do not
    check ordering. Stage ordering is enforced by the coordinator.
    """

    def __init__(
        self,
        title: str,
        genre: str,
        author: "Author",
        *,
        serials: SerialNumberAllocator,
    ) -> None:
        self.title = title
        self.genre = genre
        self.author = author
        self._serial_number = serials.allocate()
        self._status: Union[ManuscriptStatus, str] = ManuscriptStatus.DRAFT
        self._current_stage: Optional[WorkflowStage] = None

    @property
    def serial_number(self) -> int:
        return self._serial_number

    @property
    def status(self) -> Union[ManuscriptStatus, str]:
        return self._status

    @property
    def current_stage(self) -> Optional[WorkflowStage]:
        return self._current_stage

    @property
    def is_published(self) -> bool:
        return self._status == ManuscriptStatus.PUBLISHED

    @property
    def workflow_state(self) -> WorkflowState:
        """Pipeline position derived from status and current stage."""
        if self.is_published:
            return WorkflowState.PUBLISHED
        if self._current_stage is None:
            return WorkflowState.DRAFT
        return state_for_kind(self._current_stage.kind)

    def set_stage(self, stage: WorkflowStage) -> None:
        self._current_stage = stage

    def update_status(self, status: Union[ManuscriptStatus, str]) -> None:
        self._status = status

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "genre": self.genre,
            "author": self.author.name,
            "serial_number": self._serial_number,
            "status": str(self._status),
            "workflow_state": self.workflow_state.value,
            "current_stage": self._current_stage.to_dict() if self._current_stage else None,
        }

    def __repr__(self) -> str:
        return (
            f"Manuscript(title={self.title!r}, serial_number={self._serial_number}, "
            f"status={str(self._status)!r})"
        )
