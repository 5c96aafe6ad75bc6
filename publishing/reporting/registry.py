"""Registry of known manuscripts and read-only status reports.

The registry owns the serial number allocator used for the manuscripts it
creates. Reports are projections; nothing here mutates a manuscript.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from ..common.logger import get_logger
from ..core.roles.roles import Author
from ..core.workflow.manuscript import Manuscript, SerialNumberAllocator

logger = get_logger("publishing.registry")


@dataclass(frozen=True)
class ManuscriptReport:
    """Status snapshot of a single manuscript."""

    title: str
    serial_number: int
    status: str
    current_stage_name: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def render(self) -> str:
        return "\n".join([
            f"Generating report for book: {self.title}",
            f"Serial Number: {self.serial_number}",
            f"Status: {self.status}",
            f"Current Stage: {self.current_stage_name or 'None'}",
        ])


@dataclass(frozen=True)
class ManuscriptSummary:
    """One line of the registry listing."""

    title: str
    serial_number: int
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def render(self) -> str:
        return (
            f"Book Title: {self.title}, Serial Number: {self.serial_number}, "
            f"Status: {self.status}"
        )


class ManuscriptRegistry:
    """Append-only, ordered registry of manuscripts."""

    def __init__(self, serials: Optional[SerialNumberAllocator] = None) -> None:
        self._serials = serials or SerialNumberAllocator()
        self._manuscripts: List[Manuscript] = []

    @property
    def serials(self) -> SerialNumberAllocator:
        return self._serials

    def create_manuscript(self, title: str, genre: str, author: Author) -> Manuscript:
        """Create a manuscript with the next serial number and register it.

        Args:
            title: Book title
            genre: Book genre
            author: Submitting author

        Returns:
            The registered Manuscript
        """
        manuscript = Manuscript(title, genre, author, serials=self._serials)
        self.register(manuscript)
        return manuscript

    def register(self, manuscript: Manuscript) -> None:
        """Append a manuscript to the registry.

        Registering the same manuscript twice is ignored.
        """
        if any(known is manuscript for known in self._manuscripts):
            logger.warning(
                f"Manuscript #{manuscript.serial_number} is already registered"
            )
            return
        self._manuscripts.append(manuscript)
        logger.debug(f"Registered manuscript #{manuscript.serial_number}: {manuscript.title}")

    def get(self, serial_number: int) -> Optional[Manuscript]:
        for manuscript in self._manuscripts:
            if manuscript.serial_number == serial_number:
                return manuscript
        return None

    def report_on(self, manuscript: Manuscript) -> ManuscriptReport:
        stage = manuscript.current_stage
        return ManuscriptReport(
            title=manuscript.title,
            serial_number=manuscript.serial_number,
            status=str(manuscript.status),
            current_stage_name=stage.name if stage else None,
        )

    def list_all(self) -> List[ManuscriptSummary]:
        return [
            ManuscriptSummary(
                title=manuscript.title,
                serial_number=manuscript.serial_number,
                status=str(manuscript.status),
            )
            for manuscript in self._manuscripts
        ]

    def render_all(self) -> str:
        lines = ["All Books in the system:"]
        lines.extend(summary.render() for summary in self.list_all())
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._manuscripts)
