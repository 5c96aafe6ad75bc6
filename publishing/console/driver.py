"""Interactive console session for the publishing workflow.

Reads line-oriented answers from an input stream and writes prompts and
reports to an output stream, so a whole session can be scripted.
"""

import sys
from typing import Optional, TextIO

from ..common.config import DEFAULT_REQUIRED_REVIEWS
from ..common.logger import get_logger
from ..core.roles.roles import Author, Editor, Reviewer
from ..core.workflow.coordinator import PublishingCoordinator
from ..core.workflow.manuscript import Manuscript
from ..core.workflow.stages import ReviewStage
from ..reporting.registry import ManuscriptRegistry

logger = get_logger("publishing.console")


class WorkflowSession:
    """Walks one manuscript through the fixed review, editing and approval script."""

    def __init__(
        self,
        *,
        registry: Optional[ManuscriptRegistry] = None,
        coordinator: Optional[PublishingCoordinator] = None,
        required_reviews: int = DEFAULT_REQUIRED_REVIEWS,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.registry = registry or ManuscriptRegistry()
        self.coordinator = coordinator or PublishingCoordinator()
        self.required_reviews = required_reviews
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def run(self) -> Manuscript:
        """Run the full script.

        Returns:
            The manuscript created during the session

        Raises:
            EOFError: If input ends before the script completes
        """
        title = self._ask("Enter the title of the book: ")
        genre = self._ask("Enter the genre of the book: ")
        author = Author(self._ask("Enter the name of the author: "))
        first_reviewer = Reviewer(self._ask("Enter the name of the first reviewer: "))
        second_reviewer = Reviewer(self._ask("Enter the name of the second reviewer: "))
        editor = Editor(self._ask("Enter the name of the editor: "))

        manuscript = self.registry.create_manuscript(title, genre, author)
        self._echo(author.perform_role(manuscript))

        review_stage = ReviewStage(self.required_reviews)
        manuscript.set_stage(review_stage)

        self._echo("---- Review Stage ----")
        reviewers = {1: first_reviewer, 2: second_reviewer}
        while not review_stage.is_complete:
            choice = self._ask_choice(
                f"Enter 1 to add a review by {first_reviewer.name}, "
                f"2 to add a review by {second_reviewer.name}:\n"
            )
            reviewer = reviewers.get(choice)
            if reviewer is not None:
                self._echo(reviewer.perform_role(manuscript))
        self._advance_and_report(manuscript)

        self._echo("---- Editing Stage ----")
        if self._ask_choice(f"Enter 1 to approve editing by {editor.name}:\n") == 1:
            self._echo(editor.perform_role(manuscript))
        self._advance_and_report(manuscript)

        self._echo("---- Approval Stage ----")
        if self._ask_choice(f"Enter 1 to approve the final book by {editor.name}:\n") == 1:
            self._echo(editor.perform_role(manuscript))
        self._advance_and_report(manuscript)

        self._echo(f"Final Status: {manuscript.status}")
        self._echo("")
        self._echo(self.registry.render_all())
        return manuscript

    def _advance_and_report(self, manuscript: Manuscript) -> None:
        result = self.coordinator.advance(manuscript)
        self._echo(result.message)
        self._echo("")
        self._echo(self.registry.report_on(manuscript).render())

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("input ended before the workflow finished")
        return line.rstrip("\r\n")

    def _ask_choice(self, prompt: str) -> int:
        while True:
            answer = self._ask(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                logger.debug(f"Rejected non-numeric choice {answer!r}")
                self._echo("Invalid choice.")

    def _echo(self, message: Optional[str]) -> None:
        if message is None:
            return
        print(message, file=self._out)
