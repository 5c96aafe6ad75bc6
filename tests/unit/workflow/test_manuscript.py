"""Tests for the manuscript model and serial numbers."""

import threading

import pytest

from publishing.core.roles.roles import Author
from publishing.core.workflow.manuscript import Manuscript, SerialNumberAllocator
from publishing.core.workflow.stages import EditingStage, ReviewStage
from publishing.core.workflow.states import ManuscriptStatus, WorkflowState


class TestSerialNumberAllocator:
    """Test serial allocation."""

    def test_starts_at_one(self):
        serials = SerialNumberAllocator()
        assert serials.allocate() == 1
        assert serials.allocate() == 2
        assert serials.peek == 3

    def test_sequential_manuscripts(self, serials, author):
        """Test N manuscripts get distinct, strictly increasing serials from 1."""
        manuscripts = [
            Manuscript(f"Book {i}", "Drama", author, serials=serials)
            for i in range(5)
        ]
        assert [m.serial_number for m in manuscripts] == [1, 2, 3, 4, 5]

    def test_independent_allocators(self, author):
        """Test allocators do not share a hidden counter."""
        first = Manuscript("A", "Drama", author, serials=SerialNumberAllocator())
        second = Manuscript("B", "Drama", author, serials=SerialNumberAllocator())
        assert first.serial_number == second.serial_number == 1

    def test_concurrent_allocation_is_unique(self):
        serials = SerialNumberAllocator()
        allocated = []
        lock = threading.Lock()

        def worker():
            for _ in range(200):
                serial = serials.allocate()
                with lock:
                    allocated.append(serial)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(allocated) == list(range(1, 1601))


class TestManuscript:
    """Test manuscript attributes and trusted setters."""

    def test_initial_state(self, manuscript, author):
        assert manuscript.title == "M1"
        assert manuscript.author is author
        assert manuscript.status == ManuscriptStatus.DRAFT
        assert manuscript.status == "Draft"
        assert manuscript.current_stage is None
        assert manuscript.workflow_state is WorkflowState.DRAFT
        assert not manuscript.is_published

    def test_serial_number_is_read_only(self, manuscript):
        with pytest.raises(AttributeError):
            manuscript.serial_number = 99
        assert manuscript.serial_number == 1

    def test_set_stage_is_unconditional(self, manuscript):
        """Test stages can be replaced without completing the previous one."""
        manuscript.set_stage(ReviewStage(2))
        manuscript.set_stage(EditingStage())

        assert manuscript.workflow_state is WorkflowState.EDITING

    def test_update_status(self, manuscript):
        manuscript.update_status(ManuscriptStatus.PUBLISHED)

        assert manuscript.is_published
        assert manuscript.workflow_state is WorkflowState.PUBLISHED

    def test_update_status_accepts_free_text(self, manuscript):
        manuscript.update_status("On Hold")
        assert manuscript.status == "On Hold"
        assert not manuscript.is_published

    def test_to_dict(self, serials):
        manuscript = Manuscript("Dune", "Sci-Fi", Author("Frank"), serials=serials)
        manuscript.set_stage(ReviewStage(2))

        data = manuscript.to_dict()

        assert data["title"] == "Dune"
        assert data["author"] == "Frank"
        assert data["serial_number"] == 1
        assert data["status"] == "Draft"
        assert data["workflow_state"] == "review"
        assert data["current_stage"]["kind"] == "review"
