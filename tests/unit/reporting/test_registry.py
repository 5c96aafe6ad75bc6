"""Tests for the manuscript registry and reports."""

import logging

from publishing.core.roles.roles import Author
from publishing.core.workflow.manuscript import SerialNumberAllocator
from publishing.core.workflow.states import WorkflowState
from publishing.reporting.registry import (
    ManuscriptRegistry, ManuscriptReport, ManuscriptSummary,
)

from tests.factories import advance_to, create_manuscript, start_review


class TestManuscriptRegistry:
    """Tests for ManuscriptRegistry class."""

    def test_create_manuscript_registers(self, registry, author):
        first = registry.create_manuscript("Dune", "Sci-Fi", author)
        second = registry.create_manuscript("Emma", "Romance", author)

        assert [first.serial_number, second.serial_number] == [1, 2]
        assert len(registry) == 2
        assert registry.get(2) is second
        assert registry.get(3) is None

    def test_register_preserves_order(self, registry, serials):
        manuscripts = [create_manuscript(serials=serials, title=t) for t in ("C", "A", "B")]
        for manuscript in manuscripts:
            registry.register(manuscript)

        assert [s.title for s in registry.list_all()] == ["C", "A", "B"]

    def test_register_twice_is_ignored(self, registry, manuscript, caplog):
        with caplog.at_level(logging.WARNING, logger="publishing.registry"):
            registry.register(manuscript)
            registry.register(manuscript)

        assert len(registry) == 1
        assert "already registered" in caplog.text

    def test_shared_allocator(self, author):
        serials = SerialNumberAllocator(start=10)
        registry = ManuscriptRegistry(serials)

        manuscript = registry.create_manuscript("Dune", "Sci-Fi", author)

        assert manuscript.serial_number == 10
        assert registry.serials is serials


class TestReports:
    """Tests for report projections."""

    def test_report_on_draft(self, registry):
        manuscript = registry.create_manuscript("Dune", "Sci-Fi", Author("Frank"))

        report = registry.report_on(manuscript)

        assert report == ManuscriptReport(
            title="Dune", serial_number=1, status="Draft", current_stage_name=None,
        )
        assert "Current Stage: None" in report.render()

    def test_report_tracks_stage(self, registry, coordinator):
        manuscript = registry.create_manuscript("Dune", "Sci-Fi", Author("Frank"))
        advance_to(manuscript, coordinator, WorkflowState.EDITING)

        report = registry.report_on(manuscript)

        assert report.current_stage_name == "Editing Stage"
        assert report.render().splitlines() == [
            "Generating report for book: Dune",
            "Serial Number: 1",
            "Status: Draft",
            "Current Stage: Editing Stage",
        ]

    def test_report_does_not_mutate(self, registry):
        manuscript = registry.create_manuscript("Dune", "Sci-Fi", Author("Frank"))
        stage = start_review(manuscript)
        before = manuscript.to_dict()

        registry.report_on(manuscript)
        registry.list_all()

        assert manuscript.to_dict() == before
        assert manuscript.current_stage is stage

    def test_list_all(self, registry, coordinator):
        published = registry.create_manuscript("Dune", "Sci-Fi", Author("Frank"))
        registry.create_manuscript("Emma", "Romance", Author("Jane"))
        advance_to(published, coordinator, WorkflowState.PUBLISHED)

        summaries = registry.list_all()

        assert summaries == [
            ManuscriptSummary(title="Dune", serial_number=1, status="Published"),
            ManuscriptSummary(title="Emma", serial_number=2, status="Draft"),
        ]
        assert summaries[0].to_dict() == {
            "title": "Dune", "serial_number": 1, "status": "Published",
        }
        assert registry.render_all().splitlines() == [
            "All Books in the system:",
            "Book Title: Dune, Serial Number: 1, Status: Published",
            "Book Title: Emma, Serial Number: 2, Status: Draft",
        ]
