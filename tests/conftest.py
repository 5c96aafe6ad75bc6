"""Pytest configuration and shared fixtures."""

import pytest

from publishing.common.settings import get_settings
from publishing.core.roles.roles import Author, Editor, Reviewer
from publishing.core.workflow.coordinator import PublishingCoordinator
from publishing.core.workflow.manuscript import SerialNumberAllocator
from publishing.reporting.registry import ManuscriptRegistry

from tests.factories import create_manuscript


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "workflow": {
            "required_reviews": 2,
        },
        "logging": {
            "level": "INFO",
            "log_dir": "/tmp/publishing/logs",
            "file_logging": False,
        },
    }


@pytest.fixture
def serials():
    """Fresh serial number allocator starting at 1."""
    return SerialNumberAllocator()


@pytest.fixture
def author():
    return Author("Ada Writer")


@pytest.fixture
def reviewers():
    return Reviewer("Rita Reader"), Reviewer("Ravi Critic")


@pytest.fixture
def editor():
    return Editor("Eve Editor")


@pytest.fixture
def manuscript(serials, author):
    """Draft manuscript without a stage."""
    return create_manuscript(serials=serials, author=author, title="M1")


@pytest.fixture
def coordinator():
    return PublishingCoordinator()


@pytest.fixture
def registry():
    return ManuscriptRegistry()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
