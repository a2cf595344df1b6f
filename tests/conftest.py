"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services
from stores.memory import InMemoryCategoryStore


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "taskcat",
        log_level="DEBUG",
        log_dir=tmp_path / "taskcat" / "logs",
        store_backend="memory",
        store_table="task_category_c",
        remote_project_id="",
        remote_public_key="",
        default_color="#6366F1",
    )


@pytest.fixture
def store():
    """Create a fresh in-memory store seeded with the built-in categories."""
    return InMemoryCategoryStore()


@pytest.fixture
def services(test_config, store):
    """Create a Services container backed by a fresh in-memory store.

    Args:
        test_config: Test configuration fixture.
        store: In-memory store fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, store=store)
