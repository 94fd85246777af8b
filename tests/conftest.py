"""
Shared test fixtures for PaceTable test suite

This module provides reusable fixtures for testing all components of the PaceTable application.
Fixtures are organized by category: data models, storage, services, and utilities.
"""

import pytest
from typing import Dict, List
from unittest.mock import Mock

from pacetable.models.models import AthleteRecord
from pacetable.services.color_pool import ColorPoolAllocator
from pacetable.services.roster import AthleteRoster
from pacetable.services.storage import InMemoryStorage, JsonFileStorage


# =============================================================================
# DATA MODEL FIXTURES - Sample data for testing
# =============================================================================

@pytest.fixture
def small_pool() -> List[str]:
    """
    Provides a three-color pool so exhaustion is easy to reach.

    Returns:
        List[str]: Color tokens A, B, C
    """
    return ["A", "B", "C"]


@pytest.fixture
def sample_athlete_data() -> Dict:
    """
    Provides caller-supplied data for one athlete.

    Returns:
        Dict: Athlete id plus display fields
    """
    return {"id": 14208194, "name": "Faith Kipyegon", "country": "KEN"}


@pytest.fixture
def sample_athletes_data() -> List[Dict]:
    """
    Provides data for several distinct athletes.

    Returns:
        List[Dict]: Athletes in the order they should be added
    """
    return [
        {"id": 1, "name": "Jakob Ingebrigtsen"},
        {"id": 2, "name": "Beatrice Chebet"},
        {"id": 3, "name": "Emmanuel Wanyonyi"},
        {"id": 4, "name": "Femke Bol"}
    ]


@pytest.fixture
def sample_records() -> List[Dict]:
    """
    Provides a records payload as fetched for an athlete.

    Returns:
        List[Dict]: Performance entries
    """
    return [
        {"discipline": "1500m", "mark": "3:49.04"},
        {"discipline": "Mile", "mark": "4:07.64"}
    ]


@pytest.fixture
def sample_record() -> AthleteRecord:
    """
    Provides a complete AthleteRecord.

    Returns:
        AthleteRecord: Visible, not loading, with one record
    """
    return AthleteRecord(
        id=7,
        color="#03A9F4",
        records=[{"discipline": "5000m", "mark": "12:35.36"}],
        extra={"name": "Joshua Cheptegei"}
    )


# =============================================================================
# STORAGE FIXTURES - Key/value backends
# =============================================================================

@pytest.fixture
def memory_storage() -> InMemoryStorage:
    """Provides an empty in-memory storage"""
    return InMemoryStorage()


@pytest.fixture
def temp_data_dir(tmp_path):
    """
    Provides a temporary directory for testing file operations.
    Directory is automatically cleaned up after test completes.

    Args:
        tmp_path: Built-in pytest fixture providing temporary directory

    Returns:
        Path: Path to temporary data directory
    """
    data_dir = tmp_path / "test_data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def json_storage(temp_data_dir) -> JsonFileStorage:
    """
    Provides a JsonFileStorage writing into a temporary directory.

    Usage:
        def test_persistence(json_storage):
            json_storage.set_item("key", "value")
            assert JsonFileStorage(str(json_storage.data_dir)).get_item("key") == "value"
    """
    return JsonFileStorage(str(temp_data_dir))


# =============================================================================
# SERVICE FIXTURES - Allocator and roster wired to in-memory storage
# =============================================================================

@pytest.fixture
def allocator(memory_storage, small_pool) -> ColorPoolAllocator:
    """Provides an allocator over the three-color pool"""
    return ColorPoolAllocator(memory_storage, small_pool)


@pytest.fixture
def roster(allocator) -> AthleteRoster:
    """Provides an empty roster using the three-color allocator"""
    return AthleteRoster(allocator)


@pytest.fixture
def observer() -> Mock:
    """
    Provides a callable spy to subscribe to services.

    Usage:
        def test_publish(roster, observer):
            roster.subscribe(observer)
            assert observer.call_count == 1
    """
    return Mock()


# =============================================================================
# CONFIGURATION FIXTURES - Test environment setup
# =============================================================================

@pytest.fixture(autouse=True)
def reset_environment_variables(monkeypatch):
    """
    Automatically resets environment variables for each test to ensure isolation.

    Args:
        monkeypatch: Built-in pytest fixture for safely modifying environment

    Note:
        This fixture runs automatically for every test (autouse=True)
    """
    monkeypatch.setenv("DIAGNOSTIC_MODE", "false")
    monkeypatch.delenv("PACETABLE_DATA_DIR", raising=False)
    monkeypatch.delenv("PACETABLE_STORAGE_FILE", raising=False)


# Use these markers in tests:
# @pytest.mark.unit - Fast unit tests with no dependencies
# @pytest.mark.integration - Tests that touch the file system or combine services
# @pytest.mark.slow - Tests that take significant time
