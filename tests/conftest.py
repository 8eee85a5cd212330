"""
BARRIER TRACKER Planner API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

import itertools
import pytest
from datetime import datetime, timezone, timedelta

from fastapi.testclient import TestClient

from unittest.mock import MagicMock

from barrier_tracker.main import app
from barrier_tracker.auth.service import TokenService
from barrier_tracker.capacity.enums import TaskComplexity, TaskType
from barrier_tracker.capacity.models import TaskSnapshot
from barrier_tracker.checkins.repository import InMemoryCheckInRepository
from barrier_tracker.checkins.router import get_checkin_repository
from barrier_tracker.clock import get_clock
from barrier_tracker.database import get_database
from barrier_tracker.preferences.repository import InMemoryPreferencesRepository
from barrier_tracker.preferences.router import get_preferences_repository
from barrier_tracker.schedule.repository import InMemoryScheduleRepository
from barrier_tracker.schedule.router import get_schedule_repository
from barrier_tracker.tasks.repository import InMemoryTaskRepository
from barrier_tracker.tasks.router import get_task_repository


# Global in-memory repositories for tests
_test_task_repository = InMemoryTaskRepository()
_test_checkin_repository = InMemoryCheckInRepository()
_test_preferences_repository = InMemoryPreferencesRepository()
_test_schedule_repository = InMemoryScheduleRepository()

token_service = TokenService()
_task_ids = itertools.count(1)


# Time control fixtures for deterministic hard-stop testing
class FrozenClock:
    """A clock that returns a fixed time for deterministic testing."""

    def __init__(self, frozen_time: datetime):
        self._frozen_time = frozen_time

    def __call__(self) -> datetime:
        return self._frozen_time

    def set(self, new_time: datetime) -> None:
        self._frozen_time = new_time

    def advance(self, delta: timedelta) -> None:
        self._frozen_time += delta


def make_task(
    completed: bool = False,
    complexity: TaskComplexity = TaskComplexity.MEDIUM,
    type: TaskType = TaskType.FOCUS,
    description: str = "Task",
) -> TaskSnapshot:
    """Build a task snapshot for pure engine tests."""
    return TaskSnapshot(
        id=f"task-{next(_task_ids)}",
        description=description,
        completed=completed,
        complexity=complexity,
        type=type,
    )


async def override_get_database():
    """Override database dependency (repositories are replaced with in-memory ones)."""
    return MagicMock()


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed 'now': Wednesday 2025-01-15, 12:00 UTC."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(frozen_now) -> FrozenClock:
    """A controllable clock, also wired into the app's clock dependency."""
    return FrozenClock(frozen_now)


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    _test_task_repository.clear()
    return _test_task_repository


@pytest.fixture
def checkin_repository():
    _test_checkin_repository.clear()
    return _test_checkin_repository


@pytest.fixture
def preferences_repository():
    _test_preferences_repository.clear()
    return _test_preferences_repository


@pytest.fixture
def schedule_repository():
    _test_schedule_repository.clear()
    return _test_schedule_repository


@pytest.fixture
def client(
    task_repository,
    checkin_repository,
    preferences_repository,
    schedule_repository,
    frozen_clock,
):
    """Create test client with in-memory repositories and a frozen clock."""
    app.dependency_overrides[get_task_repository] = lambda: task_repository
    app.dependency_overrides[get_checkin_repository] = lambda: checkin_repository
    app.dependency_overrides[get_preferences_repository] = lambda: preferences_repository
    app.dependency_overrides[get_schedule_repository] = lambda: schedule_repository
    app.dependency_overrides[get_database] = override_get_database
    app.dependency_overrides[get_clock] = lambda: frozen_clock

    yield TestClient(app)
    # Clean up override after test
    app.dependency_overrides.clear()


@pytest.fixture
def auth_token():
    """A provider-style access token for the test user."""
    return token_service.create_access_token("user-1", email="user1@example.com")


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def second_auth_headers():
    """Authorization headers for a second user."""
    token = token_service.create_access_token("user-2", email="user2@example.com")
    return {"Authorization": f"Bearer {token}"}
