"""
Shared pytest fixtures for the Exercise Tracker API tests.

Fixtures:
- test_settings: Settings isolated from the process environment and .env
- fake_user_repo / fake_exercise_repo: In-memory fakes with seeding helpers
- fake_store: StoreHandle wrapping the fakes
- app: FastAPI app created with test settings and the fake store
- client: TestClient with the app lifespan running
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from api.deps import get_settings
from backend.settings import Settings
from tests.fakes import FakeExerciseRepository, FakeStore, FakeUserRepository


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests; never reads .env."""
    return Settings(
        environment="test",
        store_backend="memory",
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def fake_user_repo() -> FakeUserRepository:
    """Provide a fresh FakeUserRepository."""
    return FakeUserRepository()


@pytest.fixture
def fake_exercise_repo() -> FakeExerciseRepository:
    """Provide a fresh FakeExerciseRepository."""
    return FakeExerciseRepository()


@pytest.fixture
def fake_store(fake_user_repo, fake_exercise_repo) -> FakeStore:
    """Store handle backed by the fake repositories."""
    return FakeStore(users=fake_user_repo, exercises=fake_exercise_repo)


@pytest.fixture
def app(test_settings, fake_store):
    """FastAPI app wired to the fake store."""
    application = create_app(settings=test_settings, store=fake_store)
    application.dependency_overrides[get_settings] = lambda: test_settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient running the app lifespan (store open for the test)."""
    with TestClient(app) as test_client:
        yield test_client
