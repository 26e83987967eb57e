"""
TASKFLOW - Test Configuration

Shared fixtures. Every test runs against its own SQLite file under tmp_path.
"""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Callable, Dict

import pytest
import pytest_asyncio
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from taskflow.auth.dependencies import get_session_manager, get_session_repository
from taskflow.auth.repository import SessionRepository
from taskflow.auth.sessions import SessionManager
from taskflow.config import settings
from taskflow.database import Database, database
from taskflow.main import app


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Keep key derivation cheap; the algorithm is the same at any cost."""
    monkeypatch.setattr(settings, "PASSWORD_TIME_COST", 1)
    monkeypatch.setattr(settings, "PASSWORD_MEMORY_COST", 64)
    monkeypatch.setattr(settings, "PASSWORD_PARALLELISM", 1)


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'data' / 'taskflow.db'}"


@pytest_asyncio.fixture
async def engine(database_url):
    """A connected engine on a fresh schema, for repository-level tests."""
    db = Database(database_url)
    await db.connect()
    yield db.get_engine()
    await db.disconnect()


@pytest.fixture
def client(database_url, monkeypatch):
    """Test client whose lifespan connects the app to a fresh database."""
    monkeypatch.setattr(database, "url", database_url)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def run_in_app(client: TestClient, fn: Callable, *args):
    """Run an async callable on the app's event loop (where its engine lives)."""
    return client.portal.call(fn, *args)


def count_rows(client: TestClient, table) -> int:
    async def _count() -> int:
        async with database.get_engine().connect() as conn:
            result = await conn.execute(select(func.count()).select_from(table))
            return result.scalar_one()

    return run_in_app(client, _count)


def session_headers(session_id: str) -> Dict[str, str]:
    return {"Cookie": f"{settings.SESSION_COOKIE_NAME}={session_id}"}


def signup(client: TestClient, email: str, password: str = "password123") -> Dict[str, str]:
    """Sign up and return Cookie headers for the new session.

    The client's cookie jar is cleared so every request states its session explicitly.
    """
    response = client.post("/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    session_id = response.cookies[settings.SESSION_COOKIE_NAME]
    client.cookies.clear()
    return session_headers(session_id)


@pytest.fixture
def registered_user() -> Dict[str, str]:
    return {"email": "testuser@example.com", "password": "testpassword123"}


@pytest.fixture
def auth_headers(client, registered_user) -> Dict[str, str]:
    """Cookie headers for a signed-up user."""
    return signup(client, registered_user["email"], registered_user["password"])


@pytest.fixture
def second_auth_headers(client) -> Dict[str, str]:
    """Cookie headers for a second, unrelated user."""
    return signup(client, "seconduser@example.com", "secondpassword123")


# Time control fixtures for deterministic expiry testing
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


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed 'now' time for testing."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(frozen_now) -> FrozenClock:
    """A controllable clock for session expiry testing."""
    return FrozenClock(frozen_now)


@pytest.fixture
def frozen_sessions(client, frozen_clock) -> FrozenClock:
    """Route the app's SessionManager through frozen_clock; returns the clock."""

    def override_get_session_manager(
        repository: Annotated[SessionRepository, Depends(get_session_repository)]
    ) -> SessionManager:
        return SessionManager(repository, clock=frozen_clock)

    app.dependency_overrides[get_session_manager] = override_get_session_manager
    return frozen_clock
