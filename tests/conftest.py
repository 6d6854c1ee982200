"""
Shared fixtures for the test suite.

Provides an in-memory UserRepository so API and use-case tests run
without a database, plus an SQLite-backed application for end-to-end
checks of the real SQLAlchemy adapter.
"""

import threading
from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.domain.users.entities import User
from app.domain.users.errors import ConflictError, NotFoundError
from app.domain.users.ports import UserRepository
from app.infrastructure.users.tables import metadata
from app.interfaces.users.dependencies import get_user_repository
from app.main import create_app


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository honoring the same contract as the SQL adapter."""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = threading.Lock()
        self.calls: list[str] = []

    def create(self, name: str, email: str) -> User:
        self.calls.append("create")
        with self._lock:
            if any(u.email == email for u in self._users.values()):
                raise ConflictError(email)
            now = datetime.now(timezone.utc)
            user = User(id=uuid4(), name=name, email=email, created_at=now, updated_at=now)
            self._users[user.id] = user
            return user

    def get_by_id(self, user_id: UUID) -> User:
        self.calls.append("get_by_id")
        with self._lock:
            if user_id not in self._users:
                raise NotFoundError(user_id)
            return self._users[user_id]

    def list_all(self) -> list[User]:
        self.calls.append("list_all")
        with self._lock:
            return sorted(self._users.values(), key=lambda u: (u.created_at, str(u.id)))

    def update(self, user_id: UUID, name: str, email: str) -> User:
        self.calls.append("update")
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                raise NotFoundError(user_id)
            if any(u.email == email and u.id != user_id for u in self._users.values()):
                raise ConflictError(email)
            user = User(
                id=user_id,
                name=name,
                email=email,
                created_at=current.created_at,
                updated_at=datetime.now(timezone.utc),
            )
            self._users[user_id] = user
            return user

    def delete(self, user_id: UUID) -> None:
        self.calls.append("delete")
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise NotFoundError(user_id)

    def count(self) -> int:
        return len(self._users)


@pytest.fixture
def settings() -> Settings:
    """Isolated settings: in-memory SQLite, no rate limiting, no .env."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def fake_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def client(settings: Settings, fake_repo: InMemoryUserRepository) -> TestClient:
    """TestClient whose routes use the in-memory repository."""
    app = create_app(settings)
    app.dependency_overrides[get_user_repository] = lambda: fake_repo
    return TestClient(app)


@pytest.fixture
def sqlite_engine() -> Engine:
    """In-memory SQLite engine with the users schema applied."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_client(settings: Settings):
    """TestClient running the full stack, including lifespan and SQL adapter."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        metadata.create_all(app.state.engine)
        yield test_client
