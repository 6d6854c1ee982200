"""
Tests for app.infrastructure.users.user_repository.UserRepositoryAdapter.

Runs the real SQLAlchemy statements against in-memory SQLite.
Driver-level failures are simulated with unittest.mock.
"""

from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.domain.users.errors import ConflictError, NotFoundError, StorageError
from app.infrastructure.users.user_repository import (
    UserRepositoryAdapter,
    _is_email_conflict,
)


@pytest.fixture
def repo(sqlite_engine) -> UserRepositoryAdapter:
    return UserRepositoryAdapter(engine=sqlite_engine)


class TestCreate:
    """Tests for UserRepositoryAdapter.create."""

    def test_assigns_id_and_timestamps(self, repo) -> None:
        user = repo.create(name="John Doe", email="john@example.com")
        assert isinstance(user.id, UUID)
        assert user.created_at == user.updated_at

    def test_round_trip(self, repo) -> None:
        created = repo.create(name="John Doe", email="john@example.com")
        fetched = repo.get_by_id(created.id)
        assert fetched.id == created.id
        assert (fetched.name, fetched.email) == ("John Doe", "john@example.com")

    def test_read_back_timestamps_match_created(self, repo) -> None:
        created = repo.create(name="John Doe", email="john@example.com")
        fetched = repo.get_by_id(created.id)
        assert fetched.created_at.tzinfo is not None
        assert fetched.created_at == created.created_at
        assert fetched.updated_at == created.updated_at
        assert repo.list_all()[0].created_at == created.created_at

    def test_duplicate_email_raises_conflict(self, repo) -> None:
        repo.create(name="John", email="john@example.com")
        with pytest.raises(ConflictError) as exc_info:
            repo.create(name="Other John", email="john@example.com")
        assert exc_info.value.email == "john@example.com"
        assert len(repo.list_all()) == 1


class TestGetById:
    """Tests for UserRepositoryAdapter.get_by_id."""

    def test_unknown_id_raises_not_found(self, repo) -> None:
        user_id = uuid4()
        with pytest.raises(NotFoundError) as exc_info:
            repo.get_by_id(user_id)
        assert exc_info.value.user_id == user_id


class TestListAll:
    """Tests for UserRepositoryAdapter.list_all."""

    def test_empty_table(self, repo) -> None:
        assert repo.list_all() == []

    def test_returns_every_row(self, repo) -> None:
        created = [
            repo.create(name=f"User {i}", email=f"user{i}@example.com")
            for i in range(3)
        ]
        listed = repo.list_all()
        assert len(listed) == 3
        assert {u.id for u in listed} == {u.id for u in created}

    def test_iteration_order_is_stable(self, repo) -> None:
        for i in range(4):
            repo.create(name=f"User {i}", email=f"user{i}@example.com")
        assert [u.id for u in repo.list_all()] == [u.id for u in repo.list_all()]


class TestUpdate:
    """Tests for UserRepositoryAdapter.update."""

    def test_update_keeps_id_and_created_at(self, repo) -> None:
        created = repo.create(name="John", email="john@example.com")
        updated = repo.update(created.id, name="Johnny", email="johnny@example.com")
        assert updated.id == created.id
        assert (updated.name, updated.email) == ("Johnny", "johnny@example.com")
        assert updated.updated_at >= updated.created_at
        assert repo.get_by_id(created.id).email == "johnny@example.com"

    def test_unknown_id_raises_not_found(self, repo) -> None:
        with pytest.raises(NotFoundError):
            repo.update(uuid4(), name="X", email="x@example.com")

    def test_email_of_other_user_raises_conflict(self, repo) -> None:
        repo.create(name="A", email="a@example.com")
        b = repo.create(name="B", email="b@example.com")
        with pytest.raises(ConflictError):
            repo.update(b.id, name="B", email="a@example.com")
        assert repo.get_by_id(b.id).email == "b@example.com"


class TestDelete:
    """Tests for UserRepositoryAdapter.delete."""

    def test_delete_then_not_found(self, repo) -> None:
        created = repo.create(name="John", email="john@example.com")
        repo.delete(created.id)
        with pytest.raises(NotFoundError):
            repo.get_by_id(created.id)
        with pytest.raises(NotFoundError):
            repo.delete(created.id)

    def test_email_reusable_after_delete(self, repo) -> None:
        first = repo.create(name="John", email="john@example.com")
        repo.delete(first.id)
        second = repo.create(name="John", email="john@example.com")
        assert second.id != first.id


class TestStorageFailures:
    """Driver failures are reported as StorageError without retry."""

    def _broken_engine(self) -> MagicMock:
        engine = MagicMock()
        failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
        engine.connect.side_effect = failure
        engine.begin.side_effect = failure
        return engine

    @pytest.mark.parametrize(
        ("operation", "args"),
        [
            ("create", ("John", "john@example.com")),
            ("get_by_id", (uuid4(),)),
            ("list_all", ()),
            ("update", (uuid4(), "John", "john@example.com")),
            ("delete", (uuid4(),)),
        ],
    )
    def test_operational_error_becomes_storage_error(self, operation, args) -> None:
        engine = self._broken_engine()
        repo = UserRepositoryAdapter(engine=engine)
        with pytest.raises(StorageError) as exc_info:
            getattr(repo, operation)(*args)
        assert "connection refused" not in exc_info.value.reason
        assert engine.connect.call_count + engine.begin.call_count == 1


class TestIsEmailConflict:
    """Tests for unique-violation detection across drivers."""

    def _integrity_error(self, orig: Exception) -> IntegrityError:
        return IntegrityError("INSERT", {}, orig)

    def test_postgres_unique_violation_on_email(self) -> None:
        orig = Exception('duplicate key value violates unique constraint "uq_users_email"')
        orig.pgcode = "23505"
        assert _is_email_conflict(self._integrity_error(orig))

    def test_postgres_not_null_violation_is_not_conflict(self) -> None:
        orig = Exception('null value in column "name" violates not-null constraint')
        orig.pgcode = "23502"
        assert not _is_email_conflict(self._integrity_error(orig))

    def test_sqlite_primary_key_collision_is_not_conflict(self) -> None:
        orig = Exception("UNIQUE constraint failed: users.id")
        assert not _is_email_conflict(self._integrity_error(orig))
