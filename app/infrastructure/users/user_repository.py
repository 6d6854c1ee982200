"""
Adapter: User repository.

Implements UserRepository port.
Every operation runs in a single transaction on a pooled connection
that is returned to the pool on every exit path.
"""

import logging
from datetime import datetime, timezone
from uuid import UUID, uuid4

from psycopg2 import errorcodes
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.domain.users.entities import User
from app.domain.users.errors import ConflictError, NotFoundError, StorageError
from app.domain.users.ports import UserRepository
from app.infrastructure.users.tables import EMAIL_UNIQUE_CONSTRAINT, users_table

logger = logging.getLogger(__name__)

SQLITE_UNIQUE_MESSAGE = "UNIQUE constraint failed: users.email"


class UserRepositoryAdapter(UserRepository):
    """Stores users in a relational database via SQLAlchemy Core.

    Works against PostgreSQL in production and SQLite in tests.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, name: str, email: str) -> User:
        """Insert a new user with a fresh UUID and timestamps.

        Args:
            name: Validated display name.
            email: Validated email address.

        Returns:
            The persisted User.
        """
        now = _utcnow()
        user = User(id=uuid4(), name=name, email=email, created_at=now, updated_at=now)
        stmt = insert(users_table).values(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        try:
            with self._engine.begin() as conn:
                conn.execute(stmt)
        except IntegrityError as exc:
            raise _classify_integrity_error(exc, email) from exc
        except SQLAlchemyError as exc:
            raise _storage_error("create", exc) from exc

        return user

    def get_by_id(self, user_id: UUID) -> User:
        """Return the user with the given id.

        Args:
            user_id: UUID of the user to retrieve.

        Returns:
            The matching User.
        """
        stmt = select(users_table).where(users_table.c.id == user_id)

        try:
            with self._engine.connect() as conn:
                row = conn.execute(stmt).one_or_none()
        except SQLAlchemyError as exc:
            raise _storage_error("get_by_id", exc) from exc

        if row is None:
            raise NotFoundError(user_id)
        return _row_to_user(row)

    def list_all(self) -> list[User]:
        """Return all users ordered by creation time, then id."""
        stmt = select(users_table).order_by(
            users_table.c.created_at, users_table.c.id
        )

        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).fetchall()
        except SQLAlchemyError as exc:
            raise _storage_error("list_all", exc) from exc

        logger.debug("Fetched %d users.", len(rows))
        return [_row_to_user(row) for row in rows]

    def update(self, user_id: UUID, name: str, email: str) -> User:
        """Replace name and email, refresh updated_at, and return the new row.

        The UPDATE and the read-back share one transaction.
        """
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(name=name, email=email, updated_at=_utcnow())
        )
        reread = select(users_table).where(users_table.c.id == user_id)

        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
                if result.rowcount == 0:
                    raise NotFoundError(user_id)
                row = conn.execute(reread).one()
        except IntegrityError as exc:
            raise _classify_integrity_error(exc, email) from exc
        except SQLAlchemyError as exc:
            raise _storage_error("update", exc) from exc

        return _row_to_user(row)

    def delete(self, user_id: UUID) -> None:
        """Delete the user with the given id."""
        stmt = delete(users_table).where(users_table.c.id == user_id)

        try:
            with self._engine.begin() as conn:
                deleted = conn.execute(stmt).rowcount
        except SQLAlchemyError as exc:
            raise _storage_error("delete", exc) from exc

        if deleted == 0:
            raise NotFoundError(user_id)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _row_to_user(row: Row) -> User:
    """Map a users row onto the domain entity."""
    return User(
        id=row.id,
        name=row.name,
        email=row.email,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def _is_email_conflict(exc: IntegrityError) -> bool:
    """Tell whether an IntegrityError is a violation of the email unique constraint.

    PostgreSQL drivers expose the SQLSTATE (psycopg2 as ``pgcode``,
    psycopg 3 as ``sqlstate``); SQLite only offers the message text.
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == errorcodes.UNIQUE_VIOLATION and EMAIL_UNIQUE_CONSTRAINT in str(orig)
    return SQLITE_UNIQUE_MESSAGE in str(orig)


def _classify_integrity_error(exc: IntegrityError, email: str) -> Exception:
    if _is_email_conflict(exc):
        logger.warning("Email uniqueness violation.")
        return ConflictError(email)
    return _storage_error("integrity", exc)


def _storage_error(operation: str, exc: SQLAlchemyError) -> StorageError:
    logger.error("Database error during %s: %s", operation, type(exc).__name__)
    return StorageError(f"{operation} failed: {type(exc).__name__}")
