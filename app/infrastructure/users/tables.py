"""
Persisted schema of the users table.

Mirrors the Alembic revision in migrations/versions. Repositories build
their statements against this Table; the application never issues DDL.
"""

from sqlalchemy import Column, DateTime, MetaData, String, Table, UniqueConstraint, Uuid

from app.domain.users.validation import EMAIL_MAX_LEN, NAME_MAX_LEN

EMAIL_UNIQUE_CONSTRAINT = "uq_users_email"

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", Uuid(), primary_key=True),
    Column("name", String(NAME_MAX_LEN), nullable=False),
    Column("email", String(EMAIL_MAX_LEN), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),
)
