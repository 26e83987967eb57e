"""
TASKFLOW - Database Module

Relational storage using SQLAlchemy's asyncio extension.
Owns the schema for users, sessions and tasks.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    event,
)
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.types import TypeDecorator

from taskflow.config import settings

logger = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator):
    """Stores datetimes as naive UTC and hands them back timezone-aware."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(320), nullable=False, unique=True),
    Column("password_hash", String(128), nullable=False),
    Column("salt", String(64), nullable=False),
    Column("created_at", UTCDateTime(), nullable=False),
)

sessions_table = Table(
    "sessions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "user_id",
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("expires_at", UTCDateTime(), nullable=False),
    Column("created_at", UTCDateTime(), nullable=False),
    Index("idx_sessions_user", "user_id"),
)

tasks_table = Table(
    "tasks",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "user_id",
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", Text, nullable=False),
    Column("done", Boolean, nullable=False, default=False),
    Column("created_at", UTCDateTime(), nullable=False),
)

Index("idx_tasks_user_created", tasks_table.c.user_id, tasks_table.c.created_at.desc())


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return
    db_file = parsed.database
    if not db_file or db_file == ":memory:" or db_file.startswith("file:"):
        return
    Path(db_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def create_engine(url: str) -> AsyncEngine:
    """Build an async engine; SQLite connections get foreign keys switched on."""
    engine = create_async_engine(url)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """Database engine manager."""

    engine: AsyncEngine | None = None

    def __init__(self, url: str | None = None):
        self.url = url or settings.DATABASE_URL

    async def connect(self) -> None:
        """Open the engine and create the schema if it does not exist yet."""
        _ensure_sqlite_directory(self.url)
        self.engine = create_engine(self.url)
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Database ready at %s", make_url(self.url).render_as_string(hide_password=True))

    async def disconnect(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None

    def get_engine(self) -> AsyncEngine:
        """Get the engine instance."""
        if self.engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.engine


# Singleton database instance
database = Database()


async def get_database() -> AsyncEngine:
    """Dependency to get the database engine."""
    return database.get_engine()


def utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)
