import logging
from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

from taskflow.auth.models import Session, User, UserPublic
from taskflow.database import sessions_table, users_table
from taskflow.errors import ConflictError

logger = logging.getLogger(__name__)


class UserRepository:
    """SQL implementation of the user store. Emails are expected lower-cased."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def create(self, user: User) -> User:
        """Insert a user; a taken email raises ConflictError."""
        try:
            async with self.engine.begin() as conn:
                await conn.execute(insert(users_table).values(**user.to_row()))
        except IntegrityError as e:
            logger.info("Rejected duplicate signup for user id=%s", user.id)
            raise ConflictError("Email already exists") from e
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        async with self.engine.connect() as conn:
            result = await conn.execute(
                select(users_table).where(users_table.c.email == email)
            )
            row = result.mappings().first()
        if row is None:
            return None
        return User.from_row(row)

    async def get_public(self, user_id: str) -> Optional[UserPublic]:
        """Get public user fields by ID. Never selects the hash or salt."""
        async with self.engine.connect() as conn:
            result = await conn.execute(
                select(
                    users_table.c.id,
                    users_table.c.email,
                    users_table.c.created_at,
                ).where(users_table.c.id == user_id)
            )
            row = result.mappings().first()
        if row is None:
            return None
        return UserPublic(id=row["id"], email=row["email"], created_at=row["created_at"])


class SessionRepository:
    """SQL implementation of the session store."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def create(self, session: Session) -> Session:
        async with self.engine.begin() as conn:
            await conn.execute(insert(sessions_table).values(**session.to_row()))
        return session

    async def get(self, session_id: str) -> Optional[Session]:
        async with self.engine.connect() as conn:
            result = await conn.execute(
                select(sessions_table).where(sessions_table.c.id == session_id)
            )
            row = result.mappings().first()
        if row is None:
            return None
        return Session.from_row(row)

    async def delete(self, session_id: str) -> None:
        """Delete a session. Deleting a missing session is not an error."""
        async with self.engine.begin() as conn:
            await conn.execute(
                delete(sessions_table).where(sessions_table.c.id == session_id)
            )
