"""
TASKFLOW - Session Manager

Issues, resolves and revokes server-side sessions.

Lifecycle: a session is Active until ``expires_at``; after that it is
Expired and gets deleted the next time it is looked up. Logout revokes
(deletes) it immediately. Expiry is fixed from creation and is never
extended by later requests.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from taskflow.auth.models import Session
from taskflow.auth.repository import SessionRepository
from taskflow.config import settings
from taskflow.errors import AuthError

logger = logging.getLogger(__name__)


def _is_well_formed(session_id: str) -> bool:
    try:
        uuid.UUID(session_id)
    except ValueError:
        return False
    return True


class SessionManager:
    """Maps session tokens to user ids."""

    def __init__(
        self,
        repository: SessionRepository,
        clock: Optional[Callable[[], datetime]] = None,
        ttl: Optional[timedelta] = None,
    ):
        """
        Initialize the session manager.

        Args:
            repository: Session repository implementation
            clock: Optional clock function for testing (returns current datetime)
            ttl: Session lifetime, defaults to SESSION_TTL_DAYS
        """
        self.repository = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.ttl = ttl or timedelta(days=settings.SESSION_TTL_DAYS)

    def _now(self) -> datetime:
        return self._clock()

    async def issue(self, user_id: str) -> str:
        """Create a session for the user and return its id."""
        session = Session.create(user_id=user_id, ttl=self.ttl, now=self._now())
        await self.repository.create(session)
        return session.id

    async def resolve(self, session_id: Optional[str]) -> str:
        """Return the user id behind a session token or raise AuthError."""
        if not session_id or not _is_well_formed(session_id):
            raise AuthError()

        session = await self.repository.get(session_id)
        if session is None:
            raise AuthError()

        if session.is_expired(self._now()):
            logger.info("Deleting expired session for user %s", session.user_id)
            await self.repository.delete(session.id)
            raise AuthError()

        return session.user_id

    async def revoke(self, session_id: Optional[str]) -> None:
        """Delete the session if there is one."""
        if not session_id or not _is_well_formed(session_id):
            return
        await self.repository.delete(session_id)
