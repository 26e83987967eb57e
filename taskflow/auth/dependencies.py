from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlalchemy.ext.asyncio import AsyncEngine

from taskflow.auth.repository import SessionRepository, UserRepository
from taskflow.auth.service import AuthService
from taskflow.auth.sessions import SessionManager
from taskflow.config import settings
from taskflow.database import get_database


# Session cookie scheme - auto_error=False to handle missing cookies ourselves
cookie_scheme = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

SessionToken = Annotated[Optional[str], Depends(cookie_scheme)]


def get_user_repository(
    engine: Annotated[AsyncEngine, Depends(get_database)]
) -> UserRepository:
    return UserRepository(engine)


def get_session_repository(
    engine: Annotated[AsyncEngine, Depends(get_database)]
) -> SessionRepository:
    return SessionRepository(engine)


def get_auth_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)]
) -> AuthService:
    """Dependency to get AuthService instance with the SQL user repository."""
    return AuthService(repository)


def get_session_manager(
    repository: Annotated[SessionRepository, Depends(get_session_repository)]
) -> SessionManager:
    return SessionManager(repository)


async def get_current_user_id(
    session_id: SessionToken,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> str:
    """Resolve the session cookie to a user id; raises AuthError (401) otherwise."""
    return await session_manager.resolve(session_id)


# Type alias for cleaner dependency injection
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
