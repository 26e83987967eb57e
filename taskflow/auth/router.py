"""
TASKFLOW - Authentication Router

Endpoints for signup, login, logout and current user info.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from taskflow.auth.dependencies import (
    CurrentUserId,
    SessionToken,
    get_auth_service,
    get_session_manager,
)
from taskflow.auth.schemas import (
    LoginRequest,
    SignupRequest,
    UserEnvelope,
    UserResponse,
)
from taskflow.auth.service import AuthService
from taskflow.auth.sessions import SessionManager
from taskflow.config import settings
from taskflow.errors import AuthError
from taskflow.schemas import OkResponse


router = APIRouter(tags=["Authentication"])


def set_session_cookie(response: Response, session_id: str, session_manager: SessionManager) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=int(session_manager.ttl.total_seconds()),
        path="/",
        secure=settings.COOKIE_SECURE,
        httponly=True,
        samesite=settings.COOKIE_SAMESITE,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        secure=settings.COOKIE_SECURE,
        httponly=True,
        samesite=settings.COOKIE_SAMESITE,
    )


@router.post(
    "/signup",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account and start a session",
)
async def signup(
    request: SignupRequest,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> UserEnvelope:
    """
    Register a new user with email and password.

    - Email is matched case-insensitively
    - Password must be at least 8 characters
    """
    user = await auth_service.register_user(email=request.email, password=request.password)
    session_id = await session_manager.issue(user.id)
    set_session_cookie(response, session_id, session_manager)
    return UserEnvelope(user=UserResponse.from_public(user.public()))


@router.post(
    "/login",
    response_model=OkResponse,
    summary="Login and start a session",
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> OkResponse:
    user = await auth_service.authenticate_user(email=request.email, password=request.password)
    if user is None:
        raise AuthError("Invalid email or password")

    session_id = await session_manager.issue(user.id)
    set_session_cookie(response, session_id, session_manager)
    return OkResponse()


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="End the current session",
)
async def logout(
    session_id: SessionToken,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> Response:
    """Revoke the session named by the cookie, if any, and clear the cookie."""
    await session_manager.revoke(session_id)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response)
    return response


@router.get(
    "/me",
    response_model=UserEnvelope,
    summary="Get current user info",
)
async def get_me(
    user_id: CurrentUserId,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserEnvelope:
    user = await auth_service.get_public_user(user_id)
    if user is None:
        raise AuthError()
    return UserEnvelope(user=UserResponse.from_public(user))
