"""
TASKFLOW - Authentication Module

Signup/login with server-side sessions carried in an HttpOnly cookie.
"""

from taskflow.auth.router import router as auth_router
from taskflow.auth.dependencies import get_current_user_id

__all__ = ["auth_router", "get_current_user_id"]
