"""
TASKFLOW - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field, StrictStr, field_validator

from taskflow.auth.models import UserPublic
from taskflow.schemas import CamelModel


def _normalize_email(value: str) -> str:
    email = value.strip().lower()
    if not email:
        raise ValueError("email is required")
    return email


class SignupRequest(BaseModel):
    """Request schema for user signup."""

    email: StrictStr
    password: StrictStr = Field(..., min_length=8)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: StrictStr
    password: StrictStr = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class UserResponse(CamelModel):
    """Public user information response."""

    id: str
    email: str
    created_at: datetime

    @classmethod
    def from_public(cls, user: UserPublic) -> "UserResponse":
        return cls(id=user.id, email=user.email, created_at=user.created_at)


class UserEnvelope(BaseModel):
    user: UserResponse
