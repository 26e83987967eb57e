
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Mapping

from taskflow.database import utcnow
from taskflow.identifiers import new_id


@dataclass
class UserPublic:
    """The part of a user that may leave the storage layer."""

    id: str
    email: str
    created_at: datetime


@dataclass
class User:
    """User entity for authentication."""

    id: str
    email: str
    password_hash: str
    salt: str
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def create(cls, email: str, password_hash: str, salt: str) -> "User":
        """Create a new user with generated ID."""
        return cls(
            id=new_id(),
            email=email,
            password_hash=password_hash,
            salt=salt,
            created_at=utcnow(),
        )

    def to_row(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "password_hash": self.password_hash,
            "salt": self.salt,
            "created_at": self.created_at,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        return cls(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            salt=row["salt"],
            created_at=row["created_at"],
        )

    def public(self) -> UserPublic:
        return UserPublic(id=self.id, email=self.email, created_at=self.created_at)


@dataclass
class Session:
    """Server-side session. The id doubles as the bearer token in the cookie."""

    id: str
    user_id: str
    expires_at: datetime
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def create(cls, user_id: str, ttl: timedelta, now: datetime) -> "Session":
        return cls(
            id=new_id(),
            user_id=user_id,
            expires_at=now + ttl,
            created_at=now,
        )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def to_row(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "expires_at": self.expires_at,
            "created_at": self.created_at,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Session":
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            expires_at=row["expires_at"],
            created_at=row["created_at"],
        )
