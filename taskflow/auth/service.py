import logging
from typing import Optional

from taskflow.auth.models import User, UserPublic
from taskflow.auth.passwords import (
    DUMMY_SALT,
    constant_time_equal_hex,
    derive_password_hash,
    generate_password_hash,
)
from taskflow.auth.repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Authentication service: signup and credential checks."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def register_user(self, email: str, password: str) -> User:
        """Register a new user. Raises ConflictError if the email is taken."""
        hashed = generate_password_hash(password)
        user = User.create(email=email, password_hash=hashed.password_hash, salt=hashed.salt)
        await self.repository.create(user)
        logger.info("Registered user %s", user.id)
        return user

    async def authenticate_user(self, email: str, password: str) -> Optional[User]:
        """Authenticate user by email and password.

        Unknown email and wrong password both return None.
        """
        user = await self.repository.get_by_email(email)
        if user is None:
            derive_password_hash(password, DUMMY_SALT)
            logger.info("Login failed: unknown email")
            return None
        candidate = derive_password_hash(password, user.salt)
        if not constant_time_equal_hex(candidate, user.password_hash):
            logger.info("Login failed for user %s", user.id)
            return None
        return user

    async def get_public_user(self, user_id: str) -> Optional[UserPublic]:
        return await self.repository.get_public(user_id)
