"""
TASKFLOW - Password Hashing

Salted, memory-hard key derivation (Argon2id) and constant-time
comparison of the hex-encoded digests.
"""

import hmac
import secrets
from typing import NamedTuple, Optional

from argon2.low_level import Type, hash_secret_raw

from taskflow.config import settings

SALT_BYTES = 16
HASH_BYTES = 32

# Derived against when the email is unknown so that branch costs the same
DUMMY_SALT = "00" * SALT_BYTES


class PasswordHash(NamedTuple):
    salt: str
    password_hash: str


def derive_password_hash(
    password: str,
    salt_hex: str,
    time_cost: Optional[int] = None,
    memory_cost: Optional[int] = None,
) -> str:
    """Derive a fixed-length hex digest from a password and a hex salt.

    Deterministic for the same password, salt and cost parameters.
    ``memory_cost`` is in KiB.
    """
    digest = hash_secret_raw(
        secret=password.encode("utf-8"),
        salt=bytes.fromhex(salt_hex),
        time_cost=time_cost or settings.PASSWORD_TIME_COST,
        memory_cost=memory_cost or settings.PASSWORD_MEMORY_COST,
        parallelism=settings.PASSWORD_PARALLELISM,
        hash_len=HASH_BYTES,
        type=Type.ID,
    )
    return digest.hex()


def generate_password_hash(password: str) -> PasswordHash:
    """Hash a password under a fresh random salt."""
    salt_hex = secrets.token_hex(SALT_BYTES)
    return PasswordHash(salt=salt_hex, password_hash=derive_password_hash(password, salt_hex))


def constant_time_equal_hex(a_hex: str, b_hex: str) -> bool:
    """Compare two hex strings as bytes without an early exit on the first difference."""
    try:
        a = bytes.fromhex(a_hex)
        b = bytes.fromhex(b_hex)
    except ValueError:
        return False
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)
