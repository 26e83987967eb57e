"""
TASKFLOW - Security Validation

Startup checks for deployment settings that weaken session security.
"""

import warnings

from taskflow.config import settings

# KiB; lowest Argon2id memory cost in common guidance
MIN_PASSWORD_MEMORY_COST = 19456


def validate_security_config() -> None:
    """
    Validate security configuration on startup.

    Issues warnings for insecure configurations but does not crash the application
    (to allow tests and development to run).
    """
    if settings.is_production and not settings.COOKIE_SECURE:
        warnings.warn(
            "SECURITY WARNING: Session cookie is sent without the Secure attribute in production. "
            "Set COOKIE_SECURE=true when serving over HTTPS.",
            UserWarning,
        )

    if settings.COOKIE_SAMESITE.lower() == "none" and not settings.COOKIE_SECURE:
        warnings.warn(
            "SECURITY WARNING: COOKIE_SAMESITE=none requires COOKIE_SECURE=true; "
            "browsers will reject the session cookie.",
            UserWarning,
        )

    if settings.is_production and settings.PASSWORD_MEMORY_COST < MIN_PASSWORD_MEMORY_COST:
        warnings.warn(
            "SECURITY WARNING: PASSWORD_MEMORY_COST is below "
            f"{MIN_PASSWORD_MEMORY_COST} KiB; password hashes are cheap to brute-force.",
            UserWarning,
        )
