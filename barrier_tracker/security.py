"""
BARRIER TRACKER Planner API - Security Validation

Startup checks for insecure configuration.
"""

import warnings

from barrier_tracker.config import settings

DEFAULT_JWT_SECRET = "dev-secret-key-change-in-production"


def validate_security_config() -> None:
    """
    Validate security configuration on startup.

    Issues warnings for insecure configurations but does not crash the application
    (to allow tests and development to run).
    """
    if settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET and settings.is_production:
        warnings.warn(
            "SECURITY WARNING: Using default JWT_SECRET_KEY in production. "
            "Set JWT_SECRET_KEY to the auth provider's signing secret.",
            UserWarning,
        )

    if "*" in str(settings.CORS_ORIGINS):
        warnings.warn(
            "SECURITY WARNING: CORS wildcard (*) detected. "
            "Set specific origins via CORS_ORIGINS.",
            UserWarning,
        )

    if len(settings.JWT_SECRET_KEY) < 32 and settings.is_production:
        warnings.warn(
            "SECURITY WARNING: JWT_SECRET_KEY is too short for production. "
            "Use at least 32 characters.",
            UserWarning,
        )
