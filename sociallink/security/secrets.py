"""Loading of the identity-token signing secret."""
from __future__ import annotations

import os
from typing import Final

__all__ = ["MissingSecretError", "is_placeholder", "require_secret", "token_signing_secret"]

TOKEN_SECRET_ENV: Final[str] = "JWT_SECRET_KEY"

_PLACEHOLDER_VALUES: Final[frozenset[str]] = frozenset(
    {"changeme", "change-me", "placeholder", "secret", "your-key-here"}
)


class MissingSecretError(RuntimeError):
    """Raised when a required secret environment variable is unset or a placeholder."""


def is_placeholder(value: str | None) -> bool:
    if not value:
        return True
    normalized = value.strip().lower()
    return not normalized or normalized in _PLACEHOLDER_VALUES


def require_secret(name: str) -> str:
    value = os.getenv(name)
    if is_placeholder(value):
        raise MissingSecretError(f"Environment variable {name} is required and must not use placeholder defaults")
    return value.strip()


def token_signing_secret() -> str:
    """Return the shared key used to verify identity-provider tokens."""

    return require_secret(TOKEN_SECRET_ENV)
