"""Security helpers."""
from .secrets import MissingSecretError, is_placeholder, require_secret, token_signing_secret

__all__ = ["MissingSecretError", "is_placeholder", "require_secret", "token_signing_secret"]
