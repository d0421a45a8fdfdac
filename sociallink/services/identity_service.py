"""Resolution of the caller principal from identity-provider bearer tokens."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ..config import get_settings
from ..security.secrets import MissingSecretError, token_signing_secret

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)

ADMIN_ROLE = "admin"
USER_ROLE = "user"


@dataclass(frozen=True, slots=True)
class Principal:
    """Opaque caller identity; ``id`` is the key used by every store."""

    id: str
    role: str = USER_ROLE

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


@lru_cache(maxsize=1)
def _get_jwt_secret() -> str:
    try:
        return token_signing_secret()
    except MissingSecretError as exc:
        raise RuntimeError(str(exc)) from exc


def create_access_token(principal_id: str, *, role: str = USER_ROLE, expires_minutes: Optional[int] = None) -> str:
    """Create a signed JWT for ``principal_id``, as the identity provider would."""

    settings = get_settings()
    expire_delta = timedelta(minutes=expires_minutes or settings.jwt_expires_minutes)
    now = datetime.now(timezone.utc)
    payload = {"sub": principal_id, "role": role, "exp": now + expire_delta, "iat": now}
    return jwt.encode(payload, _get_jwt_secret(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Principal:
    """Decode and validate a JWT, returning the embedded principal."""

    settings = get_settings()
    try:
        payload = jwt.decode(token, _get_jwt_secret(), algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    role = payload.get("role") or USER_ROLE
    return Principal(id=subject.strip(), role=str(role).lower())


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
) -> Principal:
    """Resolve the authenticated principal from the provided bearer token."""

    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing bearer token")
    return decode_access_token(credentials.credentials)


__all__ = [
    "ADMIN_ROLE",
    "USER_ROLE",
    "Principal",
    "create_access_token",
    "decode_access_token",
    "get_current_principal",
]
