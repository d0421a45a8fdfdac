"""Utility helpers shared across ORM models."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    """Timezone-aware timestamp with microsecond resolution for ordering."""

    return datetime.now(timezone.utc)


class TimestampMixin:
    """Creation and update timestamps populated on the Python side."""

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


__all__ = ["TimestampMixin", "utcnow"]
