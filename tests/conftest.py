"""Shared fixtures: a throwaway SQLite schema and principal-scoped clients."""
from __future__ import annotations

import os
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

# Ensure the database URL and JWT secret are available before importing application modules.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_sociallink.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-signing-key")

from sociallink.database import Base, SessionLocal, engine  # noqa: E402
from sociallink.main import app  # noqa: E402
from sociallink.services import Principal, get_current_principal  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _create_schema() -> Iterator[None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_database() -> Iterator[None]:
    with SessionLocal() as session:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(delete(table))
        session.commit()
    yield


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def as_user(client: TestClient) -> Callable[..., TestClient]:
    """Return the shared client acting as ``principal_id`` until the next call."""

    def _with_principal(principal_id: str, role: str = "user") -> TestClient:
        principal = Principal(id=principal_id, role=role)

        def _override() -> Principal:
            return principal

        app.dependency_overrides[get_current_principal] = _override
        return client

    return _with_principal
