from __future__ import annotations

import os
from datetime import timedelta
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ.pop("DB_URL", None)
    os.environ["JWT_SECRET"] = "test-secret"
    os.environ["JWT_ALGORITHM"] = "HS256"

    # Ensure local .env cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"


def reset_database() -> None:
    from jobposts.database import Base, engine
    import jobposts.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def client() -> Any:
    from jobposts.main import create_app

    reset_database()
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db() -> Any:
    from jobposts.database import SessionLocal

    reset_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_token(user_id: str, minutes: int = 5) -> str:
    from jobposts.utils.jwt_handler import create_access_token

    return create_access_token({"sub": user_id}, timedelta(minutes=minutes))


@pytest.fixture()
def auth_headers() -> Callable[[str], dict[str, str]]:
    def _headers(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _headers


@pytest.fixture()
def call_action(client, auth_headers) -> Callable[..., Any]:
    """POST an action as ``user`` (or anonymously when user is None)."""

    def _call(name: str, payload: Any = None, *, user: str | None = "user-1") -> Any:
        headers = auth_headers(user) if user is not None else {}
        if payload is None:
            return client.post(f"/api/_actions/{name}", headers=headers)
        return client.post(f"/api/_actions/{name}", json=payload, headers=headers)

    return _call
