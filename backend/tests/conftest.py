"""Pytest fixtures — fresh SQLite database per test."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, build_engine, get_db  # noqa: E402
from app.main import app  # noqa: E402

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = build_engine(SQLITE_URL)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session, closed after the test."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def create_test_user(client: TestClient, name: str = "Test User", email: str = None) -> dict:
    """Helper — POST /api/users and return response JSON."""
    email = email or f"{name.lower().replace(' ', '.')}@example.com"
    resp = client.post("/api/users/", json={"name": name, "email": email})
    assert resp.status_code == 201, resp.text
    return resp.json()


def auth(user: dict) -> dict:
    """Headers identifying ``user`` as the authenticated requester."""
    return {"X-User-Id": user["id"]}


def create_test_event(client: TestClient, organizer: dict, title: str = "Standup",
                      date_time: str = "2026-11-02T09:30:00+00:00",
                      invitees: list = None, **fields) -> dict:
    """Helper — POST /api/events as ``organizer`` and return response JSON."""
    payload = {
        "title": title,
        "dateTime": date_time,
        "invitees": [u["id"] for u in invitees or []],
        **fields,
    }
    resp = client.post("/api/events/", json=payload, headers=auth(organizer))
    assert resp.status_code == 201, resp.text
    return resp.json()
