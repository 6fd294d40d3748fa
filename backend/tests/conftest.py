"""Shared pytest fixtures for the Styled backend.

Provides:
- an in-memory SQLite database recreated for every test
- a signed-in test user and a TestClient with auth and DB dependencies overridden
- fakes for outbound HTTP responses
"""
import os

# Settings are read at import time, so the environment is pinned before styled is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["AUTH_JWT_SECRET"] = "test-secret"
os.environ["AUTH_JWT_AUDIENCE"] = "authenticated"
os.environ["GEMINI_API_KEY"] = ""
os.environ["OPENWEATHER_API_KEY"] = ""
os.environ["REDIS_URL"] = ""
os.environ["USE_CLOUDINARY"] = "false"
os.environ["CLOUDINARY_CLOUD_NAME"] = ""
os.environ["CLOUDINARY_API_KEY"] = ""
os.environ["CLOUDINARY_API_SECRET"] = ""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.orm import Session

from styled.core.auth import get_current_user
from styled.core.rate_limit import limiter
from styled.database import Base, SessionLocal, engine, get_db
from styled.main import app
from styled.models import ClosetItem, User
from styled.utils.cache import clear_all_caches

limiter.enabled = False


# Database fixtures
@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Fresh schema and session for each test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clear_caches() -> Generator[None, None, None]:
    clear_all_caches()
    yield
    clear_all_caches()


# Test user fixtures
@pytest.fixture
def user(db_session: Session) -> User:
    """Profile row for the signed-in test user."""
    user = User(
        id="11111111-1111-1111-1111-111111111111",
        email="stylist@example.com",
        style_vibe=["casual", "elevated basics"],
        color_palette=["navy", "cream"],
        avoid_colors=["orange"],
        budget_level="$$",
        home_city="Chicago",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def make_token():
    """Sign provider-style access tokens with the test secret."""
    def _make(sub: str = "22222222-2222-2222-2222-222222222222", **claims) -> str:
        payload = {"sub": sub, "aud": "authenticated", "email": "new@example.com"}
        payload.update(claims)
        return jwt.encode(payload, "test-secret", algorithm="HS256")
    return _make


# FastAPI test clients
@pytest.fixture
def anon_client(db_session: Session) -> Generator[TestClient, None, None]:
    """Client with the real bearer-token dependency."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client(db_session: Session, user: User) -> Generator[TestClient, None, None]:
    """Client already signed in as the test user."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = lambda: user
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# Closet fixtures
@pytest.fixture
def closet(db_session: Session, user: User) -> dict:
    """A small closet keyed by a short handle."""
    specs = {
        "tee": dict(name="White Cotton T-Shirt", category="top", color="white"),
        "jeans": dict(name="Blue Straight Jeans", category="bottom", color="blue"),
        "sneakers": dict(name="White Leather Sneakers", category="shoes", color="white"),
        "loafers": dict(name="Tan Suede Loafers", category="shoes", color="tan"),
        "dress": dict(name="Black Slip Dress", category="dress", color="black"),
        "coat": dict(name="Camel Wool Coat", category="outerwear", color="camel"),
    }
    items = {}
    for handle, fields in specs.items():
        item = ClosetItem(user_id=user.id, **fields)
        db_session.add(item)
        items[handle] = item
    db_session.commit()
    for item in items.values():
        db_session.refresh(item)
    return items


# Outbound HTTP fakes
class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload=None, text: str = "", content: bytes = b"", headers=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.content = content
        self.headers = headers or {}

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests
            raise requests.HTTPError(f"HTTP {self.status_code}")


@pytest.fixture
def fake_response():
    return FakeResponse
