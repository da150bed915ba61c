# tests/conftest.py
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./pytest.db")
os.environ.setdefault("JWT_SECRET", "pytest-secret")

import time

import pytest
from fastapi.testclient import TestClient

from app.auth.tokens import encode_token
from app.core.config import get_settings
from app.core.database import Base, SessionLocal, engine
from app.main import app
from app.ticket.cache import TicketCache, get_ticket_cache


def subject_token(subject_id, roles, settings, ttl=3600):
    now = int(time.time())
    claims = {
        settings.SUBJECT_CLAIM: subject_id,
        settings.ROLES_CLAIM: roles,
        "iat": now,
        "exp": now + ttl,
    }
    if settings.JWT_AUDIENCE:
        claims["aud"] = settings.JWT_AUDIENCE
    if settings.JWT_ISSUER:
        claims["iss"] = settings.JWT_ISSUER
    return encode_token(claims, settings)


@pytest.fixture(autouse=True)
def fresh_state():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    get_ticket_cache().clear()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def cache():
    return TicketCache(max_size=16)


@pytest.fixture
def auth(settings):
    """Headers for a caller: auth("alice", "USER")."""

    def _headers(subject_id, *roles):
        return {"Authorization": "Bearer " + subject_token(subject_id, list(roles), settings)}

    return _headers


@pytest.fixture
def token_for():
    """Signed token factory: token_for("alice", ["USER"], settings)."""
    return subject_token
