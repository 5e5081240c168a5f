"""
Shared pytest fixtures.
"""
import os
import time
from typing import Generator

# Settings and the engine are built at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SHOPIFY_API_KEY", "test-api-key")
os.environ.setdefault("SHOPIFY_API_SECRET", "test-api-secret")

import pytest
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.database import Base, get_db
from app.core.config import settings
from app.models.location import Location

SHOP = "s1.myshopify.com"
OTHER_SHOP = "s2.myshopify.com"


def make_session_token(shop: str, **overrides) -> str:
    """Sign a session token the way Shopify does for an embedded app."""
    now = int(time.time())
    claims = {
        "iss": f"https://{shop}/admin",
        "dest": f"https://{shop}",
        "aud": settings.SHOPIFY_API_KEY,
        "sub": "42",
        "exp": now + 60,
        "nbf": now - 5,
        "iat": now - 5,
        "jti": "test-jti",
        "sid": "test-sid",
    }
    claims.update(overrides)
    return jwt.encode(claims, settings.SHOPIFY_API_SECRET, algorithm="HS256")


def auth_headers(shop: str = SHOP) -> dict:
    return {"Authorization": f"Bearer {make_session_token(shop)}"}


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """In-memory SQLite database shared across threads for the test client"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def client(test_db) -> Generator[TestClient, None, None]:
    from main import app

    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_location(test_db):
    """Insert a location directly, bypassing the service."""
    def _make(shop_domain: str = SHOP, **fields) -> Location:
        data = {"name": "Main St", "address": "123 Market St"}
        data.update(fields)
        location = Location(shop_domain=shop_domain, **data)
        test_db.add(location)
        test_db.commit()
        test_db.refresh(location)
        return location
    return _make
