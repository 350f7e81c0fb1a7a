"""Pytest configuration and fixtures."""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Settings are read at import time: configure before importing the app
os.environ["SECRET_KEY"] = "test-secret-key-0123456789abcdef0123456789"
os.environ["DATABASE_URL"] = ""

from traceright.core.rate_limit import limiter
from traceright.core.security import create_session_token
from traceright.db.base import Base
from traceright.db.session import Store, get_store
from traceright.main import app
# Import all models to ensure they're registered with Base.metadata
from traceright.models import *  # noqa: F401,F403
from traceright.models.user import User, UserRole

# Use in-memory SQLite for tests (StaticPool keeps one shared connection)
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def store() -> Generator[Store, None, None]:
    """A connected store with an empty schema."""
    test_store = Store(TEST_DATABASE_URL)
    Base.metadata.create_all(bind=test_store.engine)
    yield test_store
    Base.metadata.drop_all(bind=test_store.engine)
    test_store.dispose()


@pytest.fixture(scope="function")
def degraded_store() -> Store:
    """A store with no connection string: reads degrade, writes fail."""
    return Store(None)


@pytest.fixture(scope="function")
def client(store: Store) -> Generator[TestClient, None, None]:
    """Create a test client with store override."""
    app.dependency_overrides[get_store] = lambda: store
    # Disable rate limiter during tests to avoid flaky failures
    limiter.enabled = False
    # Don't raise server exceptions so we can test error status codes
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    limiter.enabled = True
    app.dependency_overrides.clear()


def _create_user(store: Store, open_id: str, role: UserRole, name: str) -> User:
    with store.session() as db:
        user = User(open_id=open_id, name=name, email=f"{open_id}@example.com", role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user


@pytest.fixture
def admin_user(store: Store) -> User:
    return _create_user(store, "admin-open-id", UserRole.ADMIN, "Admin User")


@pytest.fixture
def regular_user(store: Store) -> User:
    return _create_user(store, "user-open-id", UserRole.USER, "Regular User")


def auth_headers_for(user: User) -> dict:
    """Bearer headers carrying a session token for ``user``."""
    return {"Authorization": f"Bearer {create_session_token(user.open_id, name=user.name or '')}"}


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    return auth_headers_for(admin_user)


@pytest.fixture
def auth_headers(regular_user: User) -> dict:
    """Headers for a signed-in non-admin caller."""
    return auth_headers_for(regular_user)
