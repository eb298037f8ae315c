"""Shared test fixtures for userauth."""

import os
import sqlite3
import tempfile
from datetime import date

import pytest

# Point the app's startup database at a scratch file before anything
# imports userauth.config
os.environ.setdefault(
    "DATABASE_PATH", os.path.join(tempfile.mkdtemp(prefix="userauth-"), "startup.db")
)

from userauth.config import settings
from userauth.schema import SCHEMA_PATH
from userauth.auth.service import AuthService
from userauth.auth.token import JWTSigner
from userauth.db.user import UserOperations


TEST_SECRET = "test-secret-key-for-userauth-suite-0123456789"
TODAY = date(2024, 6, 1)


@pytest.fixture(autouse=True)
def fast_bcrypt():
    """Use the minimum bcrypt cost so the suite stays fast."""
    original = settings.bcrypt_work_factor
    settings.bcrypt_work_factor = 4
    yield
    settings.bcrypt_work_factor = original


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    db.execute("PRAGMA foreign_keys = ON")
    db.executescript(SCHEMA_PATH.read_text())
    db.commit()

    yield db

    db.close()


@pytest.fixture
def store(test_db):
    """SQLite credential store on the in-memory database."""
    return UserOperations(test_db)


@pytest.fixture
def test_secret():
    return TEST_SECRET


@pytest.fixture
def signer(test_secret):
    """JWT signer with a known secret."""
    return JWTSigner(test_secret)


@pytest.fixture
def auth_service(store, signer):
    """AuthService whose clock is pinned to TODAY."""
    return AuthService(store, signer, clock=lambda: TODAY)


@pytest.fixture
def registered_user(auth_service):
    """Register a user and return (stored_user, plain_password)."""
    password = "password"
    user = auth_service.register(
        email="test@test.com",
        password=password,
        name="Test",
        birth_date=date(1990, 1, 1),
    )
    return user, password


@pytest.fixture
def client():
    """Create test client for API testing.

    Each test gets a fresh temp-file database.
    """
    from userauth.db import init_db
    from userauth.main import app

    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(db_path)

    original_db_path = settings.database_path
    settings.database_path = db_path
    try:
        init_db()

        app.config['TESTING'] = True
        with app.test_client() as client:
            yield client

    finally:
        settings.database_path = original_db_path
        if os.path.exists(db_path):
            os.unlink(db_path)
