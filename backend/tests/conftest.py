"""Pytest configuration and fixtures"""
import os
import tempfile
from decimal import Decimal

import pytest

# Settings are read at import time, so the test environment goes in first.
_TMP = tempfile.mkdtemp(prefix="shopcart-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP, "test.db")
os.environ["LOCK_DIR"] = os.path.join(_TMP, "locks")
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["RESET_DB"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from shopcart.db import SessionLocal, init_db  # noqa: E402
from shopcart.main import app  # noqa: E402
from shopcart.services.catalog_service import CatalogService  # noqa: E402
from shopcart.services.user_service import UserService  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Every test starts from an empty schema."""
    init_db(reset=True)
    yield


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_item(db):
    def _make(name="Widget", price="10.00", description=None):
        return CatalogService(db).create_item(name, Decimal(price), description=description)

    return _make


@pytest.fixture
def make_user(db):
    def _make(username="alice", password="s3cret"):
        return UserService(db).register(username, password)

    return _make


@pytest.fixture
def login(client):
    """Register (if needed) and log in over HTTP; returns auth headers."""

    def _login(username="alice", password="s3cret"):
        client.post("/users", json={"username": username, "password": password})
        res = client.post("/users/login", json={"username": username, "password": password})
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}

    return _login
