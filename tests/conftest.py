import os
import sys

# Ensure repo root on sys.path for imports like `keuzekompas...`
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Settings are cached on first use, so these must be set before the app is imported.
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient

from keuzekompas.db import mongo
from keuzekompas.main import app
from fakemongo import FakeDatabase
from helpers import bearer, promote_to_admin, register


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_db(monkeypatch):
    db = FakeDatabase()

    async def _get_raw_database():
        return db

    monkeypatch.setattr(mongo, "get_raw_database", _get_raw_database)
    monkeypatch.setattr(mongo, "_indexes_ready", False)
    return db


@pytest.fixture
def client(fake_db):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    return bearer(register(client)["token"])


@pytest.fixture
def admin_headers(client, fake_db):
    body = register(client, email="admin@example.com", name="Admin")
    promote_to_admin(fake_db, "admin@example.com")
    return bearer(body["token"])
