import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from keuzekompas import main
from keuzekompas.core.config import get_settings
from helpers import bearer, register


def test_register_returns_user_and_token(client):
    body = register(client, email="Bob@Example.com", name="Bob")
    assert body["user"]["email"] == "bob@example.com"
    assert body["user"]["name"] == "Bob"
    assert body["user"]["role"] == "user"
    assert "password" not in body["user"]

    claims = jwt.decode(body["token"], get_settings().jwt_secret, algorithms=["HS256"])
    assert claims["sub"] == body["user"]["id"]
    assert claims["email"] == "bob@example.com"
    assert claims["exp"] - claims["iat"] == get_settings().jwt_expires_in


def test_register_duplicate_email_conflicts(client):
    register(client)
    resp = client.post(
        "/auth/register",
        json={"name": "Other", "email": "ALICE@example.com", "password": "another1"},
    )
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Email already exists"


def test_register_short_password_rejected(client):
    resp = client.post("/auth/register", json={"name": "A", "email": "a@example.com", "password": "123"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == "Validation failed"
    assert any("password" in e["loc"] for e in body["errors"])


def test_register_stores_hash_not_password(client, fake_db):
    register(client, password="secret123")
    stored = fake_db["users"].docs[0]
    assert stored["password"] != "secret123"
    assert stored["password"].startswith("$2")


def test_login_then_profile(client):
    register(client)
    resp = client.post("/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    assert resp.status_code == 200
    token = resp.json()["token"]

    profile = client.get("/auth/profile", headers=bearer(token))
    assert profile.status_code == 200
    assert profile.json()["user"]["email"] == "alice@example.com"


def test_login_wrong_password_and_unknown_email_look_the_same(client):
    register(client)
    wrong = client.post("/auth/login", json={"email": "alice@example.com", "password": "nope123"})
    unknown = client.post("/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json()["detail"] == unknown.json()["detail"] == "Invalid credentials"


def test_profile_requires_token(client):
    resp = client.get("/auth/profile")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Missing token"


def test_garbage_token_rejected(client):
    resp = client.get("/auth/profile", headers=bearer("not-a-jwt"))
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_expired_token_rejected(client):
    user = register(client)["user"]
    now = int(time.time())
    token = jwt.encode(
        {"sub": user["id"], "email": user["email"], "iat": now - 100, "exp": now - 10},
        get_settings().jwt_secret,
        algorithm="HS256",
    )
    resp = client.get("/auth/profile", headers=bearer(token))
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token has expired"


def test_token_for_deleted_user_rejected(client, fake_db):
    token = register(client)["token"]
    fake_db["users"].docs.clear()
    resp = client.get("/auth/profile", headers=bearer(token))
    assert resp.status_code == 401
    assert resp.json()["detail"] == "User no longer exists"


def test_logout(client, auth_headers):
    resp = client.post("/auth/logout", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out successfully"}


def test_healthz_reports_database(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["components"]["database"]["status"] == "up"
    assert "X-Request-Id" in resp.headers


def test_production_refuses_to_start_without_jwt_secret(fake_db, monkeypatch):
    monkeypatch.setattr(main._settings, "env", "prod")
    monkeypatch.setattr(main._settings, "jwt_secret", "")
    with pytest.raises(RuntimeError, match="JWT_SECRET"):
        with TestClient(main.app):
            pass
