"""
Tests für /api/v1/auth – Login, /me.
"""
import pytest
from tests.conftest import auth_headers


BASE = "/api/v1/auth"


# ── Login ─────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_login_valid(client, adult):
    resp = await client.post(f"{BASE}/login", json={
        "email": "adult@test.de",
        "password": "testpass123",
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["access_token"]
    assert data["token_type"] == "bearer"


@pytest.mark.asyncio
async def test_login_wrong_password(client, adult):
    resp = await client.post(f"{BASE}/login", json={
        "email": "adult@test.de",
        "password": "wrongpassword",
    })
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_login_unknown_email(client):
    resp = await client.post(f"{BASE}/login", json={
        "email": "nobody@test.de",
        "password": "testpass123",
    })
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_login_inactive_account(client, db, adult):
    adult.is_active = False
    await db.commit()

    resp = await client.post(f"{BASE}/login", json={
        "email": "adult@test.de",
        "password": "testpass123",
    })
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_login_token_works_for_time_endpoints(client, adult):
    login = await client.post(f"{BASE}/login", json={
        "email": "adult@test.de",
        "password": "testpass123",
    })
    token = login.json()["access_token"]

    resp = await client.get("/api/v1/time/status", headers=auth_headers(token))
    assert resp.status_code == 200


# ── /me ───────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_me(client, adult_token):
    resp = await client.get(f"{BASE}/me", headers=auth_headers(adult_token))
    assert resp.status_code == 200
    data = resp.json()
    assert data["email"] == "adult@test.de"
    assert data["birth_date"] == "1990-01-01"


@pytest.mark.asyncio
async def test_me_without_token(client):
    resp = await client.get(f"{BASE}/me")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_me_for_deactivated_employee(client, db, adult, adult_token):
    adult.is_active = False
    await db.commit()

    resp = await client.get(f"{BASE}/me", headers=auth_headers(adult_token))
    assert resp.status_code == 401
