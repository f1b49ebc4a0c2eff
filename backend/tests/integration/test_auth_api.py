"""
Integration tests for password sign-in and the token cookie check.
"""

import pytest

from taskplanner.core.config import Settings
from taskplanner.core.security import create_access_token


@pytest.fixture
def protected(settings):
    settings.TODO_PASSWORD = "secret"
    return settings


@pytest.mark.asyncio
async def test_open_when_password_unset(client):
    response = await client.get("/api/tasks")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_signin_disabled_without_password(client):
    response = await client.post("/api/signin", json={"password": "anything"})

    assert response.status_code == 400
    assert response.json()["error"]


@pytest.mark.asyncio
async def test_tasks_require_token(client, protected):
    response = await client.get("/api/tasks")

    assert response.status_code == 401
    assert response.json()["error"]


@pytest.mark.asyncio
async def test_nextdate_stays_public(client, protected):
    response = await client.get(
        "/api/nextdate", params={"now": "20240110", "date": "20240108", "repeat": "d 10"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_signin_wrong_password(client, protected):
    response = await client.post("/api/signin", json={"password": "guess"})

    assert response.status_code == 401
    assert response.json()["error"]


@pytest.mark.asyncio
async def test_signin_then_access(client, protected):
    response = await client.post("/api/signin", json={"password": "secret"})

    assert response.status_code == 200
    token = response.json()["token"]
    assert token

    client.cookies.set("token", token)
    assert (await client.get("/api/tasks")).status_code == 200


@pytest.mark.asyncio
async def test_token_invalidated_by_password_change(client, protected):
    token = create_access_token(protected)
    protected.TODO_PASSWORD = "rotated"

    client.cookies.set("token", token)
    response = await client.get("/api/tasks")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_signed_with_other_key_rejected(client, protected):
    forged = create_access_token(
        Settings(TODO_PASSWORD="secret", TODO_JWT_SECRET="another-key")
    )

    client.cookies.set("token", forged)
    response = await client.get("/api/tasks")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_garbage_token_rejected(client, protected):
    client.cookies.set("token", "not-a-jwt")

    assert (await client.get("/api/tasks")).status_code == 401
