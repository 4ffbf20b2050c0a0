import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_user_and_login(client: AsyncClient, auth_headers, test_data):
    officer = test_data.record("users", "officer")

    response = await client.post("/users", json=officer, headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["email"] == officer["email"]
    assert data["is_active"] is True
    assert "password_hash" not in data

    login = await client.post(
        "/auth/login", json={"email": officer["email"], "password": officer["password"]}
    )
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_duplicate_email(client: AsyncClient, auth_headers, test_data):
    admin = test_data.get("admin")

    response = await client.post(
        "/users",
        json={"email": admin["email"], "full_name": "Copy", "password": "Whatever123!"},
        headers=auth_headers,
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_short_password_rejected(client: AsyncClient, auth_headers):
    response = await client.post(
        "/users",
        json={"email": "short@example.com", "full_name": "Short", "password": "short"},
        headers=auth_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_deactivated_user_cannot_log_in(client: AsyncClient, auth_headers, test_data):
    clerk = test_data.record("users", "clerk")
    created = (await client.post("/users", json=clerk, headers=auth_headers)).json()

    updated = await client.put(
        f"/users/{created['id']}", json={"is_active": False}, headers=auth_headers
    )
    assert updated.status_code == 200
    assert updated.json()["is_active"] is False

    login = await client.post(
        "/auth/login", json={"email": clerk["email"], "password": clerk["password"]}
    )
    assert login.status_code == 403


@pytest.mark.asyncio
async def test_password_change_takes_effect(client: AsyncClient, auth_headers, test_data):
    clerk = test_data.record("users", "clerk")
    created = (await client.post("/users", json=clerk, headers=auth_headers)).json()

    await client.put(
        f"/users/{created['id']}", json={"password": "BrandNew123!"}, headers=auth_headers
    )

    old = await client.post("/auth/login", json={"email": clerk["email"], "password": clerk["password"]})
    new = await client.post("/auth/login", json={"email": clerk["email"], "password": "BrandNew123!"})
    assert old.status_code == 401
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_list_get_delete(client: AsyncClient, auth_headers, test_data):
    officer = test_data.record("users", "officer")
    created = (await client.post("/users", json=officer, headers=auth_headers)).json()

    listed = await client.get("/users?page=1&limit=1", headers=auth_headers)
    assert listed.status_code == 200
    assert listed.json()["pagination"]["total_items"] == 2
    assert listed.json()["pagination"]["has_next"] is True
    assert len(listed.json()["data"]) == 1

    fetched = await client.get(f"/users/{created['id']}", headers=auth_headers)
    assert fetched.json()["full_name"] == officer["full_name"]

    assert (await client.delete(f"/users/{created['id']}", headers=auth_headers)).status_code == 204
    missing = await client.get(f"/users/{created['id']}", headers=auth_headers)
    assert missing.status_code == 404
