import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_logout_signs_out(client: AsyncClient, test_data):
    signup = await client.post("/auth/signup", json=test_data.get("signup_payload"))
    headers = {"Authorization": f"Bearer {signup.json()['remember_token']}"}

    response = await client.post("/auth/logout", headers=headers)

    assert response.status_code == 200
    assert response.json()["status"] == "logged_out"

    me = await client.get("/users/me", headers=headers)
    assert me.status_code == 401


@pytest.mark.asyncio
async def test_logout_requires_token(client: AsyncClient):
    response = await client.post("/auth/logout")

    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_logout_with_unknown_token(client: AsyncClient):
    response = await client.post(
        "/auth/logout", headers={"Authorization": "Bearer not-a-real-token"}
    )

    assert response.status_code == 401
