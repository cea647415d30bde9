"""Tests for registration, login and account preferences"""

import pytest
from fastapi import HTTPException
from httpx import AsyncClient

from restaurant_api.api.auth import require_role
from restaurant_api.models.user import User, UserRole
from restaurant_api.security import AuthContext, create_access_token, create_refresh_token, decode_token


@pytest.mark.asyncio
async def test_register(client: AsyncClient):
    response = await client.post(
        "/auth/register",
        json={
            "username": "newcustomer",
            "password": "secret123",
            "email": "new@example.com",
            "phone": "01099999999",
            "address": "22 Corniche Road, Alexandria",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Registration successful!"
    assert isinstance(data["user_id"], int)


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient, test_user):
    response = await client.post(
        "/auth/register",
        json={"username": "testcustomer", "password": "secret123", "email": "other@example.com"},
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_register_requires_valid_email(client: AsyncClient):
    response = await client.post(
        "/auth/register",
        json={"username": "newcustomer", "password": "secret123", "email": "nope"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login(client: AsyncClient, test_user):
    response = await client.post(
        "/auth/login",
        data={"username": "testcustomer", "password": "testpass123"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert decode_token(data["access_token"], "access") is not None
    assert decode_token(data["refresh_token"], "refresh") is not None


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_user):
    response = await client.post(
        "/auth/login",
        data={"username": "testcustomer", "password": "wrong"},
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid username or password"


@pytest.mark.asyncio
async def test_me(authenticated_client: AsyncClient):
    response = await authenticated_client.get("/auth/me")

    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "testcustomer"
    assert data["role"] == "customer"
    assert "hashed_password" not in data


@pytest.mark.asyncio
async def test_me_requires_token(client: AsyncClient):
    response = await client.get("/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_refresh_token_cannot_be_used_as_access_token(client: AsyncClient, test_user):
    token = create_refresh_token(test_user)

    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_preferences(authenticated_client: AsyncClient, test_menu_items):
    favorite_id = test_menu_items[1].id

    response = await authenticated_client.put(
        "/auth/me/preferences",
        json={"favorite_item": favorite_id, "delivery_notes": "Ring twice", "newsletter_subscription": True},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Preferences updated successfully!"

    me = (await authenticated_client.get("/auth/me")).json()
    assert me["favorite_item"] == favorite_id
    assert me["delivery_notes"] == "Ring twice"
    assert me["newsletter_subscription"] is True


@pytest.mark.asyncio
async def test_update_preferences_unknown_favorite(authenticated_client: AsyncClient, test_menu_items):
    response = await authenticated_client.put(
        "/auth/me/preferences",
        json={"favorite_item": 99999},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_refresh_and_logout(client: AsyncClient, test_user):
    login = await client.post(
        "/auth/login",
        data={"username": "testcustomer", "password": "testpass123"},
    )
    tokens = login.json()

    refreshed = await client.post("/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert refreshed.status_code == 200
    new_tokens = refreshed.json()

    headers = {"Authorization": f"Bearer {new_tokens['access_token']}"}
    logout = await client.post("/auth/logout", headers=headers)
    assert logout.status_code == 200
    assert logout.json()["message"] == "Logout successful!"

    # Refresh token is revoked on logout
    rejected = await client.post("/auth/refresh", json={"refresh_token": new_tokens["refresh_token"]})
    assert rejected.status_code == 401


@pytest.fixture
def detached_admin():
    return User(id=7, username="admin", email="admin@example.com", hashed_password="x", role=UserRole.ADMIN)


def test_auth_context_from_user(detached_admin):
    context = AuthContext.from_user(detached_admin)

    assert context.is_admin is True
    assert context.username == "admin"


def test_access_token_round_trip(detached_admin):
    token = create_access_token(detached_admin)

    assert decode_token(token, "access") == 7
    assert decode_token(token, "refresh") is None
    assert decode_token("garbage", "access") is None


def test_role_levels():
    customer = AuthContext(user_id=1, username="c", email="c@example.com", role=UserRole.CUSTOMER)
    admin = AuthContext(user_id=2, username="a", email="a@example.com", role=UserRole.ADMIN)

    assert customer.has_role(UserRole.CUSTOMER) is True
    assert customer.has_role(UserRole.ADMIN) is False
    assert admin.has_role(UserRole.CUSTOMER) is True
    assert admin.has_role(UserRole.ADMIN) is True


@pytest.mark.asyncio
async def test_require_role_uses_role_levels():
    customer = AuthContext(user_id=1, username="c", email="c@example.com", role=UserRole.CUSTOMER)
    admin = AuthContext(user_id=2, username="a", email="a@example.com", role=UserRole.ADMIN)

    assert await require_role(UserRole.CUSTOMER)(context=customer) == customer
    assert await require_role(UserRole.CUSTOMER)(context=admin) == admin
    assert await require_role(UserRole.ADMIN)(context=admin) == admin

    with pytest.raises(HTTPException) as exc_info:
        await require_role(UserRole.ADMIN)(context=customer)
    assert exc_info.value.status_code == 403
