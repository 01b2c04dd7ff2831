"""End-to-end tests for sign up, sign in and password reset."""

import pytest

from accounts.domain.service import Mailer
from tests.harness import create_api_fixture

# E2E test fixture
api = create_api_fixture()

SIGN_UP = {
    "email": "alice@example.com",
    "password": "secret-password",
    "first_name": "Alice",
    "last_name": "Smith",
}


def token_from(message) -> str:
    """Last path segment of the link in a notification email."""
    return message.body.strip().rsplit("/", 1)[-1]


async def sign_up_and_confirm(api) -> None:
    response = await api.client.post("/auth/signup", json=SIGN_UP)
    assert response.status_code == 201
    mailer = await api.get(Mailer)
    token = token_from(mailer.last_to("alice@example.com"))
    response = await api.client.post("/auth/signup/confirm", json={"token": token})
    assert response.status_code == 200


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, api):
        response = await api.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSignUpFlow:
    """Sign up by email, confirm, then sign in."""

    @pytest.mark.asyncio
    async def test_sign_up_confirm_login(self, api):
        # Sign up
        response = await api.client.post("/auth/signup", json=SIGN_UP)
        assert response.status_code == 201
        assert response.json()["status"] == "wait"

        # Not confirmed yet
        response = await api.client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "secret-password"},
        )
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "User is not confirmed."

        # Confirm through the emailed link
        mailer = await api.get(Mailer)
        token = token_from(mailer.last_to("alice@example.com"))
        response = await api.client.post("/auth/signup/confirm", json={"token": token})
        assert response.status_code == 200
        assert response.json()["status"] == "active"

        # Sign in sets the session cookie
        response = await api.client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "secret-password"},
        )
        assert response.status_code == 200
        assert "auth_token" in response.cookies

        response = await api.client.get("/auth/me")
        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_sign_up_conflicts(self, api):
        await api.client.post("/auth/signup", json=SIGN_UP)

        response = await api.client.post("/auth/signup", json=SIGN_UP)

        assert response.status_code == 409
        assert response.json()["error"]["message"] == "User already exists."

    @pytest.mark.asyncio
    async def test_unknown_confirm_token_not_found(self, api):
        response = await api.client.post(
            "/auth/signup/confirm", json={"token": "no-such-token"}
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, api):
        response = await api.client.post(
            "/auth/signup", json={**SIGN_UP, "email": "not-an-email"}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_me_without_cookie_unauthorized(self, api):
        response = await api.client.get("/auth/me")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, api):
        await sign_up_and_confirm(api)
        await api.client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "secret-password"},
        )

        response = await api.client.post("/auth/logout")
        assert response.status_code == 204

        response = await api.client.get("/auth/me")
        assert response.status_code == 401


class TestNetworkAuth:
    @pytest.mark.asyncio
    async def test_network_sign_up_then_sign_in(self, api):
        payload = {
            "network": "github",
            "identity": "42",
            "first_name": "Git",
            "last_name": "Hub",
        }

        first = await api.client.post("/auth/network", json=payload)
        second = await api.client.post("/auth/network", json=payload)

        assert first.status_code == 200
        assert first.json()["created"] is True
        assert second.json()["created"] is False
        assert second.json()["user_id"] == first.json()["user_id"]

        response = await api.client.get("/auth/me")
        assert response.json()["networks"] == [{"network": "github", "identity": "42"}]


class TestPasswordReset:
    @pytest.mark.asyncio
    async def test_reset_flow(self, api):
        await sign_up_and_confirm(api)

        response = await api.client.post(
            "/auth/reset", json={"email": "alice@example.com"}
        )
        assert response.status_code == 204

        # A second request while the token is valid conflicts
        response = await api.client.post(
            "/auth/reset", json={"email": "alice@example.com"}
        )
        assert response.status_code == 409

        mailer = await api.get(Mailer)
        token = token_from(mailer.last_to("alice@example.com"))
        response = await api.client.post(
            "/auth/reset/confirm", json={"token": token, "password": "brand-new-pass"}
        )
        assert response.status_code == 204

        old = await api.client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "secret-password"},
        )
        new = await api.client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "brand-new-pass"},
        )
        assert old.status_code == 401
        assert new.status_code == 200
