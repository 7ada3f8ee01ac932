"""Pytest configuration and shared fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from charapi.config import AppConfig
from charapi.repositories import ROLE_ADMIN
from charapi.server import create_app


TEST_SECRET = "test_secret_key_0123456789abcdefghij"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "adminpass"


# ============================================================================
# Application
# ============================================================================

@pytest.fixture
def config():
    """Config with a known secret and a seeded admin."""
    return AppConfig(
        jwt_secret=TEST_SECRET,
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def app(config):
    """A fresh application; stores are never shared between tests."""
    return create_app(config)


@pytest.fixture
def store(app):
    """The AppState of the app under test."""
    return app.state.store


@pytest.fixture
async def client(app):
    """Create an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================================================
# Authenticated clients
# ============================================================================

class AuthClient:
    """Wraps a client and sends the bearer token with every request."""

    def __init__(self, client, token):
        self.client = client
        self.token = token
        self.headers = {"Authorization": f"Bearer {token}"}

    async def get(self, url, **kwargs):
        kwargs.setdefault("headers", {}).update(self.headers)
        return await self.client.get(url, **kwargs)

    async def post(self, url, **kwargs):
        kwargs.setdefault("headers", {}).update(self.headers)
        return await self.client.post(url, **kwargs)

    async def patch(self, url, **kwargs):
        kwargs.setdefault("headers", {}).update(self.headers)
        return await self.client.patch(url, **kwargs)

    async def delete(self, url, **kwargs):
        kwargs.setdefault("headers", {}).update(self.headers)
        return await self.client.delete(url, **kwargs)


async def login(client, email, password):
    response = await client.post(
        "/auth/login",
        json={"email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
async def user_client(client):
    """Client authenticated as a freshly registered "user"."""
    email, password = "player@example.com", "playerpass"
    response = await client.post(
        "/auth/register",
        json={"email": email, "password": password}
    )
    assert response.status_code == 201
    tokens = await login(client, email, password)
    return AuthClient(client, tokens["accessToken"])


@pytest.fixture
async def admin_client(client, store):
    """Client authenticated as the seeded admin."""
    assert store.users.get_by_email(ADMIN_EMAIL).role == ROLE_ADMIN
    tokens = await login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    return AuthClient(client, tokens["accessToken"])
