import asyncio
import os
import time

# settings are read when app.core.config is first imported
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["GOOGLE_CLIENT_ID"] = "vastradaan-test.apps.googleusercontent.com"

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient
from jose import jwk, jwt

from app.api.deps import get_identity_provider
from app.core.config import settings
from app.db import session as db_session
from app.main import app
from app.services.identity_provider import GoogleIdentityProvider

GOOGLE_CLIENT_ID = os.environ["GOOGLE_CLIENT_ID"]


def _rsa_private_pem() -> str:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return private_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()


def _public_jwk(private_pem: str, kid: str) -> dict:
    public = jwk.construct(private_pem, "RS256").public_key().to_dict()
    public["kid"] = kid
    return public


class StaticKeysProvider(GoogleIdentityProvider):
    """Identity provider that trusts a fixed JWKS instead of downloading Google's."""

    def __init__(self, jwks: dict, client_id: str = GOOGLE_CLIENT_ID):
        super().__init__(client_id=client_id, certs_url="http://keys.invalid/certs")
        self._jwks = jwks

    async def fetch_signing_keys(self) -> dict:
        return self._jwks


@pytest.fixture(scope="session")
def google_private_pem():
    return _rsa_private_pem()


@pytest.fixture(scope="session")
def rogue_private_pem():
    return _rsa_private_pem()


@pytest.fixture(scope="session")
def google_jwks(google_private_pem):
    return {"keys": [_public_jwk(google_private_pem, "test-key")]}


@pytest.fixture
def identity_provider(google_jwks):
    return StaticKeysProvider(google_jwks)


@pytest.fixture
def make_google_token(google_private_pem):
    def factory(key: str | None = None, **overrides) -> str:
        now = int(time.time())
        claims = {
            "iss": "https://accounts.google.com",
            "aud": GOOGLE_CLIENT_ID,
            "sub": "109876543210",
            "email": "asha@example.com",
            "email_verified": True,
            "name": "Asha Rao",
            "iat": now,
            "exp": now + 3600,
        }
        claims.update(overrides)
        return jwt.encode(claims, key or google_private_pem, algorithm="RS256", headers={"kid": "test-key"})

    return factory


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'vastradaan-test.db'}"


@pytest.fixture
def client(database_url, identity_provider, monkeypatch):
    monkeypatch.setattr(settings, "DATABASE_URL", database_url)
    app.dependency_overrides[get_identity_provider] = lambda: identity_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def run_with_session(database_url):
    """Run ``fn(session)`` against a fresh schema on the test database."""

    def runner(fn):
        async def main():
            await db_session.connect_db_engine(database_url)
            await db_session.init_db()
            try:
                async with db_session.async_session() as session:
                    return await fn(session)
            finally:
                await db_session.close_db_engine()

        return asyncio.run(main())

    return runner


@pytest.fixture
def registered_user(client):
    body = {"name": "Alice", "phone": "9990001111", "password": "pw123", "address": "Addr"}
    response = client.post("/api/register", json=body)
    assert response.status_code == 201
    return body
