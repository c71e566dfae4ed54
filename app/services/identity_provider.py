# app/services/identity_provider.py
"""Google Sign-In ID token verification.

Tokens are RS256 JWTs signed with one of Google's rotating keys. A token is
only trusted after its signature, audience, issuer and expiry all check out.
"""

import logging
import time
import traceback
from typing import Optional

import requests
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.exceptions import (
    IdentityProviderUnavailableException,
    TokenExpiredException,
    TokenInvalidException,
)
from app.schemas.auth_schema import ExternalIdentity

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


def _is_verified(flag) -> bool:
    # older tokens carry the flag as the string "true"
    return flag is True or flag == "true"


class GoogleIdentityProvider:

    def __init__(
        self,
        client_id: Optional[str] = None,
        certs_url: Optional[str] = None,
        cache_seconds: Optional[int] = None,
        timeout: Optional[int] = None,
    ):
        self.client_id = client_id if client_id is not None else settings.GOOGLE_CLIENT_ID
        self.certs_url = certs_url or settings.GOOGLE_CERTS_URL
        self.cache_seconds = cache_seconds if cache_seconds is not None else settings.GOOGLE_CERTS_CACHE_SECONDS
        self.timeout = timeout or settings.GOOGLE_REQUEST_TIMEOUT
        self._keys: Optional[dict] = None
        self._keys_fetched_at = 0.0

    # ------------------ Signing Keys ------------------ #

    def _download_keys(self) -> dict:
        response = requests.get(self.certs_url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    async def fetch_signing_keys(self) -> dict:
        """Return Google's JWKS, refreshed once the cache lifetime has passed."""
        now = time.monotonic()
        if self._keys is not None and now - self._keys_fetched_at < self.cache_seconds:
            return self._keys
        try:
            self._keys = await run_in_threadpool(self._download_keys)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Could not fetch Google signing keys: {e}\n{traceback.format_exc()}")
            raise IdentityProviderUnavailableException()
        self._keys_fetched_at = now
        return self._keys

    # ------------------ Verification ------------------ #

    async def verify(self, token: str) -> ExternalIdentity:
        if not self.client_id:
            logger.error("GOOGLE_CLIENT_ID is not configured; rejecting Google token.")
            raise TokenInvalidException("Google sign-in is not configured.")

        keys = await self.fetch_signing_keys()
        try:
            claims = jwt.decode(
                token,
                keys,
                algorithms=["RS256"],
                audience=self.client_id,
                issuer=GOOGLE_ISSUERS,
                options={"verify_at_hash": False},
            )
        except ExpiredSignatureError:
            logger.warning("Expired Google token rejected.")
            raise TokenExpiredException()
        except JWTError as e:
            logger.warning(f"Google token rejected: {e}")
            raise TokenInvalidException()

        subject = claims.get("sub")
        if not subject:
            raise TokenInvalidException()

        # unverified emails do not identify anyone; fall back to the subject
        email = claims.get("email") if _is_verified(claims.get("email_verified")) else None
        identifier = email or subject
        try:
            return ExternalIdentity(
                subject=subject,
                identifier=identifier,
                name=claims.get("name") or identifier,
                email=email,
            )
        except ValidationError:
            raise TokenInvalidException()
