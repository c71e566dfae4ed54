import logging
from datetime import timedelta
from typing import Optional

from starlette.concurrency import run_in_threadpool

from app.repositories.user_repo import UserRepository
from app.core.security import hash_password, verify_password, create_access_token, unusable_password
from app.core.config import settings
from app.core.exceptions import (
    IdentifierTakenException,
    InvalidCredentialsException,
    UserNotFoundException,
)
from app.services.identity_provider import GoogleIdentityProvider

logger = logging.getLogger(__name__)

EXTERNAL_ADDRESS_PLACEHOLDER = "Not provided"


def to_profile(user: dict) -> dict:
    """Public view of a user row; the password hash never leaves this layer."""
    return {
        "name": user["name"],
        "phone": user["phone"],
        "address": user["address"],
    }


class AuthService:
    def __init__(self, user_repo: UserRepository, identity_provider: Optional[GoogleIdentityProvider] = None):
        self.user_repo = user_repo
        self.identity_provider = identity_provider

    async def register(self, name: str, phone: str, password: str, address: str) -> dict:
        existing = await self.user_repo.get_by_phone(phone)
        if existing:
            logger.warning(f"Registration attempt with existing phone: {phone}")
            raise IdentifierTakenException("phone number")

        hashed_password = await run_in_threadpool(hash_password, password)
        user_data = {
            "phone": phone,
            "name": name,
            "hashed_password": hashed_password,
            "address": address,
        }
        try:
            created = await self.user_repo.create(user_in=user_data)
        except ValueError:
            raise IdentifierTakenException("phone number")
        logger.info(f"New user {phone} registered.")
        return to_profile(created)

    async def login(self, phone: str, password: str) -> dict:
        user = await self.user_repo.get_by_phone(phone)
        if not user:
            logger.warning(f"Login attempt for unknown phone: {phone}")
            raise UserNotFoundException()
        matches = await run_in_threadpool(verify_password, password, user.get("hashed_password", ""))
        if not matches:
            logger.warning(f"Failed login attempt for phone: {phone}")
            raise InvalidCredentialsException()
        return to_profile(user)

    async def login_with_external_token(self, token: str) -> dict:
        if self.identity_provider is None:
            raise RuntimeError("No identity provider configured for AuthService")

        identity = await self.identity_provider.verify(token)
        user = await self.user_repo.get_by_phone(identity.identifier)
        if user:
            return to_profile(user)

        try:
            user = await self.user_repo.create(user_in={
                "phone": identity.identifier,
                "name": identity.name,
                "hashed_password": unusable_password(),
                "address": EXTERNAL_ADDRESS_PLACEHOLDER,
            })
        except ValueError:
            # registered by a concurrent request in the meantime
            user = await self.user_repo.get_by_phone(identity.identifier)
            if user is None:
                raise
        else:
            logger.info(f"New Google user {identity.identifier} registered.")
        return to_profile(user)

    async def get_profile(self, phone: str) -> dict:
        user = await self.user_repo.get_by_phone(phone)
        if not user:
            raise UserNotFoundException()
        return to_profile(user)

    def create_token_for_user(self, user: dict) -> str:
        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        return create_access_token(subject=str(user["phone"]), expires_delta=access_token_expires)
