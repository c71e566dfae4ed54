from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    ForbiddenIdentityException,
    MissingFieldsException,
    TokenExpiredException,
    TokenInvalidException,
)
from app.core.security import decode_access_token
from app.db.session import get_db_session
from app.repositories.donation_repo import DonationRepository
from app.repositories.user_repo import UserRepository
from app.schemas.auth_schema import TokenPayload
from app.services.auth_services import AuthService
from app.services.donation_service import DonationService
from app.services.identity_provider import GoogleIdentityProvider
from app.services.tracking_service import TrackingService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

_identity_provider: GoogleIdentityProvider | None = None
_tracking_service: TrackingService | None = None


def require_fields(body, *fields: str) -> None:
    """Reject the request with 400 when any named field is absent or blank."""
    missing = []
    for field in fields:
        value = getattr(body, field, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    if missing:
        raise MissingFieldsException(missing)


def get_identity_provider() -> GoogleIdentityProvider:
    # one instance so the signing-key cache survives across requests
    global _identity_provider
    if _identity_provider is None:
        _identity_provider = GoogleIdentityProvider()
    return _identity_provider


def get_tracking_service() -> TrackingService:
    global _tracking_service
    if _tracking_service is None:
        _tracking_service = TrackingService()
    return _tracking_service


def get_user_repo(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepository(session)


def get_donation_repo(session: AsyncSession = Depends(get_db_session)) -> DonationRepository:
    return DonationRepository(session)


def get_auth_service(
        user_repo: UserRepository = Depends(get_user_repo),
        identity_provider: GoogleIdentityProvider = Depends(get_identity_provider),
) -> AuthService:
    return AuthService(user_repo, identity_provider)


def get_donation_service(
        donation_repo: DonationRepository = Depends(get_donation_repo),
) -> DonationService:
    return DonationService(donation_repo)


async def get_token_subject(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    """Identifier from the bearer token, or None when no token was sent."""
    if token is None:
        return None
    try:
        payload = decode_access_token(token)
        token_data = TokenPayload(**payload)
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except JWTError:
        raise TokenInvalidException()
    if not token_data.sub:
        raise TokenInvalidException()
    return token_data.sub


async def require_token_subject(subject: Optional[str] = Depends(get_token_subject)) -> str:
    if subject is None:
        raise TokenInvalidException("Not authenticated.")
    return subject


def ensure_same_identity(subject: Optional[str], phone: Optional[str]) -> None:
    if subject is not None and phone is not None and subject != phone:
        raise ForbiddenIdentityException()
