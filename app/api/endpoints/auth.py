import logging
import traceback

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from app.api.deps import get_auth_service, require_fields, require_token_subject
from app.core.exceptions import StoreException
from app.schemas.auth_schema import (
    GoogleLogin,
    LoginResponse,
    ProfileResponse,
    RegisterResponse,
    UserCreate,
    UserLogin,
)
from app.services.auth_services import AuthService

router = APIRouter(tags=["auth"], prefix="/api")


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(user_in: UserCreate, auth_svc: AuthService = Depends(get_auth_service)):
    require_fields(user_in, "name", "phone", "password", "address")
    try:
        await auth_svc.register(
            name=user_in.name.strip(),
            phone=user_in.phone.strip(),
            password=user_in.password,
            address=user_in.address.strip(),
        )
    except SQLAlchemyError as e:
        logging.error(f"Database error in register: {e}\n{traceback.format_exc()}")
        raise StoreException()
    return RegisterResponse()


@router.post("/login", response_model=LoginResponse)
async def login(body: UserLogin, auth_svc: AuthService = Depends(get_auth_service)):
    require_fields(body, "phone", "password")
    try:
        user = await auth_svc.login(body.phone.strip(), body.password)
    except SQLAlchemyError as e:
        logging.error(f"Database error in login: {e}\n{traceback.format_exc()}")
        raise StoreException()
    token = auth_svc.create_token_for_user(user)
    return LoginResponse(user=user, access_token=token)


@router.post("/auth/google", response_model=LoginResponse)
async def google_login(body: GoogleLogin, auth_svc: AuthService = Depends(get_auth_service)):
    require_fields(body, "token")
    try:
        user = await auth_svc.login_with_external_token(body.token.strip())
    except SQLAlchemyError as e:
        logging.error(f"Database error in google login: {e}\n{traceback.format_exc()}")
        raise StoreException()
    token = auth_svc.create_token_for_user(user)
    return LoginResponse(user=user, access_token=token)


@router.get("/auth/me", response_model=ProfileResponse)
async def read_current_user(
        subject: str = Depends(require_token_subject),
        auth_svc: AuthService = Depends(get_auth_service),
):
    user = await auth_svc.get_profile(subject)
    return ProfileResponse(user=user)
