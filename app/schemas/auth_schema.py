from pydantic import BaseModel, EmailStr
from typing import Optional

from app.schemas.user_schema import UserOut


class TokenPayload(BaseModel):
    sub: Optional[str] = None


class UserCreate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    address: Optional[str] = None


class UserLogin(BaseModel):
    phone: Optional[str] = None
    password: Optional[str] = None


class GoogleLogin(BaseModel):
    token: Optional[str] = None


class ExternalIdentity(BaseModel):
    """Claims we keep from a verified Google ID token."""
    subject: str
    identifier: str
    name: str
    email: Optional[EmailStr] = None


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "Registration successful! Please log in."


class LoginResponse(BaseModel):
    success: bool = True
    user: UserOut
    access_token: str
    token_type: str = "bearer"


class ProfileResponse(BaseModel):
    success: bool = True
    user: UserOut
