from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from bloodlink.core.constants import AccountType
from bloodlink.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Registration fields, validated from the multipart form"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    location: str = Field(..., min_length=1, max_length=255)
    account_type: AccountType


class RegisterResponse(CamelModel):
    message: str
    user_id: int
    profile_image: Optional[str] = None


class LoginRequest(CamelModel):
    """Email/password login request"""
    email: EmailStr
    password: str


class LoginResponse(CamelModel):
    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class UserRead(CamelModel):
    """Public user record; never carries the password hash"""
    id: int
    name: str
    email: str
    location: str
    account_type: AccountType
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None
