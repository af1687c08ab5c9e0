"""
Pydantic schemas for registration and login.
"""
from pydantic import BaseModel, EmailStr, Field

from imagegen.schemas.common import CamelModel
from imagegen.schemas.user import UserPublic


class RegisterRequest(BaseModel):
    """Schema for creating an account."""
    email: EmailStr = Field(..., description="Account email, unique")
    password: str = Field(..., min_length=1, description="Plaintext password")


class LoginRequest(BaseModel):
    """Schema for logging in."""
    email: str
    password: str


class AuthResponse(CamelModel):
    """Schema for register/login response."""
    success: bool = True
    message: str
    token: str
    user: UserPublic
