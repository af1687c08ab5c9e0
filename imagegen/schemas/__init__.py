"""
Pydantic schemas for API request/response validation.
"""
from imagegen.schemas.user import UserPublic, MeResponse
from imagegen.schemas.auth import RegisterRequest, LoginRequest, AuthResponse
from imagegen.schemas.image import (
    GenerateRequest,
    GenerateResponse,
    GeneratedImageResponse,
    ImageListResponse,
)
from imagegen.schemas.common import ErrorResponse

__all__ = [
    "UserPublic",
    "MeResponse",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "GenerateRequest",
    "GenerateResponse",
    "GeneratedImageResponse",
    "ImageListResponse",
    "ErrorResponse",
]
