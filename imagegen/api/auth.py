"""
Account endpoints: registration, login and identity.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.auth.dependencies import get_current_user
from imagegen.auth.security import create_access_token
from imagegen.config import settings
from imagegen.database import get_db
from imagegen.models.user import User
from imagegen.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from imagegen.schemas.user import MeResponse, UserPublic
from imagegen.services.user_service import EmailAlreadyRegisteredError, UserService
from imagegen.utils.logging import log_user_registered

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an account with the signup credit allowance and return a token.
    """
    if len(request.password) < settings.min_password_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {settings.min_password_length} characters"
        )
    
    try:
        user = await UserService.create_user(
            db,
            email=request.email,
            password=request.password,
            credits=settings.signup_credits
        )
    except EmailAlreadyRegisteredError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered"
        )
    
    log_user_registered(logger, user_id=user.id, credits=user.credits)
    
    return AuthResponse(
        message="Registration successful",
        token=create_access_token(user.id),
        user=UserPublic.model_validate(user)
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """Exchange email and password for a bearer token."""
    user = await UserService.authenticate(db, request.email, request.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    
    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id),
        user=UserPublic.model_validate(user)
    )


@router.get("/me", response_model=MeResponse)
async def me(current_user: User = Depends(get_current_user)):
    """
    Get the authenticated user's public record.
    Requires valid bearer token.
    """
    return MeResponse(user=UserPublic.model_validate(current_user))
