"""
FastAPI dependencies for authentication.
Provides get_current_user dependency that verifies bearer tokens.
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.database import get_db
from imagegen.models.user import User
from imagegen.auth.security import verify_token
from imagegen.services.user_service import UserService

# Errors are raised by get_current_user so every failure is a 401
security = HTTPBearer(auto_error=False)


async def get_user_from_token(db: AsyncSession, token: str) -> Optional[User]:
    """
    Map a bearer token to its user.
    
    The database is only queried once the token signature and expiry
    have been verified.
    
    Returns:
        User, or None if the token is invalid or the user does not exist
    """
    user_id = verify_token(token)
    if user_id is None:
        return None
    return await UserService.get_user_by_id(db, user_id)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    FastAPI dependency that verifies the bearer token and returns User.
    
    Raises:
        HTTPException 401: If the header is missing, not a Bearer token,
            the token is invalid/expired, or the user no longer exists
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    user = await get_user_from_token(db, credentials.credentials)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    return user
