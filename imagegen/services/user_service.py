"""
User service: lookup and registration.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.auth.security import hash_password, verify_password
from imagegen.models.user import User


class EmailAlreadyRegisteredError(ValueError):
    """Raised when registering an email that already has an account."""


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """Service for user records."""
    
    @staticmethod
    async def get_user_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
        """
        Get user by ID.
        
        Always reloads from the database so credit balances changed by
        bulk updates are current.
        """
        result = await db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
    
    @staticmethod
    async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        result = await db.execute(
            select(User).where(User.email == normalize_email(email))
        )
        return result.scalar_one_or_none()
    
    @staticmethod
    async def create_user(
        db: AsyncSession,
        email: str,
        password: str,
        credits: int = 0
    ) -> User:
        """
        Create a new user with an initial credit balance.
        
        Raises:
            EmailAlreadyRegisteredError: If the email is taken
            ValueError: If credits is negative
        """
        if credits < 0:
            raise ValueError("Initial credits cannot be negative")
        
        email = normalize_email(email)
        if await UserService.get_user_by_email(db, email) is not None:
            raise EmailAlreadyRegisteredError(f"Email {email} already registered")
        
        user = User(
            email=email,
            password_hash=hash_password(password),
            credits=credits
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            await db.rollback()
            raise EmailAlreadyRegisteredError(f"Email {email} already registered")
        
        await db.refresh(user)
        return user
    
    @staticmethod
    async def authenticate(db: AsyncSession, email: str, password: str) -> Optional[User]:
        """Return the user if email and password match, else None."""
        user = await UserService.get_user_by_email(db, email)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user
