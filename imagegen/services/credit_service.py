"""
Generation credits.

A balance is a plain integer on the user row and one image costs one
credit. Every write is a single UPDATE statement, so concurrent requests
cannot interleave a read and a write of the same balance.
"""
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.models.user import User


class CreditService:
    """Balance reads and atomic balance updates."""
    
    GENERATION_COST = 1
    
    @staticmethod
    async def _current(db: AsyncSession, user_id: str) -> Optional[int]:
        result = await db.execute(select(User.credits).where(User.id == user_id))
        return result.scalar_one_or_none()
    
    @staticmethod
    async def _apply(db: AsyncSession, statement, commit: bool = True) -> int:
        result = await db.execute(statement.execution_options(synchronize_session=False))
        if commit:
            await db.commit()
        return result.rowcount
    
    @staticmethod
    async def has_credits(db: AsyncSession, user_id: str, amount: int = GENERATION_COST) -> bool:
        """
        Whether the user can currently afford ``amount``.
        
        This is a snapshot. Callers that go on to spend must still rely on
        ``debit``'s return value.
        """
        balance = await CreditService._current(db, user_id)
        return balance is not None and balance >= amount
    
    @staticmethod
    async def debit(
        db: AsyncSession,
        user_id: str,
        amount: int = GENERATION_COST,
        commit: bool = True
    ) -> bool:
        """
        Take ``amount`` credits if and only if the balance covers it.
        
        The balance check and the decrement are one conditional UPDATE,
        so two requests racing for the last credit cannot both win.
        
        Args:
            db: Database session
            user_id: Paying user
            amount: Credits to take
            commit: Pass False to leave the debit in the caller's transaction
            
        Returns:
            False when the user is unknown or cannot afford it
            
        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("Cannot debit negative amount")
        
        statement = (
            update(User)
            .where(User.id == user_id, User.credits >= amount)
            .values(credits=User.credits - amount)
        )
        return await CreditService._apply(db, statement, commit=commit) > 0
    
    @staticmethod
    async def credit(db: AsyncSession, user_id: str, amount: int) -> None:
        """Add ``amount`` (> 0) credits to the user's balance."""
        if amount <= 0:
            raise ValueError("Credit amount must be positive")
        
        await CreditService._apply(
            db,
            update(User).where(User.id == user_id).values(credits=User.credits + amount)
        )
    
    @staticmethod
    async def set_balance(db: AsyncSession, user_id: str, credits: int) -> bool:
        """Overwrite the balance. Returns False for an unknown user."""
        if credits < 0:
            raise ValueError("Credit balance cannot be negative")
        
        updated = await CreditService._apply(
            db,
            update(User).where(User.id == user_id).values(credits=credits)
        )
        return updated > 0
    
    @staticmethod
    async def get_balance(db: AsyncSession, user_id: str) -> int:
        """Current balance, or 0 for an unknown user."""
        return await CreditService._current(db, user_id) or 0
