"""
Image service: generated image records and the generation transaction.
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.models.generated_image import GeneratedImage
from imagegen.services.credit_service import CreditService


class InsufficientCreditsError(Exception):
    """Raised when a user cannot pay for a generation."""


class ImageService:
    """Service for generated image records."""
    
    @staticmethod
    async def create_image(
        db: AsyncSession,
        user_id: str,
        prompt: str,
        image_url: str
    ) -> GeneratedImage:
        """Persist a generated image record."""
        image = GeneratedImage(
            user_id=user_id,
            prompt=prompt,
            image_url=image_url
        )
        db.add(image)
        await db.commit()
        await db.refresh(image)
        return image
    
    @staticmethod
    async def get_images_by_user_id(db: AsyncSession, user_id: str) -> List[GeneratedImage]:
        """All images owned by a user, newest first."""
        result = await db.execute(
            select(GeneratedImage)
            .where(GeneratedImage.user_id == user_id)
            .order_by(GeneratedImage.created_at.desc(), GeneratedImage.id.desc())
        )
        return list(result.scalars().all())
    
    @staticmethod
    async def record_generation(
        db: AsyncSession,
        user_id: str,
        prompt: str,
        image_url: str
    ) -> GeneratedImage:
        """
        Charge one credit and store the image in a single transaction.
        
        Either both the debit and the image row are committed, or neither.
        
        Raises:
            InsufficientCreditsError: If the balance dropped below the cost
                after the pre-check (e.g. a concurrent generation)
        """
        try:
            debited = await CreditService.debit(
                db, user_id, CreditService.GENERATION_COST, commit=False
            )
            if not debited:
                raise InsufficientCreditsError(f"User {user_id} has insufficient credits")
            
            image = GeneratedImage(
                user_id=user_id,
                prompt=prompt,
                image_url=image_url
            )
            db.add(image)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        
        await db.refresh(image)
        return image
