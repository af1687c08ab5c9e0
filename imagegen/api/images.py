"""
Image listing endpoint.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.auth.dependencies import get_current_user
from imagegen.database import get_db
from imagegen.models.user import User
from imagegen.schemas.image import GeneratedImageResponse, ImageListResponse
from imagegen.services.image_service import ImageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ImageListResponse)
async def list_images(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    List the authenticated user's generated images, newest first.
    Requires valid bearer token.
    """
    try:
        images = await ImageService.get_images_by_user_id(db, current_user.id)
    except Exception as e:
        logger.error(
            f"Get images error: {str(e)}",
            extra={"event": "image_list_failed", "user_id": current_user.id},
            exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve images"
        )
    
    return ImageListResponse(
        images=[GeneratedImageResponse.model_validate(image) for image in images]
    )
