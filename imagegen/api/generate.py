"""
Image generation endpoint.
Charges one credit per successful generation.
"""
import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.ai.base import ImageProvider, ImageGenerationError
from imagegen.ai.factory import get_image_provider
from imagegen.api.errors import INVALID_BODY_MESSAGE
from imagegen.auth.dependencies import get_current_user
from imagegen.database import get_db
from imagegen.models.user import User
from imagegen.schemas.image import GenerateRequest, GenerateResponse, GeneratedImageResponse
from imagegen.services.credit_service import CreditService
from imagegen.services.image_service import ImageService, InsufficientCreditsError
from imagegen.utils.logging import log_image_generated, log_generation_rejected
from imagegen.utils.metrics import images_generated_total, generation_rejected_total

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject(user_id: str, reason: str, status_code: int, detail: str) -> HTTPException:
    generation_rejected_total.labels(reason=reason).inc()
    log_generation_rejected(logger, user_id=user_id, reason=reason)
    return HTTPException(status_code=status_code, detail=detail)


async def _read_generate_request(request: Request) -> GenerateRequest:
    """Decode the body; anything but a JSON object is a 400."""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_BODY_MESSAGE)
    return GenerateRequest.model_validate(body)


@router.post(
    "",
    response_model=GenerateResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": GenerateRequest.model_json_schema()}},
        }
    },
)
async def generate_image(
    request: Request,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    provider: ImageProvider = Depends(get_image_provider)
):
    """
    Generate an image from a prompt for the authenticated user.
    Requires valid bearer token.

    The body is read only after the token has been accepted, so an
    unauthenticated request is a 401 whatever it carries.

    Credit Logic:
    1. Reject before calling the provider if the user has < 1 credit
    2. Call the provider
    3. Atomically debit 1 credit and store the image in one transaction;
       if a concurrent request spent the last credit, nothing is stored
    4. Return the image with the re-read balance
    """
    start_time = time.time()
    user_id = current_user.id
    
    prompt = (await _read_generate_request(request)).prompt
    if not isinstance(prompt, str) or not prompt.strip():
        raise _reject(user_id, "invalid_prompt", status.HTTP_400_BAD_REQUEST, "Valid prompt is required")
    
    try:
        if not await CreditService.has_credits(db, user_id):
            raise _reject(user_id, "insufficient_credits", status.HTTP_403_FORBIDDEN, "Insufficient credits")
        
        try:
            image_url = await provider.generate_image(prompt.strip())
        except ImageGenerationError as e:
            generation_rejected_total.labels(reason="provider_failure").inc()
            logger.error(
                f"Image generation failed for {user_id}: {e}",
                extra={"event": "generation_failed", "user_id": user_id, "provider": provider.name}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to generate image"
            )
        
        try:
            image = await ImageService.record_generation(
                db,
                user_id=user_id,
                prompt=prompt,
                image_url=image_url
            )
        except InsufficientCreditsError:
            raise _reject(user_id, "insufficient_credits", status.HTTP_403_FORBIDDEN, "Insufficient credits")
        
        remaining_credits = await CreditService.get_balance(db, user_id)
        
        images_generated_total.inc()
        log_image_generated(
            logger,
            image_id=image.id,
            user_id=user_id,
            remaining_credits=remaining_credits,
            duration_ms=(time.time() - start_time) * 1000,
            provider=provider.name
        )
        
        return GenerateResponse(
            message="Image generated successfully",
            image=GeneratedImageResponse.model_validate(image),
            remaining_credits=remaining_credits
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Generate error: {str(e)}",
            extra={
                "event": "generation_failed",
                "user_id": user_id,
                "duration_ms": (time.time() - start_time) * 1000,
                "error": str(e)
            },
            exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate image"
        )
