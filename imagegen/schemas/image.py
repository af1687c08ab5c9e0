"""
Pydantic schemas for generation and image listing.
"""
from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from imagegen.schemas.common import CamelModel


class GenerateRequest(BaseModel):
    """
    Schema for a generation request.
    
    The prompt is left untyped so missing, non-string and blank prompts
    are all rejected by the same route check.
    """
    prompt: Any = Field(None, description="Text description of the image")


class GeneratedImageResponse(CamelModel):
    """Schema for a generated image record."""
    id: str
    user_id: str
    prompt: str
    image_url: str
    created_at: datetime
    
    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset on read; stored values are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class GenerateResponse(CamelModel):
    """Schema for generation response."""
    success: bool = True
    message: str
    image: GeneratedImageResponse
    remaining_credits: int


class ImageListResponse(CamelModel):
    """Schema for image listing."""
    success: bool = True
    images: List[GeneratedImageResponse]
