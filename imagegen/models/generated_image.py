"""
GeneratedImage model.

One row per successful generation. Rows are immutable once written.
The image bytes live with the provider; only the returned URL is stored.
"""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index

from imagegen.models.base import Base, generate_uuid, utcnow


class GeneratedImage(Base):
    """
    Generated image record.
    
    Attributes:
        id: Unique identifier (UUID)
        user_id: Owning user (indexed for listing)
        prompt: Prompt text as submitted
        image_url: URL returned by the image provider
        created_at: When the image was generated
    """
    __tablename__ = "generated_images"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    prompt = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    
    __table_args__ = (
        # Listing is per user, newest first
        Index("ix_generated_images_user_created", "user_id", "created_at"),
    )
    
    def __repr__(self):
        return f"<GeneratedImage(id={self.id}, user_id={self.user_id})>"
