"""
SQLAlchemy models.
"""
from imagegen.models.base import Base
from imagegen.models.user import User
from imagegen.models.generated_image import GeneratedImage

__all__ = ["Base", "User", "GeneratedImage"]
