"""
Image generation providers.
"""
from imagegen.ai.base import ImageProvider, ImageGenerationError
from imagegen.ai.factory import get_image_provider

__all__ = ["ImageProvider", "ImageGenerationError", "get_image_provider"]
