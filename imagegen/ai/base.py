"""
Base class for image generation providers.
All providers must implement this interface so routes can use any of them.
"""
from abc import ABC, abstractmethod


class ImageGenerationError(Exception):
    """Raised when a provider fails to produce an image."""


class ImageProvider(ABC):
    """
    Abstract base class for image generation providers.
    
    All providers must implement:
    - generate_image(): Turn a prompt into a hosted image URL
    - is_configured(): Report whether credentials are present
    """
    
    name: str = "base"
    
    @abstractmethod
    async def generate_image(self, prompt: str) -> str:
        """
        Generate an image for a prompt.
        
        Args:
            prompt: Non-empty text prompt
            
        Returns:
            URL of the generated image
            
        Raises:
            ImageGenerationError: If generation fails
        """
        pass
    
    @abstractmethod
    def is_configured(self) -> bool:
        """
        Check if provider is properly configured (API key present, etc.).
        
        Returns:
            True if provider can be used, False otherwise
        """
        pass
