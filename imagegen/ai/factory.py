"""
Image provider factory.
Selects and returns the appropriate provider based on environment configuration.
"""
import logging
from imagegen.config import settings
from imagegen.ai.base import ImageProvider
from imagegen.ai.openai_provider import OpenAIImageProvider
from imagegen.ai.placeholder_provider import PlaceholderImageProvider

logger = logging.getLogger(__name__)


def get_provider_name() -> str:
    """Current provider name ("openai" or "placeholder")."""
    return (settings.image_provider or "placeholder").lower()


def get_image_provider() -> ImageProvider:
    """
    Factory function to get the configured image provider.
    
    Provider selection is controlled by IMAGE_PROVIDER environment variable:
    - "openai" → OpenAIImageProvider
    - "placeholder" → PlaceholderImageProvider (default)
    
    Also used as a FastAPI dependency so tests can override it. An
    OpenAI provider without a key is still returned: its calls fail with
    ImageGenerationError, which the generate route reports like any other
    provider failure once the prompt and credit checks have passed.
    
    Raises:
        ValueError: If the provider name is unknown
    """
    provider_name = get_provider_name()
    
    if provider_name == "openai":
        provider = OpenAIImageProvider()
        if not provider.is_configured():
            logger.warning("OpenAI provider selected but OPENAI_API_KEY is not set")
        return provider
    
    elif provider_name == "placeholder":
        return PlaceholderImageProvider()
    
    else:
        logger.error(f"Unknown image provider: {provider_name}")
        raise ValueError(
            f"Invalid image provider: {provider_name}. "
            f"Must be one of: 'openai', 'placeholder'"
        )
