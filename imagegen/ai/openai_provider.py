"""
OpenAI image provider.
Uses the OpenAI Images API; the hosted URL from the response is returned as-is.
"""
import logging
import time
from typing import Optional

from openai import AsyncOpenAI

from imagegen.ai.base import ImageProvider, ImageGenerationError
from imagegen.config import settings
from imagegen.utils.logging import log_provider_request, log_provider_failure
from imagegen.utils.metrics import (
    image_provider_requests_total,
    image_provider_failures_total,
    image_provider_latency_seconds,
)

logger = logging.getLogger(__name__)


class OpenAIImageProvider(ImageProvider):
    """
    OpenAI image provider implementation.
    
    API keys are read from settings and never exposed to clients.
    """
    
    name = "openai"
    
    def __init__(self, api_key: Optional[str] = None, client: Optional[AsyncOpenAI] = None):
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.model = settings.openai_image_model
        self.size = settings.openai_image_size
        
        if client is not None:
            self.client = client
        elif self.api_key:
            self.client = AsyncOpenAI(
                api_key=self.api_key,
                timeout=settings.generation_timeout_seconds,
                max_retries=0
            )
        else:
            self.client = None
    
    def is_configured(self) -> bool:
        """Check if OpenAI API key is configured."""
        return self.client is not None
    
    async def generate_image(self, prompt: str) -> str:
        """
        Generate a single image with the OpenAI Images API.
        
        Raises:
            ImageGenerationError: If not configured, the call fails, or
                the response carries no URL
        """
        if not self.is_configured():
            raise ImageGenerationError("OpenAI API key not configured")
        
        image_provider_requests_total.labels(provider=self.name).inc()
        start_time = time.time()
        
        try:
            response = await self.client.images.generate(
                model=self.model,
                prompt=prompt,
                size=self.size,
                n=1
            )
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            image_provider_failures_total.labels(provider=self.name).inc()
            log_provider_failure(
                logger,
                provider=self.name,
                operation="generate_image",
                error=str(e),
                duration_ms=duration_ms,
                include_traceback=True
            )
            raise ImageGenerationError(f"Failed to generate OpenAI image: {str(e)}") from e
        
        duration = time.time() - start_time
        image_provider_latency_seconds.labels(provider=self.name).observe(duration)
        
        image_url = response.data[0].url if response.data else None
        if not image_url:
            image_provider_failures_total.labels(provider=self.name).inc()
            log_provider_failure(
                logger,
                provider=self.name,
                operation="generate_image",
                error="response contained no image URL",
                duration_ms=duration * 1000
            )
            raise ImageGenerationError("OpenAI response contained no image URL")
        
        log_provider_request(
            logger,
            provider=self.name,
            operation="generate_image",
            duration_ms=duration * 1000,
            model=self.model
        )
        return image_url
