"""
Placeholder image provider for local development.
Returns a stable stock-image URL seeded by the prompt; no API key needed.
"""
import hashlib
import logging

from imagegen.ai.base import ImageProvider
from imagegen.config import settings
from imagegen.utils.logging import log_provider_request
from imagegen.utils.metrics import image_provider_requests_total

logger = logging.getLogger(__name__)


class PlaceholderImageProvider(ImageProvider):
    """Deterministic URL per prompt. Same prompt, same image."""
    
    name = "placeholder"
    
    def __init__(self, base_url: str = None, size: int = 1024):
        self.base_url = (base_url or settings.placeholder_image_base_url).rstrip("/")
        self.size = size
    
    def is_configured(self) -> bool:
        return bool(self.base_url)
    
    async def generate_image(self, prompt: str) -> str:
        image_provider_requests_total.labels(provider=self.name).inc()
        seed = hashlib.sha256(prompt.encode("utf-8")).hexdigest()[:16]
        log_provider_request(logger, provider=self.name, operation="generate_image", seed=seed)
        return f"{self.base_url}/{seed}/{self.size}/{self.size}"
