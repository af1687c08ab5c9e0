"""
Dashboard state for a logged-in user.

Holds the same state the web dashboard renders (user, images, messages)
and keeps it in sync with the server. Client-side checks on generation
mirror the server's but are not authoritative.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from imagegen.client.api_client import APIError, ImageGeneratorAPI
from imagegen.client.token_store import TokenStore

logger = logging.getLogger(__name__)


@dataclass
class Dashboard:
    """Client-side view of one user's account and images."""
    
    api: ImageGeneratorAPI
    token_store: Optional[TokenStore] = None
    user: Optional[Dict[str, Any]] = None
    images: List[Dict[str, Any]] = field(default_factory=list)
    error: str = ""
    success: str = ""
    loading: bool = False
    
    @classmethod
    def restore(cls, api: ImageGeneratorAPI, token_store: TokenStore) -> "Dashboard":
        """Build a dashboard using a previously stored token, if any."""
        stored = token_store.load()
        if stored:
            api.token = stored
        return cls(api=api, token_store=token_store)

    @property
    def logged_in(self) -> bool:
        return self.api.is_authenticated

    async def login(self, email: str, password: str) -> None:
        """Log in, persist the token and load the dashboard."""
        await self.api.login(email, password)
        self._remember_token()
        await self.load()

    async def register(self, email: str, password: str) -> None:
        """Create an account, persist the token and load the dashboard."""
        await self.api.register(email, password)
        self._remember_token()
        await self.load()

    def _remember_token(self) -> None:
        if self.token_store is not None and self.api.token:
            self.token_store.save(self.api.token)

    async def load(self) -> None:
        """Fetch identity and images. Any identity failure logs out."""
        await self.fetch_user()
        if self.logged_in:
            await self.fetch_images()
    
    async def fetch_user(self) -> None:
        try:
            self.user = await self.api.me()
        except (APIError, httpx.HTTPError) as e:
            logger.warning(f"Failed to fetch user: {e}")
            self.logout()
    
    async def fetch_images(self) -> None:
        try:
            self.images = await self.api.list_images()
        except (APIError, httpx.HTTPError) as e:
            logger.warning(f"Failed to fetch images: {e}")
    
    async def generate(self, prompt: str) -> bool:
        """
        Submit a generation and merge the result into local state.
        
        Returns:
            True if an image was generated
        """
        self.error = ""
        self.success = ""
        
        if not prompt.strip():
            self.error = "Please enter a prompt"
            return False
        
        if self.user is not None and self.user["credits"] < 1:
            self.error = "Insufficient credits"
            return False
        
        self.loading = True
        try:
            data = await self.api.generate(prompt)
        except APIError as e:
            self.error = e.message
            return False
        except httpx.HTTPError as e:
            logger.warning(f"Generation request failed: {e}")
            self.error = "Failed to generate image. Please try again."
            return False
        finally:
            self.loading = False
        
        self.success = "Image generated successfully!"
        if self.user is not None:
            self.user = {**self.user, "credits": data["remainingCredits"]}
        self.images = [data["image"], *self.images]
        return True
    
    def logout(self) -> None:
        """Clear the token locally and in storage, and reset state."""
        self.api.logout()
        if self.token_store is not None:
            self.token_store.clear()
        self.user = None
        self.images = []
