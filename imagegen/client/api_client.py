"""
Async HTTP client for the image generator API.

Every endpoint answers with a {success, ...} envelope; failures are raised
as APIError carrying the HTTP status and the server's message.
"""
from typing import Any, Dict, List, Optional

import httpx


class APIError(Exception):
    """Error envelope (or unusable response) returned by the server."""
    
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ImageGeneratorAPI:
    """API client for the image generator server."""
    
    def __init__(
        self,
        server_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        timeout: float = 180.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.server_url = server_url.rstrip("/")
        self.token = token
        self._client = httpx.AsyncClient(
            base_url=self.server_url,
            timeout=timeout,
            transport=transport
        )
    
    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)
    
    def _headers(self) -> dict:
        """Get request headers with auth token."""
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers
    
    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Dict[str, Any]:
        response = await self._client.request(method, path, headers=self._headers(), json=json)
        try:
            data = response.json()
        except ValueError:
            raise APIError(response.status_code, f"Unexpected response from server ({response.status_code})")
        
        if not isinstance(data, dict) or not data.get("success"):
            message = data.get("message") if isinstance(data, dict) else None
            raise APIError(response.status_code, message or "Request failed")
        return data
    
    async def register(self, email: str, password: str) -> Dict[str, Any]:
        """Create an account. Stores and returns the auth payload."""
        data = await self._request("POST", "/api/auth/register", {"email": email, "password": password})
        self.token = data["token"]
        return data
    
    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in. Stores and returns the auth payload."""
        data = await self._request("POST", "/api/auth/login", {"email": email, "password": password})
        self.token = data["token"]
        return data
    
    async def me(self) -> Dict[str, Any]:
        """Fetch the authenticated user ({id, email, credits})."""
        data = await self._request("GET", "/api/auth/me")
        return data["user"]
    
    async def list_images(self) -> List[Dict[str, Any]]:
        """Fetch the user's generated images."""
        data = await self._request("GET", "/api/images")
        return data["images"]
    
    async def generate(self, prompt: str) -> Dict[str, Any]:
        """
        Generate an image.
        
        Returns:
            dict with message, image and remainingCredits
        """
        return await self._request("POST", "/api/generate", {"prompt": prompt})
    
    def logout(self):
        """Forget the current token."""
        self.token = None
    
    async def aclose(self):
        await self._client.aclose()
    
    async def __aenter__(self):
        return self
    
    async def __aexit__(self, *exc_info):
        await self.aclose()
