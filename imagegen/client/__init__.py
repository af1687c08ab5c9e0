"""
Client for the image generator API.
Mirrors the web dashboard: token persistence, identity, images and generation.
"""
from imagegen.client.api_client import ImageGeneratorAPI, APIError
from imagegen.client.token_store import TokenStore
from imagegen.client.dashboard import Dashboard

__all__ = ["ImageGeneratorAPI", "APIError", "TokenStore", "Dashboard"]
