"""
API router aggregator.
Includes all route modules.
"""
from fastapi import APIRouter
from imagegen.api import health, auth, generate, images

api_router = APIRouter()

# Include route modules
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(generate.router, prefix="/generate", tags=["generate"])
api_router.include_router(images.router, prefix="/images", tags=["images"])
