"""
Liveness check backed by a database round trip.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from imagegen.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Report healthy when ``SELECT 1`` succeeds, else 503."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Health check failed: {e}", extra={"event": "health_check_failed"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": f"error: {e}"}
        )
    
    return {"status": "healthy", "database": "connected"}
