"""
FastAPI application entry point.
Sets up the API with lifespan events for database initialization.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from imagegen import __version__
from imagegen.config import settings
from imagegen.database import init_db
from imagegen.api.errors import register_exception_handlers
from imagegen.api.router import api_router
from imagegen.middleware.metrics_middleware import MetricsMiddleware
from imagegen.utils.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    - Startup: configure logging, create tables
    """
    configure_logging('imagegen-api', settings.log_level)
    await init_db()
    yield


app = FastAPI(
    title="AI Image Generator API",
    description="Credit-metered AI image generation",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Metrics middleware (must be after CORS to track all requests)
app.add_middleware(MetricsMiddleware)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "AI Image Generator API",
        "version": __version__,
        "environment": settings.environment
    }


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def run():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn
    uvicorn.run("imagegen.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
