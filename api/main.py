"""
Blog Feed API

Thin FastAPI backend serving the blog feed from Blogger, with seed-data fallback.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI

from api.config import get_settings
from api.middleware import OpenCORSMiddleware, RequestIDLogFilter, RequestIDMiddleware
from api.routers import blogs
from api.services.http_client import close_shared_client

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
)
for _handler in logging.getLogger().handlers:
    _handler.addFilter(RequestIDLogFilter())

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    if not settings.blogger_configured:
        logger.warning("Blogger credentials missing, /api/blogs will serve seed data")
    yield
    await close_shared_client()


app = FastAPI(
    title="Blog Feed API",
    description="Blog posts from Blogger, normalized for the frontend",
    version=VERSION,
    lifespan=lifespan,
)

# Request ID is added last so it runs outermost
app.add_middleware(OpenCORSMiddleware)
app.add_middleware(RequestIDMiddleware)

# Routers
app.include_router(blogs.router, prefix="/api")


@app.get("/api/health")
async def health_check() -> dict[str, Any]:
    """Health check reporting whether live Blogger data is configured."""
    blogger = "configured" if get_settings().blogger_configured else "seed"
    return {
        "status": "ok",
        "service": "blog-feed-api",
        "version": VERSION,
        "checks": {"blogger": blogger},
    }
