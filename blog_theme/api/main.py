import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from blog_theme import __version__
from blog_theme.api.deps import get_render_cache, get_settings
from blog_theme.api.routes import render

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    logger.info(
        "Render cache: max_entries=%s ttl_seconds=%s",
        settings.cache_max_entries,
        settings.cache_ttl_seconds,
    )
    yield
    get_render_cache().clear()


app = FastAPI(
    title="Blog Theme Render API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(render.router, prefix="/api/render", tags=["Render"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    return {"status": "ok"}
