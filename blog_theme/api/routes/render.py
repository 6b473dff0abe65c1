"""
Render Routes - Preview theme widgets as server-rendered HTML.

Key behaviors:
- POST /article-licensing renders the licensing block for {config, page}
- Rendering goes through the shared render cache
- DELETE /cache drops every cached render
"""

import logging
from typing import Any
from zoneinfo import ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from blog_theme.adapters.theme_helper import ThemeHelper
from blog_theme.api.deps import get_render_cache
from blog_theme.components.article_licensing import CacheableLicensingInput, run_cacheable
from blog_theme.config.models import PageContext, SiteConfig
from blog_theme.core.services.component_cache import ComponentCache

logger = logging.getLogger(__name__)

router = APIRouter()


class ArticleLicensingRequest(BaseModel):
    config: SiteConfig
    page: PageContext


class CacheClearResponse(BaseModel):
    removed: int


@router.post("/article-licensing", response_class=HTMLResponse)
def render_article_licensing(
    body: ArticleLicensingRequest,
    cache: ComponentCache[Any] = Depends(get_render_cache),
) -> HTMLResponse:
    """Render the article licensing block to HTML."""
    try:
        helper = ThemeHelper(body.config)
        output = run_cacheable(
            CacheableLicensingInput(config=body.config, page=body.page),
            helper=helper,
            cache=cache,
        )
    except (ValueError, ZoneInfoNotFoundError) as e:
        logger.warning("Licensing render failed for %s: %s", body.page.permalink, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return HTMLResponse(content=output.html)


@router.delete("/cache", response_model=CacheClearResponse)
def clear_render_cache(
    cache: ComponentCache[Any] = Depends(get_render_cache),
) -> CacheClearResponse:
    """Drop every cached render."""
    removed = cache.clear()
    logger.info("Render cache cleared (%d entries)", removed)
    return CacheClearResponse(removed=removed)
