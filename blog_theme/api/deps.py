import os
from functools import lru_cache
from typing import Any

from blog_theme.adapters.clock import SystemClock
from blog_theme.core.services.component_cache import ComponentCache


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        ttl = os.environ.get("BLOG_THEME_CACHE_TTL")
        max_entries = os.environ.get("BLOG_THEME_CACHE_MAX_ENTRIES")
        self.cache_ttl_seconds = float(ttl) if ttl else None
        self.cache_max_entries = int(max_entries) if max_entries else None


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Render Cache ---
@lru_cache
def get_render_cache() -> ComponentCache[Any]:
    settings = get_settings()
    return ComponentCache(
        max_entries=settings.cache_max_entries,
        ttl_seconds=settings.cache_ttl_seconds,
        clock=SystemClock(),
    )
