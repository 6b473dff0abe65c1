"""
Site configuration models and YAML loaders.
"""

from blog_theme.config.loader import load_language, load_page, load_site_config
from blog_theme.config.models import (
    ArticleConfig,
    LicenseSpec,
    PageContext,
    PrettyUrlsConfig,
    SiteConfig,
    as_page_context,
    as_site_config,
)

__all__ = [
    "ArticleConfig",
    "LicenseSpec",
    "PageContext",
    "PrettyUrlsConfig",
    "SiteConfig",
    "as_page_context",
    "as_site_config",
    "load_language",
    "load_page",
    "load_site_config",
]
