"""
Article licensing component - Licensing info block for article pages.
"""

from ._impl import (
    CACHE_NAMESPACE,
    MESSAGE_KEYS,
    ArticleLicensingCacheable,
    create_cacheable,
    derive_render_props,
    normalize_license,
    render_article_licensing,
    render_license_link,
    resolve_licenses,
)
from .component import (
    run,
    run_cacheable,
    run_render,
)
from .models import (
    CacheableLicensingInput,
    Detailed,
    LicenseEntry,
    LicenseSource,
    LicensingOutput,
    RenderLicensingInput,
    RenderProps,
    UrlOnly,
)
from .ports import HelperPort

__all__ = [
    # Entry points
    "run",
    "run_cacheable",
    "run_render",
    # Input models
    "CacheableLicensingInput",
    "RenderLicensingInput",
    # Output models
    "LicensingOutput",
    # Props
    "Detailed",
    "LicenseEntry",
    "LicenseSource",
    "RenderProps",
    "UrlOnly",
    # Ports
    "HelperPort",
    # Implementation
    "CACHE_NAMESPACE",
    "MESSAGE_KEYS",
    "ArticleLicensingCacheable",
    "create_cacheable",
    "derive_render_props",
    "normalize_license",
    "render_article_licensing",
    "render_license_link",
    "resolve_licenses",
]
