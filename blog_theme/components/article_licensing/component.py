"""
Article licensing component - Licensing block under an article.

Invariants:
- I1: Falsy optional props omit their meta item
- I2: Empty or missing licenses omit the licenses meta item
- I3: License anchors follow config key order
- I4: Dates are formatted only when present on the page
- I5: Identical derived props reuse the cached render
"""

from __future__ import annotations

from typing import Any

from blog_theme.core.services.component_cache import ComponentCache
from blog_theme.core.services.markup import render_html

from ._impl import ArticleLicensingCacheable, render_article_licensing
from .models import CacheableLicensingInput, LicensingOutput, RenderLicensingInput
from .ports import HelperPort

# --- Component Entry Points ---


def run_render(inp: RenderLicensingInput) -> LicensingOutput:
    """
    Render the licensing block from resolved props.

    Args:
        inp: Input containing display-ready props.

    Returns:
        LicensingOutput with element tree and HTML.
    """
    element = render_article_licensing(inp.props)
    return LicensingOutput(element=element, html=render_html(element))


def run_cacheable(
    inp: CacheableLicensingInput,
    *,
    helper: HelperPort,
    cache: ComponentCache[Any] | None = None,
) -> LicensingOutput:
    """
    Render the licensing block from site config + page through the render cache.

    Args:
        inp: Input containing site config and page.
        helper: Theme helpers for i18n, URL resolution and dates.
        cache: Optional render cache; the process-wide cache is used if omitted.

    Returns:
        LicensingOutput with element tree and HTML.
    """
    block = ArticleLicensingCacheable(cache=cache)
    element = block(config=inp.config, page=inp.page, helper=helper)
    return LicensingOutput(element=element, html=render_html(element))


def run(
    inp: RenderLicensingInput | CacheableLicensingInput,
    *,
    helper: HelperPort | None = None,
    cache: ComponentCache[Any] | None = None,
) -> LicensingOutput:
    """
    Main entry point for the article licensing component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderLicensingInput):
        return run_render(inp)
    elif isinstance(inp, CacheableLicensingInput):
        if helper is None:
            raise ValueError("A helper is required to render from config and page")
        return run_cacheable(inp, helper=helper, cache=cache)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
