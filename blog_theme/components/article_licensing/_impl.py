"""
ArticleLicensing - Licensing info block shown under an article.

Renders title, permalink, author, dates and license badges, and provides a
cacheable variant that derives its props from site config + page.

Key behaviors:
- Falsy optional fields omit their markup; rendering never raises on absence
- Licenses render in config key order
- A single-string icon gets class "icon"; an icon list renders one glyph
  plus a non-breaking space per entry with an empty class
- Permalinks ending in /index.html are shown as the directory URL, decoded
- Helper failures (i18n, url_for, date) propagate unchanged
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from blog_theme.config.models import (
    LicenseSpec,
    PageContext,
    SiteConfig,
    as_page_context,
    as_site_config,
)
from blog_theme.core.services.component_cache import ComponentCache, cache_component
from blog_theme.core.services.markup import Element, h
from blog_theme.core.services.permalink import display_permalink

from .models import Detailed, LicenseEntry, LicenseSource, RenderProps, UrlOnly
from .ports import HelperPort

CACHE_NAMESPACE = "misc.articlelicensing"

NBSP = "\u00a0"

MESSAGE_KEYS = {
    "author_title": "article.licensing.author",
    "created_title": "article.licensing.created_at",
    "updated_title": "article.licensing.updated_at",
    "licensed_title": "article.licensing.licensed_under",
}


# --- Rendering ---


def _meta_item(label: str | None, value: Any) -> Element:
    return h(
        "div",
        {"class": "level-item is-narrow"},
        h("div", None, h("h6", None, label), h("p", None, value)),
    )


def render_license_link(name: str, entry: LicenseEntry) -> Element:
    """Render one license anchor."""
    if entry.has_icon_sequence:
        content: Any = [(h("i", {"class": icon}), NBSP) for icon in entry.icons]
    elif entry.icon:
        content = h("i", {"class": entry.icon})
    else:
        content = name

    return h(
        "a",
        {
            "rel": "noopener",
            "target": "_blank",
            "title": name,
            "class": "icon" if entry.icon and not entry.has_icon_sequence else "",
            "href": entry.url,
        },
        content,
        entry.text or "",
    )


def render_article_licensing(props: RenderProps) -> Element:
    """
    Render the licensing block.

    Structure: div.article-licensing.box > (div.licensing-title,
    div.licensing-meta.level.is-mobile > div.level-left > item*)
    """
    items: list[Element | None] = [
        _meta_item(props.author_title, props.author) if props.author else None,
        _meta_item(props.created_title, props.created_at) if props.created_at else None,
        _meta_item(props.updated_title, props.updated_at) if props.updated_at else None,
    ]
    if props.licenses:
        links = [render_license_link(name, entry) for name, entry in props.licenses.items()]
        items.append(_meta_item(props.licensed_title, links))

    return h(
        "div",
        {"class": "article-licensing box"},
        h(
            "div",
            {"class": "licensing-title"},
            h("p", None, props.title) if props.title else None,
            h("p", None, h("a", {"href": props.link}, props.link)),
        ),
        h(
            "div",
            {"class": "licensing-meta level is-mobile"},
            h("div", {"class": "level-left"}, items),
        ),
    )


# --- Prop Derivation ---


def normalize_license(value: str | LicenseSpec | Mapping[str, Any]) -> LicenseSource:
    """Normalize a configured license value to UrlOnly or Detailed."""
    if isinstance(value, str):
        return UrlOnly(url=value)
    if isinstance(value, Mapping):
        value = LicenseSpec.model_validate(value)

    icon = tuple(value.icon) if isinstance(value.icon, list) else value.icon
    return Detailed(url=value.url, icon=icon, text=value.text)


def resolve_licenses(config: SiteConfig, helper: HelperPort) -> dict[str, LicenseEntry]:
    """Resolve configured licenses to display entries, preserving key order."""
    licenses = config.article.licenses if config.article else None

    links: dict[str, LicenseEntry] = {}
    if licenses:
        for name, value in licenses.items():
            source = normalize_license(value)
            if isinstance(source, UrlOnly):
                links[name] = LicenseEntry(url=helper.url_for(source.url))
            else:
                links[name] = LicenseEntry(
                    url=helper.url_for(source.url),
                    icon=source.icon,
                    text=source.text,
                )
    return links


def derive_render_props(
    config: SiteConfig | dict[str, Any],
    page: PageContext | dict[str, Any],
    helper: HelperPort,
) -> RenderProps:
    """
    Derive display-ready props from site config and page.

    Dates are only formatted when present.
    """
    config = as_site_config(config)
    page = as_page_context(page)

    return RenderProps(
        title=page.title,
        link=display_permalink(page.permalink),
        author=page.author or config.author,
        author_title=helper.__(MESSAGE_KEYS["author_title"]),
        created_at=helper.date(page.date) if page.date else None,
        created_title=helper.__(MESSAGE_KEYS["created_title"]),
        updated_at=helper.date(page.updated) if page.updated else None,
        updated_title=helper.__(MESSAGE_KEYS["updated_title"]),
        licenses=resolve_licenses(config, helper),
        licensed_title=helper.__(MESSAGE_KEYS["licensed_title"]),
    )


def _map_props(
    *,
    config: SiteConfig | dict[str, Any],
    page: PageContext | dict[str, Any],
    helper: HelperPort,
) -> RenderProps:
    return derive_render_props(config, page, helper)


class ArticleLicensingCacheable:
    """
    Licensing block rendered from (config, page, helper) through a render cache.

    Identical derived props reuse the previously rendered element.
    """

    namespace = CACHE_NAMESPACE

    def __init__(self, cache: ComponentCache[Any] | None = None) -> None:
        self.cache = cache
        self._render = cache_component(
            render_article_licensing,
            CACHE_NAMESPACE,
            _map_props,
            cache=cache,
        )

    def __call__(
        self,
        *,
        config: SiteConfig | dict[str, Any],
        page: PageContext | dict[str, Any],
        helper: HelperPort,
    ) -> Element:
        return cast(Element, self._render(config=config, page=page, helper=helper))


def create_cacheable(cache: ComponentCache[Any] | None = None) -> ArticleLicensingCacheable:
    """Factory for the cacheable licensing block."""
    return ArticleLicensingCacheable(cache=cache)
