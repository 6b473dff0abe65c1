"""
Article licensing component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from blog_theme.config.models import PageContext, SiteConfig
from blog_theme.core.services.markup import Element

# --- License Sources (config side) ---


@dataclass(frozen=True)
class UrlOnly:
    """License configured as a bare URL string."""

    url: str


@dataclass(frozen=True)
class Detailed:
    """License configured with url and optional icon(s)/text."""

    url: str
    icon: str | tuple[str, ...] | None = None
    text: str | None = None


LicenseSource = UrlOnly | Detailed


# --- Render Props (display side) ---


@dataclass(frozen=True)
class LicenseEntry:
    """A resolved license ready for display."""

    url: str
    icon: str | tuple[str, ...] | None = None
    text: str | None = None

    @property
    def icons(self) -> tuple[str, ...]:
        """Icon classes normalized to a sequence (possibly empty)."""
        if not self.icon:
            return ()
        if isinstance(self.icon, str):
            return (self.icon,)
        return tuple(self.icon)

    @property
    def has_icon_sequence(self) -> bool:
        return self.icon is not None and not isinstance(self.icon, str)


@dataclass(frozen=True)
class RenderProps:
    """
    Display-ready values for the licensing block.

    Every field except link is optional; falsy values suppress their markup.
    """

    link: str
    title: str | None = None
    author: str | None = None
    author_title: str | None = None
    created_at: str | None = None
    created_title: str | None = None
    updated_at: str | None = None
    updated_title: str | None = None
    licenses: dict[str, LicenseEntry] | None = None
    licensed_title: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderLicensingInput:
    """Input for rendering from already-resolved props."""

    props: RenderProps


@dataclass(frozen=True)
class CacheableLicensingInput:
    """Input for rendering from site config + page through the render cache."""

    config: SiteConfig | dict[str, Any]
    page: PageContext | dict[str, Any]


# --- Output Models ---


@dataclass(frozen=True)
class LicensingOutput:
    """Output containing the rendered tree and its HTML."""

    element: Element | None
    html: str
    errors: list[str] = field(default_factory=list)
    success: bool = True
