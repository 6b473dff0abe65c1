import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LicenseSpec(BaseModel):
    url: str
    icon: str | list[str] | None = None
    text: str | None = None


class ArticleConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Values are either a bare URL or a detailed entry; key order is display order
    licenses: dict[str, str | LicenseSpec] | None = None


class PrettyUrlsConfig(BaseModel):
    trailing_index: bool = True
    trailing_html: bool = True


class SiteConfig(BaseModel):
    """Site-wide theme configuration (the merged _config.yml)."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    author: str | None = None
    language: str | list[str] = "en"
    timezone: str | None = None
    url: str | None = None
    root: str = "/"
    date_format: str = "YYYY-MM-DD"
    pretty_urls: PrettyUrlsConfig = Field(default_factory=PrettyUrlsConfig)
    article: ArticleConfig | None = None

    @property
    def primary_language(self) -> str:
        if isinstance(self.language, list):
            return self.language[0] if self.language else "en"
        return self.language or "en"


class PageContext(BaseModel):
    """The subset of a rendered page the licensing block reads."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    permalink: str = ""
    author: str | None = None
    date: dt.datetime | dt.date | str | None = None
    updated: dt.datetime | dt.date | str | None = None


def as_site_config(value: SiteConfig | dict[str, Any]) -> SiteConfig:
    if isinstance(value, SiteConfig):
        return value
    return SiteConfig.model_validate(value)


def as_page_context(value: PageContext | dict[str, Any]) -> PageContext:
    if isinstance(value, PageContext):
        return value
    return PageContext.model_validate(value)
