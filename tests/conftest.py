from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import pytest

from blog_theme.config.models import PageContext, SiteConfig
from blog_theme.core.services.component_cache import ComponentCache


class FakeHelper:
    """
    Deterministic HelperPort double.

    Records every call so tests can assert what was (not) invoked.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def __(self, key: str, *args: Any) -> str:
        self.calls.append(("__", key))
        return f"t({key})"

    def url_for(self, path: str) -> str:
        self.calls.append(("url_for", path))
        if path.startswith(("http://", "https://")):
            return path
        return "/root" + path

    def date(self, value: Any, fmt: str | None = None) -> str:
        self.calls.append(("date", value))
        if isinstance(value, datetime):
            return value.strftime("%Y-%m-%d")
        return str(value)

    def called(self, name: str) -> list[Any]:
        return [arg for method, arg in self.calls if method == name]


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 1, 1, 12, 0, 0)

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


@pytest.fixture
def helper() -> FakeHelper:
    return FakeHelper()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache() -> ComponentCache[Any]:
    """Fresh unbounded render cache."""
    return ComponentCache()


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig.model_validate(
        {
            "title": "Test Blog",
            "author": "Site Author",
            "article": {
                "licenses": {
                    "Creative Commons": "https://creativecommons.org/",
                    "Attribution": {
                        "icon": "fab fa-creative-commons-by",
                        "url": "https://creativecommons.org/licenses/by/4.0/",
                    },
                    "Noncommercial": {
                        "icon": ["fab fa-creative-commons-nc", "fab fa-creative-commons-sa"],
                        "url": "/licenses/nc-sa/",
                        "text": "NC-SA",
                    },
                }
            },
        }
    )


@pytest.fixture
def page() -> PageContext:
    return PageContext(
        title="Hello World",
        permalink="https://example.com/2025/01/hello-world/index.html",
        date=datetime(2025, 1, 2, 9, 30),
        updated=datetime(2025, 1, 5, 18, 0),
    )
