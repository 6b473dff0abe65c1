"""
Article licensing component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class HelperPort(Protocol):
    """Theme helpers injected per render."""

    def __(self, key: str, *args: Any) -> str:
        """Look up a translated message by dotted key."""
        ...

    def url_for(self, path: str) -> str:
        """Resolve a site-relative path to a URL."""
        ...

    def date(self, value: Any, fmt: str | None = None) -> str:
        """Format a date for display."""
        ...
