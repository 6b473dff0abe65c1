"""
Theme helper adapter.

Implements HelperPort for server-side rendering: i18n lookup, URL resolution
and date formatting, all driven by the site config.

Key behaviors:
- __: dotted-key lookup in the site language, falling back to "en", then to
  the key itself
- url_for: absolute, protocol-relative and fragment URLs pass through; other
  paths are prefixed with config.root and adjusted for pretty_urls
- date: moment-style patterns (config.date_format by default), converted to
  config.timezone when the value is timezone-aware
"""

from __future__ import annotations

import calendar
import datetime as dt
import logging
import re
from pathlib import Path
from typing import Any
from urllib.parse import quote, urlparse
from zoneinfo import ZoneInfo

from blog_theme.config.loader import LANGUAGES_DIR, load_language
from blog_theme.config.models import SiteConfig

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

# Characters left unescaped when encoding a resolved path
_URL_SAFE = "/#?&=:@+$,;~%!*'()[]"

_MOMENT_TOKENS = re.compile(
    r"\[[^\]]*\]|YYYY|YY|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|HH|H|hh|h|mm|m|ss|s|A|a|ZZ|Z"
)


# --- Date Formatting ---


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _utc_offset(value: dt.datetime, sep: str) -> str:
    offset = value.utcoffset()
    if offset is None:
        return ""
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{sep}{mins:02d}"


def format_moment(value: dt.datetime, pattern: str) -> str:
    """
    Format a datetime with a moment.js-style pattern.

    Supports the common tokens (YYYY, MM, DD, HH, mm, ss, MMM, Do, A, Z, ...)
    and [bracketed] literals.
    """
    hour12 = value.hour % 12 or 12

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token.startswith("["):
            return token[1:-1]
        return {
            "YYYY": f"{value.year:04d}",
            "YY": f"{value.year % 100:02d}",
            "MMMM": calendar.month_name[value.month],
            "MMM": calendar.month_abbr[value.month],
            "MM": f"{value.month:02d}",
            "M": str(value.month),
            "Do": _ordinal(value.day),
            "DD": f"{value.day:02d}",
            "D": str(value.day),
            "dddd": calendar.day_name[value.weekday()],
            "ddd": calendar.day_abbr[value.weekday()],
            "HH": f"{value.hour:02d}",
            "H": str(value.hour),
            "hh": f"{hour12:02d}",
            "h": str(hour12),
            "mm": f"{value.minute:02d}",
            "m": str(value.minute),
            "ss": f"{value.second:02d}",
            "s": str(value.second),
            "A": "AM" if value.hour < 12 else "PM",
            "a": "am" if value.hour < 12 else "pm",
            "ZZ": _utc_offset(value, ""),
            "Z": _utc_offset(value, ":"),
        }[token]

    return _MOMENT_TOKENS.sub(replace, pattern)


def coerce_datetime(value: Any) -> dt.datetime:
    """
    Coerce a page date value to a datetime.

    Raises ValueError for values that are not dates or ISO-8601 strings.
    """
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return dt.datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(f"Unrecognized date value: {value!r}") from e
    raise ValueError(f"Unrecognized date value: {value!r}")


# --- Helper ---


class ThemeHelper:
    """Helper object passed to theme components for a single site config."""

    def __init__(self, config: SiteConfig, languages_dir: Path = LANGUAGES_DIR) -> None:
        self.config = config
        self._languages_dir = languages_dir
        self._tz = ZoneInfo(config.timezone) if config.timezone else None

    # i18n

    def _lookup(self, language: str, key: str) -> str | None:
        node: Any = load_language(language, self._languages_dir)
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def __(self, key: str, *args: Any) -> str:
        """Translate a dotted message key."""
        message = self._lookup(self.config.primary_language, key)
        if message is None and self.config.primary_language != FALLBACK_LANGUAGE:
            message = self._lookup(FALLBACK_LANGUAGE, key)
        if message is None:
            logger.debug("Missing translation for %r", key)
            message = key
        if args and ("%s" in message or "%d" in message):
            return message % args
        return message

    # URLs

    def url_for(self, path: str) -> str:
        """Resolve a site path against the configured root."""
        if not path:
            path = "/"
        if path.startswith(("#", "//")) or urlparse(path).scheme:
            return path

        root = self.config.root or "/"
        resolved = re.sub(r"/{2,}", "/", f"{root}/{path}")
        resolved = quote(resolved, safe=_URL_SAFE)

        pretty = self.config.pretty_urls
        if not pretty.trailing_index and resolved.endswith("/index.html"):
            resolved = resolved[: -len("index.html")]
        if not pretty.trailing_html and resolved.endswith(".html"):
            resolved = resolved[: -len(".html")]
        return resolved

    # Dates

    def date(self, value: Any, fmt: str | None = None) -> str:
        """Format a date with fmt or the site date_format."""
        moment = coerce_datetime(value)
        if self._tz is not None and moment.tzinfo is not None:
            moment = moment.astimezone(self._tz)
        return format_moment(moment, fmt or self.config.date_format)

    # Descriptive aliases

    def translate(self, key: str, *args: Any) -> str:
        return self.__(key, *args)

    def resolve_url(self, path: str) -> str:
        return self.url_for(path)

    def format_date(self, value: Any, fmt: str | None = None) -> str:
        return self.date(value, fmt)
