"""
Permalink normalization for display.

Key behaviors:
- Strips a trailing "index.html" from directory permalinks, keeping the slash
- Percent-decodes like ECMAScript decodeURI: reserved characters stay escaped
- Malformed escapes raise PermalinkDecodeError
"""

from __future__ import annotations

import re

INDEX_SUFFIX = "/index.html"

# Characters decodeURI leaves encoded
RESERVED_CHARS = frozenset(";/?:@&=+$,#")

_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


class PermalinkDecodeError(ValueError):
    """Raised when a permalink contains a malformed percent escape."""


def _utf8_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_run(run: str) -> str:
    escapes = [run[i : i + 3] for i in range(0, len(run), 3)]
    octets = [int(esc[1:], 16) for esc in escapes]

    out: list[str] = []
    i = 0
    while i < len(octets):
        size = _utf8_length(octets[i])
        if size == 0 or i + size > len(octets):
            raise PermalinkDecodeError(f"Malformed percent escape sequence: {run}")

        if size == 1:
            char = chr(octets[i])
            out.append(escapes[i] if char in RESERVED_CHARS else char)
        else:
            try:
                out.append(bytes(octets[i : i + size]).decode("utf-8"))
            except UnicodeDecodeError as e:
                raise PermalinkDecodeError(f"Malformed UTF-8 in escape sequence: {run}") from e
        i += size

    return "".join(out)


def decode_uri(value: str) -> str:
    """
    Percent-decode a URI with decodeURI semantics.

    Escapes that decode to reserved characters (such as %2F or %23) are kept
    verbatim so the URI structure is unchanged.
    """
    pieces: list[str] = []
    pos = 0
    for match in _ESCAPE_RUN.finditer(value):
        literal = value[pos : match.start()]
        if "%" in literal:
            raise PermalinkDecodeError(f"Malformed percent escape in: {value}")
        pieces.append(literal)
        pieces.append(_decode_run(match.group(0)))
        pos = match.end()

    tail = value[pos:]
    if "%" in tail:
        raise PermalinkDecodeError(f"Malformed percent escape in: {value}")
    pieces.append(tail)

    return "".join(pieces)


def strip_index_suffix(permalink: str) -> str:
    """Drop a trailing index.html, keeping the directory slash."""
    if permalink.endswith(INDEX_SUFFIX):
        return permalink[: -len("index.html")]
    return permalink


def display_permalink(permalink: str | None) -> str:
    """Normalize a page permalink for display in the licensing block."""
    if not permalink:
        return ""
    return decode_uri(strip_index_suffix(permalink))
