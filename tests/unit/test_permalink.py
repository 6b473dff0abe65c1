"""
Tests for permalink display normalization.
"""

from __future__ import annotations

import pytest

from blog_theme.core.services.permalink import (
    PermalinkDecodeError,
    decode_uri,
    display_permalink,
    strip_index_suffix,
)


class TestStripIndexSuffix:
    def test_strips_index_keeps_slash(self) -> None:
        assert strip_index_suffix("https://x/post/index.html") == "https://x/post/"

    def test_root_index(self) -> None:
        assert strip_index_suffix("https://x/index.html") == "https://x/"

    @pytest.mark.parametrize(
        "permalink",
        [
            "https://x/post/page2.html",
            "https://x/post/",
            "https://x/myindex.html",
            "index.html",
        ],
    )
    def test_other_paths_unchanged(self, permalink: str) -> None:
        assert strip_index_suffix(permalink) == permalink


class TestDecodeUri:
    def test_plain_text_unchanged(self) -> None:
        assert decode_uri("https://x/post/") == "https://x/post/"

    def test_decodes_spaces_and_unicode(self) -> None:
        assert decode_uri("/a%20b/%C3%A9t%C3%A9/") == "/a b/été/"

    def test_decodes_four_byte_sequences(self) -> None:
        assert decode_uri("/%F0%9F%98%80/") == "/😀/"

    @pytest.mark.parametrize("escape", ["%2F", "%3F", "%23", "%26", "%3D", "%2B", "%24", "%2C"])
    def test_reserved_characters_stay_encoded(self, escape: str) -> None:
        assert decode_uri(f"/a{escape}b") == f"/a{escape}b"

    def test_lowercase_hex_accepted(self) -> None:
        assert decode_uri("/%c3%a9") == "/é"

    @pytest.mark.parametrize(
        "value",
        ["/100%", "/%zz", "/%E4%BD", "/%C3%28", "/%FF", "/%E4x%BD%A0"],
    )
    def test_malformed_raises(self, value: str) -> None:
        with pytest.raises(PermalinkDecodeError):
            decode_uri(value)

    def test_decode_error_is_value_error(self) -> None:
        assert issubclass(PermalinkDecodeError, ValueError)


class TestDisplayPermalink:
    def test_strip_then_decode(self) -> None:
        assert display_permalink("https://x/caf%C3%A9/index.html") == "https://x/café/"

    @pytest.mark.parametrize("permalink", [None, ""])
    def test_empty(self, permalink) -> None:
        assert display_permalink(permalink) == ""
