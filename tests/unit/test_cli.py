"""
Tests for the blog-theme CLI.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from blog_theme.app_shell.cli import main
from blog_theme.core.services import component_cache
from blog_theme.core.services.component_cache import ComponentCache

SITE_YAML = """\
author: Jane Doe
article:
  licenses:
    Creative Commons: https://creativecommons.org/
    Attribution:
      icon: fab fa-creative-commons-by
      url: https://creativecommons.org/licenses/by/4.0/
"""

PAGE_YAML = """\
title: Hello World
permalink: https://example.com/hello-world/index.html
date: 2025-01-02 09:30:00
"""


@pytest.fixture
def files(tmp_path: Path) -> tuple[str, str]:
    config = tmp_path / "_config.yml"
    page = tmp_path / "page.yml"
    config.write_text(SITE_YAML, encoding="utf-8")
    page.write_text(PAGE_YAML, encoding="utf-8")
    return str(config), str(page)


@pytest.fixture(autouse=True)
def isolated_cache(monkeypatch: pytest.MonkeyPatch) -> ComponentCache:
    cache: ComponentCache = ComponentCache()
    monkeypatch.setattr(component_cache, "default_cache", cache)
    return cache


class TestRender:
    def test_render_prints_html(self, files, capsys, isolated_cache) -> None:
        config, page = files
        main(["render", "--config", config, "--page", page])
        out = capsys.readouterr().out
        assert out.startswith('<div class="article-licensing box">')
        assert "https://example.com/hello-world/" in out
        assert ">Jane Doe<" in out
        assert len(isolated_cache) == 1

    def test_render_no_cache(self, files, capsys, isolated_cache) -> None:
        config, page = files
        main(["render", "--config", config, "--page", page, "--no-cache"])
        assert "article-licensing" in capsys.readouterr().out
        assert len(isolated_cache) == 0

    def test_missing_file_exits(self, files, tmp_path: Path) -> None:
        config, _ = files
        with pytest.raises(SystemExit) as exc:
            main(["render", "--config", config, "--page", str(tmp_path / "nope.yml")])
        assert exc.value.code == 1


class TestProps:
    def test_props_json(self, files, capsys) -> None:
        config, page = files
        main(["props", "--config", config, "--page", page])
        props = json.loads(capsys.readouterr().out)
        assert props["link"] == "https://example.com/hello-world/"
        assert props["author"] == "Jane Doe"
        assert props["author_title"] == "Author"
        assert props["created_at"] == "2025-01-02"
        assert props["updated_at"] is None
        assert list(props["licenses"]) == ["Creative Commons", "Attribution"]
        assert props["licenses"]["Attribution"]["icon"] == "fab fa-creative-commons-by"
