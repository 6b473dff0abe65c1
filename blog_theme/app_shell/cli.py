import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from blog_theme.adapters.theme_helper import ThemeHelper
from blog_theme.components.article_licensing import (
    CacheableLicensingInput,
    RenderLicensingInput,
    derive_render_props,
    run_cacheable,
    run_render,
)
from blog_theme.config.loader import load_page, load_site_config
from blog_theme.config.models import PageContext, SiteConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def load_inputs(args: argparse.Namespace) -> tuple[SiteConfig, PageContext]:
    config_path = Path(args.config)
    page_path = Path(args.page)
    for path in (config_path, page_path):
        if not path.exists():
            logger.error(f"File {path} not found.")
            sys.exit(1)

    return load_site_config(config_path), load_page(page_path)


def handle_render(args: argparse.Namespace) -> None:
    config, page = load_inputs(args)
    helper = ThemeHelper(config)

    if args.no_cache:
        props = derive_render_props(config, page, helper)
        output = run_render(RenderLicensingInput(props=props))
    else:
        output = run_cacheable(CacheableLicensingInput(config=config, page=page), helper=helper)
    print(output.html)


def handle_props(args: argparse.Namespace) -> None:
    config, page = load_inputs(args)
    props = derive_render_props(config, page, ThemeHelper(config))
    print(json.dumps(dataclasses.asdict(props), indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Blog theme widget renderer")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # render
    render_parser = subparsers.add_parser("render", help="Render the article licensing block")
    render_parser.add_argument("--config", required=True, help="Path to site _config.yml")
    render_parser.add_argument("--page", required=True, help="Path to page YAML")
    render_parser.add_argument(
        "--no-cache", action="store_true", help="Render directly, bypassing the render cache"
    )

    # props
    props_parser = subparsers.add_parser("props", help="Print derived render props as JSON")
    props_parser.add_argument("--config", required=True, help="Path to site _config.yml")
    props_parser.add_argument("--page", required=True, help="Path to page YAML")

    args = parser.parse_args(argv)

    if args.command == "render":
        handle_render(args)
    elif args.command == "props":
        handle_props(args)


if __name__ == "__main__":
    main()
