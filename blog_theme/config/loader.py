import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from blog_theme.config.models import PageContext, SiteConfig

logger = logging.getLogger(__name__)

LANGUAGES_DIR = Path(__file__).resolve().parent.parent / "languages"


def _read_yaml(path: Path, label: str) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"{label.capitalize()} file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in {label}: {e}") from e


def _validate(model: type[BaseModel], data: Any, label: str) -> Any:
    try:
        return model.model_validate(data or {})
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"{label.capitalize()} validation failed:\n{e}") from e


def load_site_config(path: Path) -> SiteConfig:
    """
    Load and validate a site config file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    data = _read_yaml(path, "site config")
    config: SiteConfig = _validate(SiteConfig, data, "site config")
    logger.info("Site config loaded from %s", path)
    return config


def load_page(path: Path) -> PageContext:
    """
    Load a page context from a YAML file (front-matter style fields).
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    data = _read_yaml(path, "page")
    page: PageContext = _validate(PageContext, data, "page")
    logger.info("Page loaded from %s", path)
    return page


@lru_cache
def load_language(name: str, languages_dir: Path = LANGUAGES_DIR) -> dict[str, Any]:
    """
    Load a language catalogue by name (e.g. "en", "zh-CN").

    Returns an empty catalogue when no file exists for the language.
    """
    path = languages_dir / f"{name}.yml"
    if not path.exists():
        logger.warning("No language file for %r in %s", name, languages_dir)
        return {}
    data = _read_yaml(path, "language")
    if not isinstance(data, dict):
        raise ValueError(f"Language file {path} must contain a mapping")
    return data
