#!/usr/bin/env python3
"""
config.py
---------
Site configuration.

Site-wide values (title, description, origin, tag colours, font
preloads) live in ``site.yaml`` at the project root. Every key is
optional; missing keys fall back to the defaults below. The
``LIFEBLOG_SITE`` environment variable overrides the site origin so a
preview build can be produced without editing the file.

Usage:
    from lifeblog.core.config import load_site_config

    config = load_site_config()
    config.absolute_url("/blog/hello/")  # "https://example.com/blog/hello/"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

# --- Third-party imports ---
import yaml

# --- Local imports ---
from lifeblog.core.exceptions import ConfigError
from lifeblog.core.paths import SITE_CONFIG_PATH

logger = logging.getLogger(__name__)


# ----- Defaults -----
SITE_TITLE = "Life of Anish"
SITE_DESCRIPTION = "A blog about software development and other things."
SITE_ORIGIN = "https://example.com"
SITE_ENV_VAR = "LIFEBLOG_SITE"

TAG_COLORS: Dict[str, str] = {
    "rust": "#E43717",
    "axum": "#0645B1",
}
DEFAULT_TAG_COLOR = "#5C5D67"


@dataclass
class SiteConfig:
    """
    Site-wide settings consumed by the head component and templates.

    Attributes:
        title: Site title, also the home page <title>
        description: Default meta description
        site: Site origin used for canonical and social URLs
        author: Author name shown in the footer
        social_image: Default Open Graph / Twitter preview image path, if any
        tag_colors: Tag name -> CSS colour for tag chips
        fonts: Font file paths to preload (files must exist under public/)
        github: Optional profile link for the footer
    """

    title: str = SITE_TITLE
    description: str = SITE_DESCRIPTION
    site: str = SITE_ORIGIN
    author: str = "Anish"
    social_image: Optional[str] = None
    tag_colors: Dict[str, str] = field(default_factory=lambda: dict(TAG_COLORS))
    fonts: List[str] = field(default_factory=list)
    github: Optional[str] = None

    def __post_init__(self) -> None:
        self.site = self.site.rstrip("/")
        if not self.site.startswith(("http://", "https://")):
            raise ConfigError(f"site must be an http(s) origin, got '{self.site}'")

    def absolute_url(self, path: str) -> str:
        """
        Join a site-relative path onto the origin.

        Examples:
            >>> SiteConfig(site="https://x.dev/").absolute_url("blog/a/")
            'https://x.dev/blog/a/'
        """
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.site}/{path.lstrip('/')}"

    def tag_color(self, tag: str) -> str:
        return self.tag_colors.get(tag.lower(), DEFAULT_TAG_COLOR)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SiteConfig":
        """
        Build a config from a parsed mapping, ignoring unknown keys.

        Raises:
            ConfigError: If a known key has the wrong type
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown site config key '%s'", key)
                continue
            kwargs[key] = value

        tag_colors = kwargs.get("tag_colors")
        if tag_colors is not None:
            if not isinstance(tag_colors, dict):
                raise ConfigError("tag_colors must map tag names to colours")
            kwargs["tag_colors"] = {**TAG_COLORS, **{str(k).lower(): str(v) for k, v in tag_colors.items()}}

        fonts = kwargs.get("fonts")
        if fonts is not None and not isinstance(fonts, list):
            raise ConfigError("fonts must be a list of paths")

        for key in ("title", "description", "site", "author"):
            if key in kwargs and not isinstance(kwargs[key], str):
                raise ConfigError(f"{key} must be a string")
        social_image = kwargs.get("social_image")
        if social_image is not None and not isinstance(social_image, str):
            raise ConfigError("social_image must be a string")

        return cls(**kwargs)


def load_site_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SiteConfig:
    """
    Load the site configuration.

    A missing file yields the defaults. The ``LIFEBLOG_SITE`` environment
    variable, when set, replaces the configured origin.

    Args:
        path: Config file (defaults to ROOT/site.yaml)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        SiteConfig instance

    Raises:
        ConfigError: If the file exists but is not a valid YAML mapping
    """
    path = path or SITE_CONFIG_PATH
    environ = os.environ if environ is None else environ

    data: Dict[str, Any] = {}
    if path.exists():
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read site config {path}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{path}: expected a mapping at top level")
        data = loaded
        logger.debug("Loaded site config from %s", path)

    override = environ.get(SITE_ENV_VAR)
    if override:
        data = {**data, "site": override}

    return SiteConfig.from_mapping(data)
