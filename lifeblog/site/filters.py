#!/usr/bin/env python3
"""
filters.py
----------
Custom Jinja2 filters for page templates.

Filters:
    - date_display: "Jul 8, 2022" style dates for listings and bylines
    - iso_date: ISO 8601 dates for <time datetime> and meta tags
    - tag_color: Colour for a tag chip, from the site config
    - absolute_url: Join a path onto the configured site origin
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Any, Optional

# --- Third-party imports ---
from jinja2 import pass_context
from jinja2.runtime import Context

# --- Local imports ---
from lifeblog.core.config import DEFAULT_TAG_COLOR, SiteConfig


def date_display(value: Optional[date]) -> str:
    """
    Format a date for display.

    Examples:
        >>> date_display(date(2022, 7, 8))
        'Jul 8, 2022'
    """
    if value is None:
        return ""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def iso_date(value: Optional[date]) -> str:
    if value is None:
        return ""
    return value.isoformat()


def _site_config(context: Context) -> Optional[SiteConfig]:
    config: Any = context.get("config")
    return config if isinstance(config, SiteConfig) else None


@pass_context
def tag_color(context: Context, tag: str) -> str:
    """Colour for a tag chip; unknown tags share the neutral colour."""
    config = _site_config(context)
    if config is None:
        return DEFAULT_TAG_COLOR
    return config.tag_color(tag)


@pass_context
def absolute_url(context: Context, path: str) -> str:
    """Absolute URL for ``path`` (returned unchanged without a config)."""
    config = _site_config(context)
    if config is None:
        return path
    return config.absolute_url(path)
