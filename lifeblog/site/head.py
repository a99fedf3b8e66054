#!/usr/bin/env python3
"""
head.py
-------
Document head metadata.

Every page's <head> carries the same set of tags, built here and
rendered by ``components/head.html.jinja2``:

    - <title>, description and canonical URL
    - Open Graph and Twitter card tags (absolute URLs)
    - font preloads
    - the inline theme bootstrap script, placed before any stylesheet
      so the first paint already uses the persisted palette
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

# --- Local imports ---
from lifeblog.core.config import SiteConfig
from lifeblog.islands.dark_mode import bootstrap_script


@dataclass(frozen=True)
class FontPreload:
    href: str

    @property
    def type(self) -> str:
        suffix = self.href.rsplit(".", 1)[-1].lower()
        return f"font/{suffix}"


@dataclass(frozen=True)
class HeadMeta:
    """
    Everything the head component renders.

    Attributes:
        title: Document title
        description: Meta description
        canonical_url: Absolute canonical URL
        image_url: Absolute social preview image URL (None: no image tags)
        og_type: ``website`` for listings, ``article`` for articles
        fonts: Font files to preload
        theme_script: Inline bootstrap script text
        published: Article publication date (articles only)
        modified: Article last-updated date (articles only)
        tags: Article tags, emitted as ``article:tag``
    """

    title: str
    description: str
    canonical_url: str
    image_url: Optional[str] = None
    og_type: str = "website"
    site_name: str = ""
    fonts: List[FontPreload] = field(default_factory=list)
    theme_script: str = ""
    published: Optional[date] = None
    modified: Optional[date] = None
    tags: List[str] = field(default_factory=list)


def build_head(
    config: SiteConfig,
    path: str,
    title: Optional[str] = None,
    description: Optional[str] = None,
    image: Optional[str] = None,
    og_type: str = "website",
    published: Optional[date] = None,
    modified: Optional[date] = None,
    tags: Optional[List[str]] = None,
) -> HeadMeta:
    """
    Build head metadata for a page.

    Args:
        config: Site configuration (origin, defaults, fonts)
        path: Site-relative URL of the page, e.g. ``/blog/hello/``
        title: Page title (defaults to the site title)
        description: Page description (defaults to the site description)
        image: Preview image path (defaults to the site social image)
        og_type: Open Graph type
        published: Publication date for articles
        modified: Last-updated date for articles
        tags: Article tags

    Returns:
        HeadMeta with absolute canonical and image URLs
    """
    preview = image or config.social_image
    page_title = title or config.title
    if title and title != config.title:
        page_title = f"{title} | {config.title}"

    return HeadMeta(
        title=page_title,
        description=description or config.description,
        canonical_url=config.absolute_url(path),
        image_url=config.absolute_url(preview) if preview else None,
        og_type=og_type,
        site_name=config.title,
        fonts=[FontPreload(href) for href in config.fonts],
        theme_script=bootstrap_script(),
        published=published,
        modified=modified,
        tags=list(tags or []),
    )
