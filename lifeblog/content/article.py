#!/usr/bin/env python3
"""
article.py
-------------------
Dataclass for blog articles with YAML front matter.

An article is one Markdown or MDX file under ``content/blog``:

    ---
    title: Building a Blog with Axum
    description: Notes from wiring up a small web service.
    pubDate: Jul 08 2022
    tags: [rust, axum]
    ---

    Body in Markdown...

The file stem becomes the slug and the page lives at ``/blog/<slug>/``.
Articles are read once at build time and never mutated.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# --- Third-party imports ---
import yaml

# --- Local imports ---
from lifeblog.core.exceptions import (
    ArticleParseError,
    ArticleValidationError,
    ValidationError,
)
from lifeblog.core.validators import DataValidator
from lifeblog.utils.md import split_frontmatter
from lifeblog.utils.slugify import slugify

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ["title", "description", "pubDate"]

# Front matter key -> accepted aliases
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "pubDate": ("pubDate", "pub_date", "date"),
    "updatedDate": ("updatedDate", "updated_date", "updated"),
    "heroImage": ("heroImage", "hero_image"),
}


@dataclass(frozen=True)
class Article:
    """
    A single authored article.

    Attributes:
        slug: URL segment derived from the file name
        title: Article title
        description: One-line summary, used in listings and meta tags
        pub_date: Publication date
        tags: Unique lowercase labels in authored order
        body: Markdown body (front matter removed)
        updated_date: Optional last-updated date
        hero_image: Optional social/preview image path
        draft: Drafts are left out of normal builds
        source_path: File the article was read from
    """

    slug: str
    title: str
    description: str
    pub_date: date
    tags: Tuple[str, ...] = ()
    body: str = ""
    updated_date: Optional[date] = None
    hero_image: Optional[str] = None
    draft: bool = False
    source_path: Optional[Path] = field(default=None, compare=False)

    @property
    def url_path(self) -> str:
        """Site-relative URL of the article page."""
        return f"/blog/{self.slug}/"

    @property
    def output_path(self) -> Path:
        """Output file relative to the build directory."""
        return Path("blog") / self.slug / "index.html"

    # ----- Construction -----

    @classmethod
    def from_file(cls, path: Path) -> "Article":
        """
        Read an article from disk.

        Raises:
            ArticleParseError: If the file cannot be read or parsed
            ArticleValidationError: If required metadata is missing/invalid
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ArticleParseError(f"Cannot read {path}: {e}") from e
        return cls.from_text(text, slug=slugify(path.stem), source_path=path)

    @classmethod
    def from_text(
        cls,
        text: str,
        slug: str,
        source_path: Optional[Path] = None,
    ) -> "Article":
        """
        Parse article text (front matter plus body).

        Args:
            text: Full file content
            slug: URL slug for the article
            source_path: Optional originating file, for error messages

        Returns:
            Parsed Article

        Raises:
            ArticleParseError: If the front matter is absent or malformed
            ArticleValidationError: If required metadata is missing/invalid
        """
        label = str(source_path) if source_path else slug
        frontmatter, body_lines = split_frontmatter(text)
        if not frontmatter.strip():
            raise ArticleParseError(f"{label}: missing YAML front matter")

        try:
            metadata = yaml.safe_load(frontmatter)
        except (yaml.YAMLError, ValueError) as e:
            # PyYAML raises ValueError for timestamps like 2022-13-45
            raise ArticleParseError(f"{label}: cannot parse YAML front matter: {e}") from e

        if not isinstance(metadata, dict):
            raise ArticleParseError(
                f"{label}: front matter must be a mapping, got {type(metadata).__name__}"
            )

        return cls.from_metadata(
            metadata,
            body="\n".join(body_lines),
            slug=slug,
            source_path=source_path,
        )

    @classmethod
    def from_metadata(
        cls,
        metadata: Dict[str, Any],
        body: str,
        slug: str,
        source_path: Optional[Path] = None,
    ) -> "Article":
        """
        Build an article from an already-parsed front matter mapping.

        Raises:
            ArticleValidationError: If required metadata is missing/invalid
        """
        label = str(source_path) if source_path else slug
        data = _resolve_aliases(metadata)

        try:
            DataValidator.validate_required_fields(data, REQUIRED_FIELDS)
            pub_date = DataValidator.normalize_date(data["pubDate"])
            updated_date = DataValidator.normalize_date(data.get("updatedDate"))
            tags = DataValidator.normalize_tags(data.get("tags"))
            draft = DataValidator.normalize_bool(data.get("draft", False))
        except ValidationError as e:
            raise ArticleValidationError(f"{label}: {e}") from e

        if not slug:
            raise ArticleValidationError(f"{label}: cannot derive a slug")

        if updated_date and pub_date and updated_date < pub_date:
            logger.warning("%s: updatedDate %s precedes pubDate %s", label, updated_date, pub_date)

        return cls(
            slug=slug,
            title=str(data["title"]).strip(),
            description=str(data["description"]).strip(),
            pub_date=pub_date,  # type: ignore[arg-type]
            tags=tags,
            body=body,
            updated_date=updated_date,
            hero_image=DataValidator.normalize_string(data.get("heroImage")),
            draft=draft,
            source_path=source_path,
        )

    def to_frontmatter(self) -> str:
        """
        Render this article's metadata as a front matter block.

        Used when scaffolding new articles.
        """
        metadata: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "pubDate": self.pub_date.isoformat(),
            "tags": list(self.tags),
        }
        if self.updated_date:
            metadata["updatedDate"] = self.updated_date.isoformat()
        if self.hero_image:
            metadata["heroImage"] = self.hero_image
        if self.draft:
            metadata["draft"] = True
        dumped = yaml.safe_dump(
            metadata, sort_keys=False, allow_unicode=True, default_flow_style=None
        )
        return f"---\n{dumped}---\n"


def _resolve_aliases(metadata: Dict[str, Any]) -> Dict[str, Any]:
    """Map alias keys (``date``, ``pub_date``...) onto canonical names."""
    data = dict(metadata)
    for canonical, aliases in FIELD_ALIASES.items():
        if canonical in data:
            continue
        for alias in aliases:
            if alias in data:
                data[canonical] = data.pop(alias)
                break
    return data
