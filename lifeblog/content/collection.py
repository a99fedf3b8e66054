#!/usr/bin/env python3
"""
collection.py
-------------
The blog content collection.

Loads every article under the blog directory, drops drafts unless asked
for them, and orders the listing newest first.

Usage:
    from lifeblog.content.collection import load_articles, sort_articles

    result = load_articles(BLOG_DIR)
    for article in sort_articles(result.articles):
        print(article.pub_date, article.title)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

# --- Local imports ---
from lifeblog.content.article import Article
from lifeblog.core.exceptions import ArticleValidationError, ContentError
from lifeblog.core.logging_manager import BlogLogger, safe_logger
from lifeblog.utils.fs import find_content_files


@dataclass
class LoadResult:
    """
    Outcome of loading the collection.

    Attributes:
        articles: Successfully parsed, publishable articles
        drafts: Draft articles that were skipped
        errors: (source path, error) pairs for files that failed
    """

    articles: List[Article] = field(default_factory=list)
    drafts: List[Article] = field(default_factory=list)
    errors: List[Tuple[Path, ContentError]] = field(default_factory=list)


def load_articles(
    content_dir: Path,
    include_drafts: bool = False,
    logger: Optional[BlogLogger] = None,
) -> LoadResult:
    """
    Parse every article under ``content_dir``.

    A file that fails to parse is recorded in ``errors`` and logged;
    it never stops the rest of the collection from loading. Two files
    mapping onto the same slug are an error for the second one.

    Args:
        content_dir: Directory holding ``*.md`` / ``*.mdx`` articles
        include_drafts: Keep articles marked ``draft: true``
        logger: Optional logger

    Returns:
        LoadResult with articles in discovery order
    """
    log = safe_logger(logger)
    result = LoadResult()
    seen: Dict[str, Path] = {}

    for path in find_content_files(content_dir):
        try:
            article = Article.from_file(path)
            if article.slug in seen:
                raise ArticleValidationError(
                    f"{path}: slug '{article.slug}' already used by {seen[article.slug]}"
                )
        except ContentError as e:
            log.log_error(e, {"file": str(path)})
            log.log_warning(f"Skipping {path.name}", {"error": str(e)})
            result.errors.append((path, e))
            continue

        seen[article.slug] = path
        if article.draft and not include_drafts:
            log.log_debug("Skipping draft", {"slug": article.slug})
            result.drafts.append(article)
            continue

        log.log_debug("Loaded article", {"slug": article.slug, "pubDate": article.pub_date})
        result.articles.append(article)

    return result


def sort_articles(articles: Iterable[Article]) -> List[Article]:
    """
    Order articles by publication date, newest first.

    Articles sharing a date are ordered by slug so the listing is
    stable between builds.
    """
    by_slug = sorted(articles, key=lambda a: a.slug)
    return sorted(by_slug, key=lambda a: a.pub_date, reverse=True)


def collect_tags(articles: Iterable[Article]) -> Dict[str, int]:
    """
    Count how many articles use each tag.

    Returns:
        Tag -> count, most used first (ties alphabetical)
    """
    counts = Counter(tag for article in articles for tag in article.tags)
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))
