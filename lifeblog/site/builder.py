#!/usr/bin/env python3
"""
builder.py
----------
Static site build.

Loads the blog collection, renders the home page and one page per
article, then copies the generator's static assets and the project's
``public/`` directory into the output.

Output layout:
    dist/
    ├── index.html               # article listing, newest first
    ├── blog/<slug>/index.html   # one per article
    ├── css/site.css
    ├── js/*.js                  # island scripts
    └── ...                      # everything from public/

Pages are only rewritten when their content changes. An article that
fails to parse or render is logged and counted; the rest of the site
still builds unless ``strict`` is set.
Article pages from earlier builds whose article was deleted, turned
into a draft or failed this time are removed from the output.

Usage:
    from lifeblog.site.builder import SiteBuilder

    builder = SiteBuilder(config=load_site_config(), logger=logger)
    stats = builder.build()
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

# --- Local imports ---
from lifeblog.content.article import Article
from lifeblog.content.collection import collect_tags, load_articles, sort_articles
from lifeblog.core.cli import BuildStats
from lifeblog.core.config import SiteConfig
from lifeblog.core.exceptions import BuildError, ContentError
from lifeblog.core.logging_manager import BlogLogger, safe_logger
from lifeblog.core.paths import BLOG_DIR, DIST_DIR, PUBLIC_DIR, STATIC_DIR
from lifeblog.islands.dark_mode import DarkModeSwitch
from lifeblog.islands.embed import WasmEmbed
from lifeblog.islands.state import Store
from lifeblog.site.head import build_head
from lifeblog.site.markdown import create_markdown, render_markdown
from lifeblog.site.renderer import SiteRenderer
from lifeblog.utils.fs import copy_tree, write_if_changed


INDEX_TEMPLATE = "index.html.jinja2"
ARTICLE_TEMPLATE = "article.html.jinja2"


class SiteBuilder:
    """
    Builds the static site.

    Attributes:
        config: Site configuration
        content_dir: Directory holding articles
        output_dir: Build output directory
        public_dir: Directory copied verbatim into the output
        static_dir: Generator assets (css, island scripts)
        renderer: Jinja2 renderer
        logger: Logger (NullLogger when not provided)
    """

    def __init__(
        self,
        config: SiteConfig,
        content_dir: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        public_dir: Optional[Path] = None,
        static_dir: Optional[Path] = None,
        renderer: Optional[SiteRenderer] = None,
        logger: Optional[BlogLogger] = None,
        include_drafts: bool = False,
        strict: bool = False,
        today: Optional[date] = None,
    ) -> None:
        self.config = config
        self.content_dir = content_dir or BLOG_DIR
        self.output_dir = output_dir or DIST_DIR
        self.public_dir = public_dir or PUBLIC_DIR
        self.static_dir = static_dir or STATIC_DIR
        self.renderer = renderer or SiteRenderer()
        self.logger = safe_logger(logger)
        self.include_drafts = include_drafts
        self.strict = strict
        self.today = today or date.today()
        self.md = create_markdown()

    # ----- Public API -----

    def build(self, clean: bool = False) -> BuildStats:
        """
        Build the whole site.

        Args:
            clean: Remove the output directory first

        Returns:
            BuildStats for the run

        Raises:
            BuildError: If output cannot be written, or if ``strict`` is
                set and any article failed
        """
        stats = BuildStats()
        self.logger.log_info(
            "Building site",
            {"content": str(self.content_dir), "output": str(self.output_dir)},
        )

        if clean:
            self.clean()

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BuildError(f"Cannot create output directory {self.output_dir}: {e}") from e

        result = load_articles(
            self.content_dir,
            include_drafts=self.include_drafts,
            logger=self.logger,
        )
        stats.articles_loaded = len(result.articles)
        stats.drafts_skipped = len(result.drafts)
        for path, _error in result.errors:
            stats.record_error(str(path))

        articles = sort_articles(result.articles)
        published: List[Article] = []
        pages: Set[Path] = set()
        for article in articles:
            try:
                self._write_page(stats, self.render_article(article), article.output_path)
            except ContentError as e:
                self.logger.log_error(e, {"slug": article.slug})
                stats.record_error(str(article.source_path or article.slug))
                continue
            published.append(article)
            pages.add(article.output_path)

        self._write_page(stats, self.render_index(published), Path("index.html"))
        self._prune_stale_pages(stats, pages)
        self._copy_assets(stats)

        stats.finish()
        self.logger.log_operation("build", stats.to_dict())

        if self.strict and stats.errors:
            raise BuildError(
                f"{stats.errors} article(s) failed: {', '.join(stats.failed)}"
            )
        return stats

    def clean(self) -> None:
        """Remove the output directory."""
        if self.output_dir.exists():
            shutil.rmtree(self.output_dir)
            self.logger.log_info("Removed output directory", {"path": str(self.output_dir)})

    def render_index(self, articles: List[Article]) -> str:
        """Render the home page listing (``articles`` already sorted)."""
        context = self._base_context("/", build_head(self.config, "/"))
        context.update({
            "articles": articles,
            "tags": collect_tags(articles),
        })
        return self.renderer.render(INDEX_TEMPLATE, context)

    def render_article(self, article: Article) -> str:
        """
        Render one article page.

        Raises:
            ContentError: If the body contains a malformed embed block
        """
        body_html, env = render_markdown(article.body, self.md)
        embeds: List[WasmEmbed] = env["embeds"]
        if len(embeds) > 1:
            self.logger.log_warning(
                "Only the first embedded module on a page is mounted",
                {"slug": article.slug, "embeds": len(embeds)},
            )

        head = build_head(
            self.config,
            article.url_path,
            title=article.title,
            description=article.description,
            image=article.hero_image,
            og_type="article",
            published=article.pub_date,
            modified=article.updated_date,
            tags=list(article.tags),
        )
        context = self._base_context(article.url_path, head)
        context.update({
            "article": article,
            "body_html": body_html,
        })
        if embeds:
            context["scripts"].append(f"/{WasmEmbed.script}")
        return self.renderer.render(ARTICLE_TEMPLATE, context)

    # ----- Internals -----

    def _base_context(self, path: str, head: Any) -> Dict[str, Any]:
        # Build-time render: no storage, so the switch renders the light state
        switch = DarkModeSwitch(store=Store())
        return {
            "config": self.config,
            "head": head,
            "current_path": path,
            "dark_mode_switch": switch,
            "scripts": [f"/{DarkModeSwitch.script}"],
            "year": self.today.year,
        }

    def _write_page(self, stats: BuildStats, html: str, relative: Path) -> None:
        target = self.output_dir / relative
        try:
            changed = write_if_changed(target, html)
        except OSError as e:
            raise BuildError(f"Cannot write {target}: {e}") from e
        if changed:
            stats.pages_written += 1
            self.logger.log_operation("write_page", {"path": str(relative)})
        else:
            stats.pages_unchanged += 1
            self.logger.log_debug("Page unchanged", {"path": str(relative)})

    def _prune_stale_pages(self, stats: BuildStats, keep: Set[Path]) -> None:
        """Delete article pages left by earlier builds (removed, drafted or broken)."""
        blog_root = self.output_dir / "blog"
        if not blog_root.is_dir():
            return
        for page in sorted(blog_root.glob("*/index.html")):
            relative = page.relative_to(self.output_dir)
            if relative in keep or (self.public_dir / relative).exists():
                continue
            try:
                page.unlink()
                if not any(page.parent.iterdir()):
                    page.parent.rmdir()
            except OSError as e:
                raise BuildError(f"Cannot remove stale page {page}: {e}") from e
            stats.pages_removed += 1
            self.logger.log_operation("remove_page", {"path": str(relative)})

    def _copy_assets(self, stats: BuildStats) -> None:
        try:
            stats.assets_copied += copy_tree(self.static_dir, self.output_dir)
            stats.assets_copied += copy_tree(self.public_dir, self.output_dir)
        except OSError as e:
            raise BuildError(f"Cannot copy assets into {self.output_dir}: {e}") from e
