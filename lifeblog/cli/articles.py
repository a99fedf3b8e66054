"""
Article Commands
----------------

Commands for working with the content collection.

Commands:
    - list: Show articles newest first, as the home page lists them
    - new: Scaffold an article file with front matter
"""
from __future__ import annotations

import click
from datetime import date
from pathlib import Path
from typing import Optional, Tuple

from lifeblog.cli.site import content_option
from lifeblog.content.article import Article
from lifeblog.content.collection import load_articles, sort_articles
from lifeblog.core.cli import setup_logger
from lifeblog.core.exceptions import BlogError, BuildError, ValidationError
from lifeblog.core.logging_manager import handle_cli_error
from lifeblog.core.validators import DataValidator
from lifeblog.utils.slugify import slugify


@click.command("list")
@content_option
@click.option("--drafts", is_flag=True, help="Include articles marked draft")
@click.pass_context
def list_articles(ctx: click.Context, content: Path, drafts: bool) -> None:
    """List articles, newest first."""
    logger = setup_logger(ctx.obj["log_dir"], "list")
    ctx.obj["logger"] = logger
    result = load_articles(content, include_drafts=drafts, logger=logger)

    articles = sort_articles(result.articles)
    if not articles:
        click.echo("No articles found.")
    for article in articles:
        tags = f"  [{', '.join(article.tags)}]" if article.tags else ""
        draft = "  (draft)" if article.draft else ""
        click.echo(f"{article.pub_date.isoformat()}  {article.slug}{draft}{tags}")

    for path, error in result.errors:
        click.echo(f"⚠️  {path.name}: {error}", err=True)


@click.command("new")
@click.argument("title")
@content_option
@click.option("-d", "--description", default="", help="One-line summary")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag (repeatable)")
@click.option("--slug", default=None, help="File name (defaults to the slugified title)")
@click.option("--date", "pub_date", default=None, help="Publication date (default: today)")
@click.option("--mdx", is_flag=True, help="Create an .mdx file")
@click.option("--draft/--no-draft", default=True, show_default=True, help="Mark as draft")
@click.pass_context
def new_article(
    ctx: click.Context,
    title: str,
    content: Path,
    description: str,
    tags: Tuple[str, ...],
    slug: Optional[str],
    pub_date: Optional[str],
    mdx: bool,
    draft: bool,
) -> None:
    """Scaffold a new article. Refuses to overwrite an existing file."""
    logger = setup_logger(ctx.obj["log_dir"], "new")
    ctx.obj["logger"] = logger

    try:
        article_slug = slugify(slug or title)
        if not article_slug:
            raise ValidationError(f"Cannot derive a slug from '{title}'")
        article = Article(
            slug=article_slug,
            title=title,
            description=description or title,
            pub_date=DataValidator.normalize_date(pub_date) or date.today(),
            tags=DataValidator.normalize_tags(list(tags)),
            draft=draft,
        )

        path = content / f"{article_slug}{'.mdx' if mdx else '.md'}"
        if path.exists():
            raise BuildError(f"{path} already exists")

        content.mkdir(parents=True, exist_ok=True)
        path.write_text(
            f"{article.to_frontmatter()}\nStart writing here.\n",
            encoding="utf-8",
        )
        logger.log_operation("new_article", {"path": str(path), "slug": article_slug})
    except (BlogError, OSError) as e:
        handle_cli_error(ctx, e, "new", {"title": title})
        return

    click.echo(f"📝 Created {path}")
