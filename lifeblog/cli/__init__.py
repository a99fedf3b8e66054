#!/usr/bin/env python3
"""
lifeblog CLI
------------

Command-line interface for building and previewing the blog.

Commands:
    - build: Render the site into the output directory
    - list: Show articles newest first
    - new: Scaffold a new article with front matter
    - serve: Build, then serve the output locally

Usage:
    lifeblog build --clean
    lifeblog list --drafts
    lifeblog new "Compiling Rust to WebAssembly" --tag rust --tag wasm
    lifeblog serve --port 4321
"""
from __future__ import annotations

import click
from pathlib import Path

from lifeblog.core.paths import LOG_DIR


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Life of Anish: static blog generator"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose


from .site import build, serve
from .articles import list_articles, new_article

cli.add_command(build)
cli.add_command(list_articles)
cli.add_command(new_article)
cli.add_command(serve)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
