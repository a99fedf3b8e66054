"""
Site Commands
-------------

Commands that render the site.

Commands:
    - build: Render the site into the output directory
    - serve: Build, then serve the output for local preview (static files
      only, nothing is rendered per request)
"""
from __future__ import annotations

import click
import functools
import http.server
from pathlib import Path
from typing import Optional

from lifeblog.core.cli import BuildStats, setup_logger
from lifeblog.core.config import load_site_config
from lifeblog.core.exceptions import BlogError
from lifeblog.core.logging_manager import handle_cli_error
from lifeblog.core.paths import BLOG_DIR, DIST_DIR, PUBLIC_DIR, SITE_CONFIG_PATH
from lifeblog.site.builder import SiteBuilder


content_option = click.option(
    "-c",
    "--content",
    type=click.Path(file_okay=False, path_type=Path),
    default=BLOG_DIR,
    show_default=True,
    help="Directory holding articles",
)

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=SITE_CONFIG_PATH,
    help="Site configuration file",
)


def run_build(
    ctx: click.Context,
    content: Path,
    output: Path,
    config_path: Path,
    public: Optional[Path] = None,
    drafts: bool = False,
    strict: bool = False,
    clean: bool = False,
) -> BuildStats:
    """
    Build the site with the context's logger, exiting on failure.

    Shared by ``build`` and ``serve``.
    """
    logger = setup_logger(ctx.obj["log_dir"], "build")
    ctx.obj["logger"] = logger
    try:
        builder = SiteBuilder(
            config=load_site_config(config_path),
            content_dir=content,
            output_dir=output,
            public_dir=public or PUBLIC_DIR,
            logger=logger,
            include_drafts=drafts,
            strict=strict,
        )
        return builder.build(clean=clean)
    except BlogError as e:
        handle_cli_error(ctx, e, "build", {"content": str(content), "output": str(output)})


@click.command("build")
@content_option
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    default=DIST_DIR,
    show_default=True,
    help="Output directory",
)
@config_option
@click.option("--drafts", is_flag=True, help="Include articles marked draft")
@click.option("--strict", is_flag=True, help="Fail if any article has errors")
@click.option("--clean", is_flag=True, help="Remove the output directory first")
@click.pass_context
def build(
    ctx: click.Context,
    content: Path,
    output: Path,
    config_path: Path,
    drafts: bool,
    strict: bool,
    clean: bool,
) -> None:
    """Render the home page and every article."""
    click.echo("🔨 Building site...")
    stats = run_build(ctx, content, output, config_path, drafts=drafts, strict=strict, clean=clean)

    click.echo("\n✅ Build complete:")
    click.echo(f"  Articles: {stats.articles_loaded}")
    click.echo(f"  Pages written: {stats.pages_written} ({stats.pages_unchanged} unchanged)")
    click.echo(f"  Assets copied: {stats.assets_copied}")
    if stats.pages_removed:
        click.echo(f"  Stale pages removed: {stats.pages_removed}")
    if stats.drafts_skipped:
        click.echo(f"  Drafts skipped: {stats.drafts_skipped}")
    if stats.errors:
        click.echo(f"  ⚠️  Errors: {stats.errors}")
        for source in stats.failed:
            click.echo(f"    • {source}")
    click.echo(f"  Duration: {stats.duration():.2f}s")
    click.echo(f"  Output: {output}")


DEFAULT_PORT = 4321


def make_server(directory: Path, host: str, port: int) -> http.server.ThreadingHTTPServer:
    handler = functools.partial(
        http.server.SimpleHTTPRequestHandler, directory=str(directory)
    )
    return http.server.ThreadingHTTPServer((host, port), handler)


@click.command("serve")
@content_option
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    default=DIST_DIR,
    help="Directory to build into and serve",
)
@config_option
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("-p", "--port", type=int, default=DEFAULT_PORT, show_default=True)
@click.option("--drafts", is_flag=True, help="Include articles marked draft")
@click.option("--no-build", is_flag=True, help="Serve the existing output as-is")
@click.pass_context
def serve(
    ctx: click.Context,
    content: Path,
    output: Path,
    config_path: Path,
    host: str,
    port: int,
    drafts: bool,
    no_build: bool,
) -> None:
    """Build the site and serve it at http://HOST:PORT/."""
    if not no_build:
        stats = run_build(ctx, content, output, config_path, drafts=drafts)
        click.echo(f"🔨 {stats.summary()}")

    if not output.is_dir():
        raise click.ClickException(f"Nothing to serve: {output} does not exist")

    server = make_server(output, host, port)
    click.echo(f"🌐 Serving {output} at http://{host}:{port}/ (Ctrl+C to stop)")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        click.echo("\nStopped.")
    finally:
        server.server_close()
