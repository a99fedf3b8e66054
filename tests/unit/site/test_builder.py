"""
Tests for SiteBuilder.

Builds small sites into a temporary directory with the packaged
templates and assets, and inspects the written pages.
"""
import pytest

from lifeblog.core.exceptions import BuildError
from lifeblog.site.builder import SiteBuilder


@pytest.fixture
def builder(site_config, content_dir, output_dir, public_dir, build_date):
    return SiteBuilder(
        config=site_config,
        content_dir=content_dir,
        output_dir=output_dir,
        public_dir=public_dir,
        today=build_date,
    )


@pytest.fixture
def blog(content_dir, write_article, article_text, full_article_text, embed_article_text):
    """Three published articles and one draft."""
    write_article(content_dir, "hello-world", article_text("Hello", "2022-06-19", "[meta]"))
    write_article(content_dir, "building-with-axum", full_article_text)
    write_article(content_dir, "game-of-life", embed_article_text, suffix=".mdx")
    write_article(
        content_dir, "unfinished", article_text("Unfinished", "2024-01-01", extra="draft: true\n")
    )
    return content_dir


def _read(path) -> str:
    return path.read_text(encoding="utf-8")


class TestBuild:
    """Tests for SiteBuilder.build."""

    def test_writes_pages_and_assets(self, builder, blog, output_dir) -> None:
        stats = builder.build()
        assert stats.articles_loaded == 3
        assert stats.drafts_skipped == 1
        assert stats.pages_written == 4
        assert stats.errors == 0
        assert (output_dir / "index.html").is_file()
        for slug in ("hello-world", "building-with-axum", "game-of-life"):
            assert (output_dir / "blog" / slug / "index.html").is_file()
        assert not (output_dir / "blog" / "unfinished").exists()
        assert (output_dir / "css" / "site.css").is_file()
        assert (output_dir / "js" / "dark-mode-switch.js").is_file()
        assert (output_dir / "js" / "wasm-embed.js").is_file()
        assert (output_dir / "favicon.svg").is_file()

    def test_index_lists_newest_first(self, builder, blog, output_dir) -> None:
        builder.build()
        index = _read(output_dir / "index.html")
        positions = [
            index.index('href="/blog/game-of-life/"'),
            index.index('href="/blog/building-with-axum/"'),
            index.index('href="/blog/hello-world/"'),
        ]
        assert positions == sorted(positions)
        assert "Unfinished" not in index

    def test_drafts_built_on_request(self, site_config, blog, output_dir, public_dir) -> None:
        builder = SiteBuilder(
            config=site_config,
            content_dir=blog,
            output_dir=output_dir,
            public_dir=public_dir,
            include_drafts=True,
        )
        stats = builder.build()
        assert stats.articles_loaded == 4
        assert (output_dir / "blog" / "unfinished" / "index.html").is_file()

    def test_rebuild_leaves_unchanged_pages(self, builder, blog) -> None:
        builder.build()
        stats = builder.build()
        assert stats.pages_written == 0
        assert stats.pages_unchanged == 4
        assert stats.assets_copied == 0

    def test_broken_article_does_not_stop_build(
        self, builder, blog, write_article, output_dir
    ) -> None:
        write_article(blog, "broken", "no front matter\n")
        stats = builder.build()
        assert stats.errors == 1
        assert stats.failed[0].endswith("broken.md")
        assert (output_dir / "index.html").is_file()

    def test_bad_embed_skips_only_that_article(
        self, builder, blog, write_article, article_text, output_dir
    ) -> None:
        bad = article_text("Bad embed", "2022-01-01", extra="") + "\n```wasm-embed\nsrc: /x.js\n```\n"
        write_article(blog, "bad-embed", bad)
        stats = builder.build()
        assert stats.errors == 1
        assert not (output_dir / "blog" / "bad-embed").exists()
        assert "bad-embed" not in _read(output_dir / "index.html")

    def test_numeric_embed_fields_render(
        self, builder, blog, write_article, article_text, output_dir
    ) -> None:
        """Numbers in embed text fields are treated as text."""
        text = article_text("Numbers", "2022-01-01") + (
            "\n```wasm-embed\nsrc: /a.js\ncaption: c\nattribution: 42\n```\n"
        )
        write_article(blog, "numbers", text)
        stats = builder.build()
        assert stats.errors == 0
        page = _read(output_dir / "blog" / "numbers" / "index.html")
        assert '<a href="42" target="_blank"' in page

    def test_structured_embed_field_skips_only_that_article(
        self, builder, blog, write_article, article_text, output_dir
    ) -> None:
        text = article_text("Listy", "2022-01-01") + (
            "\n```wasm-embed\nsrc: /a.js\ncaption: c\nattribution: [a, b]\n```\n"
        )
        write_article(blog, "listy", text)
        stats = builder.build()
        assert stats.errors == 1
        assert not (output_dir / "blog" / "listy").exists()
        assert (output_dir / "blog" / "hello-world" / "index.html").is_file()

    def test_out_of_range_date_skips_only_that_article(
        self, builder, blog, write_article, article_text, output_dir
    ) -> None:
        """A typo like month 13 is one failed article, not a failed build."""
        bad = write_article(blog, "typo", article_text("Typo", "2022-13-45"))
        stats = builder.build()
        assert stats.errors == 1
        assert stats.failed == [str(bad)]
        assert stats.articles_loaded == 3
        assert (output_dir / "index.html").is_file()

    def test_strict_build_fails_on_errors(self, site_config, blog, write_article, output_dir) -> None:
        write_article(blog, "broken", "no front matter\n")
        builder = SiteBuilder(config=site_config, content_dir=blog, output_dir=output_dir, strict=True)
        with pytest.raises(BuildError, match="1 article"):
            builder.build()

    def test_clean_removes_stale_output(self, builder, blog, output_dir) -> None:
        stale = output_dir / "blog" / "old-post" / "index.html"
        stale.parent.mkdir(parents=True)
        stale.write_text("old", encoding="utf-8")
        builder.build(clean=True)
        assert not stale.exists()

    def test_drafted_article_page_removed(
        self, builder, blog, write_article, article_text, output_dir
    ) -> None:
        """Turning a published article into a draft unpublishes its page."""
        builder.build()
        page = output_dir / "blog" / "hello-world" / "index.html"
        assert page.is_file()
        write_article(blog, "hello-world", article_text("Hello", "2022-06-19", extra="draft: true\n"))
        stats = builder.build()
        assert stats.pages_removed == 1
        assert not page.parent.exists()
        assert 'href="/blog/hello-world/"' not in _read(output_dir / "index.html")

    def test_deleted_article_page_removed(self, builder, blog, output_dir) -> None:
        builder.build()
        (blog / "hello-world.md").unlink()
        stats = builder.build()
        assert stats.pages_removed == 1
        assert not (output_dir / "blog" / "hello-world").exists()
        assert (output_dir / "blog" / "building-with-axum" / "index.html").is_file()

    def test_broken_article_page_removed(self, builder, blog, write_article, output_dir) -> None:
        """A page whose article now fails to parse is not left behind."""
        builder.build()
        write_article(blog, "hello-world", "no front matter\n")
        stats = builder.build()
        assert stats.errors == 1
        assert stats.pages_removed == 1
        assert not (output_dir / "blog" / "hello-world").exists()

    def test_other_files_in_page_directory_kept(self, builder, blog, output_dir) -> None:
        """Only the stale index.html goes; other files stay in place."""
        builder.build()
        extra = output_dir / "blog" / "old-post" / "diagram.png"
        extra.parent.mkdir(parents=True)
        extra.write_bytes(b"png")
        (extra.parent / "index.html").write_text("old", encoding="utf-8")
        builder.build()
        assert not (extra.parent / "index.html").exists()
        assert extra.exists()

    def test_empty_blog(self, builder, output_dir) -> None:
        stats = builder.build()
        assert stats.articles_loaded == 0
        assert "Nothing here yet." in _read(output_dir / "index.html")


class TestRenderedPages:
    """Tests for the page markup."""

    def test_head_metadata(self, builder, blog, output_dir) -> None:
        builder.build()
        page = _read(output_dir / "blog" / "building-with-axum" / "index.html")
        assert "<title>Building with Axum | Life of Anish</title>" in page
        assert '<link rel="canonical" href="https://blog.example.dev/blog/building-with-axum/" />' in page
        assert '<meta property="og:type" content="article" />' in page
        assert '<meta property="og:image" content="https://blog.example.dev/images/axum.png" />' in page
        assert '<meta property="article:published_time" content="2022-07-08" />' in page
        assert '<meta property="article:tag" content="rust" />' in page

    def test_no_image_or_font_tags_by_default(self, builder, blog, output_dir) -> None:
        """Pages without a preview image or fonts do not link to missing files."""
        builder.build()
        page = _read(output_dir / "index.html")
        assert "og:image" not in page
        assert "twitter:image" not in page
        assert '<meta name="twitter:card" content="summary" />' in page
        assert 'rel="preload"' not in page

    def test_theme_script_precedes_stylesheet(self, builder, blog, output_dir) -> None:
        """The persisted theme is applied before any CSS loads."""
        builder.build()
        page = _read(output_dir / "index.html")
        assert page.index('localStorage.getItem("darkMode")') < page.index("/css/site.css")

    def test_article_body_and_tags(self, builder, blog, output_dir) -> None:
        builder.build()
        page = _read(output_dir / "blog" / "building-with-axum" / "index.html")
        assert '<h1 id="intro">Intro</h1>' in page
        assert '<h2 id="details">Details</h2>' in page
        assert "Jul 8, 2022" in page
        assert "Last updated" in page
        assert '<li class="tag" style="--tag-color: #E43717">rust</li>' in page

    def test_switch_rendered_on_every_page(self, builder, blog, output_dir) -> None:
        builder.build()
        for page in (output_dir / "index.html", output_dir / "blog" / "hello-world" / "index.html"):
            html = _read(page)
            assert 'data-island="dark-mode-switch"' in html
            assert '<script type="module" src="/js/dark-mode-switch.js"></script>' in html

    def test_embed_script_only_where_needed(self, builder, blog, output_dir) -> None:
        builder.build()
        with_embed = _read(output_dir / "blog" / "game-of-life" / "index.html")
        without = _read(output_dir / "blog" / "hello-world" / "index.html")
        assert 'data-island="wasm-embed"' in with_embed
        assert '<script type="module" src="/js/wasm-embed.js"></script>' in with_embed
        assert "/js/wasm-embed.js" not in without

    def test_footer_year_and_github(self, builder, blog, output_dir) -> None:
        builder.build()
        page = _read(output_dir / "index.html")
        assert "&copy; 2024 Anish" in page
        assert 'href="https://github.com/anish"' in page
        assert 'aria-current="page"' in page

    def test_tag_cloud_on_index(self, builder, blog, output_dir) -> None:
        builder.build()
        page = _read(output_dir / "index.html")
        cloud = page[page.index('class="tag-cloud"'):]
        assert cloud.index(">rust<") < cloud.index(">axum<")
