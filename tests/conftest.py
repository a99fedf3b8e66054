"""
conftest.py
-----------
Shared pytest fixtures for lifeblog tests.

Provides fixtures for:
- Article source text
- Temporary content, public and output directories
- Site configuration
- Fresh island stores
"""
import pytest
from datetime import date
from pathlib import Path

from lifeblog.core.config import SiteConfig
from lifeblog.islands.browser import DocumentRoot, LocalStorage
from lifeblog.islands.state import Store, reset_default_store


# ----- Article Content Fixtures -----

@pytest.fixture
def minimal_article_text():
    """Article with only the required front matter."""
    return """---
title: Hello
description: A first post.
pubDate: 2022-06-19
---

Hello **world**.
"""


@pytest.fixture
def full_article_text():
    """Article with every supported front matter field."""
    return """---
title: Building with Axum
description: Routing and state in a small service.
pubDate: Jul 08 2022
updatedDate: 2022-08-01
heroImage: /images/axum.png
tags: [Rust, axum, rust]
---

# Intro

Some text.

## Details

More text.
"""


@pytest.fixture
def embed_article_text():
    """Article containing a wasm-embed block."""
    return """---
title: Game of Life
description: A canvas demo.
pubDate: 2023-02-11
tags: [rust, wasm]
---

Intro paragraph.

```wasm-embed
src: /wasm/life.js
caption: Conway's Game of Life
attribution: https://github.com/example/life
```
"""


@pytest.fixture
def write_article():
    """Factory writing an article file and returning its path."""
    def _write(directory: Path, slug: str, text: str, suffix: str = ".md") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{slug}{suffix}"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def article_text():
    """Factory for front matter + body with the given title and date."""
    def _text(title: str, pub_date: str, tags: str = "[]", extra: str = "") -> str:
        return (
            f"---\ntitle: {title}\ndescription: About {title}.\n"
            f"pubDate: {pub_date}\ntags: {tags}\n{extra}---\n\nBody of {title}.\n"
        )
    return _text


# ----- Directory Fixtures -----

@pytest.fixture
def content_dir(tmp_path):
    """Empty blog content directory."""
    path = tmp_path / "content" / "blog"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def public_dir(tmp_path):
    """Public directory with a favicon."""
    path = tmp_path / "public"
    path.mkdir()
    (path / "favicon.svg").write_text("<svg/>", encoding="utf-8")
    return path


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "dist"


@pytest.fixture
def site_config():
    return SiteConfig(site="https://blog.example.dev", github="https://github.com/anish")


@pytest.fixture
def build_date():
    return date(2024, 5, 1)


# ----- Island Fixtures -----

@pytest.fixture
def storage():
    return LocalStorage()


@pytest.fixture
def document():
    return DocumentRoot()


@pytest.fixture
def store(storage):
    """Page store backed by the ``storage`` fixture."""
    return Store(storage=storage)


@pytest.fixture(autouse=True)
def _fresh_default_store():
    """Each test starts from a new page-wide store."""
    reset_default_store()
    yield
    reset_default_store()
