#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the lifeblog project.

All project paths are defined here as Path objects, relative to the
project root, so the builder, CLI and tests agree on where content,
templates and build output live.

The project structure:
    ROOT/
    ├── lifeblog/      # Generator code, templates and static assets
    ├── content/       # Articles (content/blog/*.md, *.mdx)
    ├── public/        # Files copied verbatim into the build (fonts, images)
    ├── dist/          # Build output
    └── logs/          # Build logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/lifeblog/core/paths.py and navigates up
    the directory tree to find ROOT.

    Returns:
        Path object for project root

    Raises:
        RuntimeError: If the package directory cannot be found under root
    """
    current_file = Path(__file__).resolve()

    # Navigate up: paths.py -> core/ -> lifeblog/ -> ROOT/
    root = current_file.parent.parent.parent

    if not (root / "lifeblog").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'lifeblog'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "lifeblog"

# ---- Content ----
CONTENT_DIR = ROOT / "content"
BLOG_DIR = CONTENT_DIR / "blog"
PUBLIC_DIR = ROOT / "public"
SITE_CONFIG_PATH = ROOT / "site.yaml"

# ---- Generator assets ----
TEMPLATES_DIR = PACKAGE_DIR / "site" / "templates"
STATIC_DIR = PACKAGE_DIR / "site" / "static"

# ---- Output & Logs ----
DIST_DIR = ROOT / "dist"
LOG_DIR = ROOT / "logs"
