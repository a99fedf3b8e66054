"""
Utilities package for lifeblog.

- md: Front matter splitting and content hashing
- slugify: URL-safe slugs for articles and tags
- fs: Content discovery and asset copying

Import commonly-used utilities directly from this package:
    from lifeblog.utils import split_frontmatter, slugify
"""

from .md import split_frontmatter, get_text_hash
from .slugify import slugify
from .fs import find_content_files, copy_tree, write_if_changed

__all__ = [
    "split_frontmatter",
    "get_text_hash",
    "slugify",
    "find_content_files",
    "copy_tree",
    "write_if_changed",
]
