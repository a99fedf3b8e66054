#!/usr/bin/env python3
"""
slugify.py
----------
URL-safe slugs for article paths and tag anchors.

Usage:
    from lifeblog.utils.slugify import slugify

    slugify("Building a Blog with Axum & Rust")  # "building-a-blog-with-axum-and-rust"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata


def slugify(text: str, max_length: int = 80) -> str:
    """
    Convert text to a URL path segment.

    Lowercases, strips accents and apostrophes, turns ``&`` into
    ``and``, replaces runs of whitespace, underscores, dots and slashes
    with a single hyphen and drops anything else that is not ``a-z0-9``.

    Examples:
        >>> slugify("Héllo, Wörld!")
        'hello-world'
        >>> slugify("rust_wasm/part.2")
        'rust-wasm-part-2'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()
    text = text.replace("'", "")
    text = text.replace("&", " and ")
    text = re.sub(r"[\s_./]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text).strip("-")

    if len(text) > max_length:
        text = text[:max_length].rstrip("-")

    return text
