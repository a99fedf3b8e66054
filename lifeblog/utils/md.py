#!/usr/bin/env python3
"""
md.py
-------------------
Markdown helpers for article files.

Splits YAML front matter from the body and hashes text for change
detection. Parsing the front matter itself is left to the Article
dataclass.
"""
from __future__ import annotations

# --- Standard library imports ---
import hashlib
from typing import List, Tuple


FRONTMATTER_DELIMITER = "---"


def split_frontmatter(content: str) -> Tuple[str, List[str]]:
    """
    Split markdown content into YAML front matter and body.

    Expected format:
        ---
        title: Hello
        ---

        Body content here...

    Args:
        content: Full article file content

    Returns:
        Tuple of (frontmatter_text, body_lines). frontmatter_text is
        empty when the file has no (closed) front matter block.

    Examples:
        >>> fm, body = split_frontmatter("---\\ntitle: Hi\\n---\\n\\nBody")
        >>> fm
        'title: Hi'
        >>> body
        ['Body']
    """
    # utf-8-sig leftovers from editors
    lines = content.lstrip("\ufeff").splitlines()

    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return "", lines

    frontmatter_end = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == FRONTMATTER_DELIMITER:
            frontmatter_end = i
            break

    if frontmatter_end is None:
        return "", lines

    frontmatter_lines = lines[1:frontmatter_end]
    body_lines = lines[frontmatter_end + 1 :]

    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines


def get_text_hash(text: str) -> str:
    """MD5 of text, used only to detect changed output."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()
