#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem helpers for the site build.

Functions:
    find_content_files: Discover article sources (.md and .mdx)
    write_if_changed: Write text only when it differs from the file on disk
    copy_tree: Mirror a directory into the output, skipping identical files
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import filecmp
import shutil
from pathlib import Path
from typing import Iterable, List


CONTENT_SUFFIXES = (".md", ".mdx")


def find_content_files(
    directory: Path, suffixes: Iterable[str] = CONTENT_SUFFIXES
) -> List[Path]:
    """
    Find article source files under ``directory``, sorted by path.

    Files and directories starting with ``_`` or ``.`` are ignored so
    partials and editor swap files never become pages.
    """
    if not directory.exists():
        return []
    wanted = tuple(suffixes)
    found = []
    for path in directory.rglob("*"):
        rel_parts = path.relative_to(directory).parts
        if any(part.startswith(("_", ".")) for part in rel_parts):
            continue
        if path.is_file() and path.suffix.lower() in wanted:
            found.append(path)
    return sorted(found)


def write_if_changed(path: Path, content: str) -> bool:
    """
    Write ``content`` to ``path`` unless the file already holds it.

    Returns:
        True if the file was written, False if it was already identical
    """
    if path.exists() and path.read_text(encoding="utf-8") == content:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True


def copy_tree(source: Path, destination: Path) -> int:
    """
    Copy every file under ``source`` into ``destination``.

    Existing identical files are left alone.

    Returns:
        Number of files copied
    """
    if not source.is_dir():
        return 0
    copied = 0
    for path in sorted(source.rglob("*")):
        if not path.is_file():
            continue
        target = destination / path.relative_to(source)
        if target.exists() and filecmp.cmp(path, target, shallow=False):
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, target)
        copied += 1
    return copied
