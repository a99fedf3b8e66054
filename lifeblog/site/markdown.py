#!/usr/bin/env python3
"""
markdown.py
-----------
markdown-it-py setup for article bodies.

CommonMark plus tables and strikethrough, with two additions:

    - Headings get ``id`` attributes (slugified text, de-duplicated per
      document) so sections can be linked.
    - A ``wasm-embed`` fenced block mounts an embedded WebAssembly demo.
      The fence body is YAML:

          ```wasm-embed
          src: /wasm/life.js
          caption: Conway's Game of Life, compiled from Rust
          attribution: https://github.com/example/life
          ```

Rendering records every embed in ``env["embeds"]`` so the page template
knows to include the embed script.

Usage:
    from lifeblog.site.markdown import render_markdown

    html, env = render_markdown(article.body)
    if env["embeds"]:
        ...

Dependencies:
    - markdown-it-py >= 3.0.0
    - PyYAML for fence bodies
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, MutableMapping, Optional, Sequence, Tuple

# --- Third-party imports ---
import yaml
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

# --- Local imports ---
from lifeblog.core.exceptions import ArticleParseError, EmbedError
from lifeblog.islands.embed import WasmEmbed
from lifeblog.utils.slugify import slugify


EMBED_FENCE = "wasm-embed"


def create_markdown() -> MarkdownIt:
    """Create the MarkdownIt instance used for every article."""
    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    md.use(heading_anchor_plugin)
    md.use(wasm_embed_plugin)
    return md


def render_markdown(text: str, md: Optional[MarkdownIt] = None) -> Tuple[str, Dict[str, Any]]:
    """
    Render a Markdown body to HTML.

    Returns:
        (html, env) where ``env["embeds"]`` lists WasmEmbed instances

    Raises:
        ArticleParseError: If a ``wasm-embed`` block is malformed
    """
    md = md or create_markdown()
    env: Dict[str, Any] = {"embeds": []}
    return md.render(text, env), env


# ----- Heading anchors -----

def heading_anchor_plugin(md: MarkdownIt) -> None:
    """Register the core rule adding ``id`` attributes to headings."""
    md.core.ruler.push("heading_anchor", _heading_anchor_rule)


def _heading_anchor_rule(state: StateCore) -> None:
    seen: Dict[str, int] = {}
    tokens = state.tokens
    for idx, token in enumerate(tokens):
        if token.type != "heading_open" or token.attrGet("id"):
            continue
        inline = tokens[idx + 1] if idx + 1 < len(tokens) else None
        text = inline.content if inline is not None else ""
        slug = slugify(text) or "section"
        count = seen.get(slug, 0)
        seen[slug] = count + 1
        token.attrSet("id", slug if count == 0 else f"{slug}-{count}")


# ----- WebAssembly embeds -----

def wasm_embed_plugin(md: MarkdownIt) -> None:
    """
    Route ``wasm-embed`` fences to the embed renderer.

    All other fences keep the default rendering.
    """
    default_fence = md.renderer.rules["fence"]

    def _fence(
        self: Any,
        tokens: Sequence[Any],
        idx: int,
        options: Any,
        env: MutableMapping[str, Any],
    ) -> str:
        token = tokens[idx]
        if token.info.strip() != EMBED_FENCE:
            return default_fence(tokens, idx, options, env)
        embed = _parse_embed(token.content, token.map[0] + 1 if token.map else None)
        env.setdefault("embeds", []).append(embed)
        return embed.render()

    md.add_render_rule("fence", _fence)


def _parse_embed(content: str, line: Optional[int]) -> WasmEmbed:
    where = f"wasm-embed block (line {line})" if line else "wasm-embed block"
    try:
        data = yaml.safe_load(content) or {}
    except (yaml.YAMLError, ValueError) as e:
        raise ArticleParseError(f"{where}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ArticleParseError(f"{where}: expected key/value pairs")
    try:
        return WasmEmbed.from_mapping(data)
    except EmbedError as e:
        raise ArticleParseError(f"{where}: {e}") from e
