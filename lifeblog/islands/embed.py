#!/usr/bin/env python3
"""
embed.py
--------
Bridge for embedding a pre-compiled WebAssembly program on a page.

The page creates a canvas, publishes a host object (``window.Module``)
exposing that canvas and a readiness callback, and only then loads the
program script. The program fills in ``requestFullscreen`` itself.

The bridge relays a small set of browser events:
    - the context menu is suppressed on the canvas
    - entering fullscreen forces the default cursor
    - arrow keys and space are captured while the canvas is fully in
      view, so they drive the program instead of scrolling the page

If the program never loads the canvas stays blank; nothing retries.
``js/wasm-embed.js`` implements the same behaviour in the browser.

Usage:
    embed = WasmEmbed(src="/wasm/life.js", caption="Game of Life")
    html = embed.render()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import html
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

# --- Local imports ---
from lifeblog.core.exceptions import EmbedError
from lifeblog.islands.browser import Event, KeyEvent, Rect, Viewport
from lifeblog.utils.slugify import slugify

logger = logging.getLogger(__name__)


RELAYED_KEYS = frozenset({"ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight", " "})

FullscreenFn = Callable[[bool, bool], Any]


@dataclass(frozen=True)
class WasmEmbed:
    """
    One embedded program.

    Attributes:
        src: URL of the compiled program's loader script
        caption: Caption shown under the canvas
        attribution: Optional link to the program's source or author
        attribution_label: Link text (defaults to "Source")
        width: Canvas width attribute in pixels
        height: Canvas height attribute in pixels
        canvas_id: DOM id of the canvas (derived from ``src`` if empty)
    """

    src: str
    caption: str
    attribution: Optional[str] = None
    attribution_label: Optional[str] = None
    width: int = 800
    height: int = 600
    canvas_id: str = ""

    script = "js/wasm-embed.js"

    def __post_init__(self) -> None:
        if not self.src:
            raise EmbedError("Embedded module needs a src")
        if self.width <= 0 or self.height <= 0:
            raise EmbedError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if not self.canvas_id:
            stem = self.src.rsplit("/", 1)[-1].split(".", 1)[0]
            object.__setattr__(self, "canvas_id", f"canvas-{slugify(stem) or 'wasm'}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WasmEmbed":
        """
        Build an embed from a parsed mapping (a ``wasm-embed`` fence body).

        Raises:
            EmbedError: If ``src`` or ``caption`` is missing, a size is invalid,
                or a text field holds a list or mapping
        """
        missing = [key for key in ("src", "caption") if not data.get(key)]
        if missing:
            raise EmbedError(f"wasm-embed block missing: {', '.join(missing)}")
        try:
            width = int(data.get("width", 800))
            height = int(data.get("height", 600))
        except (TypeError, ValueError) as e:
            raise EmbedError(f"wasm-embed size must be an integer: {e}") from e
        return cls(
            src=str(data["src"]),
            caption=str(data["caption"]),
            attribution=_optional_text(data, "attribution"),
            attribution_label=_optional_text(data, "attribution_label"),
            width=width,
            height=height,
            canvas_id=_optional_text(data, "canvas_id") or "",
        )

    def render(self) -> str:
        """Figure markup: canvas, fullscreen control and caption."""
        esc = html.escape
        caption = esc(self.caption)
        if self.attribution:
            label = esc(self.attribution_label or "Source")
            caption += (
                f' <a href="{esc(self.attribution)}" target="_blank" '
                f'rel="noopener noreferrer">{label}</a>'
            )
        return (
            f'<figure class="wasm-embed" data-island="wasm-embed" '
            f'data-wasm-src="{esc(self.src)}" data-canvas-id="{esc(self.canvas_id)}">\n'
            f'<canvas id="{esc(self.canvas_id)}" class="wasm-canvas" '
            f'width="{self.width}" height="{self.height}" tabindex="-1"></canvas>\n'
            f'<div class="wasm-embed-controls">'
            f'<button type="button" class="wasm-fullscreen" '
            f'aria-controls="{esc(self.canvas_id)}">Fullscreen</button></div>\n'
            f"<figcaption>{caption}</figcaption>\n"
            f"</figure>\n"
        )


def _optional_text(data: Mapping[str, Any], key: str) -> Optional[str]:
    """Read an optional scalar fence value as text (YAML may hand back ints)."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise EmbedError(f"wasm-embed {key} must be text, got {type(value).__name__}")
    return str(value)


@dataclass
class Canvas:
    """The drawing surface the program renders into."""

    id: str
    width: int
    height: int
    style: Dict[str, str] = field(default_factory=dict)


class HostModule:
    """
    The host object handed to the program before it loads.

    Attributes:
        canvas: Drawing surface exposed to the program
        ready: Set once the program calls ``on_runtime_initialized``
    """

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self.ready = False
        self._request_fullscreen: Optional[FullscreenFn] = None

    def on_runtime_initialized(self) -> None:
        """Readiness callback invoked by the program (no arguments)."""
        self.ready = True
        logger.debug("Embedded module ready on #%s", self.canvas.id)

    def define_fullscreen(self, fn: FullscreenFn) -> None:
        """Called by the program to install its own fullscreen method."""
        self._request_fullscreen = fn

    def request_fullscreen(self, lock_pointer: bool = True, resize_canvas: bool = False) -> Any:
        """
        Ask the program to present the canvas fullscreen.

        Raises:
            EmbedError: If the program has not defined the method (not loaded)
        """
        if self._request_fullscreen is None:
            raise EmbedError("Embedded module has not defined requestFullscreen")
        return self._request_fullscreen(lock_pointer, resize_canvas)


def is_fully_visible(rect: Rect, viewport: Viewport) -> bool:
    """True when every edge of ``rect`` lies inside the viewport."""
    return (
        rect.top >= 0
        and rect.left >= 0
        and rect.bottom <= viewport.height
        and rect.right <= viewport.width
    )


class EmbedBridge:
    """
    Mounted embed: the canvas, its host object and event relays.

    Attributes:
        embed: The embed being mounted
        canvas: Drawing surface created for it
        module: Host object exposed to the program
        load_failed: True after the program script failed to load
    """

    def __init__(self, embed: WasmEmbed) -> None:
        self.embed = embed
        self.canvas = Canvas(id=embed.canvas_id, width=embed.width, height=embed.height)
        self.module = HostModule(self.canvas)
        self.load_failed = False

    def handle_context_menu(self, event: Event) -> None:
        event.prevent_default()

    def handle_fullscreen_change(self, is_fullscreen: bool) -> None:
        if is_fullscreen:
            self.canvas.style["cursor"] = "default"

    def handle_keydown(self, event: KeyEvent, rect: Rect, viewport: Viewport) -> bool:
        """
        Capture navigation keys while the canvas is fully in view.

        Returns:
            True if the event was captured (page will not scroll)
        """
        if event.key in RELAYED_KEYS and is_fully_visible(rect, viewport):
            event.prevent_default()
            return True
        return False

    def handle_load_error(self, reason: str = "") -> None:
        """Record a failed program load; the canvas is left blank."""
        self.load_failed = True
        logger.warning("Embedded module %s failed to load %s", self.embed.src, reason)

    def request_fullscreen(self) -> Any:
        """Fullscreen button handler: pointer lock on, canvas not resized."""
        return self.module.request_fullscreen(True, False)
