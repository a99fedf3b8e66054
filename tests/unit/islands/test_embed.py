"""
Tests for the WebAssembly embed bridge.

Covers:
- WasmEmbed construction and markup
- Event relays: context menu, fullscreen cursor, key capture
- The host object handed to the program
"""
import logging

import pytest

from lifeblog.core.exceptions import EmbedError
from lifeblog.islands.browser import Event, KeyEvent, Rect, Viewport
from lifeblog.islands.embed import (
    RELAYED_KEYS,
    Canvas,
    EmbedBridge,
    HostModule,
    WasmEmbed,
    is_fully_visible,
)


VIEWPORT = Viewport(width=1280, height=800)
IN_VIEW = Rect(top=100, left=240, width=800, height=600)
PARTLY_BELOW = Rect(top=500, left=240, width=800, height=600)
ABOVE = Rect(top=-200, left=240, width=800, height=600)


@pytest.fixture
def embed():
    return WasmEmbed(src="/wasm/life.js", caption="Game of Life")


@pytest.fixture
def bridge(embed):
    return EmbedBridge(embed)


class TestWasmEmbed:
    """Tests for the embed description."""

    def test_canvas_id_derived_from_src(self, embed) -> None:
        """The canvas id comes from the program file name."""
        assert embed.canvas_id == "canvas-life"

    def test_explicit_canvas_id_kept(self) -> None:
        """A given canvas id is not replaced."""
        embed = WasmEmbed(src="/wasm/life.js", caption="x", canvas_id="board")
        assert embed.canvas_id == "board"

    def test_empty_src_rejected(self) -> None:
        """An embed needs a program to load."""
        with pytest.raises(EmbedError):
            WasmEmbed(src="", caption="x")

    @pytest.mark.parametrize("width,height", [(0, 600), (800, -1)])
    def test_non_positive_size_rejected(self, width, height) -> None:
        """Canvas dimensions must be positive."""
        with pytest.raises(EmbedError):
            WasmEmbed(src="/a.js", caption="x", width=width, height=height)

    def test_from_mapping(self) -> None:
        """Fence data builds an embed."""
        embed = WasmEmbed.from_mapping({
            "src": "/wasm/life.js",
            "caption": "Life",
            "attribution": "https://github.com/example/life",
            "width": "640",
            "height": 480,
        })
        assert embed.width == 640
        assert embed.height == 480
        assert embed.attribution == "https://github.com/example/life"

    def test_from_mapping_requires_src_and_caption(self) -> None:
        """Missing keys are named in the error."""
        with pytest.raises(EmbedError, match="src, caption"):
            WasmEmbed.from_mapping({})

    def test_from_mapping_rejects_bad_size(self) -> None:
        """Non-integer sizes are an embed error."""
        with pytest.raises(EmbedError, match="integer"):
            WasmEmbed.from_mapping({"src": "/a.js", "caption": "x", "width": "wide"})

    def test_from_mapping_stringifies_scalars(self) -> None:
        """Numbers in text fields become text, so rendering cannot fail."""
        embed = WasmEmbed.from_mapping({
            "src": "/a.js",
            "caption": 2048,
            "attribution": 42,
            "attribution_label": 7,
            "canvas_id": 3,
        })
        assert (embed.caption, embed.attribution, embed.attribution_label) == ("2048", "42", "7")
        assert embed.canvas_id == "3"
        markup = embed.render()
        assert '<a href="42" target="_blank"' in markup
        assert '<canvas id="3"' in markup

    @pytest.mark.parametrize("key", ["attribution", "attribution_label", "canvas_id"])
    def test_from_mapping_rejects_structured_text(self, key) -> None:
        """Lists and mappings are not accepted where text is expected."""
        data = {"src": "/a.js", "caption": "x", key: ["a", "b"]}
        with pytest.raises(EmbedError, match=key):
            WasmEmbed.from_mapping(data)

    def test_render_markup(self, embed) -> None:
        """The figure holds a canvas, a fullscreen button and a caption."""
        markup = embed.render()
        assert 'data-island="wasm-embed"' in markup
        assert 'data-wasm-src="/wasm/life.js"' in markup
        assert '<canvas id="canvas-life"' in markup
        assert 'width="800" height="600"' in markup
        assert 'aria-controls="canvas-life"' in markup
        assert "<figcaption>Game of Life</figcaption>" in markup

    def test_render_attribution_link(self) -> None:
        """Attribution renders as an external link."""
        embed = WasmEmbed(
            src="/a.js",
            caption="Demo",
            attribution="https://example.org/src",
        )
        markup = embed.render()
        assert '<a href="https://example.org/src" target="_blank"' in markup
        assert 'rel="noopener noreferrer">Source</a>' in markup

    def test_render_escapes_caption(self) -> None:
        """Captions are HTML-escaped."""
        markup = WasmEmbed(src="/a.js", caption="<b>x</b> & y").render()
        assert "&lt;b&gt;x&lt;/b&gt; &amp; y" in markup


class TestVisibility:
    """Tests for is_fully_visible."""

    def test_inside_viewport(self) -> None:
        assert is_fully_visible(IN_VIEW, VIEWPORT) is True

    def test_exactly_filling_viewport(self) -> None:
        """Edges touching the viewport still count as visible."""
        assert is_fully_visible(Rect(0, 0, 1280, 800), VIEWPORT) is True

    @pytest.mark.parametrize("rect", [PARTLY_BELOW, ABOVE, Rect(100, -1, 800, 600)])
    def test_partly_outside(self, rect) -> None:
        assert is_fully_visible(rect, VIEWPORT) is False


class TestEventRelays:
    """Tests for EmbedBridge event handling."""

    @pytest.mark.parametrize("key", sorted(RELAYED_KEYS))
    def test_keys_captured_when_in_view(self, bridge, key) -> None:
        """Arrow keys and space drive the program while it is in view."""
        event = KeyEvent(key=key)
        assert bridge.handle_keydown(event, IN_VIEW, VIEWPORT) is True
        assert event.default_prevented is True

    @pytest.mark.parametrize("rect", [PARTLY_BELOW, ABOVE])
    def test_keys_scroll_page_when_not_in_view(self, bridge, rect) -> None:
        """Off-screen canvases leave the keys to the page."""
        event = KeyEvent(key="ArrowDown")
        assert bridge.handle_keydown(event, rect, VIEWPORT) is False
        assert event.default_prevented is False

    @pytest.mark.parametrize("key", ["a", "Enter", "PageDown", "Tab"])
    def test_other_keys_never_captured(self, bridge, key) -> None:
        """Only navigation keys are captured."""
        event = KeyEvent(key=key)
        assert bridge.handle_keydown(event, IN_VIEW, VIEWPORT) is False
        assert event.default_prevented is False

    def test_context_menu_always_suppressed(self, bridge) -> None:
        """Right-click never opens the browser menu on the canvas."""
        event = Event(type="contextmenu")
        bridge.handle_context_menu(event)
        assert event.default_prevented is True

    def test_fullscreen_sets_default_cursor(self, bridge) -> None:
        """Entering fullscreen forces the default cursor."""
        bridge.handle_fullscreen_change(True)
        assert bridge.canvas.style["cursor"] == "default"

    def test_leaving_fullscreen_keeps_style(self, bridge) -> None:
        """Leaving fullscreen does not touch the cursor."""
        bridge.handle_fullscreen_change(False)
        assert "cursor" not in bridge.canvas.style

    def test_load_error_recorded(self, bridge, caplog) -> None:
        """A failed program load is flagged and logged."""
        with caplog.at_level(logging.WARNING, logger="lifeblog.islands.embed"):
            bridge.handle_load_error("404")
        assert bridge.load_failed is True
        assert "/wasm/life.js" in caplog.text


class TestHostModule:
    """Tests for the host object exposed to the program."""

    def test_canvas_matches_embed(self, bridge) -> None:
        """The exposed canvas has the embed's id and size."""
        assert bridge.canvas == Canvas(id="canvas-life", width=800, height=600)
        assert bridge.module.canvas is bridge.canvas

    def test_ready_after_runtime_initialized(self) -> None:
        """The readiness callback marks the module ready."""
        module = HostModule(Canvas(id="c", width=1, height=1))
        assert module.ready is False
        module.on_runtime_initialized()
        assert module.ready is True

    def test_fullscreen_before_load_raises(self, bridge) -> None:
        """Fullscreen is unavailable until the program defines it."""
        with pytest.raises(EmbedError):
            bridge.request_fullscreen()

    def test_fullscreen_button_locks_pointer_without_resize(self, bridge) -> None:
        """The button asks for pointer lock and no canvas resize."""
        calls = []
        bridge.module.define_fullscreen(lambda lock, resize: calls.append((lock, resize)))
        bridge.request_fullscreen()
        assert calls == [(True, False)]
