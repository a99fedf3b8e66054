#!/usr/bin/env python3
"""
browser.py
----------
Minimal models of the browser surfaces the islands touch.

The islands ship as JavaScript, but their behaviour is specified and
tested against these models:

    - DocumentRoot: the ``<html>`` element's ``data-*`` attributes
    - LocalStorage: string key/value storage that may be blocked
    - Rect / Viewport: geometry for "is the canvas fully in view"
    - KeyEvent / MouseEvent: events whose default action can be prevented
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Dict, Optional

# --- Local imports ---
from lifeblog.core.exceptions import StorageUnavailableError


@dataclass
class DocumentRoot:
    """
    The document root element.

    Attributes:
        dataset: ``data-*`` attributes without the ``data-`` prefix
    """

    dataset: Dict[str, str] = field(default_factory=dict)

    @property
    def theme(self) -> Optional[str]:
        return self.dataset.get("theme")

    @theme.setter
    def theme(self, value: str) -> None:
        self.dataset["theme"] = value


class LocalStorage:
    """
    Per-origin string storage.

    When ``available`` is False every access raises
    StorageUnavailableError, as browsers do when storage is disabled.
    """

    def __init__(
        self,
        items: Optional[Dict[str, str]] = None,
        available: bool = True,
    ) -> None:
        self._items: Dict[str, str] = dict(items or {})
        self.available = available

    def _check(self) -> None:
        if not self.available:
            raise StorageUnavailableError("localStorage is not available")

    def get_item(self, key: str) -> Optional[str]:
        self._check()
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._check()
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._check()
        self._items.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        """Stored items regardless of availability (test inspection)."""
        return dict(self._items)


@dataclass(frozen=True)
class Rect:
    """An element's bounding box relative to the viewport (CSS pixels)."""

    top: float
    left: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


@dataclass
class Event:
    """Base DOM-style event with a preventable default action."""

    type: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


@dataclass
class KeyEvent(Event):
    """Keyboard event; ``key`` follows ``KeyboardEvent.key`` values."""

    type: str = "keydown"
    key: str = ""


@dataclass
class MouseEvent(Event):
    type: str = "click"
    button: int = 0
