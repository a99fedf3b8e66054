#!/usr/bin/env python3
"""
dark_mode.py
------------
Dark-mode theme state and the header switch island.

Three pieces cooperate to keep the page theme consistent:

    1. The bootstrap script, inlined in <head>, reads ``darkMode`` from
       local storage before first paint and marks the root ``dark``.
    2. ``dark_mode_atom`` is the shared boolean, persisted as JSON
       under the same key.
    3. DarkModeSwitch flips the atom on click, writes ``data-theme``
       on the root immediately, and keeps an effect subscribed so any
       later change to the atom (from any island) re-applies the
       attribute.

The bootstrap script and the atom each read storage on their own; a
stored value other than ``"true"``/``"false"`` can make them disagree
until the switch mounts. ``js/dark-mode-switch.js`` implements the
same behaviour in the browser.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import html
import logging
from typing import Optional

# --- Local imports ---
from lifeblog.core.exceptions import StorageUnavailableError
from lifeblog.islands.browser import DocumentRoot, LocalStorage
from lifeblog.islands.state import StorageAtom, Store, get_default_store

logger = logging.getLogger(__name__)


DARK_MODE_KEY = "darkMode"
DARK = "dark"
LIGHT = "light"

dark_mode_atom = StorageAtom(DARK_MODE_KEY, False)


BOOTSTRAP_SCRIPT = """\
(function () {
  try {
    if (localStorage.getItem("%s") === "true") {
      document.documentElement.dataset.theme = "dark";
    }
  } catch (e) {
    /* storage blocked: keep the default palette */
  }
})();""" % DARK_MODE_KEY

SUN_ICON = (
    '<svg class="icon icon-sun" width="15" height="15" viewBox="0 0 24 24" aria-hidden="true" '
    'fill="none" stroke="currentColor" stroke-width="2"><circle cx="12" cy="12" r="4"/>'
    '<path d="M12 2v2M12 20v2M4.93 4.93l1.41 1.41M17.66 17.66l1.41 1.41M2 12h2M20 12h2'
    'M6.34 17.66l-1.41 1.41M19.07 4.93l-1.41 1.41"/></svg>'
)
MOON_ICON = (
    '<svg class="icon icon-moon" width="12" height="12" viewBox="0 0 24 24" aria-hidden="true" '
    'fill="currentColor"><path d="M21 12.79A9 9 0 1 1 11.21 3 7 7 0 0 0 21 12.79z"/></svg>'
)


def theme_for(dark: bool) -> str:
    return DARK if dark else LIGHT


def bootstrap_script() -> str:
    """Inline <head> script restoring the persisted theme before paint."""
    return BOOTSTRAP_SCRIPT


def bootstrap_theme(document: DocumentRoot, storage: LocalStorage) -> bool:
    """
    Apply the persisted preference to the root, as the inline script does.

    Only the exact string ``"true"`` enables dark mode; anything else
    leaves the root untouched. Blocked storage is not an error.

    Returns:
        True if the root was marked dark
    """
    try:
        stored = storage.get_item(DARK_MODE_KEY)
    except StorageUnavailableError:
        return False
    if stored == "true":
        document.theme = DARK
        return True
    return False


class DarkModeSwitch:
    """
    The header switch island.

    Mounting subscribes an effect to ``dark_mode_atom`` and applies the
    current value to the root once. Call ``unmount()`` to drop the
    subscription.

    Attributes:
        store: Store holding the shared atom
        document: Root element whose ``data-theme`` mirrors the atom
    """

    island_name = "dark-mode-switch"
    script = "js/dark-mode-switch.js"
    aria_label = "Toggle dark mode"

    def __init__(
        self,
        store: Optional[Store] = None,
        document: Optional[DocumentRoot] = None,
    ) -> None:
        self.store = store if store is not None else get_default_store()
        self.document = document if document is not None else DocumentRoot()
        self._unsubscribe = self.store.sub(dark_mode_atom, self._apply)
        self._apply(self.dark)

    def _apply(self, dark: bool) -> None:
        self.document.theme = theme_for(dark)

    @property
    def dark(self) -> bool:
        return bool(self.store.get(dark_mode_atom))

    @property
    def checked(self) -> bool:
        return self.dark

    @property
    def icon(self) -> str:
        """Sun while dark (click for light), moon while light."""
        return "sun" if self.dark else "moon"

    def toggle(self) -> bool:
        """
        Flip the theme.

        The root attribute is written first, synchronously; the atom
        update then notifies subscribers and persists the value.

        Returns:
            The new dark-mode value
        """
        dark = not self.dark
        self.document.theme = theme_for(dark)
        self.store.set(dark_mode_atom, dark)
        logger.debug("Theme toggled to %s", theme_for(dark))
        return dark

    def unmount(self) -> None:
        self._unsubscribe()

    def render(self) -> str:
        """Server-rendered markup; the script hydrates it on load."""
        state = "checked" if self.checked else "unchecked"
        icon = SUN_ICON if self.dark else MOON_ICON
        return (
            f'<div class="dark-mode-switch" data-island="{self.island_name}">'
            f"{icon}"
            f'<button type="button" role="switch" class="switch" '
            f'aria-checked="{str(self.checked).lower()}" '
            f'aria-label="{html.escape(self.aria_label)}" data-state="{state}">'
            f'<span class="switch-thumb" data-state="{state}"></span>'
            f"</button></div>"
        )
