#!/usr/bin/env python3
"""
state.py
--------
Shared observable state for islands.

An Atom describes one piece of state; a Store owns the current values
for one page and notifies subscribers when a value changes. Islands
never pass state to each other directly: each one subscribes to the
atom it cares about, so every reader on the page sees the same value.

StorageAtom additionally hydrates from, and writes back to, browser
local storage (JSON-encoded, so ``True`` is stored as ``"true"``).

Usage:
    from lifeblog.islands.state import Atom, Store

    count = Atom(0, label="count")
    store = Store()
    unsubscribe = store.sub(count, lambda value: print("now", value))
    store.set(count, lambda n: n + 1)   # prints "now 1"
    unsubscribe()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
from typing import Any, Callable, Dict, List, Optional

# --- Local imports ---
from lifeblog.core.exceptions import StorageUnavailableError
from lifeblog.islands.browser import LocalStorage

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class Atom:
    """
    Descriptor for a single piece of shared state.

    Atoms hold no value themselves; values live in a Store. Atoms hash by
    identity, so two atoms with equal initial values are distinct.
    """

    def __init__(self, initial: Any, label: Optional[str] = None) -> None:
        self.initial = initial
        self.label = label

    def read_initial(self, store: "Store") -> Any:
        return self.initial

    def on_write(self, store: "Store", value: Any) -> None:
        """Hook run after every set; plain atoms have no side effects."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label or id(self)})"


class StorageAtom(Atom):
    """
    Atom persisted in the store's local storage under ``key``.

    The first read parses the stored JSON; a missing, unparseable or
    blocked entry falls back to ``initial``. Every write stores the new
    value. Blocked storage is logged and otherwise ignored, leaving the
    in-memory value authoritative for the rest of the page view.
    """

    def __init__(self, key: str, initial: Any) -> None:
        super().__init__(initial, label=key)
        self.key = key

    def read_initial(self, store: "Store") -> Any:
        if store.storage is None:
            return self.initial
        try:
            raw = store.storage.get_item(self.key)
        except StorageUnavailableError as e:
            logger.debug("Cannot read %s from storage: %s", self.key, e)
            return self.initial
        if raw is None:
            return self.initial
        try:
            return json.loads(raw)
        except ValueError:
            logger.debug("Ignoring malformed stored value for %s: %r", self.key, raw)
            return self.initial

    def on_write(self, store: "Store", value: Any) -> None:
        if store.storage is None:
            return
        try:
            store.storage.set_item(self.key, json.dumps(value))
        except StorageUnavailableError as e:
            logger.debug("Cannot persist %s: %s", self.key, e)


class Store:
    """
    Holds atom values for one page and their subscriber lists.

    Attributes:
        storage: Local storage backing StorageAtoms (None disables persistence)
    """

    def __init__(self, storage: Optional[LocalStorage] = None) -> None:
        self.storage = storage
        self._values: Dict[Atom, Any] = {}
        self._listeners: Dict[Atom, List[Listener]] = {}

    def get(self, atom: Atom) -> Any:
        if atom not in self._values:
            self._values[atom] = atom.read_initial(self)
        return self._values[atom]

    def set(self, atom: Atom, value: Any) -> None:
        """
        Write a value, or apply an updater ``f(previous) -> value``.

        The atom's write hook always runs; subscribers are notified only
        when the value actually changed.
        """
        previous = self.get(atom)
        if callable(value):
            value = value(previous)
        self._values[atom] = value
        atom.on_write(self, value)
        if value != previous:
            for listener in list(self._listeners.get(atom, [])):
                listener(value)

    def sub(self, atom: Atom, listener: Listener) -> Callable[[], None]:
        """
        Subscribe to changes of ``atom``.

        Returns:
            A function that removes the subscription (safe to call twice)
        """
        listeners = self._listeners.setdefault(atom, [])
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def subscriber_count(self, atom: Atom) -> int:
        return len(self._listeners.get(atom, []))


_default_store: Optional[Store] = None


def get_default_store() -> Store:
    """
    Return the page-wide store, creating it on first use.

    Islands mounted without an explicit store share this one.
    """
    global _default_store
    if _default_store is None:
        _default_store = Store(storage=LocalStorage())
    return _default_store


def reset_default_store(store: Optional[Store] = None) -> Store:
    """Replace the page-wide store (a new page load)."""
    global _default_store
    _default_store = store if store is not None else Store(storage=LocalStorage())
    return _default_store
