"""
Client-side islands.

Each island renders its initial markup at build time and ships a small
script that takes over in the browser. The Python classes also carry
the reference behaviour the scripts implement.

- state: Atom / Store shared-state cells
- dark_mode: Theme bootstrap and the dark-mode switch
- embed: WebAssembly canvas embed bridge
- browser: Document, storage, geometry and event models
"""

from .dark_mode import DarkModeSwitch, bootstrap_script, bootstrap_theme, dark_mode_atom
from .embed import EmbedBridge, WasmEmbed
from .state import Atom, StorageAtom, Store, get_default_store

__all__ = [
    "Atom",
    "StorageAtom",
    "Store",
    "get_default_store",
    "DarkModeSwitch",
    "bootstrap_script",
    "bootstrap_theme",
    "dark_mode_atom",
    "EmbedBridge",
    "WasmEmbed",
]
