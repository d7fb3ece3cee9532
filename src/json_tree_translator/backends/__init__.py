"""Backends subpackage for json-tree-translator.

Two HTTP backends ship with the package, both built on ``httpx``:

- ``LibreTranslateBackend``: the primary backend (JSON POST)
- ``MyMemoryBackend``: the secondary backend used as a fallback (GET)

All backends satisfy the ``TranslationBackend`` Protocol structurally.
"""

from json_tree_translator.backends.libretranslate import LibreTranslateBackend
from json_tree_translator.backends.mymemory import MyMemoryBackend

__all__ = ["LibreTranslateBackend", "MyMemoryBackend"]
