from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from .backends import DEFAULT_BACKEND, SYLLABLE_MARK
from .registry import BackendRegistry, Hyphenate, backend_registry


logger = logging.getLogger(__name__)


class HyphenationAdapter:
    """Marks syllable boundaries in words, one cached hyphenator per language.

    Hyphenators are built lazily on first use of a language code. Building
    happens under a lock so concurrent callers asking for the same language
    share a single instance.
    """

    def __init__(self, backend: str = DEFAULT_BACKEND, registry: Optional[BackendRegistry] = None) -> None:
        self._registry = registry or backend_registry
        self.backend = self._registry.get(backend)
        self._hyphenators: Dict[str, Hyphenate] = {}
        self._lock = threading.Lock()

    def hyphenator_for(self, language: str) -> Hyphenate:
        key = language.strip()
        hyphenator = self._hyphenators.get(key)
        if hyphenator is not None:
            return hyphenator
        with self._lock:
            hyphenator = self._hyphenators.get(key)
            if hyphenator is None:
                logger.debug("Loading %s hyphenator for '%s'", self.backend.name, key)
                hyphenator = self.backend.create(key)
                self._hyphenators[key] = hyphenator
        return hyphenator

    def hyphenate(self, word: str, language: str) -> str:
        return self.hyphenator_for(language)(word)

    def syllables(self, word: str, language: str) -> List[str]:
        marked = self.hyphenate(word, language)
        return [fragment for fragment in marked.split(SYLLABLE_MARK) if fragment]

    def loaded_languages(self) -> List[str]:
        with self._lock:
            return sorted(self._hyphenators.keys())

    def supported_languages(self) -> List[str]:
        return self.backend.languages()
