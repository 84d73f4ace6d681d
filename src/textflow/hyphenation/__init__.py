"""Hyphenation backends and the per-language hyphenator cache."""

from .adapter import HyphenationAdapter
from .backends import DEFAULT_BACKEND, SYLLABLE_MARK
from .registry import (
    Backend,
    BackendRegistry,
    Hyphenate,
    available_backends,
    get_backend,
    register_backend,
)

__all__ = [
    "Backend",
    "BackendRegistry",
    "DEFAULT_BACKEND",
    "Hyphenate",
    "HyphenationAdapter",
    "SYLLABLE_MARK",
    "available_backends",
    "get_backend",
    "register_backend",
]
