"""Reflow plain text into fixed-width lines with hyphenation and alignment."""

from .config import build_config, parse_frontmatter, resolve_config
from .errors import HyphenatorUnavailable, InvalidConfig, LayoutError, UnsupportedLanguage
from .hyphenation import HyphenationAdapter
from .layout import layout, layout_lines
from .models import Align, FitOutcome, HyphenateMode, JustifyToken, LayoutConfig

__all__ = [
    "Align",
    "FitOutcome",
    "HyphenateMode",
    "HyphenationAdapter",
    "HyphenatorUnavailable",
    "InvalidConfig",
    "JustifyToken",
    "LayoutConfig",
    "LayoutError",
    "UnsupportedLanguage",
    "build_config",
    "layout",
    "layout_lines",
    "parse_frontmatter",
    "resolve_config",
]
