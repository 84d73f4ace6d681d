from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidConfig
from .models import Align, HyphenateMode, LayoutConfig


logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r"^---\s*$")

TRUE_VALUES = {"true", "yes", "1", "on"}
FALSE_VALUES = {"false", "no", "0", "off"}

HYPHENATE_ALIASES: Dict[str, HyphenateMode] = {
    **{value: HyphenateMode.ALWAYS for value in TRUE_VALUES},
    **{value: HyphenateMode.NEVER for value in FALSE_VALUES},
}

SETTING_ALIASES = {
    "lang": "language",
    "hyphen_lang": "language",
    "fill_spaces": "pad_right",
    "fill-spaces": "pad_right",
    "pad-right": "pad_right",
}

CONFIG_FIELDS = ("width", "align", "hyphenate", "language", "pad_right")


def canonical_key(key: str) -> str:
    normalized = key.strip().lower()
    return SETTING_ALIASES.get(normalized, normalized)


def parse_width(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidConfig(f"Width must be an integer, got {value!r}.")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not re.fullmatch(r"[+-]?\d+", text):
        raise InvalidConfig(f"Width must be an integer, got {value!r}.")
    return int(text)


def parse_align(value: Any) -> Align:
    if isinstance(value, Align):
        return value
    normalized = str(value).strip().lower()
    if normalized == "centre":
        normalized = "center"
    try:
        return Align(normalized)
    except ValueError as exc:
        valid = ", ".join(align.value for align in Align)
        raise InvalidConfig(f"{value!r} is not a valid value for align. Valid values are: {valid}") from exc


def parse_hyphenate(value: Any) -> HyphenateMode:
    if isinstance(value, HyphenateMode):
        return value
    if isinstance(value, bool):
        return HyphenateMode.ALWAYS if value else HyphenateMode.NEVER
    normalized = str(value).strip().lower()
    if normalized in HYPHENATE_ALIASES:
        return HYPHENATE_ALIASES[normalized]
    try:
        return HyphenateMode(normalized)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in HyphenateMode)
        raise InvalidConfig(
            f"{value!r} is not a valid value for hyphenate. Valid values are: {valid}"
        ) from exc


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise InvalidConfig(f"Expected a boolean value, got {value!r}.")


def parse_language(value: Any) -> str:
    language = str(value).strip()
    if not language:
        raise InvalidConfig("Language code cannot be empty.")
    return language


PARSERS = {
    "width": parse_width,
    "align": parse_align,
    "hyphenate": parse_hyphenate,
    "language": parse_language,
    "pad_right": parse_flag,
}


def build_config(**settings: Any) -> LayoutConfig:
    """Build a validated ``LayoutConfig`` from raw option values.

    Values may be strings as typed on a command line or in a frontmatter
    block. Keys that are missing or ``None`` keep their default.
    """
    values: Dict[str, Any] = {}
    for key, raw in settings.items():
        field = canonical_key(key)
        if field not in PARSERS:
            raise InvalidConfig(f"Unknown layout option '{key}'.")
        if raw is None:
            continue
        values[field] = PARSERS[field](raw)
    return LayoutConfig(**values)


def resolve_config(
    options: Optional[Mapping[str, Any]] = None,
    frontmatter: Optional[Mapping[str, Any]] = None,
) -> LayoutConfig:
    """Merge frontmatter settings with explicit options, options winning."""
    merged: Dict[str, Any] = {}
    for source in (frontmatter or {}, options or {}):
        for key, value in source.items():
            if value is not None:
                merged[canonical_key(key)] = value
    return build_config(**merged)


def parse_frontmatter(text: str) -> Tuple[Dict[str, str], str]:
    """Split a leading ``---`` settings block off ``text``.

    Returns the recognised settings and the remaining body. Text without a
    closed block is returned unchanged with no settings.
    """
    lines = text.splitlines(keepends=True)
    if not lines or not FRONTMATTER_PATTERN.match(lines[0]):
        return {}, text
    settings: Dict[str, str] = {}
    idx = 1
    while idx < len(lines):
        if FRONTMATTER_PATTERN.match(lines[idx]):
            break
        if ":" in lines[idx]:
            key, value = lines[idx].split(":", 1)
            field = canonical_key(key)
            if field in CONFIG_FIELDS:
                settings[field] = value.strip()
            else:
                logger.warning("Ignoring unknown frontmatter setting '%s'", key.strip())
        idx += 1
    if idx >= len(lines):
        return {}, text
    return settings, "".join(lines[idx + 1 :])
