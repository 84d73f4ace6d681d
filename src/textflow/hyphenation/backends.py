"""Hyphenation backends.

Each backend turns a language code into a function that returns a word
with its syllable boundaries marked by ``SYLLABLE_MARK``.
"""
from __future__ import annotations

import re
from functools import partial
from typing import List

import pyphen

from ..errors import HyphenatorUnavailable, UnsupportedLanguage
from .registry import Backend, Hyphenate, register_backend


# Soft hyphen; keeps literal hyphens in the input distinguishable from break points.
SYLLABLE_MARK = "\u00ad"

DEFAULT_BACKEND = "pyphen"

LANGUAGE_SPLIT_RE = re.compile(r"[-_]")


def _pyphen_languages() -> List[str]:
    return sorted(pyphen.LANGUAGES)


def _pyphen_factory(language: str) -> Hyphenate:
    resolved = pyphen.language_fallback(language.strip())
    if resolved is None:
        raise UnsupportedLanguage(language, _pyphen_languages())
    dic = pyphen.Pyphen(lang=resolved)
    return partial(dic.inserted, hyphen=SYLLABLE_MARK)


def _pyhyphen_code(language: str) -> str:
    parts = [part for part in LANGUAGE_SPLIT_RE.split(language.strip()) if part]
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0].lower()
    return f"{parts[0].lower()}_{parts[1].upper()}"


def _pyhyphen_languages() -> List[str]:
    """Codes PyHyphen can download, plus any dictionaries already installed."""
    from hyphen import dictools

    return sorted(set(dictools.LANGUAGES) | set(dictools.list_installed()))


def _pyhyphen_knows(code: str, languages: List[str]) -> bool:
    # The repository groups regional variants under the bare language, e.g. en_US under en.
    prefixes = {known.split("_")[0].lower() for known in languages}
    return code in languages or code.split("_")[0] in prefixes


def _pyhyphen_factory(language: str) -> Hyphenate:
    from hyphen import Hyphenator

    code = _pyhyphen_code(language)
    languages = _pyhyphen_languages()
    if not code or not _pyhyphen_knows(code, languages):
        raise UnsupportedLanguage(language, languages)
    try:
        hyphenator = Hyphenator(code)
    except Exception as exc:
        raise HyphenatorUnavailable("pyhyphen", language, exc) from exc

    def hyphenate(word: str) -> str:
        syllables = hyphenator.syllables(word)
        if not syllables or "".join(syllables) != word:
            return word
        return SYLLABLE_MARK.join(syllables)

    return hyphenate


PYPHEN_BACKEND = Backend(name="pyphen", create=_pyphen_factory, languages=_pyphen_languages)
PYHYPHEN_BACKEND = Backend(name="pyhyphen", create=_pyhyphen_factory, languages=_pyhyphen_languages)

register_backend(PYPHEN_BACKEND)
register_backend(PYHYPHEN_BACKEND)
