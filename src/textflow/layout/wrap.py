from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, List

from ..hyphenation import HyphenationAdapter
from ..models import FitOutcome, HyphenateMode, LayoutConfig
from .align import SPACE, align_line
from .fit import fit_word, split_to_fit


logger = logging.getLogger(__name__)

ADAPTIVE_HYPHENATE_BIAS = 1.2


class LineBuilder:
    """Greedy word wrapper for a single paragraph.

    Words are placed on the current line while they fit. A word that
    overflows is either split between syllables or moved whole to the next
    line, depending on the hyphenation mode; a split-off remainder is
    retried as the next word. Every finished line is aligned immediately.
    """

    def __init__(self, config: LayoutConfig, adapter: HyphenationAdapter) -> None:
        self.config = config
        self.adapter = adapter

    def wrap(self, words: Iterable[str]) -> List[str]:
        queue = deque(words)
        lines: List[str] = []
        current = ""
        word_count = 0
        while queue:
            word = queue.popleft()
            separator = SPACE if current else ""
            remaining = self.config.width - len(current) - len(separator)

            if len(word) <= remaining:
                current += separator + word
                word_count += 1
                continue

            outcome = self._resolve_overflow(word, remaining, word_count, start_of_line=not current)
            if outcome.fitting_part:
                current += separator + outcome.fitting_part
            lines.append(align_line(current, self.config))
            current = ""
            word_count = 0
            if outcome.remainder:
                queue.appendleft(outcome.remainder)

        lines.append(align_line(current, self.config, last=True))
        return lines

    def should_split(self, remaining: int, word_count: int, *, start_of_line: bool = False) -> bool:
        if remaining <= 0:
            return False
        if start_of_line:
            return True
        mode = self.config.hyphenate
        if mode is HyphenateMode.ALWAYS:
            return True
        if mode is HyphenateMode.NEVER:
            return False
        # Adaptive: hyphenate less eagerly the more words the line already holds.
        return remaining * ADAPTIVE_HYPHENATE_BIAS > word_count

    def _resolve_overflow(self, word: str, remaining: int, word_count: int, *, start_of_line: bool) -> FitOutcome:
        if not self.should_split(remaining, word_count, start_of_line=start_of_line):
            return FitOutcome(fitting_part="", remainder=word)
        outcome = fit_word(word, remaining, self.config.language, self.adapter)
        if not outcome.fitting_part and start_of_line:
            logger.debug("No syllable break fits '%s' in %d columns; splitting by character", word, remaining)
            outcome = split_to_fit(word, remaining)
        return outcome


def wrap_paragraph(words: Iterable[str], config: LayoutConfig, adapter: HyphenationAdapter) -> List[str]:
    return LineBuilder(config, adapter).wrap(words)
