from __future__ import annotations

from ..hyphenation import HyphenationAdapter
from ..models import FitOutcome


HYPHEN = "-"


def fit_word(word: str, budget: int, language: str, adapter: HyphenationAdapter) -> FitOutcome:
    """Split ``word`` between syllables so the first part fits in ``budget``.

    The budget includes the hyphen appended to the first part. Split points
    are tried from the last syllable backwards, so the longest fitting
    prefix wins. When not even an empty prefix fits, or the word has no
    usable split point, the whole word is returned as the remainder.
    """
    syllables = adapter.syllables(word, language)
    for split in range(len(syllables) - 1, -1, -1):
        head = "".join(syllables[:split])
        if len(head) + len(HYPHEN) > budget:
            continue
        if split == 0:
            return FitOutcome(fitting_part="", remainder=word)
        return FitOutcome(fitting_part=head + HYPHEN, remainder="".join(syllables[split:]))
    return FitOutcome(fitting_part="", remainder=word)


def split_to_fit(word: str, budget: int) -> FitOutcome:
    """Split ``word`` at a character position, ignoring syllables.

    Only used for a word that is alone on its line and still has no
    syllable break that fits, so at least one character is always placed.
    """
    if budget <= len(HYPHEN):
        # No room for a hyphen next to a character.
        return FitOutcome(fitting_part=word[:1], remainder=word[1:])
    position = max(max(budget, 1) - len(HYPHEN), 1)
    return FitOutcome(fitting_part=word[:position] + HYPHEN, remainder=word[position:])
