from __future__ import annotations

from typing import Callable, Dict, List

from ..models import Align, JustifyToken, LayoutConfig


SPACE = " "
JUSTIFY_SPACE_WEIGHT = 4
EDGE_SCORE_MULTIPLIER = 2

Aligner = Callable[[str, LayoutConfig], str]


def align_left(line: str, config: LayoutConfig) -> str:
    if config.pad_right:
        return line + SPACE * (config.width - len(line))
    return line


def align_right(line: str, config: LayoutConfig) -> str:
    return SPACE * (config.width - len(line)) + line


def align_center(line: str, config: LayoutConfig) -> str:
    gap = max(0, config.width - len(line))
    left_gap = gap // 2
    if config.pad_right:
        return SPACE * left_gap + line + SPACE * (gap - left_gap)
    return SPACE * left_gap + line


def align_justify(line: str, config: LayoutConfig) -> str:
    """Stretch ``line`` to the full width by widening the gaps between words.

    Extra spaces go one at a time to the token with the lowest score, where
    a token's score is its length plus four per space it already received,
    doubled for the first and last token. Ties go to the earliest token.
    """
    words = line.split(SPACE)
    if len(words) == 1:
        return align_left(line, config)

    tokens = [JustifyToken(word) for word in words]
    gap = config.width - len(line)
    while gap > 0:
        _lowest_scoring(tokens).added_spaces += 1
        gap -= 1
    return SPACE.join(_render_token(tokens, index) for index in range(len(tokens)))


def _token_score(token: JustifyToken, edge: bool) -> int:
    score = len(token.text) + token.added_spaces * JUSTIFY_SPACE_WEIGHT
    if edge:
        score *= EDGE_SCORE_MULTIPLIER
    return score


def _lowest_scoring(tokens: List[JustifyToken]) -> JustifyToken:
    last_index = len(tokens) - 1
    lowest = tokens[0]
    lowest_score = _token_score(lowest, edge=True)
    for index in range(1, len(tokens)):
        score = _token_score(tokens[index], edge=index == last_index)
        if score < lowest_score:
            lowest = tokens[index]
            lowest_score = score
    return lowest


def _render_token(tokens: List[JustifyToken], index: int) -> str:
    token = tokens[index]
    if index == 0:
        before, after = 0, token.added_spaces
    elif index == len(tokens) - 1:
        before, after = token.added_spaces, 0
    else:
        after = token.added_spaces // 2
        before = token.added_spaces - after
    return SPACE * before + token.text + SPACE * after


ALIGNERS: Dict[Align, Aligner] = {
    Align.LEFT: align_left,
    Align.RIGHT: align_right,
    Align.CENTER: align_center,
    Align.JUSTIFY: align_justify,
}

# The closing line of a paragraph is never stretched.
LAST_LINE_ALIGNERS: Dict[Align, Aligner] = {
    Align.RIGHT: align_right,
    Align.CENTER: align_center,
}


def align_line(line: str, config: LayoutConfig, *, last: bool = False) -> str:
    if last:
        aligner = LAST_LINE_ALIGNERS.get(config.align, align_left)
    else:
        aligner = ALIGNERS[config.align]
    return aligner(line, config)
