from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..errors import InvalidConfig
from ..hyphenation import HyphenationAdapter
from ..models import LayoutConfig
from .align import SPACE
from .wrap import LineBuilder


logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"
LINE_BREAK = "\n"
LINE_ENDING_RE = re.compile(r"\r\n?")


def segment(text: str) -> List[str]:
    """Split ``text`` into paragraphs with internal line breaks flattened."""
    normalized = LINE_ENDING_RE.sub(LINE_BREAK, text)
    return [
        paragraph.strip().replace(LINE_BREAK, SPACE)
        for paragraph in normalized.split(PARAGRAPH_SEPARATOR)
    ]


def paragraph_words(paragraph: str) -> List[str]:
    return paragraph.split()


def join(paragraphs: Sequence[str], config: LayoutConfig) -> str:
    if config.pad_right:
        separator = LINE_BREAK + SPACE * config.width + LINE_BREAK
    else:
        separator = PARAGRAPH_SEPARATOR
    return separator.join(paragraphs)


def layout(
    text: str,
    config: LayoutConfig,
    *,
    adapter: Optional[HyphenationAdapter] = None,
    workers: Optional[int] = None,
) -> str:
    """Reflow ``text`` into lines of ``config.width`` columns.

    With ``workers`` above one, paragraphs are laid out on a thread pool;
    they are joined in input order either way.
    """
    if workers is not None and workers < 1:
        raise InvalidConfig(f"Workers must be at least 1, got {workers}.")
    builder = LineBuilder(config, adapter or HyphenationAdapter())
    paragraphs = segment(text)
    logger.debug("Laying out %d paragraph(s) at width %d", len(paragraphs), config.width)

    def render(paragraph: str) -> str:
        return LINE_BREAK.join(builder.wrap(paragraph_words(paragraph)))

    if workers is not None and workers > 1 and len(paragraphs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            rendered = list(pool.map(render, paragraphs))
    else:
        rendered = [render(paragraph) for paragraph in paragraphs]
    return join(rendered, config)


def layout_lines(
    text: str,
    config: LayoutConfig,
    *,
    adapter: Optional[HyphenationAdapter] = None,
    workers: Optional[int] = None,
) -> List[str]:
    return layout(text, config, adapter=adapter, workers=workers).split(LINE_BREAK)
