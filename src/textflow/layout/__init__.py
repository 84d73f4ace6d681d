"""Paragraph segmentation, word wrapping and line alignment."""

from .align import align_center, align_justify, align_left, align_line, align_right
from .core import join, layout, layout_lines, paragraph_words, segment
from .fit import fit_word, split_to_fit
from .wrap import LineBuilder, wrap_paragraph

__all__ = [
    "LineBuilder",
    "align_center",
    "align_justify",
    "align_left",
    "align_line",
    "align_right",
    "fit_word",
    "join",
    "layout",
    "layout_lines",
    "paragraph_words",
    "segment",
    "split_to_fit",
    "wrap_paragraph",
]
