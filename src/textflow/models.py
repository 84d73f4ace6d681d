from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidConfig


class HyphenateMode(Enum):
    ALWAYS = "always"
    NEVER = "never"
    ADAPTIVE = "adaptive"


class Align(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


@dataclass(frozen=True)
class LayoutConfig:
    width: int = 80
    align: Align = Align.JUSTIFY
    hyphenate: HyphenateMode = HyphenateMode.ADAPTIVE
    language: str = "en-us"
    pad_right: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise InvalidConfig(f"Width must be an integer, got {self.width!r}.")
        if self.width < 1:
            raise InvalidConfig(f"Width must be at least 1, got {self.width}.")
        if not isinstance(self.align, Align):
            raise InvalidConfig(f"Unknown align value {self.align!r}.")
        if not isinstance(self.hyphenate, HyphenateMode):
            raise InvalidConfig(f"Unknown hyphenate value {self.hyphenate!r}.")
        if not isinstance(self.language, str) or not self.language.strip():
            raise InvalidConfig("Language code cannot be empty.")


@dataclass(frozen=True)
class FitOutcome:
    fitting_part: str
    remainder: str


@dataclass
class JustifyToken:
    text: str
    added_spaces: int = 0
