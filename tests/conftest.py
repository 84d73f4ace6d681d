import sys
import types

import pytest

from textflow.errors import UnsupportedLanguage
from textflow.hyphenation import SYLLABLE_MARK, Backend, BackendRegistry, HyphenationAdapter
from textflow.models import Align, HyphenateMode, LayoutConfig


FAKE_SYLLABLES = {
    "hyphenation": "hy-phen-ation",
    "wonderful": "won-der-ful",
    "extraordinary": "ex-tra-or-di-nary",
    "ordinary": "or-di-nary",
    "beautiful": "beau-ti-ful",
    "paragraph": "para-graph",
}

FAKE_LANGUAGES = ["en-us", "xx"]


def _fake_factory(language):
    if language not in FAKE_LANGUAGES:
        raise UnsupportedLanguage(language, FAKE_LANGUAGES)

    def hyphenate(word):
        return FAKE_SYLLABLES.get(word, word).replace("-", SYLLABLE_MARK)

    return hyphenate


@pytest.fixture
def registry():
    registry = BackendRegistry()
    registry.register(Backend(name="fake", create=_fake_factory, languages=lambda: list(FAKE_LANGUAGES)))
    return registry


@pytest.fixture
def adapter(registry):
    return HyphenationAdapter("fake", registry=registry)


@pytest.fixture
def make_config():
    def factory(**overrides):
        settings = {
            "width": 10,
            "align": Align.LEFT,
            "hyphenate": HyphenateMode.NEVER,
            "language": "en-us",
            "pad_right": False,
        }
        settings.update(overrides)
        return LayoutConfig(**settings)

    return factory


class _FakePyHyphenator:
    table = {
        "hyphenation": ["hy", "phen", "ation"],
        "odd": ["o", "d"],
    }

    def __init__(self, language):
        if language == "fr_FR":
            raise ConnectionError("network is unreachable")
        self.language = language

    def syllables(self, word):
        return self.table.get(word, [])


@pytest.fixture
def fake_pyhyphen(monkeypatch):
    dictools = types.ModuleType("hyphen.dictools")
    dictools.LANGUAGES = ["de", "en", "fr_FR"]
    dictools.list_installed = lambda: ["en_US"]
    module = types.ModuleType("hyphen")
    module.Hyphenator = _FakePyHyphenator
    module.dictools = dictools
    monkeypatch.setitem(sys.modules, "hyphen", module)
    monkeypatch.setitem(sys.modules, "hyphen.dictools", dictools)
    return module
