import pytest

from textflow.config import build_config, parse_frontmatter, resolve_config
from textflow.errors import InvalidConfig
from textflow.models import Align, HyphenateMode, LayoutConfig


def test_defaults():
    config = build_config()
    assert config == LayoutConfig(
        width=80,
        align=Align.JUSTIFY,
        hyphenate=HyphenateMode.ADAPTIVE,
        language="en-us",
        pad_right=False,
    )


def test_build_config_parses_strings_and_aliases():
    config = build_config(width="40", align="Right", hyphenate="true", lang=" de ", fill_spaces="yes")
    assert config.width == 40
    assert config.align is Align.RIGHT
    assert config.hyphenate is HyphenateMode.ALWAYS
    assert config.language == "de"
    assert config.pad_right is True


@pytest.mark.parametrize(
    "value, expected",
    [
        ("always", HyphenateMode.ALWAYS),
        ("false", HyphenateMode.NEVER),
        ("Adaptive", HyphenateMode.ADAPTIVE),
        (False, HyphenateMode.NEVER),
    ],
)
def test_hyphenate_values(value, expected):
    assert build_config(hyphenate=value).hyphenate is expected


@pytest.mark.parametrize(
    "settings",
    [
        {"width": "abc"},
        {"width": "0"},
        {"width": -3},
        {"width": True},
        {"align": "middle"},
        {"hyphenate": "sometimes"},
        {"pad_right": "maybe"},
        {"language": "  "},
        {"colour": "red"},
    ],
)
def test_invalid_settings_are_rejected(settings):
    with pytest.raises(InvalidConfig):
        build_config(**settings)


def test_layout_config_validates_directly():
    with pytest.raises(InvalidConfig):
        LayoutConfig(width=0)
    with pytest.raises(ValueError):
        LayoutConfig(align="left")


def test_parse_frontmatter():
    text = "---\nwidth: 20\nalign: center\nfoo: bar\n---\nBody text\n"
    settings, body = parse_frontmatter(text)
    assert settings == {"width": "20", "align": "center"}
    assert body == "Body text\n"


def test_unclosed_frontmatter_is_body():
    text = "---\nwidth: 20\nBody"
    assert parse_frontmatter(text) == ({}, text)


def test_text_without_frontmatter():
    assert parse_frontmatter("Just text") == ({}, "Just text")


def test_options_override_frontmatter():
    config = resolve_config(
        {"width": "30", "align": None},
        {"width": "20", "align": "center", "lang": "fr"},
    )
    assert config.width == 30
    assert config.align is Align.CENTER
    assert config.language == "fr"
