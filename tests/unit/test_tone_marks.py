"""Unit tests for tone diacritic placement and style rendering."""

from __future__ import annotations

import pytest

from hanzi_pinyin.models import PinyinStyle
from hanzi_pinyin.rendering.tone_marks import place_tone_mark, render_letters


@pytest.mark.parametrize(
    ("letters", "tone_class", "expected"),
    [
        ("zhong", 1, "zhōng"),
        ("guo", 2, "guó"),
        ("hao", 3, "hǎo"),
        ("xie", 4, "xiè"),
        ("dou", 1, "dōu"),
        ("liu", 2, "liú"),
        ("gui", 4, "guì"),
        ("lv", 4, "lǜ"),
        ("lve", 4, "lüè"),
        ("nv", 3, "nǚ"),
        ("yuan", 2, "yuán"),
        ("er", 2, "ér"),
    ],
)
def test_place_tone_mark_follows_vowel_priority(letters: str, tone_class: int, expected: str) -> None:
    assert place_tone_mark(letters, tone_class) == expected


def test_neutral_tone_and_vowelless_syllables_are_unmarked() -> None:
    assert place_tone_mark("de", 5) == "de"
    assert place_tone_mark("lv", 5) == "lü"
    assert place_tone_mark("ng", 2) == "ng"
    assert place_tone_mark("hm", 4) == "hm"


def test_place_tone_mark_rejects_unknown_tone() -> None:
    with pytest.raises(ValueError):
        place_tone_mark("ma", 0)


def test_render_letters_per_style() -> None:
    assert render_letters("lv", 4, PinyinStyle.WITH_TONE_MARK) == "lǜ"
    assert render_letters("lv", 4, PinyinStyle.WITHOUT_TONE_U_UNICODE) == "lü"
    assert render_letters("lv", 4, PinyinStyle.WITHOUT_TONE_V_ASCII) == "lv"


def test_style_aliases_resolve_to_canonical_members() -> None:
    assert PinyinStyle.WITHOUT_TONE_ASCII_V is PinyinStyle.WITHOUT_TONE_V_ASCII
    assert PinyinStyle.WITHOUT_TONE_UNICODE_U is PinyinStyle.WITHOUT_TONE_U_UNICODE
    assert [style.value for style in PinyinStyle] == ["tone-mark", "ascii", "unicode"]
