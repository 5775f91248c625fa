"""Integration tests against the shared store built from pypinyin data."""

from __future__ import annotations

import pytest

from hanzi_pinyin import (
    CaseMode,
    PinyinStyle,
    UnsupportedCharacterError,
    basic_expander,
    basic_store,
)


def test_basic_store_covers_common_cjk_block() -> None:
    store = basic_store()

    assert store.supported_range == (0x4E00, 0x9FA6)
    assert store.is_supported(0x4E00)
    assert store.is_supported(0x9FA6)
    assert not store.is_supported(0x4DFF)
    assert not store.is_supported(0x9FA7)
    with pytest.raises(UnsupportedCharacterError):
        store.is_supported(0x4DFF, strict=True)


def test_basic_store_is_shared() -> None:
    assert basic_store() is basic_store()
    assert basic_expander().store is basic_store()


def test_polyphone_dedup_depends_on_style() -> None:
    store = basic_store()
    code_point = ord("中")

    ascii_readings = store.readings_for(code_point, PinyinStyle.WITHOUT_TONE_V_ASCII)
    marked_readings = store.readings_for(code_point, PinyinStyle.WITH_TONE_MARK)

    assert ascii_readings == ("zhong",)
    assert "zhōng" in marked_readings
    assert "zhòng" in marked_readings
    assert len(marked_readings) > len(ascii_readings)


def test_basic_expander_spells_mixed_text() -> None:
    expander = basic_expander()

    results = expander.expand_full_spelling("ABC中国123", PinyinStyle.WITH_TONE_MARK)

    assert results
    assert all(result.startswith("A B C ") for result in results)
    assert all(result.endswith(" 1 2 3") for result in results)
    assert any("zhōng guó" in result for result in results)
    assert expander.expand_first_letters("中国", CaseMode.UPPER) == ["ZG"]
    assert expander.expand_full_spelling("中国", case=CaseMode.UPPER) == ["ZHONG GUO"]


def test_first_letters_of_polyphone_are_sorted_unique() -> None:
    letters = basic_store().first_letters_for(ord("喜"))

    assert list(letters) == sorted(set(letters))
