"""Unit tests for dictionary sources and resource I/O."""

from __future__ import annotations

from pathlib import Path

import pytest

from hanzi_pinyin.dictionary.loader import load_store, numbered_token, pypinyin_dictionary_lines
from hanzi_pinyin.dictionary.parser import format_dictionary_line, parse_dictionary_line
from hanzi_pinyin.errors import ResourceUnavailableError
from hanzi_pinyin.io.dictionary_io import read_dictionary_lines, write_dictionary
from hanzi_pinyin.models import PinyinReading, PinyinStyle


@pytest.mark.parametrize(
    ("marked", "expected"),
    [
        ("zhōng", "zhong1"),
        ("guó", "guo2"),
        ("lǜ", "lv4"),
        ("lü", "lv5"),
        ("de", "de5"),
        ("ń", "n2"),
        ("ǹg", "ng4"),
        ("zhuàng", "zhuang4"),
    ],
)
def test_numbered_token_converts_tone_marks(marked: str, expected: str) -> None:
    assert numbered_token(marked) == expected


@pytest.mark.parametrize("marked", ["m̄", "ê̄", "", "shuāngg", "nǐhào"])
def test_numbered_token_skips_unrepresentable_readings(marked: str) -> None:
    assert numbered_token(marked) is None


def test_parse_and_format_dictionary_line() -> None:
    readings = parse_dictionary_line(" zhong1, zhong4 ")

    assert readings == (PinyinReading("zhong", 1), PinyinReading("zhong", 4))
    assert format_dictionary_line(readings) == "zhong1,zhong4"
    assert parse_dictionary_line("   ") == ()


def test_pypinyin_lines_cover_range_one_line_per_code_point() -> None:
    lines = pypinyin_dictionary_lines(ord("中"), ord("中") + 9)

    assert len(lines) == 10
    assert "zhong1" in lines[0].split(",")


def test_read_missing_dictionary_raises(tmp_path: Path) -> None:
    with pytest.raises(ResourceUnavailableError):
        read_dictionary_lines(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        load_store(0x4E00, 0x4E01, path=tmp_path / "missing.txt")


def test_written_dictionary_loads_back(tmp_path: Path) -> None:
    output = tmp_path / "dict.txt"

    count = write_dictionary(["hao3,hao4", "", "lv4"], output_path=output)
    store = load_store(0x4E00, 0x4E02, path=output)

    assert count == 3
    assert output.read_text(encoding="utf-8").splitlines() == ["hao3,hao4", "", "lv4"]
    assert store.readings_for(0x4E00, PinyinStyle.WITH_TONE_MARK) == ("hào", "hǎo")
    assert store.readings_for(0x4E01) == ()
    assert store.readings_for(0x4E02, PinyinStyle.WITHOUT_TONE_U_UNICODE) == ("lü",)
