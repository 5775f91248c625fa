"""Unit tests for the command-line entrypoint."""

from __future__ import annotations

from pathlib import Path

import pytest

from hanzi_pinyin.cli import main

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "mini_pinyin.txt"
RANGE_ARGS = ["--dictionary", str(FIXTURE), "--start", "U+4E2D", "--end", "0x4E33"]


def test_spell_prints_one_line_per_combination(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([*RANGE_ARGS, "spell", "中串", "--style", "tone-mark"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "zhòng chuàn",
        "zhòng guàn",
        "zhōng chuàn",
        "zhōng guàn",
    ]


def test_initials_with_case(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([*RANGE_ARGS, "initials", "中串", "--case", "upper"]) == 0
    assert capsys.readouterr().out.splitlines() == ["ZC", "ZG"]


def test_lookup_prints_table(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([*RANGE_ARGS, "lookup", "丱"]) == 0

    out = capsys.readouterr().out
    assert "tone_mark" in out
    assert "lù, lǜ" in out
    assert "lu, lü" in out


def test_missing_dictionary_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="not found"):
        main(["--dictionary", str(tmp_path / "missing.txt"), "spell", "x"])


def test_overflow_is_reported(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit, match="too large"):
        main([*RANGE_ARGS, "initials", "串" * 31])


def test_export_writes_dictionary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "dict.txt"

    assert main(["--start", "U+4E2D", "--end", "U+4E30", "export", "--output", str(output)]) == 0

    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert "zhong1" in lines[0].split(",")
    assert "Wrote 4 rows" in capsys.readouterr().out
