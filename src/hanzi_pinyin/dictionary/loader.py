"""Dictionary sources for building pinyin data stores.

Rows come either from a plain-text resource file or, by default, from the
per-character dictionary bundled with ``pypinyin``. The basic store covering the
common CJK Unified Ideographs block is built lazily and shared process-wide.
"""

from __future__ import annotations

import functools
import logging
import unicodedata
from pathlib import Path

from pypinyin import constants as pypinyin_constants

from hanzi_pinyin.dictionary.codec import MAX_LETTERS
from hanzi_pinyin.dictionary.repository import PinyinDataStore
from hanzi_pinyin.io.dictionary_io import read_dictionary_lines

logger = logging.getLogger(__name__)

BASIC_START_CODE_POINT = 0x4E00
BASIC_END_CODE_POINT = 0x9FA6

TONE_MARKS = {
    "ā": ("a", 1),
    "á": ("a", 2),
    "ǎ": ("a", 3),
    "à": ("a", 4),
    "ē": ("e", 1),
    "é": ("e", 2),
    "ě": ("e", 3),
    "è": ("e", 4),
    "ī": ("i", 1),
    "í": ("i", 2),
    "ǐ": ("i", 3),
    "ì": ("i", 4),
    "ō": ("o", 1),
    "ó": ("o", 2),
    "ǒ": ("o", 3),
    "ò": ("o", 4),
    "ū": ("u", 1),
    "ú": ("u", 2),
    "ǔ": ("u", 3),
    "ù": ("u", 4),
    "ǖ": ("v", 1),
    "ǘ": ("v", 2),
    "ǚ": ("v", 3),
    "ǜ": ("v", 4),
    "ü": ("v", 5),
    "ń": ("n", 2),
    "ň": ("n", 3),
    "ǹ": ("n", 4),
    "ḿ": ("m", 2),
    "ê": ("e", 5),
}


def numbered_token(marked: str) -> str | None:
    """Convert one tone-marked pinyin syllable into a resource token.

    Args:
        marked: Syllable such as ``zhōng`` or ``lǜ``.

    Returns:
        Token such as ``zhong1`` or ``lv4``; unmarked syllables get tone 5.
        ``None`` when the syllable cannot be expressed as 1-6 letters a-z with
        a single tone, e.g. when a combining mark has no precomposed form.
    """

    letters: list[str] = []
    tones: set[int] = set()
    for ch in unicodedata.normalize("NFC", marked.strip().lower()):
        if "a" <= ch <= "z":
            letters.append(ch)
        elif ch in TONE_MARKS:
            base, tone = TONE_MARKS[ch]
            letters.append(base)
            if tone != 5:
                tones.add(tone)
        else:
            return None

    if not letters or len(letters) > MAX_LETTERS or len(tones) > 1:
        return None
    tone = tones.pop() if tones else 5
    return f"{''.join(letters)}{tone}"


def pypinyin_dictionary_lines(start_code_point: int, end_code_point: int) -> list[str]:
    """Build resource lines for a code point range from pypinyin data.

    Args:
        start_code_point: First code point (inclusive).
        end_code_point: Last code point (inclusive).

    Returns:
        One line per code point; code points without data get an empty line.
    """

    pinyin_dict = pypinyin_constants.PINYIN_DICT
    lines: list[str] = []
    skipped = 0
    for code_point in range(start_code_point, end_code_point + 1):
        tokens: list[str] = []
        for item in str(pinyin_dict.get(code_point, "")).split(","):
            if not item.strip():
                continue
            token = numbered_token(item)
            if token is None:
                skipped += 1
                logger.debug("Skipping reading %r for U+%04X", item, code_point)
                continue
            if token not in tokens:
                tokens.append(token)
        lines.append(",".join(tokens))

    if skipped:
        logger.debug("Skipped %d unrepresentable pypinyin readings", skipped)
    return lines


def load_store(
    start_code_point: int,
    end_code_point: int,
    path: Path | None = None,
) -> PinyinDataStore:
    """Build a data store from a resource file or from pypinyin.

    Args:
        start_code_point: First supported code point (inclusive).
        end_code_point: Last supported code point (inclusive).
        path: Optional resource file; pypinyin data is used when omitted.

    Returns:
        The built store.

    Raises:
        ResourceUnavailableError: If ``path`` is given but cannot be read.
        InvalidRangeError: If the bounds are invalid.
        DataFormatError: If the resource contains malformed rows.
    """

    if path is not None:
        logger.info("Loading pinyin dictionary from %s", path)
        lines = read_dictionary_lines(path)
    else:
        logger.info("Loading pinyin dictionary from pypinyin data")
        lines = pypinyin_dictionary_lines(start_code_point, end_code_point)
    return PinyinDataStore.from_lines(start_code_point, end_code_point, lines)


@functools.lru_cache(maxsize=None)
def basic_store() -> PinyinDataStore:
    """Return the shared store for U+4E00..U+9FA6, building it on first use."""

    return load_store(BASIC_START_CODE_POINT, BASIC_END_CODE_POINT)
