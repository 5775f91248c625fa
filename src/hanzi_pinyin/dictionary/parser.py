"""Parsing utilities for the per-character pinyin dictionary resource.

The resource holds one line per code point. Each non-empty line is a comma
separated list of numbered tokens such as ``zhong1,zhong4``; ``v`` stands for
``ü`` and tone ``5`` marks the neutral tone.
"""

from __future__ import annotations

import re

from hanzi_pinyin.errors import DataFormatError
from hanzi_pinyin.models import PinyinReading

TOKEN_RE = re.compile(r"([a-z]{1,6})([1-5])")


def parse_dictionary_token(token: str) -> PinyinReading:
    """Parse one numbered token into a reading.

    Args:
        token: Raw token such as ``lv4``; surrounding whitespace is ignored.

    Returns:
        The parsed reading.

    Raises:
        DataFormatError: If the token is not 1-6 letters a-z followed by a
            single tone digit 1-5.
    """

    token = token.strip()
    match = TOKEN_RE.fullmatch(token)
    if match is None:
        raise DataFormatError(f"Invalid pinyin token '{token}'.")
    letters, tone = match.groups()
    return PinyinReading(letters=letters, tone_class=int(tone))


def parse_dictionary_line(line: str) -> tuple[PinyinReading, ...]:
    """Parse one resource line into the readings for a single code point.

    Args:
        line: Raw line; blank or whitespace-only lines have no readings.

    Returns:
        Readings in the order they appear on the line.

    Raises:
        DataFormatError: If any token on the line is malformed.
    """

    line = line.strip()
    if not line:
        return ()
    return tuple(parse_dictionary_token(token) for token in line.split(","))


def format_dictionary_line(readings: tuple[PinyinReading, ...]) -> str:
    """Render readings back into one resource line."""

    return ",".join(reading.numbered for reading in readings)
