"""Immutable code point to pinyin lookup store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from hanzi_pinyin.dictionary.codec import decode_word, encode_reading
from hanzi_pinyin.dictionary.parser import parse_dictionary_line
from hanzi_pinyin.errors import (
    DataFormatError,
    InvalidRangeError,
    UnsupportedCharacterError,
)
from hanzi_pinyin.models import CharacterIndexRange, PinyinReading, PinyinStyle
from hanzi_pinyin.rendering.tone_marks import render_letters
from hanzi_pinyin.validation import format_error_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PinyinDataStore:
    """Read-only store mapping code points to their encoded readings.

    The store covers the contiguous inclusive range
    ``[start_code_point, end_code_point]``. For the code point at offset ``i``
    in that range, ``words[starts[i]:ends[i]]`` holds its encoded readings; an
    empty slice means no known reading. Instances are built once by
    :meth:`from_lines` and never mutated, so they can be shared freely.
    """

    start_code_point: int
    end_code_point: int
    starts: tuple[int, ...]
    ends: tuple[int, ...]
    words: tuple[int, ...]

    def __post_init__(self) -> None:
        _check_range(self.start_code_point, self.end_code_point)
        size = self.end_code_point - self.start_code_point + 1
        if len(self.starts) != size or len(self.ends) != size:
            raise DataFormatError(
                f"Index table has {len(self.starts)} entries, expected {size}."
            )

    @classmethod
    def from_lines(
        cls,
        start_code_point: int,
        end_code_point: int,
        lines: Iterable[str],
    ) -> PinyinDataStore:
        """Build a store from dictionary resource lines.

        Line ``n`` holds the readings of code point ``start_code_point + n``.
        Missing trailing lines mean the remaining code points have no reading.
        Every line is parsed before the store is created, so a failure never
        leaves a partially built instance behind.

        Args:
            start_code_point: First supported code point (inclusive).
            end_code_point: Last supported code point (inclusive).
            lines: Resource lines in ascending code point order.

        Returns:
            The built store.

        Raises:
            InvalidRangeError: If the bounds are invalid.
            DataFormatError: If any line is malformed or there are more lines
                than code points in the range.
        """

        _check_range(start_code_point, end_code_point)
        size = end_code_point - start_code_point + 1

        words: list[int] = []
        starts: list[int] = []
        ends: list[int] = []
        errors: list[str] = []

        for row, line in enumerate(lines):
            if row >= size:
                if line.strip():
                    errors.append(
                        f"Row {row + 1}: beyond end of range U+{end_code_point:04X}"
                    )
                continue
            start = len(words)
            try:
                for reading in parse_dictionary_line(line):
                    words.extend(encode_reading(reading.letters, reading.tone_class))
            except DataFormatError as exc:
                del words[start:]
                errors.append(f"Row {row + 1} (U+{start_code_point + row:04X}): {exc}")
            starts.append(start)
            ends.append(len(words))

        if errors:
            raise DataFormatError(format_error_summary("Dictionary load", errors))

        while len(starts) < size:
            starts.append(len(words))
            ends.append(len(words))

        store = cls(
            start_code_point=start_code_point,
            end_code_point=end_code_point,
            starts=tuple(starts),
            ends=tuple(ends),
            words=tuple(words),
        )
        logger.info(
            "Built pinyin store U+%04X..U+%04X: %d code points, %d encoded words",
            start_code_point,
            end_code_point,
            size,
            len(words),
        )
        return store

    @property
    def supported_range(self) -> tuple[int, int]:
        """Return the inclusive ``(start, end)`` code point range."""

        return self.start_code_point, self.end_code_point

    def is_supported(self, code_point: int, strict: bool = False) -> bool:
        """Return whether ``code_point`` falls inside the supported range.

        Args:
            code_point: Code point to check.
            strict: Raise instead of returning ``False`` for unsupported input.

        Raises:
            UnsupportedCharacterError: If ``strict`` is set and the code point is
                out of range.
        """

        supported = self.start_code_point <= code_point <= self.end_code_point
        if strict and not supported:
            raise UnsupportedCharacterError(
                f"No pinyin data for U+{code_point:04X}; supported range is "
                f"U+{self.start_code_point:04X}..U+{self.end_code_point:04X}."
            )
        return supported

    def index_range(self, code_point: int) -> CharacterIndexRange:
        """Return the word slice for ``code_point``; empty when unsupported."""

        if not self.is_supported(code_point):
            return CharacterIndexRange(0, 0)
        offset = code_point - self.start_code_point
        return CharacterIndexRange(self.starts[offset], self.ends[offset])

    def readings(self, code_point: int) -> tuple[PinyinReading, ...]:
        """Decode every reading stored for ``code_point`` in stored order."""

        span = self.index_range(code_point)
        out: list[PinyinReading] = []
        idx = span.start
        while idx < span.end:
            next_word = self.words[idx + 1] if idx + 1 < span.end else None
            decoded = decode_word(self.words[idx], next_word)
            if decoded.letters:
                out.append(PinyinReading(decoded.letters, decoded.tone_class))
            idx += decoded.words_consumed
        return tuple(out)

    def readings_for(
        self,
        code_point: int,
        style: PinyinStyle = PinyinStyle.WITHOUT_TONE_V_ASCII,
    ) -> tuple[str, ...]:
        """Return sorted, de-duplicated spellings of ``code_point`` in ``style``.

        Deduplication happens on the rendered text, so ``zhong1`` and
        ``zhong4`` collapse to one ASCII spelling but stay distinct with tone
        marks.

        Returns:
            Rendered spellings, or an empty tuple for unsupported or unknown
            code points.
        """

        rendered = {
            render_letters(reading.letters, reading.tone_class, style)
            for reading in self.readings(code_point)
        }
        return tuple(sorted(rendered))

    def first_letters_for(self, code_point: int) -> tuple[str, ...]:
        """Return sorted, de-duplicated first letters of every reading."""

        return tuple(sorted({reading.letters[0] for reading in self.readings(code_point)}))

    def spellings_or_literal(
        self,
        code_point: int,
        style: PinyinStyle = PinyinStyle.WITHOUT_TONE_V_ASCII,
    ) -> tuple[str, ...]:
        """Return spellings for ``code_point``, or the character itself if none."""

        return self.readings_for(code_point, style) or (chr(code_point),)


def _check_range(start_code_point: int, end_code_point: int) -> None:
    if end_code_point <= start_code_point or start_code_point < 0:
        raise InvalidRangeError(
            f"Invalid range: start_code_point={start_code_point}, "
            f"end_code_point={end_code_point}"
        )
