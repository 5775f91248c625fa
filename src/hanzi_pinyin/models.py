"""Data models shared by the dictionary, rendering and expansion layers.

Readings and index ranges are immutable value objects so a built data store can
be shared between any number of callers without copying or locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PinyinReading:
    """One decoded reading of a character.

    ``letters`` holds one to six lowercase ASCII letters where ``v`` stands for
    ``ü``. ``tone_class`` is 1-4 for the four tones and 5 for the neutral tone.
    """

    letters: str
    tone_class: int

    @property
    def numbered(self) -> str:
        """Return the reading in dictionary token form such as ``zhong1``."""

        return f"{self.letters}{self.tone_class}"


@dataclass(frozen=True)
class CharacterIndexRange:
    """Half-open ``[start, end)`` slice into a store's encoded word sequence."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return self.end - self.start


class PinyinStyle(Enum):
    """Rendering selector for full spellings."""

    WITH_TONE_MARK = "tone-mark"
    WITHOUT_TONE_V_ASCII = "ascii"
    WITHOUT_TONE_U_UNICODE = "unicode"

    WITHOUT_TONE_ASCII_V = "ascii"
    WITHOUT_TONE_UNICODE_U = "unicode"


class CaseMode(Enum):
    """Case transform applied to expanded output."""

    PRESERVE = "preserve"
    UPPER = "upper"
    LOWER = "lower"

    def apply(self, text: str) -> str:
        """Return ``text`` transformed according to this mode."""

        if self is CaseMode.UPPER:
            return text.upper()
        if self is CaseMode.LOWER:
            return text.lower()
        return text
