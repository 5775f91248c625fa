"""Expand character sequences into every combination of their readings."""

from __future__ import annotations

import functools
from typing import Sequence

from hanzi_pinyin.dictionary.loader import basic_store
from hanzi_pinyin.dictionary.repository import PinyinDataStore
from hanzi_pinyin.expansion.combinations import combine
from hanzi_pinyin.models import CaseMode, PinyinStyle


class PinyinExpander:
    """Turns text into full-spelling or first-letter strings.

    Characters the store has no reading for (Latin letters, digits,
    punctuation, code points outside the store range) pass through unchanged as
    their own single alternative.
    """

    def __init__(self, store: PinyinDataStore) -> None:
        self._store = store

    @property
    def store(self) -> PinyinDataStore:
        return self._store

    def alternatives(
        self,
        text: str,
        style: PinyinStyle = PinyinStyle.WITHOUT_TONE_V_ASCII,
    ) -> list[tuple[str, ...]]:
        """Return the spelling alternatives for each code point of ``text``."""

        return [self._store.spellings_or_literal(ord(char), style) for char in text]

    def expand_full_spelling(
        self,
        text: str | None,
        style: PinyinStyle = PinyinStyle.WITHOUT_TONE_V_ASCII,
        case: CaseMode = CaseMode.PRESERVE,
    ) -> list[str]:
        """Return every space-joined spelling of ``text``.

        Args:
            text: Input text; ``None`` or empty yields an empty list.
            style: Rendering style for known characters.
            case: Case transform applied to each complete result.

        Returns:
            One string per combination of readings, in odometer order.

        Raises:
            CombinationOverflowError: If the text has too many combinations.
        """

        if not text:
            return []
        options = self.alternatives(text, style)
        return [case.apply(" ".join(_pick(options, indexes))) for indexes in _indexes(options)]

    def expand_first_letters(
        self,
        text: str | None,
        case: CaseMode = CaseMode.PRESERVE,
    ) -> list[str]:
        """Return every first-letter abbreviation of ``text``.

        Args:
            text: Input text; ``None`` or empty yields an empty list.
            case: Case transform applied to each character before joining.

        Returns:
            One string per combination of first letters, in odometer order.

        Raises:
            CombinationOverflowError: If the text has too many combinations.
        """

        if not text:
            return []
        options = [self._store.first_letters_for(ord(char)) or (char,) for char in text]
        return [
            "".join(case.apply(letter) for letter in _pick(options, indexes))
            for indexes in _indexes(options)
        ]


def _indexes(options: Sequence[tuple[str, ...]]) -> list[tuple[int, ...]]:
    return combine([len(choices) for choices in options])


def _pick(options: Sequence[tuple[str, ...]], indexes: tuple[int, ...]) -> list[str]:
    return [choices[idx] for choices, idx in zip(options, indexes)]


@functools.lru_cache(maxsize=None)
def basic_expander() -> PinyinExpander:
    """Return the shared expander over :func:`basic_store`."""

    return PinyinExpander(basic_store())
