"""Chinese character to pinyin conversion with polyphone expansion."""

from .dictionary.loader import basic_store, load_store
from .dictionary.repository import PinyinDataStore
from .errors import (
    CombinationOverflowError,
    DataFormatError,
    InvalidInputError,
    InvalidRangeError,
    PinyinError,
    ResourceUnavailableError,
    UnsupportedCharacterError,
)
from .expansion.combinations import combine
from .expansion.expander import PinyinExpander, basic_expander
from .models import CaseMode, CharacterIndexRange, PinyinReading, PinyinStyle
from .rendering.tone_marks import place_tone_mark

__all__ = [
    "CaseMode",
    "CharacterIndexRange",
    "PinyinReading",
    "PinyinStyle",
    "PinyinDataStore",
    "PinyinExpander",
    "basic_store",
    "basic_expander",
    "load_store",
    "combine",
    "place_tone_mark",
    "PinyinError",
    "InvalidRangeError",
    "DataFormatError",
    "ResourceUnavailableError",
    "InvalidInputError",
    "CombinationOverflowError",
    "UnsupportedCharacterError",
]
