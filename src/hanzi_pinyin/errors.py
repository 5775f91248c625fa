"""Exception types raised by the pinyin data store and expansion helpers.

Each error also derives from the built-in exception callers would naturally
catch (``ValueError``, ``FileNotFoundError``, ``OverflowError``).
"""

from __future__ import annotations


class PinyinError(Exception):
    """Base class for all package errors."""


class InvalidRangeError(PinyinError, ValueError):
    """Raised when a data store is constructed with invalid code point bounds."""


class DataFormatError(PinyinError, ValueError):
    """Raised for malformed dictionary rows or unencodable readings."""


class ResourceUnavailableError(PinyinError, FileNotFoundError):
    """Raised when the dictionary resource cannot be found or read."""


class InvalidInputError(PinyinError, ValueError):
    """Raised for empty or non-positive cardinalities passed to ``combine``."""


class CombinationOverflowError(PinyinError, OverflowError):
    """Raised when the number of combinations exceeds the representable count."""


class UnsupportedCharacterError(PinyinError, ValueError):
    """Raised by strict support checks for code points outside the store range."""
