"""Bit-packed encoding of pinyin readings into 32-bit words.

Letters ``a``-``z`` map to 5-bit codes 1-26, packed from the least significant
bits upward. Three word shapes exist:

* normal: bits 0-29 hold up to six letter codes, bits 30-31 hold tones 1-4
  stored as 0-3;
* single-compact: neutral tone with at most four letters, tagged by setting
  bits 0-4 and 25-29 while letters live in bits 5-24;
* double-word: neutral tone with five or six letters; the lead word sets bits
  0-4 and stores letters one to five in bits 5-29, the tail word sets bits
  25-29 and stores the sixth letter (or zero) in bits 0-4.

A 5-bit group of all ones is never a letter code, so tagged words cannot be
mistaken for normal ones.
"""

from __future__ import annotations

from dataclasses import dataclass

from hanzi_pinyin.errors import DataFormatError

CODE_MASK = 0x3FFFFFFF
LETTER_BITS = 5
LETTER_MASK = 0x1F
MAX_LETTERS = 6
NEUTRAL_TONE = 5

SINGLE_TAG = 0x3E00001F
SINGLE_PAYLOAD = CODE_MASK ^ SINGLE_TAG
DOUBLE_LEAD_TAG = 0x0000001F
DOUBLE_LEAD_PAYLOAD = CODE_MASK ^ DOUBLE_LEAD_TAG
DOUBLE_TAIL_TAG = 0x3E000000
DOUBLE_TAIL_PAYLOAD = CODE_MASK ^ DOUBLE_TAIL_TAG

SINGLE_MAX_LETTERS = 4
TAIL_SHIFT = LETTER_BITS * 5


@dataclass(frozen=True)
class DecodedWord:
    """Result of decoding one entry of the encoded word sequence."""

    letters: str
    tone_class: int
    words_consumed: int


def _pack_letters(letters: str) -> int:
    code = 0
    for position, char in enumerate(letters):
        code |= (ord(char) - ord("a") + 1) << (position * LETTER_BITS)
    return code


def _unpack_letters(code: int) -> str:
    chars: list[str] = []
    for position in range(MAX_LETTERS):
        value = (code >> (position * LETTER_BITS)) & LETTER_MASK
        if value == 0 or value > 26:
            break
        chars.append(chr(ord("a") + value - 1))
    return "".join(chars)


def encode_reading(letters: str, tone_class: int) -> tuple[int, ...]:
    """Encode one reading into one or two 32-bit words.

    Args:
        letters: One to six lowercase letters ``a``-``z``.
        tone_class: Tone 1-4, or 5 for the neutral tone.

    Returns:
        A one-word tuple for normal and single-compact readings, or a two-word
        tuple for neutral-tone readings of five or six letters.

    Raises:
        DataFormatError: If the letters or tone cannot be encoded.
    """

    if not letters or len(letters) > MAX_LETTERS:
        raise DataFormatError(
            f"Cannot encode '{letters}': expected 1-{MAX_LETTERS} letters, got {len(letters)}."
        )
    if any(not ("a" <= char <= "z") for char in letters):
        raise DataFormatError(f"Cannot encode '{letters}': letters must be a-z.")
    if tone_class not in range(1, 6):
        raise DataFormatError(f"Cannot encode '{letters}': invalid tone class {tone_class}.")

    code = _pack_letters(letters)
    if tone_class != NEUTRAL_TONE:
        return (code | (tone_class - 1) << 30,)
    if len(letters) <= SINGLE_MAX_LETTERS:
        return ((code << LETTER_BITS) & SINGLE_PAYLOAD | SINGLE_TAG,)

    lead = (code << LETTER_BITS) & DOUBLE_LEAD_PAYLOAD | DOUBLE_LEAD_TAG
    tail = (code >> TAIL_SHIFT) & LETTER_MASK | DOUBLE_TAIL_TAG
    return (lead, tail)


def decode_word(word: int, next_word: int | None = None) -> DecodedWord:
    """Decode the reading that starts at ``word``.

    Tag patterns are checked before the normal layout: single-compact first,
    then the double-word lead, which requires ``next_word`` to carry the tail
    tag. Letter groups are read until the first zero or out-of-range group, so
    letters after a gap are dropped rather than reported.

    Args:
        word: The encoded word at the current position.
        next_word: The following word, or ``None`` at the end of the sequence.

    Returns:
        Decoded letters, tone class and the number of words consumed.

    Raises:
        DataFormatError: If a double-word lead is not followed by its tail.
    """

    if word & SINGLE_TAG == SINGLE_TAG:
        code = (word & SINGLE_PAYLOAD) >> LETTER_BITS
        return DecodedWord(_unpack_letters(code), NEUTRAL_TONE, 1)

    if word & DOUBLE_LEAD_TAG == DOUBLE_LEAD_TAG:
        if next_word is None or next_word & DOUBLE_TAIL_TAG != DOUBLE_TAIL_TAG:
            raise DataFormatError(f"Double-word lead 0x{word:08X} is missing its tail word.")
        code = (word & DOUBLE_LEAD_PAYLOAD) >> LETTER_BITS
        code |= (next_word & DOUBLE_TAIL_PAYLOAD & LETTER_MASK) << TAIL_SHIFT
        return DecodedWord(_unpack_letters(code), NEUTRAL_TONE, 2)

    tone_class = ((word >> 30) & 0x3) + 1
    return DecodedWord(_unpack_letters(word & CODE_MASK), tone_class, 1)
