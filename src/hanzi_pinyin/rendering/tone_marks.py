"""Tone diacritic placement and style rendering for decoded readings."""

from __future__ import annotations

from hanzi_pinyin.models import PinyinStyle

UMLAUT_U = "ü"
VOWELS = "aeiouü"

# Tones 1-4 followed by the unmarked form used for the neutral tone.
TONE_MARKS = {
    "a": ("ā", "á", "ǎ", "à", "a"),
    "e": ("ē", "é", "ě", "è", "e"),
    "i": ("ī", "í", "ǐ", "ì", "i"),
    "o": ("ō", "ó", "ǒ", "ò", "o"),
    "u": ("ū", "ú", "ǔ", "ù", "u"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ", "ü"),
}


def _marked_vowel_index(chars: list[str]) -> int:
    """Return the index of the vowel that carries the tone mark, or ``-1``.

    Priority: first ``a``, then first ``e``, then the ``o`` of ``ou``, then the
    last vowel in the syllable (so ``iu`` marks ``u`` and ``ui`` marks ``i``).
    """

    last_vowel = -1
    first_e = -1
    ou_index = -1
    for idx, char in enumerate(chars):
        if char == "a":
            return idx
        if char == "e" and first_e < 0:
            first_e = idx
        elif char == "o" and ou_index < 0 and idx + 1 < len(chars) and chars[idx + 1] == "u":
            ou_index = idx
        if char in VOWELS:
            last_vowel = idx

    if first_e >= 0:
        return first_e
    if ou_index >= 0:
        return ou_index
    return last_vowel


def place_tone_mark(letters: str, tone_class: int) -> str:
    """Render ``letters`` with the diacritic for ``tone_class``.

    Every ``v`` becomes ``ü`` first. The neutral tone (5), or a syllable with
    no vowel such as ``ng``, is returned without a diacritic.

    Args:
        letters: Unmarked letters, using ``v`` for ``ü``.
        tone_class: Tone 1-4, or 5 for the neutral tone.

    Returns:
        The tone-marked spelling, e.g. ``zhōng`` for ``("zhong", 1)``.

    Raises:
        ValueError: If ``tone_class`` is outside 1-5.
    """

    if tone_class not in range(1, 6):
        raise ValueError(f"Invalid tone class {tone_class} for '{letters}'.")

    chars = [UMLAUT_U if char == "v" else char for char in letters]
    index = _marked_vowel_index(chars)
    if index >= 0:
        chars[index] = TONE_MARKS[chars[index]][tone_class - 1]
    return "".join(chars)


def render_letters(letters: str, tone_class: int, style: PinyinStyle) -> str:
    """Render a decoded reading in the requested style.

    Args:
        letters: Unmarked letters, using ``v`` for ``ü``.
        tone_class: Tone 1-4, or 5 for the neutral tone.
        style: Output style.

    Returns:
        Tone-marked text, ``ü`` text without tones, or the raw ASCII letters.
    """

    if style is PinyinStyle.WITH_TONE_MARK:
        return place_tone_mark(letters, tone_class)
    if style is PinyinStyle.WITHOUT_TONE_U_UNICODE:
        return letters.replace("v", UMLAUT_U)
    return letters
