"""Mixed-radix enumeration of per-position alternative indexes."""

from __future__ import annotations

import itertools
from typing import Sequence

from hanzi_pinyin.errors import CombinationOverflowError, InvalidInputError

MAX_COMBINATIONS = 2**31 - 1


def combination_count(
    cardinalities: Sequence[int],
    start: int = 0,
    end: int | None = None,
) -> int:
    """Return the product of ``cardinalities[start:end]`` after validation.

    The running product is checked before each multiplication, so an input
    whose count would exceed ``MAX_COMBINATIONS`` is rejected without ever
    forming the oversized value.

    Raises:
        InvalidInputError: If the slice is empty or out of bounds, or holds a
            value less than 1.
        CombinationOverflowError: If the count exceeds ``MAX_COMBINATIONS``.
    """

    if end is None:
        end = len(cardinalities)
    if not cardinalities or start < 0 or end > len(cardinalities) or start >= end:
        raise InvalidInputError(
            "Invalid input: cardinalities cannot be empty, and range must be valid."
        )

    window = cardinalities[start:end]
    if any(value <= 0 for value in window):
        raise InvalidInputError("Invalid input: cardinalities cannot contain 0 or negative values.")

    total = 1
    for value in window:
        if total > MAX_COMBINATIONS // value:
            raise CombinationOverflowError(
                f"Combination count exceeds {MAX_COMBINATIONS} for cardinalities {list(window)}."
            )
        total *= value
    return total


def combine(
    cardinalities: Sequence[int],
    start: int = 0,
    end: int | None = None,
) -> list[tuple[int, ...]]:
    """Enumerate every index tuple for ``cardinalities[start:end]``.

    Tuples come in odometer order: the last position varies fastest and carries
    into earlier positions, so ``combine([3, 2])`` yields ``(0, 0), (0, 1),
    (1, 0), (1, 1), (2, 0), (2, 1)``.

    Args:
        cardinalities: Number of alternatives per position.
        start: First position to combine (inclusive).
        end: Last position to combine (exclusive); defaults to the full length.

    Returns:
        All index tuples, one index per combined position.

    Raises:
        InvalidInputError: If the slice is empty, out of bounds, or holds a
            value less than 1.
        CombinationOverflowError: If the count exceeds ``MAX_COMBINATIONS``.
    """

    combination_count(cardinalities, start, end)
    if end is None:
        end = len(cardinalities)
    return list(itertools.product(*(range(value) for value in cardinalities[start:end])))
