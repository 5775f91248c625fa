"""Read/write helpers for the plain-text pinyin dictionary resource."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from hanzi_pinyin.errors import ResourceUnavailableError


def read_dictionary_lines(path: Path) -> list[str]:
    """Read every line of a dictionary resource file.

    Args:
        path: Resource file path (UTF-8, one line per code point).

    Returns:
        Lines with trailing newlines removed.

    Raises:
        ResourceUnavailableError: If the file does not exist or cannot be read.
    """

    if not path.exists():
        raise ResourceUnavailableError(f"Pinyin dictionary not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            return [line.rstrip("\r\n") for line in handle]
    except OSError as exc:
        raise ResourceUnavailableError(f"Unable to read pinyin dictionary {path}: {exc}") from exc


def write_dictionary(lines: Iterable[str], output_path: Path) -> int:
    """Write dictionary resource lines to ``output_path``.

    Args:
        lines: One line per code point, in ascending order.
        output_path: Destination file path.

    Returns:
        Number of lines written.
    """

    count = 0
    with output_path.open("w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(line)
            handle.write("\n")
            count += 1
    return count
