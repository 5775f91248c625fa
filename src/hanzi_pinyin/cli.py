"""CLI entrypoint for pinyin lookup and expansion."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from hanzi_pinyin.dictionary.loader import (
    BASIC_END_CODE_POINT,
    BASIC_START_CODE_POINT,
    load_store,
    pypinyin_dictionary_lines,
)
from hanzi_pinyin.errors import CombinationOverflowError, PinyinError
from hanzi_pinyin.expansion.expander import PinyinExpander
from hanzi_pinyin.io.dictionary_io import write_dictionary
from hanzi_pinyin.models import CaseMode, PinyinStyle

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_default_dictionary_path() -> Path | None:
    """Resolve the default dictionary resource from project layout.

    Returns:
        ``data/pinyin_basic.txt`` when present, otherwise ``None`` so the
        bundled pypinyin data is used.
    """

    cwd_data = Path("data") / "pinyin_basic.txt"
    if cwd_data.exists():
        return cwd_data
    return None


def _parse_code_point(value: str) -> int:
    """Parse ``U+4E00``, ``0x4E00`` or a decimal string into a code point."""

    text = value.strip().upper()
    if text.startswith("U+"):
        return int(text[2:], 16)
    return int(text, 0)


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser with ``spell``, ``initials``, ``lookup`` and
        ``export`` subcommands.
    """

    parser = argparse.ArgumentParser(description="Convert Chinese characters to pinyin.")
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=_resolve_default_dictionary_path(),
        help="Pinyin dictionary resource (default: data/pinyin_basic.txt, else pypinyin data).",
    )
    parser.add_argument(
        "--start",
        type=_parse_code_point,
        default=BASIC_START_CODE_POINT,
        help="First supported code point, e.g. U+4E00.",
    )
    parser.add_argument(
        "--end",
        type=_parse_code_point,
        default=BASIC_END_CODE_POINT,
        help="Last supported code point (inclusive), e.g. U+9FA6.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    spell = subparsers.add_parser("spell", help="Print every full-spelling combination.")
    spell.add_argument("text", help="Text to convert.")
    spell.add_argument(
        "--style",
        choices=[style.value for style in PinyinStyle],
        default=PinyinStyle.WITHOUT_TONE_V_ASCII.value,
        help="Output style (default: ascii).",
    )
    spell.add_argument(
        "--case",
        choices=[mode.value for mode in CaseMode],
        default=CaseMode.PRESERVE.value,
        help="Case transform (default: preserve).",
    )

    initials = subparsers.add_parser("initials", help="Print every first-letter combination.")
    initials.add_argument("text", help="Text to convert.")
    initials.add_argument(
        "--case",
        choices=[mode.value for mode in CaseMode],
        default=CaseMode.PRESERVE.value,
        help="Case transform (default: preserve).",
    )

    lookup = subparsers.add_parser("lookup", help="Show readings of each character.")
    lookup.add_argument("text", help="Characters to look up.")

    export = subparsers.add_parser("export", help="Write the dictionary resource file.")
    export.add_argument("--output", required=True, type=Path, help="Destination path.")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _lookup_rows(expander: PinyinExpander, text: str) -> list[list[str]]:
    store = expander.store
    rows: list[list[str]] = []
    for char in text:
        code_point = ord(char)
        rows.append(
            [
                char,
                f"U+{code_point:04X}",
                ", ".join(store.readings_for(code_point, PinyinStyle.WITH_TONE_MARK)),
                ", ".join(store.readings_for(code_point, PinyinStyle.WITHOUT_TONE_V_ASCII)),
                ", ".join(store.readings_for(code_point, PinyinStyle.WITHOUT_TONE_U_UNICODE)),
                "".join(store.first_letters_for(code_point)),
            ]
        )
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through printed output.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "export":
        count = write_dictionary(
            pypinyin_dictionary_lines(args.start, args.end), output_path=args.output
        )
        print(f"Wrote {count} rows to {args.output}")
        return 0

    try:
        expander = PinyinExpander(load_store(args.start, args.end, path=args.dictionary))
    except PinyinError as exc:
        raise SystemExit(str(exc)) from exc

    if args.command == "lookup":
        headers = ["char", "code_point", "tone_mark", "ascii", "unicode", "initials"]
        print(_format_table(headers, _lookup_rows(expander, args.text)))
        return 0

    try:
        if args.command == "spell":
            results = expander.expand_full_spelling(
                args.text, style=PinyinStyle(args.style), case=CaseMode(args.case)
            )
        else:
            results = expander.expand_first_letters(args.text, case=CaseMode(args.case))
    except CombinationOverflowError as exc:
        raise SystemExit(f"Input too large to enumerate: {exc}") from exc

    for line in results:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
