"""Turn a fixed-column orbital elements table into comma-separated values."""

from __future__ import annotations

import argparse

from tinkerbench.fileops import read_file_to_string, write_string_to_file

COMMA_POSITIONS = (6, 24, 30, 41, 52, 72, 82, 94, 100, 106)
DEFAULT_INPUT = "ELEMENTS.NUMBR"
DEFAULT_OUTPUT = "bodiesorbit.csv"


def insert_comma(line: str) -> str:
    """Put a comma in each column gap of ``line`` and end it with a newline."""
    needed = COMMA_POSITIONS[-1] + 1
    if len(line) < needed:
        raise ValueError(f"line has {len(line)} characters, at least {needed} needed")
    chars = list(line)
    for position in COMMA_POSITIONS:
        chars[position] = ","
    return "".join(chars) + "\n"


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def convert(text: str) -> str:
    """Convert the table: header row kept, the line below it dropped, data rows kept."""
    lines = _lines(text)
    if not lines:
        raise ValueError("input has no header line")
    header, body = lines[0], lines[2:]
    return insert_comma(header) + "".join(insert_comma(line) for line in body)


def main(argv: list[str] | None = None) -> int:
    """Read the input table and write it out as CSV."""
    parser = argparse.ArgumentParser(description="Convert a fixed-column table to CSV.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="table to read")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT, help="CSV to write")
    args = parser.parse_args(argv)

    write_string_to_file(args.output, convert(read_file_to_string(args.input)))
    return 0