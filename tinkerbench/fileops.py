"""Small helpers for reading and writing text files line by line."""

from __future__ import annotations

from typing import TextIO

_BANNER = "\n ******************************** \n"


def print_file(stream: TextIO) -> None:
    """Print every line of ``stream`` between two banner lines."""
    print(_BANNER)
    for line in stream:
        print(line.rstrip("\n"))
    print(_BANNER)


def read_file_to_string(filename: str) -> str:
    """Return the whole contents of ``filename`` as text."""
    with open(filename, encoding="utf-8") as handle:
        return handle.read()


def read_line(stream: TextIO) -> str | None:
    """Return the next line without its newline, or None at end of input."""
    line = stream.readline()
    if not line:
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line


def read_record(stream: TextIO) -> str:
    """Read ``stream`` to the end and return its last line, or "" if empty."""
    record = ""
    while (line := read_line(stream)) is not None:
        record = line
    return record


def write_record(stream: TextIO, output: str) -> int:
    """Write ``output`` followed by a newline; return the characters written."""
    written = stream.write(output)
    written += stream.write("\n")
    return written


def write_string_to_file(filename: str, output: str) -> int:
    """Replace ``filename`` with ``output``; return the number of bytes written."""
    data = output.encode("utf-8")
    with open(filename, "wb") as handle:
        written = handle.write(data)
        handle.flush()
    return written