import pytest

from tinkerbench.tocsv import COMMA_POSITIONS, convert, insert_comma, main

WIDTH = 120


def _row(fill: str) -> str:
    return fill * WIDTH


def test_insert_comma_places_commas_at_column_gaps():
    result = insert_comma(_row("a"))
    commas = [i for i, ch in enumerate(result) if ch == ","]
    assert commas == [6, 24, 30, 41, 52, 72, 82, 94, 100, 106]


def test_insert_comma_keeps_other_characters_and_adds_newline():
    line = _row("b")
    result = insert_comma(line)
    assert result.endswith("\n")
    assert len(result) == len(line) + 1
    for i, (before, after) in enumerate(zip(line, result)):
        if i not in COMMA_POSITIONS:
            assert before == after


def test_insert_comma_minimum_length_line():
    line = "z" * (COMMA_POSITIONS[-1] + 1)
    assert insert_comma(line).endswith(",\n")


def test_insert_comma_rejects_short_line():
    with pytest.raises(ValueError):
        insert_comma("too short")


def test_convert_drops_second_line():
    text = "\n".join([_row("h"), "-" * 5, _row("1"), _row("2")]) + "\n"
    result = convert(text)
    rows = result.splitlines()
    assert len(rows) == 3
    assert rows[0] == insert_comma(_row("h")).rstrip("\n")
    assert rows[1] == insert_comma(_row("1")).rstrip("\n")
    assert rows[2] == insert_comma(_row("2")).rstrip("\n")


def test_convert_handles_crlf_line_endings():
    text = "\r\n".join([_row("h"), "", _row("d")]) + "\r\n"
    assert convert(text) == insert_comma(_row("h")) + insert_comma(_row("d"))


def test_convert_header_only():
    assert convert(_row("h")) == insert_comma(_row("h"))


def test_convert_empty_input_raises():
    with pytest.raises(ValueError):
        convert("")


def test_main_writes_converted_file(tmp_path):
    source = tmp_path / "table.txt"
    target = tmp_path / "table.csv"
    text = "\n".join([_row("h"), "====", _row("x")]) + "\n"
    source.write_text(text, encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == convert(text)