import pytest

from scenescript.parsing import UnterminatedStringError, find_string_literal, read_string_literal


def test_read_string_literal_decodes_escapes() -> None:
    line = 'print "line1\\nline2\\t\\"done\\""'
    value, end = read_string_literal(line, line.index('"'))

    assert value == 'line1\nline2\t"done"'
    assert end == len(line)


def test_read_string_literal_backslash_escape() -> None:
    value, _ = read_string_literal('"C:\\\\games"', 0)
    assert value == "C:\\games"


def test_read_string_literal_unknown_escape_is_copied() -> None:
    value, _ = read_string_literal('"a\\qb"', 0)
    assert value == "aqb"


def test_read_string_literal_returns_index_after_closing_quote() -> None:
    line = '"first" rest'
    value, end = read_string_literal(line, 0)
    assert value == "first"
    assert line[end:] == " rest"


def test_read_string_literal_unterminated() -> None:
    with pytest.raises(UnterminatedStringError):
        read_string_literal('"never closed', 0)


def test_read_string_literal_escape_at_end_is_unterminated() -> None:
    with pytest.raises(UnterminatedStringError):
        read_string_literal('"dangling\\', 0)


def test_read_string_literal_requires_opening_quote() -> None:
    with pytest.raises(ValueError):
        read_string_literal("no quote", 0)


def test_find_string_literal_without_quote() -> None:
    assert find_string_literal("print hello") is None
    assert find_string_literal('image "a.png"') == ("a.png", 13)
