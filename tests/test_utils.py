import io

import pytest

from shelfkeeper.utils import truncate, _read_int, _read_char, _skip_line


def test_truncate_cuts_long_text():
    assert truncate("Mohandas Karamchand Gandhi", 15) == "Mohandas Karamchand Gandhi"[:15]


def test_truncate_keeps_short_text():
    assert truncate("Star", 15) == "Star"


def test_truncate_exact_length():
    assert truncate("abcd", 4) == "abcd"


def test_truncate_none_is_empty():
    assert truncate(None, 10) == ""


@pytest.mark.parametrize("length", [0, -3])
def test_truncate_non_positive_length(length):
    assert truncate("anything", length) == ""


def test_truncate_never_longer_than_length():
    for n in range(0, 12):
        assert len(truncate("Seneca Weekly", n)) <= n


def test_read_int_leaves_terminator():
    stream = io.StringIO("  2024/11")
    assert _read_int(stream) == 2024
    assert stream.read() == "/11"


def test_read_int_negative():
    assert _read_int(io.StringIO("-17 ")) == -17


def test_read_int_not_a_number():
    stream = io.StringIO("abc")
    assert _read_int(stream) is None
    assert stream.read() == "abc"


def test_read_int_eof():
    with pytest.raises(EOFError):
        _read_int(io.StringIO("   \n"))


def test_read_char_skips_space():
    assert _read_char(io.StringIO("  \t/x")) == "/"


def test_skip_line():
    stream = io.StringIO("junk here\nnext")
    assert _skip_line(stream) is True
    assert stream.read() == "next"


def test_skip_line_at_end():
    assert _skip_line(io.StringIO("no newline")) is False