import io
import os

import pytest

from minitalk.lines import LineReader, extract_line, find_newline


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 100000])
def test_reads_lines_with_any_buffer_size(buffer_size):
    reader = LineReader(io.BytesIO(b"a\nbb\n\nccc"), buffer_size)
    assert list(reader) == [b"a\n", b"bb\n", b"\n", b"ccc"]


def test_next_line_returns_none_at_end():
    reader = LineReader(io.BytesIO(b"only\n"))
    assert reader.next_line() == b"only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_input_gives_no_lines():
    assert list(LineReader(io.BytesIO(b""))) == []


def test_lines_join_back_to_input():
    data = b"first line\nsecond\nthird without newline"
    assert b"".join(LineReader(io.BytesIO(data), 4)) == data


def test_reads_from_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"one\ntwo\n")
        os.close(write_end)
        write_end = None
        assert list(LineReader(read_end, 5)) == [b"one\n", b"two\n"]
    finally:
        os.close(read_end)
        if write_end is not None:
            os.close(write_end)


def test_nul_ends_a_chunk():
    reader = LineReader(io.BytesIO(b"ab\0cd\n"), 6)
    assert list(reader) == [b"ab"]


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_rejects_bad_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), buffer_size)


def test_rejects_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_find_newline():
    assert find_newline("abc\ndef") == 3
    assert find_newline(b"\n") == 0
    assert find_newline("abc") is None
    assert find_newline(None) is None


def test_extract_line():
    assert extract_line(b"ab\ncd") == (b"ab\n", b"cd")
    assert extract_line("tail") == ("tail", "")
    line, rest = extract_line("x\ny\nz")
    assert line + rest == "x\ny\nz"
    assert line.endswith("\n")