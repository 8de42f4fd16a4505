import io

import pytest

from cubscene.linereader import BUFFER_SIZE, read_lines


def test_default_buffer_size_reads_fifty_characters_at_a_time():
    text = "x\n" + "y" * 98 + "\n"
    stream = io.StringIO(text)
    lines = read_lines(stream)
    assert next(lines) == "x\n"
    assert BUFFER_SIZE == 50
    assert stream.read() == text[50:]


def test_lines_keep_their_newlines():
    lines = list(read_lines(io.StringIO("abc\ndef\n")))
    assert lines == ["abc\n", "def\n"]


def test_last_line_without_newline_is_returned():
    lines = list(read_lines(io.StringIO("first\nlast")))
    assert lines == ["first\n", "last"]


def test_empty_stream_yields_nothing():
    assert list(read_lines(io.StringIO(""))) == []


def test_blank_lines_are_kept():
    lines = list(read_lines(io.StringIO("\n\nx\n")))
    assert lines == ["\n", "\n", "x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 50, 1000])
def test_join_restores_the_text(size):
    text = "NO ./north.xpm\n\nSO ./south.xpm\nF 220,100,0\nC 225,30,0"
    lines = list(read_lines(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_reads_lazily():
    stream = io.StringIO("one\ntwo\nthree\n")
    lines = read_lines(stream, 4)
    assert next(lines) == "one\n"
    assert stream.read() == "two\nthree\n"


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_size_is_rejected(size):
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("abc\n"), size))