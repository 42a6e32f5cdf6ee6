import io

import pytest

from malcolm.lines import LineReader, read_lines

SAMPLE = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64, 1000])
def test_lines_rejoin_to_input(size):
    lines = list(read_lines(io.StringIO(SAMPLE), size))
    assert "".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 64])
def test_binary_stream(size):
    data = SAMPLE.encode()
    lines = list(read_lines(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(isinstance(line, bytes) for line in lines)


def test_every_line_but_last_ends_with_newline():
    lines = list(read_lines(io.StringIO(SAMPLE), 5))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")


def test_empty_stream_gives_none():
    assert LineReader().next_line(io.StringIO("")) is None


def test_end_of_stream_keeps_returning_none():
    reader = LineReader(4)
    stream = io.StringIO("x\n")
    assert reader.next_line(stream) == "x\n"
    assert reader.next_line(stream) is None
    assert reader.next_line(stream) is None


def test_line_longer_than_buffer():
    text = "y" * 50 + "\n"
    assert LineReader(3).next_line(io.StringIO(text)) == text


def test_streams_keep_separate_leftovers():
    reader = LineReader(64)
    one = io.StringIO("a1\na2\n")
    two = io.StringIO("b1\nb2\n")
    got = [
        reader.next_line(one),
        reader.next_line(two),
        reader.next_line(one),
        reader.next_line(two),
    ]
    assert got == ["a1\n", "b1\n", "a2\n", "b2\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(size)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, n):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("read failed")


def test_read_error_is_raised():
    reader = LineReader(16)
    with pytest.raises(OSError):
        reader.next_line(_FailingStream())


def test_read_lines_matches_repeated_next_line():
    reader = LineReader(5)
    stream = io.StringIO(SAMPLE)
    manual = []
    while (line := reader.next_line(stream)) is not None:
        manual.append(line)
    assert manual == list(read_lines(io.StringIO(SAMPLE), 5))