import pytest

from malcolm.memory import memchr, memcmp, memmove, memset, strlcat, strlcpy


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_uses_low_byte():
    data = b"\x00\x01"
    assert memchr(data, 0x101, len(data)) == data.index(b"\x01")


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)


def test_memcmp_zero_count():
    assert memcmp(b"a", b"b", 0) == 0


@pytest.mark.parametrize(
    "first, second",
    [(b"abc", b"abd"), (b"abd", b"abc"), (b"abc", b"abc"), (b"\xff", b"\x00")],
)
def test_memcmp_sign_matches_bytes_order(first, second):
    result = memcmp(first, second, len(first))
    assert (result > 0) == (first > second)
    assert (result < 0) == (first < second)
    assert (result == 0) == (first == second)


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_difference_value():
    assert memcmp(b"a", b"c", 1) == ord("a") - ord("c")


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert buf == bytearray(b"zzz") + bytearray(b"def")


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x1FF, len(buf))
    assert set(buf) == {0xFF}


def test_memset_zero_fill():
    buf = bytearray(b"xyz")
    memset(buf, 0, len(buf))
    assert buf == bytearray(len(buf))


@pytest.mark.parametrize("dst, src, n", [(1, 0, 4), (0, 1, 4), (2, 2, 3), (0, 3, 3), (3, 0, 3)])
def test_memmove_copies_region(dst, src, n):
    original = bytes(b"abcdef")
    buf = bytearray(original)
    result = memmove(buf, dst, src, n)
    assert result is buf
    assert bytes(buf[dst:dst + n]) == original[src:src + n]
    assert len(buf) == len(original)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 0, 4)
    assert buf == bytearray(b"aabcdf")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 2, 0, 2)
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), -1, 0, 1)


@pytest.mark.parametrize("size", [1, 2, 4, 6, 10])
def test_strlcpy_truncates(size):
    src = "hello"
    copied, total = strlcpy(src, size)
    assert copied == src[:size - 1]
    assert total == len(src)
    assert len(copied) < size


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    assert strlcat("abc", "def", 10) == ("abcdef", len("abcdef"))


def test_strlcat_truncates():
    text, total = strlcat("abc", "def", 5)
    assert text == "abcd"
    assert total == len("abc") + len("def")


def test_strlcat_size_equal_to_dst():
    assert strlcat("abc", "def", 3) == ("abc", len("abc") + len("def"))


def test_strlcat_size_below_dst():
    assert strlcat("abcdef", "xy", 3) == ("abcdef", len("xy") + 3)


def test_strlcat_zero_size():
    assert strlcat("abc", "xy", 0) == ("abc", len("xy"))


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        strlcpy("a", -1)
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)