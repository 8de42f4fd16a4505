import pytest

from cubscene.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"HELLO WORLD")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"LLO WORLD"


def test_bzero_rejects_overlong_count():
    with pytest.raises(IndexError):
        bzero(bytearray(3), 4)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(7, 4)
    assert len(buf) == 7 * 4
    assert not any(buf)


@pytest.mark.parametrize("nmemb, size", [(0, 5), (5, 0), (0, 0)])
def test_calloc_zero_request_gives_one_byte(nmemb, size):
    assert len(calloc(nmemb, size)) == 1


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_match():
    data = b"abc1d1234"
    index = memchr(data, ord("1"), len(data))
    assert data[index] == ord("1")
    assert ord("1") not in data[:index]


def test_memchr_respects_count():
    data = b"abc1d1234"
    assert memchr(data, ord("1"), data.index(b"1")) is None


def test_memchr_uses_low_byte():
    data = b"xyz"
    assert memchr(data, ord("y") + 256, len(data)) == memchr(data, ord("y"), len(data))


def test_memchr_missing_byte():
    assert memchr(b"hello", ord("q"), 5) is None


def test_memcmp_equal_buffers():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_stops_after_count():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_rejects_short_buffer():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_and_returns_dest():
    src = bytes(range(5))
    dest = bytearray(5)
    result = memcpy(dest, src, 5)
    assert result is dest
    assert dest == src


def test_memcpy_with_offsets():
    dest = bytearray(b"..........")
    memcpy(dest, b"xxabcxx", 3, dest_offset=4, src_offset=2)
    assert dest[4:7] == b"abc"
    assert dest[:4] == b"...."
    assert dest[7:] == b"..."


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, buf, 4, dest_offset=2)
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, buf, 4, src_offset=2)
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memcpy_overlap_matches_memmove():
    a = bytearray(b"0123456789")
    b = bytearray(a)
    memcpy(a, a, 6, dest_offset=3)
    memmove(b, b, 6, dest_offset=3)
    assert a == b


def test_memcpy_zero_count_leaves_dest():
    dest = bytearray(b"keep")
    memcpy(dest, b"", 0)
    assert dest == b"keep"


def test_memcpy_rejects_overflow():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memcpy_rejects_negative_offset():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"abcd", 1, dest_offset=-1)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("X"), 4)
    assert result is buf
    assert buf[:4] == b"X" * 4
    assert buf[4:] == b"ef"


def test_memset_truncates_value():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert set(buf) == {0x41}