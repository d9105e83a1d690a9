import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(5)
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"x" * 3
    assert buf[3:] == bytes(2)


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 256 + ord("A"), 2)
    assert buf == bytearray(b"AA")
    memset(buf, -1, 1)
    assert buf[0] == 0xFF


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == bytearray(b"keep")


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"o"


def test_memcpy_copies_bytes():
    dest = bytearray(6)
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == bytes(2)


def test_memcpy_count_checked_against_both_buffers():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", -1)


def test_memmove_overlap_forward():
    buf = bytearray(b"123456")
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"1234"
    assert buf == bytearray(b"121234")


def test_memmove_overlap_backward():
    buf = bytearray(b"123456")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"345656"
    assert buf == bytearray(b"345656")


def test_memmove_matches_memcpy_without_overlap():
    src = b"payload"
    a = bytearray(len(src))
    b = bytearray(len(src))
    memcpy(a, src, len(src))
    memmove(b, src, len(src))
    assert a == b == bytearray(src)


def test_memchr_finds_first_occurrence():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")
    assert memchr(data, ord("a"), len(data)) == 0


def test_memchr_respects_count():
    data = b"abcabc"
    assert memchr(data, ord("c"), 2) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_finds_nul_and_masks():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == 2
    assert memchr(data, 256 + ord("d"), len(data)) == 4


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_sign_and_antisymmetry():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) == -memcmp(b"abd", b"abc", 3)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) == 255
    assert memcmp(b"\x80", b"\x7f", 1) > 0


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_sizes():
    assert len(calloc(0, 8)) == 0
    assert len(calloc(8, 0)) == 0


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_calloc_buffer_is_writable():
    buf = calloc(1, 3)
    memcpy(buf, b"xyz", 3)
    assert buf == bytearray(b"xyz")