import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_calloc_is_zero_filled_with_product_length():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memset_fills_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 4)
    assert result is buf
    assert buf == bytearray(b"xxxxo")


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert list(buf) == [0x41, 0x41]


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    src = b"abcdef"
    memcpy(dest, src, 3)
    assert dest[:3] == src[:3]
    assert dest[3:] == b"..."


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memchr_finds_first():
    assert memchr(b"hello", ord("l"), 5) == 2


def test_memchr_respects_limit_and_misses():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("z"), 5) is None


def test_memchr_finds_zero_byte():
    data = b"ab\x00c"
    assert memchr(data, 0, len(data)) == data.index(0)


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abx", b"aby", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x10\x20\x30", b"\x10\x05\x30"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_zero_length_is_noop():
    buf = bytearray(b"abc")
    memmove(buf, 0, 1, 0)
    assert buf == bytearray(b"abc")


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)