import pytest

from cstrkit.memory import memchr, memcmp, memcpy, memmove, memset


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_count():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None


def test_memchr_missing_byte():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_uses_low_byte_of_value():
    data = b"hat"
    assert memchr(data, 0x100 + ord("h"), 3) == 0


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"abc", ord("a"), 4)


def test_memcmp_equal_blocks():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0


def test_memcmp_zero_count():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    first, second = b"kettle", b"kernel"
    assert memcmp(first, second, 6) == -memcmp(second, first, 6)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix_in_place():
    dest = bytearray(5)
    result = memcpy(dest, b"abcde", 3)
    assert result is dest
    assert dest == bytearray(b"abc\x00\x00")


def test_memcpy_negative_count():
    with pytest.raises(ValueError):
        memcpy(bytearray(3), b"abc", -1)


def test_memmove_overlapping_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view[2:], view, 3)
    assert bytes(result[:3]) == b"abc"
    assert buf == bytearray(b"ababcf")


def test_memmove_overlapping_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 3)
    assert bytes(result[:3]) == b"cde"
    assert buf == bytearray(b"cdedef")


def test_memmove_dest_too_small():
    with pytest.raises(ValueError):
        memmove(bytearray(2), b"abc", 3)


def test_memset_fills_prefix():
    buf = bytearray(4)
    result = memset(buf, ord("x"), 2)
    assert result is buf
    assert buf == bytearray(b"xx\x00\x00")


def test_memset_whole_buffer_is_uniform():
    buf = bytearray(b"abcdef")
    memset(buf, ord("q"), len(buf))
    assert set(buf) == {ord("q")}


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(1), 0, 2)