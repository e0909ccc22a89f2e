"""Tests for little-endian primitive and length-prefixed string reads."""
import struct

import pytest

from locres.errors import LocresError, StringDecodeError, TruncatedDataError

from locres_builder import fstring, raw_fstring


def test_fixed_width_integers(reader_for):
    data = struct.pack("<iIqQ", -2, 0xDEADBEEF, -(2 ** 40), 2 ** 63 + 5)
    reader = reader_for(data)

    assert reader.read_i32() == -2
    assert reader.read_u32() == 0xDEADBEEF
    assert reader.read_i64() == -(2 ** 40)
    assert reader.read_u64() == 2 ** 63 + 5
    assert reader.tell() == len(data)


def test_read_bytes_exact(reader_for):
    reader = reader_for(b"abcdef")
    assert reader.read_bytes(4) == b"abcd"
    assert reader.tell() == 4


def test_zero_length_string_is_empty(reader_for):
    reader = reader_for(raw_fstring(0, b"") + b"rest")
    assert reader.read_string() == ""
    assert reader.tell() == 4


def test_utf8_string(reader_for):
    reader = reader_for(fstring("Grüße"))
    assert reader.read_string() == "Grüße"


def test_trailing_nuls_are_stripped(reader_for):
    reader = reader_for(raw_fstring(6, b"Hi\x00\x00\x00\x00"))
    assert reader.read_string() == "Hi"


def test_inner_nul_is_kept(reader_for):
    reader = reader_for(raw_fstring(4, b"a\x00b\x00"))
    assert reader.read_string() == "a\x00b"


def test_negative_length_reads_twice_the_bytes_leniently(reader_for):
    payload = b"\xff\xfeA\x00\x80\x00\x00\x00"
    reader = reader_for(raw_fstring(-4, payload) + b"tail")

    text = reader.read_string()

    assert reader.tell() == 4 + 8
    assert "\ufffd" in text
    assert "A" in text
    assert not text.endswith("\x00")


def test_negative_length_ascii_payload(reader_for):
    reader = reader_for(raw_fstring(-2, b"OK\x00\x00"))
    assert reader.read_string() == "OK"


def test_invalid_utf8_on_positive_length_fails(reader_for):
    reader = reader_for(raw_fstring(3, b"a\xffb"))

    with pytest.raises(StringDecodeError) as excinfo:
        reader.read_string()

    assert excinfo.value.offset == 4
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert isinstance(excinfo.value, LocresError)


def test_short_integer_read_is_truncated(reader_for):
    reader = reader_for(b"\x01\x02")

    with pytest.raises(TruncatedDataError) as excinfo:
        reader.read_u32()

    err = excinfo.value
    assert (err.offset, err.expected, err.received) == (0, 4, 2)
    assert isinstance(err, EOFError)


def test_short_string_payload_is_truncated(reader_for):
    reader = reader_for(raw_fstring(10, b"short"))

    with pytest.raises(TruncatedDataError) as excinfo:
        reader.read_string()

    assert excinfo.value.offset == 4
    assert excinfo.value.expected == 10
    assert excinfo.value.received == 5
