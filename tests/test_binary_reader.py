"""
Tests for the reply cursor
"""

import struct

import pytest

from pysourcequery.exceptions import DecodeError
from pysourcequery.protocol.binary_reader import BinaryPacketReader


class TestNumbers:
    """Fixed-width little-endian reads"""

    def test_read_byte_advances(self):
        reader = BinaryPacketReader(b'\x01\xff')
        assert reader.read_byte() == 1
        assert reader.read_byte() == 255
        assert reader.remaining() == 0

    def test_signed_and_unsigned_16(self):
        reader = BinaryPacketReader(b'\xff\xff\xff\xff')
        assert reader.read_int16() == -1
        assert reader.read_uint16() == 0xFFFF

    def test_int32_float_int64(self):
        data = struct.pack('<ifq', -42, 1.5, -(2 ** 40))
        reader = BinaryPacketReader(data)
        assert reader.read_int32() == -42
        assert reader.read_float() == 1.5
        assert reader.read_int64() == -(2 ** 40)
        assert reader.remaining() == 0

    def test_short_read_raises(self):
        reader = BinaryPacketReader(b'\x01\x02\x03')
        with pytest.raises(DecodeError):
            reader.read_int32()
        # Cursor untouched after a failed read
        assert reader.pos == 0

    def test_read_past_end_raises(self):
        reader = BinaryPacketReader(b'')
        with pytest.raises(DecodeError):
            reader.read_byte()


class TestStrings:
    """NUL-terminated strings"""

    def test_read_string(self):
        reader = BinaryPacketReader(b'hello\x00world\x00')
        assert reader.read_string() == 'hello'
        assert reader.read_string() == 'world'
        assert reader.remaining() == 0

    def test_empty_string(self):
        reader = BinaryPacketReader(b'\x00x')
        assert reader.read_string() == ''
        assert reader.pos == 1

    def test_utf8(self):
        reader = BinaryPacketReader('Škoda ✓'.encode('utf-8') + b'\x00')
        assert reader.read_string() == 'Škoda ✓'

    def test_missing_terminator_raises(self):
        reader = BinaryPacketReader(b'no terminator')
        with pytest.raises(DecodeError):
            reader.read_string()

    def test_invalid_utf8_raises(self):
        reader = BinaryPacketReader(b'\xff\xfe\x00')
        with pytest.raises(DecodeError):
            reader.read_string()

    def test_read_char(self):
        assert BinaryPacketReader(b'd').read_char() == 'd'


class TestRawData:
    """Skipped blocks"""

    def test_skip(self):
        reader = BinaryPacketReader(b'12345678a\x00')
        reader.skip(8)
        assert reader.pos == 8
        assert reader.read_string() == 'a'
        assert reader.remaining() == 0

    def test_skip_too_far_raises(self):
        with pytest.raises(DecodeError):
            BinaryPacketReader(b'1234567').skip(8)
