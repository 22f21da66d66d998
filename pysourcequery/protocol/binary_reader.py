"""
Binary Packet Reader for reply datagrams

All multi-byte integers in A2S replies are little-endian. Strings are
NUL-terminated UTF-8.
"""

import struct

from ..exceptions import DecodeError

_INT16 = struct.Struct('<h')
_UINT16 = struct.Struct('<H')
_INT32 = struct.Struct('<i')
_FLOAT = struct.Struct('<f')
_INT64 = struct.Struct('<q')


class BinaryPacketReader:
    """Cursor over a reply datagram"""

    def __init__(self, data: bytes, pos: int = 0):
        self.data = bytes(data)
        self.pos = pos

    def remaining(self) -> int:
        """Bytes remaining to read"""
        return len(self.data) - self.pos

    def _require(self, size: int, what: str):
        if self.remaining() < size:
            raise DecodeError(
                f"Not enough data for {what}: need {size} bytes at offset "
                f"{self.pos}, have {self.remaining()}"
            )

    def _unpack(self, fmt: struct.Struct, what: str):
        self._require(fmt.size, what)
        (value,) = fmt.unpack_from(self.data, self.pos)
        self.pos += fmt.size
        return value

    def read_byte(self) -> int:
        """Read a single unsigned byte"""
        self._require(1, "byte")
        value = self.data[self.pos]
        self.pos += 1
        return value

    def read_char(self) -> str:
        """Read a single byte as an ASCII character"""
        return chr(self.read_byte())

    def read_int16(self) -> int:
        return self._unpack(_INT16, "int16")

    def read_uint16(self) -> int:
        return self._unpack(_UINT16, "uint16")

    def read_int32(self) -> int:
        return self._unpack(_INT32, "int32")

    def read_float(self) -> float:
        return self._unpack(_FLOAT, "float")

    def read_int64(self) -> int:
        return self._unpack(_INT64, "int64")

    def read_string(self) -> str:
        """Read a NUL-terminated string and step past the terminator"""
        end = self.data.find(b'\x00', self.pos)
        if end == -1:
            raise DecodeError(f"Unterminated string at offset {self.pos}")
        raw = self.data[self.pos:end]
        self.pos = end + 1
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError(f"Invalid UTF-8 in string ending at offset {end}: {e}") from e

    def skip(self, size: int):
        """Advance the cursor without decoding"""
        self._require(size, f"{size} skipped bytes")
        self.pos += size
