"""
Primitive accessor contract.

Everything a generation layout needs from a decoded record is "read an
unsigned little-endian integer of width W at offset O".  ``ByteReader``
provides that over an immutable canonical buffer, plus a couple of
conveniences built on top of it (bit fields and UTF-16 strings).
"""

import struct
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]

_WIDTH_FORMATS = {
    1: '<B',
    2: '<H',
    4: '<I',
    8: '<Q',
}


class ByteReader:
    """Read-only, little-endian field access over a byte buffer."""

    def __init__(self, data: Buffer):
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        """The underlying buffer."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def read_le(self, offset: int, width: int) -> int:
        """
        Read an unsigned little-endian integer.

        Args:
            offset: Byte offset into the buffer
            width:  Width in bytes (1, 2, 4 or 8)

        Raises:
            ValueError:   if ``width`` is not a supported integer width
            struct.error: if the read runs past the end of the buffer
        """
        fmt = _WIDTH_FORMATS.get(width)
        if fmt is None:
            raise ValueError(f"Unsupported read width: {width}")
        return struct.unpack_from(fmt, self._data, offset)[0]

    def read_u8(self, offset: int) -> int:
        return self.read_le(offset, 1)

    def read_u16(self, offset: int) -> int:
        return self.read_le(offset, 2)

    def read_u32(self, offset: int) -> int:
        return self.read_le(offset, 4)

    def read_bits(self, offset: int, shift: int, mask: int) -> int:
        """``(byte >> shift) & mask`` for the byte at ``offset``."""
        return (self.read_u8(offset) >> shift) & mask

    def read_flag(self, offset: int, bit: int) -> bool:
        return bool(self.read_bits(offset, bit, 1))

    def read_string(self, offset: int, length: int) -> str:
        """
        Read a UTF-16LE string of at most ``length`` bytes.

        Text ends at the first NUL code unit.
        """
        raw = self._data[offset:offset + length]
        text = raw.decode('utf-16-le', errors='replace')
        return text.split('\x00', 1)[0]
