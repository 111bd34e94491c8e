"""
Little endian and big endian fixed-width unsigned integers.

``ByteOrder`` is a two-member enum; each member encodes and decodes 16, 32
and 64 bit unsigned integers to and from 2, 4 and 8 byte buffers.

Example:
    ```python
    from connx.encoding.binary import ByteOrder

    b = bytearray(4)
    ByteOrder.LITTLE.encode_u32(0x12345678, b)    # b == b"\\x78\\x56\\x34\\x12"
    ByteOrder.LITTLE.decode_u32(b)                # 0x12345678
    ByteOrder.BIG.pack_u16(0x1234)                # b"\\x12\\x34"
    ```
"""

from __future__ import annotations
from enum import Enum


def _check_len(b, width: int) -> None:
    if len(b) < width:
        raise IndexError(f"Buffer overflow: need {width} bytes, buffer has {len(b)}")


class ByteOrder(Enum):
    """Byte order of a multi-byte integer."""

    LITTLE = "little"
    BIG = "big"

    def _encode(self, n: int, b: bytearray, width: int) -> None:
        if n < 0:
            raise ValueError("unsigned integer cannot be negative")
        _check_len(b, width)
        n &= (1 << (8 * width)) - 1
        if self is ByteOrder.LITTLE:
            for i in range(width):
                b[i] = (n >> (8 * i)) & 0xFF
        else:
            for i in range(width):
                b[i] = (n >> (8 * (width - 1 - i))) & 0xFF

    def _decode(self, b: bytes, width: int) -> int:
        _check_len(b, width)
        n = 0
        if self is ByteOrder.LITTLE:
            for i in range(width):
                n |= b[i] << (8 * i)
        else:
            for i in range(width):
                n |= b[i] << (8 * (width - 1 - i))
        return n

    def encode_u16(self, n: int, b: bytearray) -> None:
        """Write ``n`` into the first 2 bytes of ``b``."""
        self._encode(n, b, 2)

    def encode_u32(self, n: int, b: bytearray) -> None:
        """Write ``n`` into the first 4 bytes of ``b``."""
        self._encode(n, b, 4)

    def encode_u64(self, n: int, b: bytearray) -> None:
        """Write ``n`` into the first 8 bytes of ``b``."""
        self._encode(n, b, 8)

    def decode_u16(self, b: bytes) -> int:
        """Read an unsigned 16-bit integer from the first 2 bytes of ``b``."""
        return self._decode(b, 2)

    def decode_u32(self, b: bytes) -> int:
        """Read an unsigned 32-bit integer from the first 4 bytes of ``b``."""
        return self._decode(b, 4)

    def decode_u64(self, b: bytes) -> int:
        """Read an unsigned 64-bit integer from the first 8 bytes of ``b``."""
        return self._decode(b, 8)

    def pack_u16(self, n: int) -> bytes:
        """Return ``n`` as a new 2-byte buffer."""
        b = bytearray(2)
        self._encode(n, b, 2)
        return bytes(b)

    def pack_u32(self, n: int) -> bytes:
        """Return ``n`` as a new 4-byte buffer."""
        b = bytearray(4)
        self._encode(n, b, 4)
        return bytes(b)

    def pack_u64(self, n: int) -> bytes:
        """Return ``n`` as a new 8-byte buffer."""
        b = bytearray(8)
        self._encode(n, b, 8)
        return bytes(b)


LittleEndian = ByteOrder.LITTLE
BigEndian = ByteOrder.BIG

__all__ = ["ByteOrder", "LittleEndian", "BigEndian"]
