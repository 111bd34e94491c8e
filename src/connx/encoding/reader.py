"""
Byte Reader

Cursor over a byte buffer decoding fixed-width integers and raw bytes in a
selectable byte order. Reads past the end raise ``IndexError``.
"""

import builtins

from .binary import ByteOrder


class ByteReader:
    """Binary reader over an in-memory buffer."""

    def __init__(self, buf: builtins.bytes, order: ByteOrder = ByteOrder.LITTLE):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
            order: Byte order for multi-byte integers
        """
        self._buf = buf
        self._off = 0
        self.order = order

    @property
    def eof(self) -> bool:
        """True if at end of buffer."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return max(len(self._buf) - self._off, 0)

    def _take(self, n: int) -> builtins.bytes:
        if self._off + n > len(self._buf):
            raise IndexError(f"Buffer overflow: attempting to read {n} bytes beyond end")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def u8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self._take(1)[0]

    def u16(self) -> int:
        """Read unsigned 16-bit integer."""
        return self.order.decode_u16(self._take(2))

    def u32(self) -> int:
        """Read unsigned 32-bit integer."""
        return self.order.decode_u32(self._take(4))

    def u64(self) -> int:
        """Read unsigned 64-bit integer."""
        return self.order.decode_u64(self._take(8))

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        return builtins.bytes(self._take(n))
