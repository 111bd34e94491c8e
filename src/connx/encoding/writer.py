"""
Byte Writer

Sequential writer of fixed-width integers and raw bytes into a growable
buffer, using a selectable byte order.
"""

from .binary import ByteOrder


class ByteWriter:
    """
    Growable binary writer.

    Integers are masked to their width before encoding.
    """

    def __init__(self, order: ByteOrder = ByteOrder.LITTLE):
        """
        Initialize writer with empty byte buffer.

        Args:
            order: Byte order for multi-byte integers
        """
        self._bb = bytearray()
        self.order = order

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        self._bb.append(v & 0xFF)

    def u16(self, v: int) -> None:
        """
        Write unsigned 16-bit integer.

        Args:
            v: Integer value to write in the writer's byte order
        """
        self._bb.extend(self.order.pack_u16(v))

    def u32(self, v: int) -> None:
        """
        Write unsigned 32-bit integer.

        Args:
            v: Integer value to write in the writer's byte order
        """
        self._bb.extend(self.order.pack_u32(v))

    def u64(self, v: int) -> None:
        """
        Write unsigned 64-bit integer.

        Args:
            v: Integer value to write in the writer's byte order
        """
        self._bb.extend(self.order.pack_u64(v))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def __len__(self) -> int:
        return len(self._bb)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
