"""
RFC4648 base64 encoding.

Every 3 raw bytes (24 bits) become 4 symbols of 6 bits each. A final group of
1 or 2 bytes is padded with ``=`` up to 4 symbols.

Example:
    ```python
    from connx.encoding import base64

    base64.encode_str("hello")                              # "aGVsbG8="
    base64.decode(b"aGVsbG8=")                              # b"hello"
    base64.encode(b"\xfb\xff", base64.URL_ENCODING)         # b"-_8="
    ```
"""

from __future__ import annotations
import logging
from typing import Union

from ..errors import InvalidByteError, InvalidLengthError
from .symbols import INVALID, PAD_CHAR, SymbolTable, as_bytes, decode_map

logger = logging.getLogger(__name__)

SCHEME = "base64"

ENCODE_STD = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
"""Standard encoding map from RFC4648."""

ENCODE_URL = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
"""URL and filename safe encoding map from RFC4648."""

# Inverse of ENCODE_STD
DECODE_STD_MAP = bytes((
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x3E, 0xFF, 0xFF, 0xFF, 0x3F,
    0x34, 0x35, 0x36, 0x37, 0x38, 0x39, 0x3A, 0x3B, 0x3C, 0x3D, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08, 0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x0E,
    0x0F, 0x10, 0x11, 0x12, 0x13, 0x14, 0x15, 0x16, 0x17, 0x18, 0x19, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0x1A, 0x1B, 0x1C, 0x1D, 0x1E, 0x1F, 0x20, 0x21, 0x22, 0x23, 0x24, 0x25, 0x26, 0x27, 0x28,
    0x29, 0x2A, 0x2B, 0x2C, 0x2D, 0x2E, 0x2F, 0x30, 0x31, 0x32, 0x33, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
))

STD_ENCODING = SymbolTable(ENCODE_STD, 64)
URL_ENCODING = SymbolTable(ENCODE_URL, 64)


def encode_len(n: int) -> int:
    """Length of the base64 text for ``n`` raw bytes, padding included."""
    return (n + 2) // 3 * 4


def encode_str_len(src: str) -> int:
    """Length of the base64 text for the UTF-8 bytes of ``src``."""
    return encode_len(len(src.encode("utf-8")))


def decode_len(n: int) -> int:
    """
    Maximum number of raw bytes for ``n`` base64 characters.

    The decoded output may be 1 or 2 bytes shorter, depending on padding.
    """
    return n // 4 * 3


def encode_into(dst: bytearray, src: bytes, table: SymbolTable = STD_ENCODING) -> int:
    """
    Encode ``src`` into ``dst``.

    Args:
        dst: Destination buffer of at least ``encode_len(len(src))`` bytes
        src: Raw bytes
        table: Alphabet to encode with

    Returns:
        Number of bytes written
    """
    out_len = encode_len(len(src))
    if len(dst) < out_len:
        raise IndexError(f"Buffer overflow: need {out_len} bytes, destination has {len(dst)}")
    encode_map = table.encode_map

    # 3x8bit => 4x6bit
    si = 0
    di = 0
    n = len(src) // 3 * 3
    while si < n:
        val = src[si] << 16 | src[si + 1] << 8 | src[si + 2]
        dst[di] = encode_map[val >> 18 & 0x3F]
        dst[di + 1] = encode_map[val >> 12 & 0x3F]
        dst[di + 2] = encode_map[val >> 6 & 0x3F]
        dst[di + 3] = encode_map[val & 0x3F]
        si += 3
        di += 4

    remain = len(src) - si
    if remain == 1:
        val = src[si] << 16
        dst[di] = encode_map[val >> 18 & 0x3F]
        dst[di + 1] = encode_map[val >> 12 & 0x3F]
        dst[di + 2] = PAD_CHAR
        dst[di + 3] = PAD_CHAR
    elif remain == 2:
        val = src[si] << 16 | src[si + 1] << 8
        dst[di] = encode_map[val >> 18 & 0x3F]
        dst[di + 1] = encode_map[val >> 12 & 0x3F]
        dst[di + 2] = encode_map[val >> 6 & 0x3F]
        dst[di + 3] = PAD_CHAR
    return out_len


def _lookup(dmap: bytes, src: bytes, i: int) -> int:
    v = dmap[src[i]]
    if v == INVALID:
        logger.debug("base64 decode rejected byte %#04x at offset %d", src[i], i)
        raise InvalidByteError(src[i], i, SCHEME)
    return v


def decode_into(dst: bytearray, src: Union[bytes, str], table: SymbolTable = STD_ENCODING) -> int:
    """
    Decode base64 text into ``dst``.

    Args:
        dst: Destination buffer of at least ``decode_len(len(src))`` bytes
        src: Padded base64 text
        table: Alphabet to decode with

    Returns:
        Number of bytes written

    Raises:
        InvalidLengthError: Input is empty or not a multiple of 4 long
        InvalidByteError: A symbol is outside the alphabet or padding is misplaced
    """
    src = as_bytes(src)
    if len(src) == 0 or len(src) % 4 != 0:
        logger.debug("base64 decode rejected length %d", len(src))
        raise InvalidLengthError(len(src), SCHEME, 4)
    if len(dst) < decode_len(len(src)):
        raise IndexError(f"Buffer overflow: need {decode_len(len(src))} bytes, destination has {len(dst)}")
    dmap = table.decode_map

    si = 0
    di = 0
    last = len(src) - 4
    while si < last:
        val = (_lookup(dmap, src, si) << 18
               | _lookup(dmap, src, si + 1) << 12
               | _lookup(dmap, src, si + 2) << 6
               | _lookup(dmap, src, si + 3))
        dst[di] = val >> 16 & 0xFF
        dst[di + 1] = val >> 8 & 0xFF
        dst[di + 2] = val & 0xFF
        si += 4
        di += 3

    # Final group decides the output length from its padding
    val = _lookup(dmap, src, si) << 18 | _lookup(dmap, src, si + 1) << 12
    if src[si + 2] == PAD_CHAR:
        if src[si + 3] != PAD_CHAR:
            raise InvalidByteError(PAD_CHAR, si + 2, SCHEME)
        dst[di] = val >> 16 & 0xFF
        return di + 1
    val |= _lookup(dmap, src, si + 2) << 6
    if src[si + 3] == PAD_CHAR:
        dst[di] = val >> 16 & 0xFF
        dst[di + 1] = val >> 8 & 0xFF
        return di + 2
    val |= _lookup(dmap, src, si + 3)
    dst[di] = val >> 16 & 0xFF
    dst[di + 1] = val >> 8 & 0xFF
    dst[di + 2] = val & 0xFF
    return di + 3


def encode_bytes(src: bytes, table: SymbolTable = STD_ENCODING) -> bytes:
    """Encode raw bytes to base64 bytes."""
    dst = bytearray(encode_len(len(src)))
    encode_into(dst, src, table)
    return bytes(dst)


encode = encode_bytes


def encode_to_string(src: bytes, table: SymbolTable = STD_ENCODING) -> str:
    """Encode raw bytes to a base64 string."""
    return encode_bytes(src, table).decode("ascii")


def encode_str(src: str, table: SymbolTable = STD_ENCODING) -> str:
    """Encode the UTF-8 bytes of a string to a base64 string."""
    return encode_to_string(src.encode("utf-8"), table)


def decode(src: Union[bytes, str], table: SymbolTable = STD_ENCODING) -> bytes:
    """Decode base64 bytes or text to raw bytes."""
    src = as_bytes(src)
    dst = bytearray(decode_len(len(src)))
    n = decode_into(dst, src, table)
    return bytes(dst[:n])


def decode_string(src: str, table: SymbolTable = STD_ENCODING) -> bytes:
    """Decode a base64 string to raw bytes."""
    return decode(src, table)


__all__ = [
    "ENCODE_STD",
    "ENCODE_URL",
    "DECODE_STD_MAP",
    "STD_ENCODING",
    "URL_ENCODING",
    "decode_map",
    "encode_len",
    "encode_str_len",
    "decode_len",
    "encode_into",
    "decode_into",
    "encode",
    "encode_bytes",
    "encode_to_string",
    "encode_str",
    "decode",
    "decode_string",
]
