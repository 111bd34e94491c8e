"""
RFC4648 base32 encoding.

Every 5 raw bytes (40 bits) become 8 symbols of 5 bits each. A short final
group is padded with ``=`` up to 8 symbols, giving 6, 4, 3 or 1 pad
characters for 1, 2, 3 or 4 trailing bytes.

Two alphabets are provided: the standard ``A-Z2-7`` alphabet and the
"extended hex" ``0-9A-V`` alphabet.
"""

from __future__ import annotations
import logging
from typing import Union

from ..errors import InvalidByteError, InvalidLengthError
from .symbols import INVALID, PAD_CHAR, SymbolTable, as_bytes

logger = logging.getLogger(__name__)

SCHEME = "base32"

ENCODE_STD = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
"""Standard encoding map from RFC4648."""

ENCODE_HEX = b"0123456789ABCDEFGHIJKLMNOPQRSTUV"
"""Extended hex encoding map from RFC4648."""

# Inverse of ENCODE_STD
DECODE_STD_MAP = bytes((
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0x1A, 0x1B, 0x1C, 0x1D, 0x1E, 0x1F, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08, 0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x0E,
    0x0F, 0x10, 0x11, 0x12, 0x13, 0x14, 0x15, 0x16, 0x17, 0x18, 0x19, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
))

STD_ENCODING = SymbolTable(ENCODE_STD, 32)
HEX_ENCODING = SymbolTable(ENCODE_HEX, 32)

# Number of data symbols in a final group for each count of trailing pad characters
_PAD_TO_SYMBOLS = {0: 8, 1: 7, 3: 5, 4: 4, 6: 2}


def encode_len(n: int) -> int:
    """Length of the base32 text for ``n`` raw bytes, padding included."""
    return (n + 4) // 5 * 8


def decode_len(n: int) -> int:
    """Maximum number of raw bytes for ``n`` base32 characters."""
    return n // 8 * 5


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

    # 5x8bit => 8x5bit
    si = 0
    di = 0
    n = len(src) // 5 * 5
    while si < n:
        val = int.from_bytes(src[si:si + 5], "big")
        for k in range(8):
            dst[di + k] = encode_map[(val >> (35 - 5 * k)) & 0x1F]
        si += 5
        di += 8

    remain = len(src) - si
    if remain == 0:
        return out_len

    # Left-justify the tail in a 40-bit group; missing low bits are zero
    val = int.from_bytes(src[si:], "big") << ((5 - remain) * 8)
    used = (remain * 8 + 4) // 5
    for k in range(8):
        if k < used:
            dst[di + k] = encode_map[(val >> (35 - 5 * k)) & 0x1F]
        else:
            dst[di + k] = PAD_CHAR
    return out_len


def _invalid(src: bytes, i: int) -> InvalidByteError:
    logger.debug("base32 decode rejected byte %#04x at offset %d", src[i], i)
    return InvalidByteError(src[i], i, SCHEME)


def decode_into(dst: bytearray, src: Union[bytes, str], table: SymbolTable = STD_ENCODING) -> int:
    """
    Decode base32 text into ``dst``.

    Args:
        dst: Destination buffer of at least ``decode_len(len(src))`` bytes
        src: Padded base32 text
        table: Alphabet to decode with

    Returns:
        Number of bytes written

    Raises:
        InvalidLengthError: Input length is not a multiple of 8
        InvalidByteError: A symbol is outside the alphabet or padding is misplaced
    """
    src = as_bytes(src)
    if len(src) % 8 != 0:
        logger.debug("base32 decode rejected length %d", len(src))
        raise InvalidLengthError(len(src), SCHEME, 8)
    if len(dst) < decode_len(len(src)):
        raise IndexError(f"Buffer overflow: need {decode_len(len(src))} bytes, destination has {len(dst)}")
    dmap = table.decode_map

    di = 0
    for si in range(0, len(src), 8):
        group = src[si:si + 8]
        symbols = 8
        if si + 8 == len(src):
            pads = len(group) - len(group.rstrip(b"="))
            if pads not in _PAD_TO_SYMBOLS:
                raise _invalid(src, si + 8 - pads)
            symbols = _PAD_TO_SYMBOLS[pads]

        val = 0
        for k in range(symbols):
            v = dmap[group[k]]
            if v == INVALID:
                raise _invalid(src, si + k)
            val = (val << 5) | v
        val <<= 5 * (8 - symbols)

        nbytes = symbols * 5 // 8
        dst[di:di + nbytes] = val.to_bytes(5, "big")[:nbytes]
        di += nbytes
    return di


def encode(src: bytes, table: SymbolTable = STD_ENCODING) -> bytes:
    """Encode raw bytes to base32 bytes."""
    dst = bytearray(encode_len(len(src)))
    encode_into(dst, src, table)
    return bytes(dst)


def encode_to_string(src: bytes, table: SymbolTable = STD_ENCODING) -> str:
    """Encode raw bytes to a base32 string."""
    return encode(src, table).decode("ascii")


def decode(src: Union[bytes, str], table: SymbolTable = STD_ENCODING) -> bytes:
    """Decode base32 bytes or text to raw bytes."""
    src = as_bytes(src)
    dst = bytearray(decode_len(len(src)))
    n = decode_into(dst, src, table)
    return bytes(dst[:n])


def decode_string(src: str, table: SymbolTable = STD_ENCODING) -> bytes:
    """Decode a base32 string to raw bytes."""
    return decode(src, table)


__all__ = [
    "ENCODE_STD",
    "ENCODE_HEX",
    "DECODE_STD_MAP",
    "STD_ENCODING",
    "HEX_ENCODING",
    "encode_len",
    "decode_len",
    "encode_into",
    "decode_into",
    "encode",
    "encode_to_string",
    "decode",
    "decode_string",
]
