"""
RFC4648 base16 encoding.

Base 16 encoding is the standard case-insensitive hex encoding and may be
referred to as "base16" or "hex". Encoding always emits lowercase digits.

Example:
    ```python
    from connx.encoding import base16

    base16.encode_to_string(b"hello")     # "68656c6c6f"
    base16.decode_string("68656C6C6F")    # b"hello"
    ```
"""

from __future__ import annotations
import logging
from typing import Union

from ..errors import InvalidByteError, OddLengthError
from .symbols import INVALID, SymbolTable, as_bytes

logger = logging.getLogger(__name__)

SCHEME = "base16"

HEX_TABLE = b"0123456789abcdef"
"""Base16 encoding map."""

HEX_ENCODING = SymbolTable(HEX_TABLE, 16, fold_case=True)


def encode_len(n: int) -> int:
    """Length of the base16 text for ``n`` raw bytes."""
    return n * 2


def decode_len(n: int) -> int:
    """Length of the raw bytes for ``n`` base16 characters."""
    return n // 2


def encode_into(dst: bytearray, src: bytes) -> int:
    """
    Encode ``src`` into ``dst`` as lowercase hex.

    Args:
        dst: Destination buffer of at least ``encode_len(len(src))`` bytes
        src: Raw bytes

    Returns:
        Number of bytes written
    """
    n = encode_len(len(src))
    if len(dst) < n:
        raise IndexError(f"Buffer overflow: need {n} bytes, destination has {len(dst)}")
    hex_map = HEX_ENCODING.encode_map
    j = 0
    for b in src:
        dst[j] = hex_map[b >> 4]
        dst[j + 1] = hex_map[b & 0x0F]
        j += 2
    return n


def _from_hex_char(src: bytes, i: int) -> int:
    v = HEX_ENCODING.decode_map[src[i]]
    if v == INVALID:
        logger.debug("base16 decode rejected byte %#04x at offset %d", src[i], i)
        raise InvalidByteError(src[i], i, SCHEME)
    return v


def decode_into(dst: bytearray, src: Union[bytes, str]) -> int:
    """
    Decode hex text into ``dst``.

    Characters are validated pairwise from the start. For odd-length input
    the trailing character is validated too, so a bad final character is
    reported as an invalid byte and a good one as odd length.

    Args:
        dst: Destination buffer of at least ``decode_len(len(src))`` bytes
        src: Hex text

    Returns:
        Number of bytes written

    Raises:
        InvalidByteError: A character is not a hex digit
        OddLengthError: Input length is odd
    """
    src = as_bytes(src)
    n = decode_len(len(src))
    if len(dst) < n:
        raise IndexError(f"Buffer overflow: need {n} bytes, destination has {len(dst)}")
    j = 0
    for i in range(1, len(src), 2):
        a = _from_hex_char(src, i - 1)
        b = _from_hex_char(src, i)
        dst[j] = (a << 4) | b
        j += 1
    if len(src) % 2 == 1:
        _from_hex_char(src, len(src) - 1)
        logger.debug("base16 decode rejected odd length %d", len(src))
        raise OddLengthError(details={"length": len(src)})
    return j


def encode(src: bytes) -> bytes:
    """Encode raw bytes to hex bytes."""
    dst = bytearray(encode_len(len(src)))
    encode_into(dst, src)
    return bytes(dst)


def encode_to_string(src: bytes) -> str:
    """Encode raw bytes to a hex string."""
    return encode(src).decode("ascii")


def decode(src: Union[bytes, str]) -> bytes:
    """Decode hex bytes or text to raw bytes."""
    src = as_bytes(src)
    dst = bytearray(decode_len(len(src)))
    decode_into(dst, src)
    return bytes(dst)


def decode_string(src: str) -> bytes:
    """Decode a hex string to raw bytes."""
    return decode(src)


__all__ = [
    "HEX_TABLE",
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
