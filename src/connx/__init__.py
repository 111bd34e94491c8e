"""
Connx - RFC4648 encodings and integer byte order

This package provides base16, base32 and base64 codecs over byte buffers
together with little and big endian fixed-width integer encoding.
"""

from .encoding import (
    base16, base32, base64, binary,
    ByteOrder, LittleEndian, BigEndian,
    ByteReader, ByteWriter,
    SymbolTable, decode_map, INVALID, PAD_CHAR,
)
from .errors import (
    ErrorCode, ConnxError, EncodingError,
    InvalidByteError, OddLengthError, InvalidLengthError,
)
from .options import CodecOptions
from .facade import Codec

__version__ = "0.1.0"
__all__ = [
    # Codecs
    "base16",
    "base32",
    "base64",
    "binary",
    "Codec",
    "CodecOptions",

    # Byte order
    "ByteOrder",
    "LittleEndian",
    "BigEndian",
    "ByteReader",
    "ByteWriter",

    # Symbol tables
    "SymbolTable",
    "decode_map",
    "INVALID",
    "PAD_CHAR",

    # Errors
    "ErrorCode",
    "ConnxError",
    "EncodingError",
    "InvalidByteError",
    "OddLengthError",
    "InvalidLengthError",
]
