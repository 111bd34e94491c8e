"""
Connx Encoding Module

RFC4648 binary-to-text codecs and fixed-width integer byte order helpers.

Key components:
- symbols.py: Alphabet / decode map pairs shared by the text codecs
- base16.py: Hex encoding
- base32.py: Base32 encoding, standard and extended hex alphabets
- base64.py: Base64 encoding, standard and URL safe alphabets
- binary.py: Little and big endian u16/u32/u64 encoding
- reader.py / writer.py: Sequential byte reader and writer over binary.py
"""

from . import base16, base32, base64, binary
from .binary import BigEndian, ByteOrder, LittleEndian
from .reader import ByteReader
from .symbols import INVALID, PAD_CHAR, SymbolTable, decode_map
from .writer import ByteWriter

__all__ = [
    "base16",
    "base32",
    "base64",
    "binary",
    "ByteOrder",
    "LittleEndian",
    "BigEndian",
    "ByteReader",
    "ByteWriter",
    "SymbolTable",
    "decode_map",
    "INVALID",
    "PAD_CHAR",
]
