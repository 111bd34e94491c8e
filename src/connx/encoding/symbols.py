"""
Symbol tables shared by the base16, base32 and base64 codecs.

An alphabet maps a value in ``[0, N)`` to an ASCII symbol; its decode map is
the 256-entry structural inverse, holding ``INVALID`` for every byte that is
not a symbol of the alphabet.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

INVALID = 0xFF
"""Decode-map sentinel for bytes outside the alphabet."""

PAD_CHAR = ord("=")
"""Padding symbol from RFC4648."""


def decode_map(alphabet: Union[bytes, str]) -> bytes:
    """
    Calculate the decode map for an alphabet.

    Args:
        alphabet: Ordered symbols, value ``i`` is ``alphabet[i]``

    Returns:
        256-byte table with ``table[alphabet[i]] == i`` and ``INVALID`` elsewhere
    """
    if isinstance(alphabet, str):
        alphabet = alphabet.encode("ascii")
    table = bytearray([INVALID]) * 256
    for i, c in enumerate(alphabet):
        table[c] = i
    return bytes(table)


@dataclass(frozen=True)
class SymbolTable:
    """
    An alphabet paired with its decode map.

    Instances are immutable and meant to be built once at import time.

    Args:
        alphabet: Ordered symbols
        size: Required number of symbols (16, 32 or 64)
        fold_case: Also accept the other ASCII case of letter symbols on decode
    """
    alphabet: bytes
    size: int
    fold_case: bool = False
    decode_map: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        alphabet = self.alphabet
        if isinstance(alphabet, str):
            alphabet = alphabet.encode("ascii")
            object.__setattr__(self, "alphabet", alphabet)
        if len(alphabet) != self.size:
            raise ValueError(f"alphabet must have {self.size} symbols, got {len(alphabet)}")
        if len(set(alphabet)) != self.size:
            raise ValueError("alphabet symbols must be distinct")
        if any(c >= 0x80 for c in alphabet):
            raise ValueError("alphabet symbols must be ASCII")
        if PAD_CHAR in alphabet:
            raise ValueError("alphabet must not contain the padding character")

        table = bytearray(decode_map(alphabet))
        if self.fold_case:
            for i, c in enumerate(alphabet):
                other = ord(chr(c).swapcase())
                if other != c:
                    if table[other] != INVALID and table[other] != i:
                        raise ValueError("case folding makes alphabet ambiguous")
                    table[other] = i
        object.__setattr__(self, "decode_map", bytes(table))

    @property
    def encode_map(self) -> bytes:
        """Alphabet as bytes, indexed by value."""
        return self.alphabet

    def value_of(self, c: int) -> int:
        """Return the value of symbol byte ``c`` or ``INVALID``."""
        return self.decode_map[c]

    def __len__(self) -> int:
        return self.size


def as_bytes(src) -> bytes:
    """
    Coerce decode input to bytes.

    Text is taken as UTF-8; non-ASCII bytes are never alphabet symbols, so the
    decoder rejects them in input order like any other invalid byte.
    """
    if isinstance(src, str):
        return src.encode("utf-8")
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    raise TypeError(f"expected bytes-like object or str, got {type(src).__name__}")


__all__ = ["INVALID", "PAD_CHAR", "SymbolTable", "decode_map", "as_bytes"]
