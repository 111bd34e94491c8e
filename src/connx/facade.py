"""
Connx Codec Facade.

Provides a single object wrapping one text encoding scheme and alphabet.

Example:
    ```python
    from connx import Codec, CodecOptions

    codec = Codec.base64_url()
    text = codec.encode_to_string(b"\\xfb\\xff")   # "-_8="
    codec.decode(text)                             # b"\\xfb\\xff"

    codec = Codec.from_options(CodecOptions(scheme="base32", alphabet="hex"))
    ```
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from .encoding import base16, base32, base64
from .encoding.symbols import SymbolTable
from .options import CodecOptions

logger = logging.getLogger(__name__)

_TABLES = {
    ("base16", "std"): base16.HEX_ENCODING,
    ("base32", "std"): base32.STD_ENCODING,
    ("base32", "hex"): base32.HEX_ENCODING,
    ("base64", "std"): base64.STD_ENCODING,
    ("base64", "url"): base64.URL_ENCODING,
}

_MODULES = {
    "base16": base16,
    "base32": base32,
    "base64": base64,
}


class Codec:
    """
    Text codec bound to one scheme and alphabet.

    Instances hold no mutable state and may be shared between threads.

    Attributes:
        options: The validated options this codec was built from
        table: Symbol table used for encoding and decoding
    """

    def __init__(self, options: Optional[CodecOptions] = None):
        self.options = options or CodecOptions()
        self.table: SymbolTable = _TABLES[(self.options.scheme, self.options.alphabet)]
        self._module = _MODULES[self.options.scheme]
        logger.debug("Built %s codec with %s alphabet", self.options.scheme, self.options.alphabet)

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def from_options(cls, options: CodecOptions) -> 'Codec':
        """Build a codec from validated options."""
        return cls(options)

    @classmethod
    def hex(cls) -> 'Codec':
        """Base16 codec, lowercase output, case-insensitive input."""
        return cls(CodecOptions(scheme="base16"))

    @classmethod
    def base32(cls) -> 'Codec':
        """Base32 codec with the standard alphabet."""
        return cls(CodecOptions(scheme="base32"))

    @classmethod
    def base32_hex(cls) -> 'Codec':
        """Base32 codec with the extended hex alphabet."""
        return cls(CodecOptions(scheme="base32", alphabet="hex"))

    @classmethod
    def base64(cls) -> 'Codec':
        """Base64 codec with the standard alphabet."""
        return cls(CodecOptions(scheme="base64"))

    @classmethod
    def base64_url(cls) -> 'Codec':
        """Base64 codec with the URL and filename safe alphabet."""
        return cls(CodecOptions(scheme="base64", alphabet="url"))

    # =========================================================================
    # Operations
    # =========================================================================

    @property
    def scheme(self) -> str:
        return self.options.scheme

    def encode_len(self, n: int) -> int:
        return self._module.encode_len(n)

    def decode_len(self, n: int) -> int:
        return self._module.decode_len(n)

    def encode(self, src: bytes) -> bytes:
        """Encode raw bytes to encoded bytes."""
        if self._module is base16:
            return base16.encode(src)
        return self._module.encode(src, self.table)

    def encode_to_string(self, src: bytes) -> str:
        """Encode raw bytes to a string."""
        return self.encode(src).decode("ascii")

    def decode(self, src: Union[bytes, str]) -> bytes:
        """
        Decode encoded bytes or text.

        Raises:
            EncodingError: Input is malformed for this scheme
        """
        if self._module is base16:
            return base16.decode(src)
        return self._module.decode(src, self.table)

    def __repr__(self) -> str:
        return f"Codec(scheme={self.options.scheme!r}, alphabet={self.options.alphabet!r})"


__all__ = ["Codec"]
