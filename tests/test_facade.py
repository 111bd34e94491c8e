"""
Codec facade and option model tests.
"""

import pytest
from pydantic import ValidationError

from connx import Codec, CodecOptions
from connx.encoding import base32, base64
from connx.errors import EncodingError, InvalidByteError


@pytest.mark.unit
class TestCodecOptions:

    def test_defaults(self):
        opts = CodecOptions()
        assert opts.scheme == "base64"
        assert opts.alphabet == "std"
        assert opts.to_dict() == {"scheme": "base64", "alphabet": "std"}

    def test_hex_alias(self):
        assert CodecOptions(scheme="hex").scheme == "base16"
        assert CodecOptions(scheme=" Base32 ").scheme == "base32"

    def test_alphabet_aliases(self):
        assert CodecOptions(scheme="base64", alphabet="URL-safe").alphabet == "url"
        assert CodecOptions(scheme="base64", alphabet="standard").alphabet == "std"

    def test_unknown_scheme_rejected(self):
        with pytest.raises(ValidationError):
            CodecOptions(scheme="base58")

    @pytest.mark.parametrize("scheme,alphabet", [
        ("base16", "url"),
        ("base32", "url"),
        ("base64", "hex"),
    ])
    def test_alphabet_must_match_scheme(self, scheme, alphabet):
        with pytest.raises(ValidationError, match="not available"):
            CodecOptions(scheme=scheme, alphabet=alphabet)

    def test_options_are_frozen(self):
        opts = CodecOptions()
        with pytest.raises(ValidationError):
            opts.scheme = "base32"


@pytest.mark.unit
class TestCodec:

    @pytest.mark.parametrize("factory,raw,text", [
        (Codec.hex, b"foobar", "666f6f626172"),
        (Codec.base32, b"foobar", "MZXW6YTBOI======"),
        (Codec.base32_hex, b"foobar", "CPNMUOJ1E8======"),
        (Codec.base64, b"foobar", "Zm9vYmFy"),
        (Codec.base64_url, b"\xfb\xff", "-_8="),
    ])
    def test_constructors(self, factory, raw, text):
        codec = factory()
        assert codec.encode_to_string(raw) == text
        assert codec.encode(raw) == text.encode("ascii")
        assert codec.decode(text) == raw
        assert codec.encode_len(len(raw)) == len(text)
        assert codec.decode_len(len(text)) >= len(raw)

    def test_from_options(self):
        codec = Codec.from_options(CodecOptions(scheme="base32", alphabet="hex"))
        assert codec.scheme == "base32"
        assert codec.table is base32.HEX_ENCODING

    def test_default_is_standard_base64(self):
        codec = Codec()
        assert codec.table is base64.STD_ENCODING
        assert repr(codec) == "Codec(scheme='base64', alphabet='std')"

    def test_decode_errors_propagate(self):
        with pytest.raises(InvalidByteError):
            Codec.base64_url().decode("+/+/")
        with pytest.raises(EncodingError):
            Codec.hex().decode("abc")

    def test_roundtrip(self, random_payloads):
        codecs = [Codec.hex(), Codec.base32(), Codec.base32_hex(), Codec.base64(), Codec.base64_url()]
        for data in random_payloads:
            if not data:
                continue
            for codec in codecs:
                assert codec.decode(codec.encode(data)) == data
