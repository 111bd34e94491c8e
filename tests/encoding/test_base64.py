"""
Base64 codec tests.

RFC4648 vectors, the standard and URL safe alphabets, final-group padding
handling and length rejection.
"""

import base64 as std_base64

import pytest

from connx.encoding import base64
from connx.errors import ErrorCode, InvalidByteError, InvalidLengthError


VECTORS = [
    (b"", ""),
    (b"f", "Zg=="),
    (b"fo", "Zm8="),
    (b"foo", "Zm9v"),
    (b"foob", "Zm9vYg=="),
    (b"fooba", "Zm9vYmE="),
    (b"foobar", "Zm9vYmFy"),
    (b"sure.", "c3VyZS4="),
    (b"sure", "c3VyZQ=="),
    (b"sur", "c3Vy"),
    (b"su", "c3U="),
    (b"leasure.", "bGVhc3VyZS4="),
    (b"easure.", "ZWFzdXJlLg=="),
    (b"asure.", "YXN1cmUu"),
    (b"hello", "aGVsbG8="),
    (b"Hello, World!", "SGVsbG8sIFdvcmxkIQ=="),
]

ALL_VALUES = bytes([
    0x00, 0x10, 0x83, 0x10, 0x51, 0x87, 0x20, 0x92, 0x8B, 0x30, 0xD3, 0x8F,
    0x41, 0x14, 0x93, 0x51, 0x55, 0x97, 0x61, 0x96, 0x9B, 0x71, 0xD7, 0x9F,
    0x82, 0x18, 0xA3, 0x92, 0x59, 0xA7, 0xA2, 0x9A, 0xAB, 0xB2, 0xDB, 0xAF,
    0xC3, 0x1C, 0xB3, 0xD3, 0x5D, 0xB7, 0xE3, 0x9E, 0xBB, 0xF3, 0xDF, 0xBF,
])


@pytest.mark.unit
class TestBase64Lengths:

    def test_encode_str_len(self):
        assert base64.encode_str_len("") == 0
        assert base64.encode_str_len("a") == 4
        assert base64.encode_str_len("ab") == 4
        assert base64.encode_str_len("abc") == 4
        assert base64.encode_str_len("abcd") == 8

    @pytest.mark.parametrize("n,expected", [(0, 0), (1, 4), (2, 4), (3, 4), (4, 8), (6, 8), (7, 12)])
    def test_encode_len(self, n, expected):
        assert base64.encode_len(n) == expected

    @pytest.mark.parametrize("n,expected", [(0, 0), (3, 0), (4, 3), (8, 6), (12, 9)])
    def test_decode_len(self, n, expected):
        assert base64.decode_len(n) == expected

    def test_length_math(self):
        previous = 0
        for n in range(200):
            assert base64.decode_len(base64.encode_len(n)) >= n
            assert base64.encode_len(n) >= previous
            previous = base64.encode_len(n)


@pytest.mark.unit
class TestBase64Encode:

    @pytest.mark.parametrize("raw,text", VECTORS)
    def test_vectors(self, raw, text):
        assert base64.encode_to_string(raw) == text
        assert base64.encode_bytes(raw) == text.encode("ascii")

    def test_encode_str(self):
        assert base64.encode_str("hello") == "aGVsbG8="
        assert base64.encode_str("") == ""

    def test_every_symbol(self):
        assert base64.encode(ALL_VALUES) == base64.ENCODE_STD
        assert base64.encode(ALL_VALUES, base64.URL_ENCODING) == base64.ENCODE_URL

    def test_url_alphabet(self):
        assert base64.encode(b"\xfb\xff\xbf") == b"+/+/"
        assert base64.encode(b"\xfb\xff\xbf", base64.URL_ENCODING) == b"-_-_"
        assert base64.encode(b"\xfb\xff", base64.URL_ENCODING) == b"-_8="

    def test_encode_into_short_buffer_fails_fast(self):
        dst = bytearray(3)
        with pytest.raises(IndexError):
            base64.encode_into(dst, b"f")
        assert dst == bytearray(3)


@pytest.mark.unit
class TestBase64Decode:

    @pytest.mark.parametrize("raw,text", [v for v in VECTORS if v[0]])
    def test_vectors(self, raw, text):
        assert base64.decode_string(text) == raw

    def test_foo(self):
        assert base64.decode("Zm9v") == b"foo"

    def test_final_group_sizes(self):
        dst = bytearray(3)
        assert base64.decode_into(dst, "Zg==") == 1
        assert base64.decode_into(dst, "Zm8=") == 2
        assert base64.decode_into(dst, "Zm9v") == 3

    def test_every_symbol(self):
        assert base64.decode(base64.ENCODE_STD) == ALL_VALUES
        assert base64.decode(base64.ENCODE_URL, base64.URL_ENCODING) == ALL_VALUES

    def test_roundtrip_std(self, random_payloads):
        for data in random_payloads:
            encoded = base64.encode(data)
            assert encoded == std_base64.b64encode(data)
            if data:
                assert base64.decode(encoded) == data

    def test_roundtrip_url(self, random_payloads):
        for data in random_payloads:
            encoded = base64.encode(data, base64.URL_ENCODING)
            assert encoded == std_base64.urlsafe_b64encode(data)
            if data:
                assert base64.decode(encoded, base64.URL_ENCODING) == data


@pytest.mark.unit
class TestBase64Errors:

    def test_empty_input_rejected(self):
        with pytest.raises(InvalidLengthError) as exc_info:
            base64.decode("")
        assert exc_info.value.code == ErrorCode.INVALID_LENGTH
        assert exc_info.value.length == 0

    @pytest.mark.parametrize("text", ["Z", "Zg", "Zg=", "Zm9vY"])
    def test_not_multiple_of_four(self, text):
        with pytest.raises(InvalidLengthError):
            base64.decode(text)

    def test_length_checked_before_characters(self):
        with pytest.raises(InvalidLengthError):
            base64.decode("!!!")

    def test_invalid_byte(self):
        with pytest.raises(InvalidByteError) as exc_info:
            base64.decode("Zm9!")
        assert exc_info.value.byte == ord("!")
        assert exc_info.value.offset == 3

    def test_invalid_byte_in_leading_group(self):
        with pytest.raises(InvalidByteError) as exc_info:
            base64.decode("Z*9vYmFy")
        assert exc_info.value.offset == 1

    def test_url_symbols_rejected_by_std(self):
        with pytest.raises(InvalidByteError) as exc_info:
            base64.decode("-_-_")
        assert exc_info.value.byte == ord("-")
        with pytest.raises(InvalidByteError):
            base64.decode("+/+/", base64.URL_ENCODING)

    @pytest.mark.parametrize("text,offset", [
        ("====", 0),
        ("Z===", 1),
        ("Zg=A", 2),
        ("Zg==Zm9v", 2),
    ])
    def test_misplaced_padding(self, text, offset):
        with pytest.raises(InvalidByteError) as exc_info:
            base64.decode(text)
        assert exc_info.value.byte == ord("=")
        assert exc_info.value.offset == offset

    def test_non_ascii_text_reported_by_decoder(self):
        with pytest.raises(InvalidByteError) as exc_info:
            base64.decode("éZm")
        assert exc_info.value.byte == 0xC3
        assert exc_info.value.offset == 0
        assert exc_info.value.message.startswith("base64:")

    def test_earlier_ascii_error_beats_non_ascii(self):
        with pytest.raises(InvalidByteError) as exc_info:
            base64.decode("Z!é")
        assert exc_info.value.byte == ord("!")
        assert exc_info.value.offset == 1
