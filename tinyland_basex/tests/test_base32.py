"""Tests for the Crockford base32 encode/decode functions."""

import pytest

from tinyland_basex.base32 import (
    CROCKFORD_ALPHABET,
    b32decode,
    b32decode_str,
    b32encode,
    b32encode_str,
)
from tinyland_basex.errors import InvalidArgument, InvalidEncoding

SOURCE = b"TestString124567890FooBar!@#$%^&*()[]"
ENCODED = "AHJQ6X2KEHS6JVK764S38D9P6WW3JC26DXQM4RBJ45026915BRK2MA19BDEG"


# ---------------------------------------------------------------------------
# Round-trip tests
# ---------------------------------------------------------------------------


class TestBase32RoundTrip:
    """Verify that encode -> decode is identity for various inputs."""

    def test_empty_bytes(self):
        assert b32encode(b"") == ""
        assert b32decode("") == b""

    def test_blank_string_decodes_empty(self):
        assert b32decode(" \t\n") == b""

    def test_single_byte(self):
        for i in range(256):
            data = bytes([i])
            assert b32decode(b32encode(data)) == data

    def test_binary_blob(self):
        data = bytes(range(256))
        assert b32decode(b32encode(data)) == data

    def test_embedded_null_bytes(self):
        data = b"\x00\x00a\x00b\x00\x00"
        assert b32decode(b32encode(data)) == data

    def test_variable_lengths(self):
        for length in range(1, 32):
            data = bytes((i * 53 + length) % 256 for i in range(length))
            assert b32decode(b32encode(data)) == data

    def test_unicode_string(self):
        text = "ÆØÅ ЇєҐ €¥₴"
        assert b32decode_str(b32encode_str(text)) == text


# ---------------------------------------------------------------------------
# Known values
# ---------------------------------------------------------------------------


class TestBase32KnownValues:
    """Fixed vectors guarding the bit order and alphabet."""

    def test_regression_vector_encode(self):
        assert b32encode(SOURCE) == ENCODED

    def test_regression_vector_decode(self):
        assert b32decode(ENCODED) == SOURCE

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (b"\x00", "00"),
            (b"\xff", "ZW"),
            (b"T", "AG"),
            (b"\x00\x00\x00\x00\x00", "00000000"),
            (b"\xff\xff\xff\xff\xff", "ZZZZZZZZ"),
        ],
    )
    def test_known_encode(self, raw, expected):
        assert b32encode(raw) == expected

    @pytest.mark.parametrize("length", range(0, 12))
    def test_output_length_has_no_padding(self, length):
        assert len(b32encode(b"\xa5" * length)) == -(-length * 8 // 5)


# ---------------------------------------------------------------------------
# Lenient decoding
# ---------------------------------------------------------------------------


class TestBase32Lenience:
    """Aliases, case folding and ignored formatting characters."""

    def test_lowercase(self):
        assert b32decode(ENCODED.lower()) == SOURCE

    @pytest.mark.parametrize(
        "alias, canonical",
        [("O", "0"), ("o", "0"), ("I", "1"), ("i", "1"), ("L", "1"), ("l", "1")],
    )
    def test_aliases(self, alias, canonical):
        assert b32decode(alias * 8) == b32decode(canonical * 8)

    def test_ignored_characters(self):
        formatted = "AHJQ-6X2K EHS6\tJVK7\n64S3\r8D9P\v 6WW3\f JC26-DXQM4RBJ45026915BRK2MA19BDEG"
        assert b32decode(formatted) == SOURCE

    def test_hyphen_and_space_between_symbols(self):
        assert b32decode("A-B C") == b32decode("ABC")


# ---------------------------------------------------------------------------
# Error handling tests
# ---------------------------------------------------------------------------


class TestBase32Errors:
    """Verify that invalid inputs raise the expected exceptions."""

    @pytest.mark.parametrize("bad", ["U", "u", "!", "A_B", "é", "=="])
    def test_decode_rejects_invalid_char(self, bad):
        with pytest.raises(InvalidEncoding, match="Invalid base32 character"):
            b32decode(bad)

    @pytest.mark.parametrize("blank", ["\u00a0", "\u2003", "\u3000", "\x1c", " \u00a0 "])
    def test_unicode_whitespace_is_not_ignored(self, blank):
        with pytest.raises(InvalidEncoding):
            b32decode(blank)

    def test_encode_rejects_str(self):
        with pytest.raises(InvalidArgument):
            b32encode("text")  # type: ignore[arg-type]

    def test_decode_rejects_none(self):
        with pytest.raises(InvalidArgument):
            b32decode(None)  # type: ignore[arg-type]


class TestAlphabet:
    """Verify alphabet properties."""

    def test_length(self):
        assert len(CROCKFORD_ALPHABET) == 32
        assert len(set(CROCKFORD_ALPHABET)) == 32

    def test_excluded_letters(self):
        for ch in "ILOU":
            assert ch not in CROCKFORD_ALPHABET

    def test_output_within_alphabet(self):
        assert set(b32encode(bytes(range(256)))) <= set(CROCKFORD_ALPHABET)
