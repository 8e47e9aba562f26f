"""
Tests for the order-preserving integer codec.
"""

import pytest

from hilbert_geo.core.codec import (
    ALPHABETS,
    BASE16_ALPHABET,
    BASE64_ALPHABET,
    decode_int,
    encode_int,
    get_alphabet,
)
from hilbert_geo.core.exceptions import InvalidBitsPerCharError, InvalidGeohashError


class TestAlphabets:
    """Tests for the coding alphabets."""

    def test_alphabet_sizes(self) -> None:
        """Test that each alphabet has 2**bits_per_char characters."""
        for bits_per_char, alphabet in ALPHABETS.items():
            assert len(alphabet) == 2**bits_per_char
            assert len(set(alphabet)) == len(alphabet)

    def test_alphabets_are_sorted(self) -> None:
        """Test that character order equals digit order."""
        for alphabet in ALPHABETS.values():
            assert list(alphabet) == sorted(alphabet)

    def test_base64_is_not_mime(self) -> None:
        """Test the custom base64 alphabet layout."""
        assert BASE64_ALPHABET[10] == "@"
        assert BASE64_ALPHABET[37] == "_"
        assert "+" not in BASE64_ALPHABET
        assert "/" not in BASE64_ALPHABET

    def test_get_alphabet_invalid(self) -> None:
        """Test that unknown bits_per_char values are rejected."""
        with pytest.raises(InvalidBitsPerCharError):
            get_alphabet(3)
        with pytest.raises(InvalidBitsPerCharError):
            get_alphabet(None)


class TestEncodeInt:
    """Tests for encode_int()."""

    def test_single_hex_digits(self) -> None:
        """Test that 0-15 map to the matching base16 character."""
        for i in range(16):
            assert encode_int(i, 4) == BASE16_ALPHABET[i]

    def test_zero(self) -> None:
        """Test that zero encodes to a single zero character."""
        assert encode_int(0, 2) == "0"
        assert encode_int(0, 4) == "0"
        assert encode_int(0, 6) == "0"

    def test_multi_digit(self) -> None:
        """Test multi-character values in every base."""
        assert encode_int(255, 4) == "ff"
        assert encode_int(4, 2) == "10"
        assert encode_int(64, 6) == "10"
        assert encode_int(63, 6) == "z"

    def test_max_64_bit(self) -> None:
        """Test that the largest supported distance is exact."""
        assert encode_int(2**63 - 1, 4) == "7" + "f" * 15
        assert decode_int("7" + "f" * 15, 4) == 2**63 - 1

    def test_no_padding(self) -> None:
        """Test that encode_int does not pad."""
        assert encode_int(1, 4) == "1"

    def test_invalid_bits_per_char(self) -> None:
        """Test that the codec fails loudly instead of returning an empty string."""
        with pytest.raises(InvalidBitsPerCharError):
            encode_int(5, 8)

    def test_negative(self) -> None:
        """Test that negative integers are rejected."""
        with pytest.raises(ValueError):
            encode_int(-1, 4)


class TestDecodeInt:
    """Tests for decode_int()."""

    def test_inverse_of_encode(self) -> None:
        """Test decoding values produced by encode_int."""
        for bits_per_char in (2, 4, 6):
            for n in (0, 1, 7, 100, 12345, 2**40 + 3):
                assert decode_int(encode_int(n, bits_per_char), bits_per_char) == n

    def test_leading_zeros_ignored(self) -> None:
        """Test that padding does not change the value."""
        assert decode_int("000ff", 4) == 255

    def test_invalid_character(self) -> None:
        """Test that characters outside the alphabet are rejected."""
        with pytest.raises(InvalidGeohashError):
            decode_int("4", 2)
        with pytest.raises(InvalidGeohashError):
            decode_int("FF", 4)

    def test_invalid_bits_per_char(self) -> None:
        """Test that the codec fails loudly instead of returning zero."""
        with pytest.raises(InvalidBitsPerCharError):
            decode_int("ff", 5)

    def test_order_preserved(self) -> None:
        """Test that fixed-width strings sort like their integers."""
        for bits_per_char in (2, 4, 6):
            values = [0, 1, 2, 3, 9, 10, 11, 36, 37, 38, 63, 64, 1000, 4000]
            width = len(encode_int(max(values), bits_per_char))
            codes = [encode_int(v, bits_per_char).rjust(width, "0") for v in values]
            assert sorted(codes) == codes
