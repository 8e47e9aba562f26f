"""
Order-preserving integer <-> string conversion.

Each alphabet lists its characters in ascending ASCII order, so for two
strings of equal length the lexicographic order matches the numeric order
of the integers they encode. Padding to a fixed width is left to the caller.
"""

from typing import Dict

from .exceptions import InvalidBitsPerCharError, InvalidGeohashError

BASE4_ALPHABET = "0123"
BASE16_ALPHABET = "0123456789abcdef"
# Not MIME base64: "@" and "_" are placed so that ASCII order equals digit order
BASE64_ALPHABET = "0123456789@ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"

# bits_per_char -> alphabet
ALPHABETS: Dict[int, str] = {
    2: BASE4_ALPHABET,
    4: BASE16_ALPHABET,
    6: BASE64_ALPHABET,
}

# Reverse lookup for decoding
_DECODE_TABLES: Dict[int, Dict[str, int]] = {
    bpc: {c: i for i, c in enumerate(alphabet)} for bpc, alphabet in ALPHABETS.items()
}


def get_alphabet(bits_per_char: int) -> str:
    """
    Get the coding alphabet for a number of bits per character.

    Args:
        bits_per_char: 2, 4 or 6

    Returns:
        Alphabet of size 2**bits_per_char

    Raises:
        InvalidBitsPerCharError: For any other value
    """
    try:
        return ALPHABETS[bits_per_char]
    except (KeyError, TypeError):
        raise InvalidBitsPerCharError(bits_per_char) from None


def encode_int(n: int, bits_per_char: int = 4) -> str:
    """
    Encode a non-negative integer as a string in base 2**bits_per_char.

    Example:
        >>> encode_int(255, 4)
        'ff'
    """
    alphabet = get_alphabet(bits_per_char)
    if n < 0:
        raise ValueError(f"Cannot encode negative integer {n}")

    base = len(alphabet)
    digits = []
    while True:
        n, digit = divmod(n, base)
        digits.append(alphabet[digit])
        if n == 0:
            break

    return "".join(reversed(digits))


def decode_int(code: str, bits_per_char: int = 4) -> int:
    """
    Decode a string produced by encode_int() back into an integer.

    Example:
        >>> decode_int('ff', 4)
        255
    """
    alphabet = get_alphabet(bits_per_char)
    lookup = _DECODE_TABLES[bits_per_char]

    result = 0
    for char in code:
        if char not in lookup:
            raise InvalidGeohashError(
                f"Invalid character {char!r} for base {len(alphabet)} geohash"
            )
        result = (result << bits_per_char) | lookup[char]

    return result
