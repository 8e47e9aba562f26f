"""
Exception types raised by the geohash codec.

All of them subclass ValueError so callers that only care about bad input
can keep catching the builtin.
"""


class HilbertGeoError(ValueError):
    """Base class for invalid geohash input."""

    pass


class InvalidBitsPerCharError(HilbertGeoError):
    """Raised when bits_per_char is not one of 2, 4 or 6."""

    def __init__(self, bits_per_char: object) -> None:
        self.bits_per_char = bits_per_char
        super().__init__(f"bits_per_char must be 2, 4 or 6, got {bits_per_char!r}")


class PrecisionOverflowError(HilbertGeoError):
    """Raised when precision * bits_per_char does not fit in 64 bits."""

    def __init__(self, precision: int, bits_per_char: int) -> None:
        self.precision = precision
        self.bits_per_char = bits_per_char
        super().__init__(
            f"Over 64 bits not supported (precision={precision}, "
            f"bits_per_char={bits_per_char}). Reduce 'precision' or "
            f"'bits_per_char' so their product is < 64"
        )


class InvalidGeohashError(HilbertGeoError):
    """Raised when a geohash string is empty or uses characters outside its alphabet."""

    pass
