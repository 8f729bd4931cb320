from __future__ import annotations

# Widest representation handled; matches a 64-bit machine word.
MAX_BIT_WIDTH = 64

_BIT_CHARS = frozenset("01")


class CodecError(ValueError):
    pass


class InvalidFormatError(CodecError):
    """Bit string is empty or holds characters other than '0' and '1'."""


class InvalidSizeError(CodecError):
    """Requested bit width is zero or negative."""


class OutOfRangeError(CodecError):
    """Value does not fit the requested bit width."""


class BitWidthOverflowError(CodecError):
    """Bit width exceeds the supported maximum."""


def _check_width(size: int, max_width: int) -> None:
    if size <= 0:
        raise InvalidSizeError(f"size must be greater than 0, got {size}")
    if size > max_width:
        raise BitWidthOverflowError(f"size {size} exceeds supported maximum of {max_width} bits")


def _mask(size: int) -> int:
    return (1 << size) - 1


def _signed_from_uint(v: int, size: int) -> int:
    """Interpret a `size`-bit unsigned as signed two's complement."""
    sign = 1 << (size - 1)
    return v - (1 << size) if (v & sign) else v


def representable_range(size: int, *, max_width: int = MAX_BIT_WIDTH) -> tuple[int, int]:
    """Return (min_negative, max_positive) for a `size`-bit two's complement value."""
    _check_width(size, max_width)
    half = 1 << (size - 1)
    return -half, half - 1


def decode(bits: str, *, max_width: int = MAX_BIT_WIDTH) -> int:
    """
    Decode an MSB-first two's complement bit string.

    The leftmost bit is the sign bit: "0101" -> 5, "1101" -> -3.
    Raises InvalidFormatError for anything that is not a non-empty run of
    0/1 characters and BitWidthOverflowError past `max_width` bits.
    """
    if not isinstance(bits, str) or not bits or not _BIT_CHARS.issuperset(bits):
        raise InvalidFormatError(f"not a bit string: {bits!r}")
    size = len(bits)
    if size > max_width:
        raise BitWidthOverflowError(f"{size}-bit input exceeds supported maximum of {max_width} bits")
    return _signed_from_uint(int(bits, 2), size)


def encode(value: int, size: int, *, max_width: int = MAX_BIT_WIDTH) -> str:
    """
    Encode `value` as a two's complement bit string of exactly `size` characters.

    Negative values are the ones' complement of the magnitude plus one,
    masked back to `size` bits so the result always keeps its full width.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {type(value).__name__}")
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be int, got {type(size).__name__}")

    lo, hi = representable_range(size, max_width=max_width)
    if value > hi or value < lo:
        raise OutOfRangeError(f"{value} does not fit in {size} bits (range {lo}..{hi})")

    mask = _mask(size)
    if value >= 0:
        raw = value
    else:
        ones = ~(-value) & mask
        raw = (ones + 1) & mask
    return format(raw, f"0{size}b")
