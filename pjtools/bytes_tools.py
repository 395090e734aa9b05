"""Helpers for converting and comparing raw byte buffers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

__all__ = ["bytes2hex", "hex2bytes", "byte2hex", "compare", "byte_swap"]


def _nibble(char: str) -> int:
    """Decode one hex digit; case-insensitive and lenient like the device code."""
    return (ord(char) % 32 + 9) % 25


def bytes2hex(data: Iterable[int], upper_case: bool = True) -> str:
    """Return the hexadecimal representation of ``data``, two digits per byte."""
    text = bytes(data).hex()
    return text.upper() if upper_case else text


def hex2bytes(hex_string: str, size: int) -> bytes:
    """Decode ``hex_string`` into exactly ``size`` bytes.

    Missing bytes are zero-filled, surplus digits are ignored.
    Raises ValueError for an empty or odd-length string or a non-positive size.
    """
    if not hex_string:
        raise ValueError("hex string is empty")
    if len(hex_string) % 2:
        raise ValueError("hex string must have an even number of digits")
    if size <= 0:
        raise ValueError("size must be positive")
    pairs = zip(hex_string[0::2], hex_string[1::2])
    decoded = bytes(
        (_nibble(high) * 16 + _nibble(low)) & 0xFF
        for high, low in islice(pairs, size)
    )
    return decoded.ljust(size, b"\0")


def byte2hex(byte: int) -> int:
    """Read a byte as a packed decimal number (0x42 -> 42); 0 if a digit exceeds 9."""
    text = bytes2hex(bytes([byte]))
    return int(text) if text.isdigit() else 0


def compare(buf1: bytes, buf2: bytes, size: int | None = None) -> bool:
    """Compare the first ``size`` items of two buffers, or the whole buffers."""
    if size is None:
        return bytes(buf1) == bytes(buf2)
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(buf1) or size > len(buf2):
        raise ValueError("size exceeds buffer length")
    return bytes(buf1[:size]) == bytes(buf2[:size])


def byte_swap(value: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    high = (value >> 8) & 0xFF
    low = value & 0xFF
    return (low << 8) | high