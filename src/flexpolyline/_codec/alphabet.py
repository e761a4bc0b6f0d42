"""Alphabet table for the URL-safe polyline characters."""

from __future__ import annotations

from flexpolyline._constants import ALPHABET_FIRST, ALPHABET_LAST, DECODING_TABLE, INVALID_CHAR


def decode_char(char: str) -> int:
    """Return the 6-bit value of *char*, or ``-1`` when it is not in the alphabet."""
    code = ord(char)
    if code < ALPHABET_FIRST or code > ALPHABET_LAST:
        return INVALID_CHAR
    return DECODING_TABLE[code - ALPHABET_FIRST]
