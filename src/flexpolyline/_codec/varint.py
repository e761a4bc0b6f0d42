"""Unsigned variable-length integer reader.

Every character carries 5 data bits (``0x1F``) and a continuation flag
(``0x20``). Groups are little-endian: the first character holds bits 0-4,
the next one bits 5-9, and so on.
"""

from __future__ import annotations

from typing import NamedTuple

from flexpolyline._codec.alphabet import decode_char
from flexpolyline._constants import CONTINUATION_FLAG, DATA_MASK, DEFAULT_MAX_VARINT_BITS, GROUP_BITS
from flexpolyline.exceptions import InvalidEncodingError


class VarintResult(NamedTuple):
    """Decoded value and the cursor just past it.

    ``value`` is ``None`` when the cursor was already at the end of input.
    """

    value: int | None
    cursor: int


def read_varint(text: str, cursor: int, *, max_bits: int = DEFAULT_MAX_VARINT_BITS) -> VarintResult:
    """Read one unsigned varint from *text* starting at *cursor*.

    Parameters
    ----------
    text : str
        Encoded polyline.
    cursor : int
        Index of the first character of the varint.
    max_bits : int
        Maximum width of the decoded value.

    Returns
    -------
    VarintResult
        The value and the index of the next unread character. The value is
        ``None`` if *cursor* already pointed at the end of *text*.

    Raises
    ------
    InvalidEncodingError
        On a character outside the alphabet, a varint cut off by the end of
        input, or a value wider than *max_bits*.
    """
    shift = 0
    result = 0
    length = len(text)

    while cursor < length:
        value = decode_char(text[cursor])
        if value < 0:
            raise InvalidEncodingError(f"Invalid character {text[cursor]!r} at index {cursor}", position=cursor)
        cursor += 1
        result |= (value & DATA_MASK) << shift
        if not value & CONTINUATION_FLAG:
            if result >> max_bits:
                raise InvalidEncodingError(f"Varint exceeds {max_bits} bits at index {cursor - 1}", position=cursor - 1)
            return VarintResult(result, cursor)
        shift += GROUP_BITS
        if shift >= max_bits:
            raise InvalidEncodingError(f"Varint exceeds {max_bits} bits at index {cursor - 1}", position=cursor - 1)

    if shift > 0:
        raise InvalidEncodingError("Truncated varint at end of input", position=length)
    return VarintResult(None, cursor)
