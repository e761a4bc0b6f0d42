"""Per-axis delta decoding.

Each axis (latitude, longitude, third dimension) keeps its own running
integer. Encoded values are zigzagged deltas against the previous point
on the same axis:

    Lat0 Lng0 Z0 (Lat1-Lat0) (Lng1-Lng0) (Z1-Z0) ...
"""

from __future__ import annotations

from typing import NamedTuple

from flexpolyline._codec.varint import read_varint
from flexpolyline._constants import DEFAULT_MAX_VARINT_BITS
from flexpolyline.exceptions import InvalidEncodingError


class AxisResult(NamedTuple):
    """Scaled axis value and the cursor just past its varint."""

    value: float
    cursor: int


_INT64_SIGN_BIT = 1 << 63
_UINT64_RANGE = 1 << 64


def unzigzag(raw: int) -> int:
    """Map an unsigned zigzag value back to the signed integer.

    Odd values are negative: ``~raw >> 1`` (equal to ``-((raw + 1) >> 1)``).
    A 64-bit raw value with its top bit set is read as a signed 64-bit
    integer first, matching a signed 64-bit decoder; deltas then lie in
    ``[-2**62, 2**62 - 1]``.
    """
    if _INT64_SIGN_BIT <= raw < _UINT64_RANGE:
        raw -= _UINT64_RANGE
    if raw & 1:
        return ~raw >> 1
    return raw >> 1


class AxisDecoder:
    """Stateful decoder for one coordinate axis.

    Parameters
    ----------
    precision : int
        Decimal digits of the fixed-point values on this axis.
    max_bits : int
        Maximum varint width.
    """

    def __init__(self, precision: int, *, max_bits: int = DEFAULT_MAX_VARINT_BITS) -> None:
        self.precision = precision
        self.scale = 10**precision
        self.accumulator = 0
        self._max_bits = max_bits

    def decode_next(self, text: str, cursor: int) -> AxisResult:
        """Decode the next delta at *cursor* and return the updated axis value.

        Raises :class:`InvalidEncodingError` on a malformed varint or when the
        input ends before the value.
        """
        raw, cursor = read_varint(text, cursor, max_bits=self._max_bits)
        if raw is None:
            raise InvalidEncodingError("Unexpected end of input inside a coordinate group", position=cursor)
        self.accumulator += unzigzag(raw)
        return AxisResult(self.accumulator / self.scale, cursor)
