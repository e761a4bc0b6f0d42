"""Low-level decoding primitives for the flexible polyline format."""

from __future__ import annotations

from flexpolyline._codec.alphabet import decode_char
from flexpolyline._codec.axis import AxisDecoder, AxisResult, unzigzag
from flexpolyline._codec.header import parse_header
from flexpolyline._codec.varint import VarintResult, read_varint

__all__ = [
    "AxisDecoder",
    "AxisResult",
    "VarintResult",
    "decode_char",
    "parse_header",
    "read_varint",
    "unzigzag",
]
