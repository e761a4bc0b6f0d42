"""Header parsing: format version varint followed by the header bitfield varint."""

from __future__ import annotations

from flexpolyline._codec.varint import read_varint
from flexpolyline._constants import DEFAULT_MAX_VARINT_BITS, FORMAT_VERSION
from flexpolyline.exceptions import InvalidEncodingError, InvalidFormatVersionError
from flexpolyline.models.header import Header


def parse_header(text: str, cursor: int = 0, *, max_bits: int = DEFAULT_MAX_VARINT_BITS) -> tuple[Header, int]:
    """Parse the polyline header.

    Returns
    -------
    tuple[Header, int]
        The header and the cursor positioned on the first coordinate.

    Raises
    ------
    InvalidFormatVersionError
        If the version varint is not ``FORMAT_VERSION``.
    InvalidEncodingError
        If either varint is malformed or missing.
    """
    version, cursor = read_varint(text, cursor, max_bits=max_bits)
    if version is None:
        raise InvalidEncodingError("Missing format version", position=cursor)
    if version != FORMAT_VERSION:
        raise InvalidFormatVersionError(
            f"Invalid format version: expected {FORMAT_VERSION}, got {version}",
            version=version,
        )

    bitfield, cursor = read_varint(text, cursor, max_bits=max_bits)
    if bitfield is None:
        raise InvalidEncodingError("Missing header bitfield", position=cursor)

    return Header.from_bitfield(bitfield, format_version=version), cursor
