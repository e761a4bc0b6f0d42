"""Flexible polyline decoding.

An encoded polyline is a header followed by coordinate groups::

    [version][header bitfield][lat][lng][z if present] [lat][lng][z] ...

Every field is an unsigned varint. Coordinates are zigzagged deltas
against the previous point, scaled by ``10 ** precision``.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from typing import Any

from flexpolyline._codec.axis import AxisDecoder
from flexpolyline._codec.header import parse_header
from flexpolyline._redact import abbreviate_for_log
from flexpolyline.config import DecoderConfig
from flexpolyline.exceptions import FlexPolylineError, InvalidArgumentError
from flexpolyline.models.coordinate import CoordinateTriple
from flexpolyline.models.header import Header
from flexpolyline.models.third_dimension import ThirdDimension

_logger = logging.getLogger(__name__)


class DecoderState(enum.Enum):
    """Lifecycle of a :class:`PolylineDecoder` session."""

    START = "start"
    HEADER_PARSED = "header_parsed"
    DECODING_GROUP = "decoding_group"
    DONE = "done"
    FAILED = "failed"


def _require_text(text: Any) -> str:
    if not isinstance(text, str):
        raise InvalidArgumentError(f"Encoded polyline must be a string, got {type(text).__name__}")
    if not text.strip():
        raise InvalidArgumentError("Encoded polyline is empty")
    return text


class PolylineDecoder:
    """Single-use decoding session for one encoded polyline.

    The session owns its cursor and per-axis accumulators. Once it is done
    or has failed it cannot be resumed; create a new one instead.

    Parameters
    ----------
    text : str
        URL-safe encoded polyline.
    config : DecoderConfig or None
        Decoder settings. Defaults to ``DecoderConfig()``.
    """

    def __init__(self, text: str, *, config: DecoderConfig | None = None) -> None:
        self._text = _require_text(text)
        self._config = config or DecoderConfig()
        self.state = DecoderState.START
        self.cursor = 0
        self.header: Header | None = None

    def _fail(self, exc: FlexPolylineError) -> None:
        self.state = DecoderState.FAILED
        position = getattr(exc, "position", -1)
        _logger.debug(
            "Polyline decode failed at index %d: %s (input=%s)",
            position if position >= 0 else self.cursor,
            exc,
            abbreviate_for_log(self._text, max_string=self._config.log_preview_chars),
        )

    def read_header(self) -> Header:
        """Parse the header and move the cursor to the first coordinate."""
        if self.state is not DecoderState.START:
            raise FlexPolylineError(f"Header can only be read once (state={self.state.value})")
        try:
            self.header, self.cursor = parse_header(self._text, max_bits=self._config.max_varint_bits)
        except FlexPolylineError as exc:
            self._fail(exc)
            raise
        self.state = DecoderState.HEADER_PARSED
        _logger.debug(
            "Parsed polyline header: precision=%d third_dimension=%s third_dimension_precision=%d",
            self.header.precision,
            self.header.third_dimension.name,
            self.header.third_dimension_precision,
        )
        return self.header

    def _iter_points(self, header: Header) -> Iterator[CoordinateTriple]:
        max_bits = self._config.max_varint_bits
        lat_axis = AxisDecoder(header.precision, max_bits=max_bits)
        lng_axis = AxisDecoder(header.precision, max_bits=max_bits)
        z_axis = (
            AxisDecoder(header.third_dimension_precision, max_bits=max_bits) if header.has_third_dimension else None
        )

        text = self._text
        length = len(text)
        while self.cursor < length:
            lat, self.cursor = lat_axis.decode_next(text, self.cursor)
            lng, self.cursor = lng_axis.decode_next(text, self.cursor)
            z = 0.0
            if z_axis is not None:
                z, self.cursor = z_axis.decode_next(text, self.cursor)
            yield CoordinateTriple(lat=lat, lng=lng, z=z)

    def points(self) -> list[CoordinateTriple]:
        """Decode every coordinate group up to the end of input.

        Reads the header first if it has not been read yet. The list is
        only returned once the whole input has been consumed; the first
        decoding error is raised instead and the session is then ``FAILED``.
        """
        if self.state is DecoderState.START:
            self.read_header()
        if self.state is not DecoderState.HEADER_PARSED or self.header is None:
            raise FlexPolylineError(f"Decoder session cannot be resumed (state={self.state.value})")

        self.state = DecoderState.DECODING_GROUP
        try:
            result = list(self._iter_points(self.header))
        except FlexPolylineError as exc:
            self._fail(exc)
            raise

        self.state = DecoderState.DONE
        _logger.debug("Decoded %d polyline points from %d characters", len(result), len(self._text))
        return result


def decode(text: str, *, config: DecoderConfig | None = None) -> list[CoordinateTriple]:
    """Decode an encoded polyline into a list of coordinate triples.

    Parameters
    ----------
    text : str
        URL-safe encoded polyline.
    config : DecoderConfig or None
        Decoder settings.

    Returns
    -------
    list[CoordinateTriple]
        Decoded points. ``z`` is ``0.0`` when the polyline has no third
        dimension.

    Raises
    ------
    InvalidArgumentError
        If *text* is not a string or is blank.
    InvalidFormatVersionError
        If the version is not ``FORMAT_VERSION``.
    InvalidEncodingError
        On any malformed or truncated data.
    """
    return PolylineDecoder(text, config=config).points()


def get_header(text: str, *, config: DecoderConfig | None = None) -> Header:
    """Parse only the header of *text*."""
    return PolylineDecoder(text, config=config).read_header()


def get_third_dimension(text: str, *, config: DecoderConfig | None = None) -> ThirdDimension:
    """Return the third dimension kind declared in the header of *text*.

    No coordinate data is read.
    """
    return get_header(text, config=config).third_dimension


peek_third_dimension_kind = get_third_dimension
