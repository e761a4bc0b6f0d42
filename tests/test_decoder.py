from __future__ import annotations

import logging

import pytest

from flexpolyline import (
    FORMAT_VERSION,
    CoordinateTriple,
    DecoderConfig,
    DecoderState,
    FlexPolylineError,
    InvalidArgumentError,
    InvalidEncodingError,
    InvalidFormatVersionError,
    PolylineDecoder,
    ThirdDimension,
    decode,
    get_header,
    get_third_dimension,
    peek_third_dimension_kind,
)

ENCODING_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

ROUTE_2D = "BFoz5xJ67i1B1B7PzIhaxL7Y"
ROUTE_2D_POINTS = [
    (50.10228, 8.69821, 0.0),
    (50.10201, 8.69567, 0.0),
    (50.10063, 8.6915, 0.0),
    (50.09878, 8.68752, 0.0),
]
ROUTE_3D = "BlBoz5xJ67i1BU1B7PUzIhaUxL7YU"
ROUTE_3D_POINTS = [
    (50.10228, 8.69821, 10.0),
    (50.10201, 8.69567, 20.0),
    (50.10063, 8.6915, 30.0),
    (50.09878, 8.68752, 40.0),
]


def _encode_unsigned(value: int) -> str:
    chars: list[str] = []
    while value > 0x1F:
        chars.append(ENCODING_ALPHABET[(value & 0x1F) | 0x20])
        value >>= 5
    chars.append(ENCODING_ALPHABET[value])
    return "".join(chars)


def _encode_signed(value: int) -> str:
    return _encode_unsigned(~(value << 1) if value < 0 else value << 1)


def _encode(points: list[tuple[int, ...]], precision: int, kind: ThirdDimension, third_precision: int) -> str:
    """Encode already-scaled integer points."""
    bitfield = precision | (int(kind) << 4) | (third_precision << 7)
    parts = [_encode_unsigned(FORMAT_VERSION), _encode_unsigned(bitfield)]
    last = [0, 0, 0]
    for point in points:
        for axis, value in enumerate(point):
            parts.append(_encode_signed(value - last[axis]))
            last[axis] = value
    return "".join(parts)


def _as_tuples(points: list[CoordinateTriple]) -> list[tuple[float, float, float]]:
    return [point.as_tuple() for point in points]


# ------------------------------------------------------------------
# decode
# ------------------------------------------------------------------


class TestDecode:
    def test_single_point(self) -> None:
        assert decode("BFUU") == [CoordinateTriple(lat=0.0001, lng=0.0001, z=0.0)]

    def test_two_dimensional_route(self) -> None:
        assert _as_tuples(decode(ROUTE_2D)) == ROUTE_2D_POINTS

    def test_three_dimensional_route(self) -> None:
        assert _as_tuples(decode(ROUTE_3D)) == ROUTE_3D_POINTS

    def test_third_dimension_precision(self) -> None:
        # precision 5, ELEVATION, third dimension precision 2
        assert decode("B1JUUsJ") == [CoordinateTriple(lat=0.0001, lng=0.0001, z=1.5)]

    def test_absent_third_dimension_is_zero(self) -> None:
        assert all(point.z == 0.0 for point in decode(ROUTE_2D))

    def test_header_only_yields_no_points(self) -> None:
        assert decode("BF") == []
        assert decode("BlB") == []

    def test_is_deterministic(self) -> None:
        assert decode(ROUTE_3D) == decode(ROUTE_3D)

    def test_negative_coordinates(self) -> None:
        points = [(-3374000, -15121000, -120), (-3374500, -15120000, 35)]
        text = _encode(points, 5, ThirdDimension.LEVEL, 1)
        assert _as_tuples(decode(text)) == [(-33.74, -151.21, -12.0), (-33.745, -151.2, 3.5)]

    @pytest.mark.parametrize("precision", [0, 6, 15])
    def test_scales_by_precision(self, precision: int) -> None:
        text = _encode([(123456789, -987654321)], precision, ThirdDimension.ABSENT, 0)
        assert _as_tuples(decode(text)) == [(123456789 / 10**precision, -987654321 / 10**precision, 0.0)]


class TestDecodeErrors:
    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_input(self, text: str) -> None:
        with pytest.raises(InvalidArgumentError):
            decode(text)

    def test_none_input(self) -> None:
        with pytest.raises(InvalidArgumentError):
            decode(None)  # type: ignore[arg-type]

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode("")

    @pytest.mark.parametrize("text", ["AFUU", "CFUU", "DF"])
    def test_unsupported_version(self, text: str) -> None:
        with pytest.raises(InvalidFormatVersionError):
            decode(text)

    def test_truncated_data_character(self) -> None:
        with pytest.raises(InvalidEncodingError, match="Truncated"):
            decode("BFl")

    def test_incomplete_group(self) -> None:
        with pytest.raises(InvalidEncodingError, match="Unexpected end of input"):
            decode("BFUUU")

    def test_missing_third_dimension_value(self) -> None:
        with pytest.raises(InvalidEncodingError):
            decode("BlBUU")

    @pytest.mark.parametrize(("text", "position"), [("BFU.", 3), ("BFUU=", 4), ("BFUU ", 4), ("B#UU", 1)])
    def test_invalid_character(self, text: str, position: int) -> None:
        with pytest.raises(InvalidEncodingError) as exc_info:
            decode(text)
        assert exc_info.value.position == position

    def test_all_errors_share_base_class(self) -> None:
        for text in ("", "CF", "BFl"):
            with pytest.raises(FlexPolylineError):
                decode(text)

    def test_config_limits_varint_width(self) -> None:
        with pytest.raises(InvalidEncodingError, match="exceeds 16 bits"):
            decode(ROUTE_2D, config=DecoderConfig(max_varint_bits=16))


# ------------------------------------------------------------------
# Header helpers
# ------------------------------------------------------------------


class TestThirdDimensionPeek:
    def test_header_only(self) -> None:
        assert get_third_dimension("BlB") is ThirdDimension.ALTITUDE

    def test_ignores_coordinate_data(self) -> None:
        # trailing garbage is never read
        assert peek_third_dimension_kind("BlB???") is ThirdDimension.ALTITUDE
        assert get_third_dimension(ROUTE_2D) is ThirdDimension.ABSENT

    def test_unsupported_version(self) -> None:
        with pytest.raises(InvalidFormatVersionError):
            get_third_dimension("ClB")

    def test_truncated_header(self) -> None:
        with pytest.raises(InvalidEncodingError):
            get_third_dimension("Bl")

    def test_get_header(self) -> None:
        header = get_header("B1JUUsJ")
        assert header.precision == 5
        assert header.third_dimension is ThirdDimension.ELEVATION
        assert header.third_dimension_precision == 2


# ------------------------------------------------------------------
# PolylineDecoder session
# ------------------------------------------------------------------


class TestPolylineDecoder:
    def test_state_transitions(self) -> None:
        session = PolylineDecoder("BFUU")
        assert session.state is DecoderState.START
        session.read_header()
        assert session.state is DecoderState.HEADER_PARSED
        assert session.cursor == 2
        points = session.points()
        assert len(points) == 1
        assert session.state is DecoderState.DONE
        assert session.cursor == 4

    def test_consumes_entire_input(self) -> None:
        session = PolylineDecoder(ROUTE_3D)
        session.points()
        assert session.cursor == len(ROUTE_3D)

    def test_failure_is_terminal(self) -> None:
        session = PolylineDecoder("BFUUl")
        with pytest.raises(InvalidEncodingError):
            session.points()
        assert session.state is DecoderState.FAILED
        with pytest.raises(FlexPolylineError, match="cannot be resumed"):
            session.points()

    def test_done_session_cannot_be_reused(self) -> None:
        session = PolylineDecoder("BFUU")
        session.points()
        with pytest.raises(FlexPolylineError, match="cannot be resumed"):
            session.points()
        with pytest.raises(FlexPolylineError, match="only be read once"):
            session.read_header()

    def test_header_failure_is_terminal(self) -> None:
        session = PolylineDecoder("CF")
        with pytest.raises(InvalidFormatVersionError):
            session.read_header()
        assert session.state is DecoderState.FAILED

    def test_failing_input_returns_no_points(self) -> None:
        session = PolylineDecoder("BFUUUUl")
        result = None
        with pytest.raises(InvalidEncodingError, match="Truncated"):
            result = session.points()
        assert result is None
        assert session.state is DecoderState.FAILED

    def test_points_returns_a_complete_list(self) -> None:
        points = PolylineDecoder(ROUTE_2D).points()
        assert isinstance(points, list)
        assert _as_tuples(points) == ROUTE_2D_POINTS

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_session_is_invalid_argument(self, text: str) -> None:
        with pytest.raises(InvalidArgumentError, match="empty"):
            PolylineDecoder(text)

    @pytest.mark.parametrize("text", ["", " "])
    def test_blank_header_peek_is_invalid_argument(self, text: str) -> None:
        with pytest.raises(InvalidArgumentError):
            get_third_dimension(text)
        with pytest.raises(InvalidArgumentError):
            get_header(text)

    def test_logs_header_and_failures(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="flexpolyline.decoder"):
            decode("BFUU")
            with pytest.raises(InvalidEncodingError):
                decode("BFUU" + "U" * 200 + ".", config=DecoderConfig(log_preview_chars=8))
        assert "Parsed polyline header: precision=5" in caplog.text
        assert "Decoded 1 polyline points" in caplog.text
        assert "Polyline decode failed" in caplog.text
        assert "BFUUUUUU…<truncated" in caplog.text

    def test_failure_log_reports_error_position(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="flexpolyline.decoder"):
            with pytest.raises(InvalidEncodingError):
                decode("BFUUl")
        assert "Polyline decode failed at index 5" in caplog.text
