"""Custom exception hierarchy for flexpolyline."""

from __future__ import annotations


class FlexPolylineError(Exception):
    """Base exception for all flexpolyline errors."""


class FlexPolylineConfigError(FlexPolylineError):
    """Invalid decoder configuration."""


class InvalidArgumentError(FlexPolylineError, ValueError):
    """Input is ``None``, not a string, empty or whitespace only."""


class InvalidFormatVersionError(FlexPolylineError):
    """The version varint does not match the supported format version."""

    def __init__(self, message: str, *, version: int) -> None:
        self.version = version
        super().__init__(message)


class InvalidEncodingError(FlexPolylineError):
    """Malformed encoded text.

    Raised for a character outside the alphabet, a varint truncated by the
    end of input while its continuation flag is still set, a varint wider
    than the configured bit width, or a missing header field.

    ``position`` is the index of the offending character in the input
    (the input length when the text ended too early).
    """

    def __init__(self, message: str, *, position: int = -1) -> None:
        self.position = position
        super().__init__(message)
