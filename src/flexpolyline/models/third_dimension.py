"""Third dimension kinds declared in the polyline header."""

from __future__ import annotations

import enum

from flexpolyline.exceptions import InvalidEncodingError


class ThirdDimension(enum.IntEnum):
    """Kind of the optional third coordinate axis.

    ``ABSENT`` means the encoded points carry only latitude and longitude.
    """

    ABSENT = 0
    LEVEL = 1
    ALTITUDE = 2
    ELEVATION = 3
    RESERVED1 = 4
    RESERVED2 = 5
    CUSTOM1 = 6
    CUSTOM2 = 7

    @classmethod
    def from_num(cls, value: int) -> ThirdDimension:
        """Return the member for a 3-bit header code.

        Raises :class:`InvalidEncodingError` for codes outside ``[0, 7]``.
        """
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidEncodingError(f"Unknown third dimension code: {value}") from exc

    @property
    def num(self) -> int:
        return int(self)


ThirdDimensionKind = ThirdDimension
