"""Polyline header model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flexpolyline._constants import (
    FORMAT_VERSION,
    MAX_PRECISION,
    PRECISION_BITS,
    PRECISION_MASK,
    THIRD_DIM_BITS,
    THIRD_DIM_MASK,
)
from flexpolyline.models.third_dimension import ThirdDimension


class Header(BaseModel):
    """Decoded polyline header.

    Parameters
    ----------
    format_version : int
        Encoding format version. Only ``FORMAT_VERSION`` is accepted.
    precision : int
        Decimal digits of the latitude/longitude fixed-point values.
    third_dimension : ThirdDimension
        Kind of the optional third axis.
    third_dimension_precision : int
        Decimal digits of the third axis fixed-point values.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    format_version: int = FORMAT_VERSION
    precision: int = Field(ge=0, le=MAX_PRECISION)
    third_dimension: ThirdDimension = ThirdDimension.ABSENT
    third_dimension_precision: int = Field(default=0, ge=0, le=MAX_PRECISION)

    @field_validator("format_version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != FORMAT_VERSION:
            raise ValueError(f"format version must be {FORMAT_VERSION}, got {value}")
        return value

    @property
    def has_third_dimension(self) -> bool:
        return self.third_dimension != ThirdDimension.ABSENT

    @classmethod
    def from_bitfield(cls, bitfield: int, *, format_version: int = FORMAT_VERSION) -> Header:
        """Split a raw header bitfield into its fields.

        Layout, least significant bits first: precision (4 bits), third
        dimension kind (3 bits), third dimension precision (4 bits).
        Bits above bit 10 are ignored.
        """
        precision = bitfield & PRECISION_MASK
        bitfield >>= PRECISION_BITS
        third_dimension = ThirdDimension.from_num(bitfield & THIRD_DIM_MASK)
        bitfield >>= THIRD_DIM_BITS
        return cls(
            format_version=format_version,
            precision=precision,
            third_dimension=third_dimension,
            third_dimension_precision=bitfield & PRECISION_MASK,
        )

    def to_bitfield(self) -> int:
        """Pack the header fields back into the raw bitfield."""
        return (
            self.precision
            | (int(self.third_dimension) << PRECISION_BITS)
            | (self.third_dimension_precision << (PRECISION_BITS + THIRD_DIM_BITS))
        )
