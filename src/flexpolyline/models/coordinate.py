"""Coordinate triple model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CoordinateTriple(BaseModel):
    """A decoded point.

    Parameters
    ----------
    lat : float
        Latitude.
    lng : float
        Longitude.
    z : float
        Third dimension value, ``0.0`` when the polyline has none.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    lat: float
    lng: float
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.lat, self.lng, self.z)

    def __str__(self) -> str:
        return f"LatLngZ [lat={self.lat}, lng={self.lng}, z={self.z}]"


LatLngZ = CoordinateTriple
