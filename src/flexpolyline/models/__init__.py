"""Data models for decoded polylines."""

from flexpolyline.models.coordinate import CoordinateTriple, LatLngZ
from flexpolyline.models.header import Header
from flexpolyline.models.third_dimension import ThirdDimension, ThirdDimensionKind

__all__ = [
    "CoordinateTriple",
    "Header",
    "LatLngZ",
    "ThirdDimension",
    "ThirdDimensionKind",
]
