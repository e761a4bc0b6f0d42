"""flexpolyline - Decoder for the flexible polyline coordinate encoding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("flexpolyline")
except PackageNotFoundError:
    __version__ = "0+local"
from flexpolyline._constants import FORMAT_VERSION
from flexpolyline.config import DecoderConfig
from flexpolyline.decoder import (
    DecoderState,
    PolylineDecoder,
    decode,
    get_header,
    get_third_dimension,
    peek_third_dimension_kind,
)
from flexpolyline.exceptions import (
    FlexPolylineConfigError,
    FlexPolylineError,
    InvalidArgumentError,
    InvalidEncodingError,
    InvalidFormatVersionError,
)
from flexpolyline.models import (
    CoordinateTriple,
    Header,
    LatLngZ,
    ThirdDimension,
    ThirdDimensionKind,
)

__all__ = [
    "__version__",
    "FORMAT_VERSION",
    "CoordinateTriple",
    "DecoderConfig",
    "DecoderState",
    "FlexPolylineConfigError",
    "FlexPolylineError",
    "Header",
    "InvalidArgumentError",
    "InvalidEncodingError",
    "InvalidFormatVersionError",
    "LatLngZ",
    "PolylineDecoder",
    "ThirdDimension",
    "ThirdDimensionKind",
    "decode",
    "get_header",
    "get_third_dimension",
    "peek_third_dimension_kind",
]
