"""colorapi: CSS-compatible color objects, color space conversion and parsing."""

from .colors.color import Color
from .spaces import ColorSpace, Coordinate
from .conversions import convert
from .css import parse_color, serialize_color
from .errors import (
    ColorError,
    ColorParseError,
    CoordinateCountError,
    UnknownColorSpaceError,
    UnknownCoordinateError,
)

__all__ = [
    # core
    "Color",
    "ColorSpace",
    "Coordinate",
    # functions
    "convert",
    "parse_color",
    "serialize_color",
    # errors
    "ColorError",
    "ColorParseError",
    "CoordinateCountError",
    "UnknownColorSpaceError",
    "UnknownCoordinateError",
]
