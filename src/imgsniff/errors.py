from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    UNSUPPORTED_FORMAT = "unsupported_format"
    MALFORMED = "malformed"
    TRUNCATED = "truncated"
    DIMENSIONS_NOT_FOUND = "dimensions_not_found"


class DimensionError(ValueError):
    """Base for every failure raised while sniffing image dimensions."""
    kind: ErrorKind


class UnsupportedFormat(DimensionError):
    kind = ErrorKind.UNSUPPORTED_FORMAT


class Malformed(DimensionError):
    kind = ErrorKind.MALFORMED


class Truncated(DimensionError):
    kind = ErrorKind.TRUNCATED


class DimensionsNotFound(DimensionError):
    kind = ErrorKind.DIMENSIONS_NOT_FOUND
