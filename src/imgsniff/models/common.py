from __future__ import annotations
from enum import Enum


class MediaType(str, Enum):
    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    BMP = "image/bmp"
    TIFF = "image/tiff"
    SVG = "image/svg+xml"


# File extension -> declared media type; only consulted by callers that have a filename.
EXTENSIONS = {
    ".jpg": MediaType.JPEG,
    ".jpeg": MediaType.JPEG,
    ".png": MediaType.PNG,
    ".gif": MediaType.GIF,
    ".bmp": MediaType.BMP,
    ".tif": MediaType.TIFF,
    ".tiff": MediaType.TIFF,
    ".svg": MediaType.SVG,
}
