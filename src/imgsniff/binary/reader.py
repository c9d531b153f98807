from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Callable, Dict, Union

from .codecs.cursor import Cursor
from .codecs.bmp import decode_bmp
from .codecs.gif import decode_gif
from .codecs.jpeg import decode_jpeg
from .codecs.png import decode_png
from .codecs.tiff import decode_tiff

from imgsniff.errors import UnsupportedFormat
from imgsniff.models.common import EXTENSIONS, MediaType
from imgsniff.models.dimensions import Dimensions
from imgsniff.xmlio.svg import read_svg_dimensions

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# -----------------------------
# Helpers
# -----------------------------

def load_bytes(inp: Union[str, Path, BytesLike]) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    return Path(str(inp)).read_bytes()


def _cursor_decoder(decode: Callable[[Cursor], Dimensions]) -> Callable[[BytesLike], Dimensions]:
    def run(data: BytesLike) -> Dimensions:
        return decode(Cursor(data))
    run.__name__ = decode.__name__
    return run


# -----------------------------
# Dispatch
# -----------------------------

DECODERS: Dict[str, Callable[[BytesLike], Dimensions]] = {
    MediaType.JPEG.value: _cursor_decoder(decode_jpeg),
    MediaType.PNG.value: _cursor_decoder(decode_png),
    MediaType.GIF.value: _cursor_decoder(decode_gif),
    MediaType.BMP.value: _cursor_decoder(decode_bmp),
    MediaType.TIFF.value: _cursor_decoder(decode_tiff),
    MediaType.SVG.value: read_svg_dimensions,
}


def parse_dimensions(data: BytesLike, media_type: str) -> Dimensions:
    """
    Sniff width/height from the header of an image declared as media_type.

    The declared type is trusted: bytes are never inspected to pick a
    different parser, and an unregistered type fails before the buffer
    is touched.
    """
    key = media_type.value if isinstance(media_type, MediaType) else media_type
    decode = DECODERS.get(key)
    if decode is None:
        logger.debug("no parser registered for %r", media_type)
        raise UnsupportedFormat(f"Unsupported image format: {media_type!r}")
    logger.debug("parsing %d bytes as %s with %s", len(data), key, decode.__name__)
    return decode(data)


def guess_media_type(filename: str) -> str:
    """Map a file extension to a registered media type."""
    suffix = PurePath(filename).suffix.lower()
    try:
        return EXTENSIONS[suffix].value
    except KeyError:
        raise UnsupportedFormat(f"cannot infer an image media type from {filename!r}") from None
