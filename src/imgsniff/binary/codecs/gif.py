from __future__ import annotations
import logging

from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.errors import DimensionsNotFound, Malformed
from imgsniff.models.dimensions import Dimensions

logger = logging.getLogger(__name__)

GIF_MAGIC = b"GIF"  # version ("87a"/"89a") is not checked


def decode_gif(cur: Cursor) -> Dimensions:
    """
    Logical Screen Descriptor follows the 6-byte signature+version:
    width u16 LE at 6, height u16 LE at 8.
    """
    magic = cur.peek(3, at=0)
    if magic != GIF_MAGIC:
        raise Malformed(f"invalid GIF signature {magic.hex()}")

    width = cur.u16(at=6, order="little")
    height = cur.u16(at=8, order="little")
    logger.debug("GIF screen descriptor width=%d height=%d", width, height)

    if width == 0 or height == 0:
        raise DimensionsNotFound(f"GIF screen descriptor carries zero dimension ({width}x{height})")
    return Dimensions(width=width, height=height)
