from __future__ import annotations
import logging

from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.errors import DimensionsNotFound, Malformed
from imgsniff.models.dimensions import Dimensions

logger = logging.getLogger(__name__)

# Only the first half of the 8-byte signature is checked.
PNG_MAGIC = b"\x89PNG"

# IHDR is always the first chunk: 8 signature + 4 length + 4 type, then width/height.
IHDR_WIDTH_OFF = 16
IHDR_HEIGHT_OFF = 20


def decode_png(cur: Cursor) -> Dimensions:
    """
    Read width/height straight out of IHDR at their fixed offsets.
    No generic chunk walk: a valid PNG always carries IHDR first.
    """
    magic = cur.peek(4, at=0)
    if magic != PNG_MAGIC:
        raise Malformed(f"invalid PNG signature {magic.hex()}")

    width = cur.u32(at=IHDR_WIDTH_OFF, order="big")
    height = cur.u32(at=IHDR_HEIGHT_OFF, order="big")
    logger.debug("PNG IHDR width=%d height=%d", width, height)

    if width == 0 or height == 0:
        raise DimensionsNotFound(f"PNG IHDR carries zero dimension ({width}x{height})")
    return Dimensions(width=width, height=height)
