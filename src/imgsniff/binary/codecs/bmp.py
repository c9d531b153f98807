from __future__ import annotations
import logging

from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.errors import DimensionsNotFound
from imgsniff.models.dimensions import Dimensions

logger = logging.getLogger(__name__)

BMP_MAGIC = b"BM"

# 14-byte file header, then BITMAPINFOHEADER: biSize (4), biWidth (4), biHeight (4)
BI_WIDTH_OFF = 18
BI_HEIGHT_OFF = 22


def decode_bmp(cur: Cursor) -> Dimensions:
    """
    biWidth/biHeight are signed 32-bit little-endian. A negative height marks a
    top-down bitmap and is reported as-is.

    The "BM" signature is NOT validated; any 26+ byte buffer declared as BMP is
    read at the fixed DIB offsets.
    """
    height = cur.s32(at=BI_HEIGHT_OFF, order="little")  # bounds check covers the whole header
    width = cur.s32(at=BI_WIDTH_OFF, order="little")

    sig = cur.peek(2, at=0)
    if sig != BMP_MAGIC:
        # not validated; likely a latent bug
        logger.debug("BMP signature %s is not 'BM'; reading DIB fields anyway", sig.hex())
    logger.debug("BMP DIB width=%d height=%d", width, height)

    if width == 0 or height == 0:
        raise DimensionsNotFound(f"BMP DIB header carries zero dimension ({width}x{height})")
    return Dimensions(width=width, height=height)
