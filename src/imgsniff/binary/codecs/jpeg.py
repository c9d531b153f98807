from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.errors import DimensionsNotFound, Malformed
from imgsniff.models.dimensions import Dimensions

logger = logging.getLogger(__name__)


class Marker:
    SOF0 = 0xC0   # baseline
    SOF2 = 0xC2   # progressive
    SOS = 0xDA


# Only baseline/progressive Huffman frames are recognised; other SOFn fall through to SOS.
FRAME_MARKERS = (Marker.SOF0, Marker.SOF2)

# length (2) + precision (1) + height (2) + width (2)
MIN_FRAME_LENGTH = 7


@dataclass(frozen=True)
class JpegSegment:
    offset: int               # position of the 0xFF prefix
    marker: int
    length: Optional[int]     # includes the 2 length bytes; None for SOS

    @property
    def payload_start(self) -> int:
        return self.offset + 4


def iter_segments(cur: Cursor) -> Iterator[JpegSegment]:
    """
    Walk marker segments from just after SOI. Yields each segment in file
    order; SOS is yielded last (without a length) and ends the walk.
    The cursor lands on the next segment once the consumer resumes, so
    consumers read payload bytes with absolute offsets.
    """
    cur.seek(2)  # skip SOI
    while True:
        offset = cur.tell()
        prefix = cur.u8()
        if prefix != 0xFF:
            raise Malformed(f"expected marker prefix 0xFF at {offset}, got 0x{prefix:02x}")
        marker = cur.u8()
        if marker == Marker.SOS:
            yield JpegSegment(offset, marker, None)
            return

        length = cur.u16(order="big")
        if length < 2:
            raise Malformed(f"segment 0x{marker:02x} at {offset} has invalid length {length}")
        yield JpegSegment(offset, marker, length)
        cur.seek(offset + 4)
        cur.skip(length - 2)


def decode_jpeg(cur: Cursor) -> Dimensions:
    """
    SOF0/SOF2 payload: precision (1), height (2 BE), width (2 BE).
    Reaching SOS first means the header section ended without a frame.
    """
    for seg in iter_segments(cur):
        logger.debug("JPEG segment 0x%02x at %d length=%s", seg.marker, seg.offset, seg.length)
        if seg.marker == Marker.SOS:
            raise DimensionsNotFound("reached start of scan without a frame header")
        if seg.marker in FRAME_MARKERS:
            if seg.length < MIN_FRAME_LENGTH:
                raise Malformed(f"frame segment at {seg.offset} too short ({seg.length} bytes)")
            start = seg.payload_start
            _precision = cur.u8(at=start)
            height = cur.u16(at=start + 1, order="big")
            width = cur.u16(at=start + 3, order="big")
            if width == 0 or height == 0:
                raise DimensionsNotFound(f"JPEG frame header carries zero dimension ({width}x{height})")
            return Dimensions(width=width, height=height)

    # iter_segments only returns after yielding SOS
    raise DimensionsNotFound("no frame header in JPEG")
