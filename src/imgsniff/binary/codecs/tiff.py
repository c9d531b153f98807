from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator

from imgsniff.binary.codecs.cursor import ByteOrder, Cursor
from imgsniff.errors import DimensionsNotFound, Malformed
from imgsniff.models.dimensions import Dimensions

logger = logging.getLogger(__name__)

BYTE_ORDERS: dict[bytes, ByteOrder] = {
    b"II": "little",  # Intel
    b"MM": "big",     # Motorola
}

TAG_IMAGE_WIDTH = 256
TAG_IMAGE_LENGTH = 257

TYPE_SHORT = 3

IFD_ENTRY_SIZE = 12


@dataclass(frozen=True)
class TiffIfdEntry:
    tag: int
    field_type: int
    count: int
    value_or_offset: int
    value_pos: int  # absolute position of the 4-byte value field

    @property
    def is_inline_short(self) -> bool:
        return self.field_type == TYPE_SHORT and self.count == 1


def read_byte_order(cur: Cursor) -> ByteOrder:
    """Detect II/MM and set it as the cursor's default byte order."""
    mark = cur.peek(2, at=0)
    order = BYTE_ORDERS.get(mark)
    if order is None:
        raise Malformed(f"invalid TIFF byte-order mark {mark.hex()}")
    cur.order = order
    return order


def iter_ifd_entries(cur: Cursor, ifd_offset: int) -> Iterator[TiffIfdEntry]:
    """
    Yield the 12-byte records of the IFD at ifd_offset:
    tag u16, type u16, count u32, value-or-offset u32 (cursor byte order).
    """
    n_entries = cur.u16(at=ifd_offset)
    logger.debug("TIFF IFD at %d has %d entries", ifd_offset, n_entries)
    for i in range(n_entries):
        base = ifd_offset + 2 + i * IFD_ENTRY_SIZE
        yield TiffIfdEntry(
            tag=cur.u16(at=base),
            field_type=cur.u16(at=base + 2),
            count=cur.u32(at=base + 4),
            value_or_offset=cur.u32(at=base + 8),
            value_pos=base + 8,
        )


def resolve_value(cur: Cursor, entry: TiffIfdEntry) -> int:
    """
    A single SHORT is packed into the first two bytes of the value field;
    anything else is read as a u32 at the offset the field points to.
    """
    if entry.is_inline_short:
        return cur.u16(at=entry.value_pos)
    return cur.u32(at=entry.value_or_offset)


def decode_tiff(cur: Cursor) -> Dimensions:
    order = read_byte_order(cur)
    ifd_offset = cur.u32(at=4)
    logger.debug("TIFF byte order=%s first IFD at %d", order, ifd_offset)

    width = height = 0
    for entry in iter_ifd_entries(cur, ifd_offset):
        if entry.tag == TAG_IMAGE_WIDTH:
            width = resolve_value(cur, entry)
        elif entry.tag == TAG_IMAGE_LENGTH:
            height = resolve_value(cur, entry)

    if width == 0 or height == 0:
        raise DimensionsNotFound(f"TIFF IFD lacks width/height (width={width}, height={height})")
    return Dimensions(width=width, height=height)
