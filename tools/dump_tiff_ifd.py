#!/usr/bin/env python3
import sys
from pathlib import Path
from imgsniff.binary.reader import load_bytes
from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.binary.codecs.tiff import iter_ifd_entries, read_byte_order, resolve_value, TAG_IMAGE_LENGTH, TAG_IMAGE_WIDTH

def main(path: Path):
    cur = Cursor(load_bytes(path))
    order = read_byte_order(cur)
    ifd = cur.u32(at=4)
    print(f"byte order: {order}, first IFD at {ifd}")
    for e in iter_ifd_entries(cur, ifd):
        line = (f"tag={e.tag:5d} type={e.field_type:2d} count={e.count:6d} "
                f"value/offset=0x{e.value_or_offset:08x} inline_short={'Y' if e.is_inline_short else 'n'}")
        if e.tag in (TAG_IMAGE_WIDTH, TAG_IMAGE_LENGTH):
            line += f"  -> {resolve_value(cur, e)}"
        print(line)

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: dump_tiff_ifd.py <file.tif>")
        sys.exit(1)
    main(Path(sys.argv[1]))
