#!/usr/bin/env python3
import sys
from pathlib import Path
from imgsniff.binary.reader import load_bytes
from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.binary.codecs.jpeg import FRAME_MARKERS, Marker, iter_segments

def main(path: Path):
    cur = Cursor(load_bytes(path))
    for seg in iter_segments(cur):
        line = f"@{seg.offset:08d} marker=0x{seg.marker:02x} length={seg.length}"
        if seg.marker in FRAME_MARKERS:
            start = seg.payload_start
            line += f"  precision={cur.u8(at=start)} height={cur.u16(at=start + 1)} width={cur.u16(at=start + 3)}"
        elif seg.marker == Marker.SOS:
            line += "  (start of scan, header ends)"
        print(line)

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: dump_jpeg_segments.py <file.jpg>")
        sys.exit(1)
    main(Path(sys.argv[1]))
