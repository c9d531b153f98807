from __future__ import annotations
import struct
from typing import Literal, Optional

from imgsniff.errors import Truncated

ByteOrder = Literal["big", "little"]

_PREFIX = {"big": ">", "little": "<"}


class Cursor:
    __slots__ = ("buf", "pos", "order")

    def __init__(self, data: bytes | bytearray | memoryview, pos: int = 0, order: ByteOrder = "big"):
        self.buf = memoryview(data).cast("B")
        self.order = order
        self.pos = 0
        self.seek(pos)

    def __len__(self) -> int: return len(self.buf)
    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos

    def seek(self, pos: int) -> None:
        if not (0 <= pos <= len(self.buf)):
            raise Truncated(f"seek to {pos} outside buffer of {len(self.buf)} bytes")
        self.pos = pos

    def skip(self, n: int) -> None: self.seek(self.pos + n)

    def _span(self, n: int, at: Optional[int]) -> tuple[int, int]:
        start = self.pos if at is None else at
        end = start + n
        if start < 0 or end > len(self.buf):
            raise Truncated(f"underrun: need {n} at {start}, buffer is {len(self.buf)} bytes")
        return start, end

    def take(self, n: int) -> bytes:
        start, end = self._span(n, None)
        self.pos = end
        return self.buf[start:end].tobytes()

    def peek(self, n: int, at: Optional[int] = None) -> bytes:
        start, end = self._span(n, at)
        return self.buf[start:end].tobytes()

    # fixed-width reads; at=None reads at pos and advances, otherwise absolute and non-advancing
    def _unpack(self, code: str, n: int, at: Optional[int], order: Optional[ByteOrder]):
        start, end = self._span(n, at)
        value = struct.unpack(_PREFIX[order or self.order] + code, self.buf[start:end])[0]
        if at is None:
            self.pos = end
        return value

    def u8(self, at: Optional[int] = None) -> int:
        return self._unpack("B", 1, at, None)

    def u16(self, at: Optional[int] = None, order: Optional[ByteOrder] = None) -> int:
        return self._unpack("H", 2, at, order)

    def u32(self, at: Optional[int] = None, order: Optional[ByteOrder] = None) -> int:
        return self._unpack("I", 4, at, order)

    def s32(self, at: Optional[int] = None, order: Optional[ByteOrder] = None) -> int:
        return self._unpack("i", 4, at, order)
