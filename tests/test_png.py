# tests/test_png.py
import pytest

from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.binary.codecs.png import decode_png
from imgsniff.errors import DimensionsNotFound, Malformed, Truncated


def png(width: int, height: int) -> bytes:
    ihdr = width.to_bytes(4, "big") + height.to_bytes(4, "big") + b"\x08\x06\x00\x00\x00"
    return b"\x89PNG\r\n\x1a\n" + (13).to_bytes(4, "big") + b"IHDR" + ihdr + b"\x00" * 4


@pytest.mark.parametrize("w,h", [(1, 1), (800, 600), (65535, 1), (70000, 3)])
def test_ihdr_dimensions(w, h):
    dims = decode_png(Cursor(png(w, h)))
    assert (dims.width, dims.height) == (w, h)


def test_only_first_four_signature_bytes_are_checked():
    data = bytearray(png(10, 20))
    data[4:8] = b"XXXX"
    dims = decode_png(Cursor(bytes(data)))
    assert (dims.width, dims.height) == (10, 20)


def test_bad_signature():
    data = bytearray(png(10, 20))
    data[1] = ord("J")
    with pytest.raises(Malformed):
        decode_png(Cursor(bytes(data)))


@pytest.mark.parametrize("cut", [0, 3, 16, 20, 23])
def test_shorter_than_24_bytes(cut):
    with pytest.raises(Truncated):
        decode_png(Cursor(png(10, 20)[:cut]))


def test_exactly_24_bytes_is_enough():
    dims = decode_png(Cursor(png(10, 20)[:24]))
    assert dims.height == 20


def test_zero_width():
    with pytest.raises(DimensionsNotFound):
        decode_png(Cursor(png(0, 20)))
