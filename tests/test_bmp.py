# tests/test_bmp.py
import pytest

from imgsniff.binary.codecs.cursor import Cursor
from imgsniff.binary.codecs.bmp import decode_bmp
from imgsniff.errors import DimensionsNotFound, Truncated


def bmp(width: int, height: int, sig: bytes = b"BM") -> bytes:
    file_header = sig + (0).to_bytes(4, "little") + b"\x00" * 4 + (54).to_bytes(4, "little")
    info = (40).to_bytes(4, "little") + width.to_bytes(4, "little", signed=True) + height.to_bytes(4, "little", signed=True)
    return file_header + info + (1).to_bytes(2, "little") + (24).to_bytes(2, "little")


@pytest.mark.parametrize("w,h", [(1, 1), (1024, 768), (65535, 65535)])
def test_dib_dimensions(w, h):
    dims = decode_bmp(Cursor(bmp(w, h)))
    assert (dims.width, dims.height) == (w, h)


def test_negative_height_is_kept():
    dims = decode_bmp(Cursor(bmp(64, -40)))
    assert dims.height == -40
    assert dims.width == 64


def test_signature_is_not_validated():
    dims = decode_bmp(Cursor(bmp(5, 6, sig=b"XX")))
    assert (dims.width, dims.height) == (5, 6)


@pytest.mark.parametrize("cut", [0, 2, 18, 22, 25])
def test_shorter_than_26_bytes(cut):
    with pytest.raises(Truncated):
        decode_bmp(Cursor(bmp(5, 6)[:cut]))


def test_zero_width():
    with pytest.raises(DimensionsNotFound):
        decode_bmp(Cursor(bmp(0, 6)))
