# tests/test_svg.py
import pytest

from imgsniff.errors import Malformed, Truncated
from imgsniff.xmlio.svg import parse_length, read_svg_dimensions

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


def svg(attrs: str, body: str = "<rect width='1' height='1'/>") -> bytes:
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<svg {SVG_NS} {attrs}>{body}</svg>'.encode("utf-8")


@pytest.mark.parametrize("w,h", [(1, 1), (640, 480), (65535, 65535)])
def test_width_height_attributes(w, h):
    dims = read_svg_dimensions(svg(f'width="{w}" height="{h}"'))
    assert (dims.width, dims.height) == (w, h)


def test_units_are_ignored():
    dims = read_svg_dimensions(svg('width="120.5px" height="50%"'))
    assert (dims.width, dims.height) == (120.5, 50.0)


def test_missing_attributes_default_to_zero():
    dims = read_svg_dimensions(svg('viewBox="0 0 100 40"'))
    assert (dims.width, dims.height) == (0, 0)


def test_without_namespace_or_declaration():
    dims = read_svg_dimensions(b"<svg width='3' height='4'/>")
    assert (dims.width, dims.height) == (3, 4)


def test_utf8_bom_and_non_ascii_content():
    data = "\ufeff<svg width='8' height='9'><title>caf\u00e9</title></svg>".encode("utf-8")
    dims = read_svg_dimensions(data)
    assert (dims.width, dims.height) == (8, 9)


def test_invalid_utf8():
    with pytest.raises(Malformed):
        read_svg_dimensions(b"<svg width='3' height='4'>\xff\xfe</svg>")


def test_cut_inside_utf8_sequence():
    data = "<svg width='3' height='4'><title>\u00e9".encode("utf-8")
    with pytest.raises(Truncated):
        read_svg_dimensions(data[:-1])


def test_not_xml():
    with pytest.raises(Malformed):
        read_svg_dimensions(b"<svg width='3' height='4'></g></svg>")


def test_root_must_be_svg():
    with pytest.raises(Malformed):
        read_svg_dimensions(b"<html width='3' height='4'/>")


def test_non_numeric_length():
    with pytest.raises(Malformed):
        read_svg_dimensions(b"<svg width='auto' height='4'/>")


@pytest.mark.parametrize("cut", [0, 40, 45, 80])
def test_truncated_document(cut):
    data = svg('width="640" height="480"')
    assert cut < len(data)
    with pytest.raises(Truncated):
        read_svg_dimensions(data[:cut])


@pytest.mark.parametrize("raw,expected", [
    (None, 0.0),
    ("10", 10.0),
    (" 2.5em", 2.5),
    ("1e2", 100.0),
    (".5", 0.5),
    ("-3px", -3.0),
    ("7e", 7.0),
])
def test_parse_length(raw, expected):
    assert parse_length(raw) == expected


def test_document_without_element():
    with pytest.raises(Malformed):
        read_svg_dimensions(b"<?xml version='1.0'?>\n<!-- only a comment -->")


def test_cut_right_after_root_start_tag():
    with pytest.raises(Truncated):
        read_svg_dimensions(b"<svg width='640' height='480'>")


def test_whole_numbers_come_back_as_int():
    dims = read_svg_dimensions(svg('width="640" height="480.0px"'))
    assert isinstance(dims.width, int) and isinstance(dims.height, int)
    assert dims.model_dump() == {"width": 640, "height": 480}
    assert isinstance(parse_length("2.5"), float)
