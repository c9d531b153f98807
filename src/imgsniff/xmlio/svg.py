from __future__ import annotations
import logging
import re
import xml.etree.ElementTree as ET
from xml.parsers.expat import errors as expat_errors

from imgsniff.errors import Malformed, Truncated
from imgsniff.models.dimensions import Dimensions

logger = logging.getLogger(__name__)

# expat errors raised when the document simply stops early
_TRUNCATION_CODES = frozenset(
    expat_errors.codes[msg]
    for msg in (
        expat_errors.XML_ERROR_NO_ELEMENTS,
        expat_errors.XML_ERROR_UNCLOSED_TOKEN,
        expat_errors.XML_ERROR_PARTIAL_CHAR,
    )
)
_NO_ELEMENTS = expat_errors.codes[expat_errors.XML_ERROR_NO_ELEMENTS]

# Leading decimal number; trailing units ("px", "%", "em") are ignored.
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_length(value: str | None) -> int | float:
    """
    Interpret an SVG width/height attribute the way a browser's parseFloat
    does: "120", "120.5px" and "50%" give 120, 120.5 and 50. Whole numbers
    come back as int. A missing attribute is 0.
    """
    if value is None:
        return 0
    m = _LEADING_NUMBER.match(value)
    if m is None:
        raise Malformed(f"SVG length {value!r} is not a number")
    number = float(m.group(1))
    return int(number) if number.is_integer() else number


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        if e.reason == "unexpected end of data":
            raise Truncated(f"SVG ends inside a UTF-8 sequence at byte {e.start}") from e
        raise Malformed(f"SVG is not valid UTF-8: {e.reason} at byte {e.start}") from e


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def read_svg_dimensions(data: bytes) -> Dimensions:
    """
    Take width/height from the root <svg> element's attributes.

    viewBox is not consulted, so an SVG without explicit width/height
    reports 0 for the missing values.
    """
    text = _decode_text(bytes(data))
    parser = ET.XMLPullParser(events=("start",))
    root = None

    def first_start(current):
        for _, el in parser.read_events():
            if current is None:
                current = el
        return current

    try:
        parser.feed(text)
        root = first_start(root)
        parser.close()
        root = first_start(root)
    except ET.ParseError as e:
        # "no element found" with no root opened and a closing '>' is a complete
        # document that simply has no element (e.g. only a comment)
        ends_early = e.code != _NO_ELEMENTS or root is not None or not text.rstrip().endswith(">")
        if e.code in _TRUNCATION_CODES and ends_early:
            raise Truncated(f"SVG document ends early: {e}") from e
        raise Malformed(f"SVG is not well-formed XML: {e}") from e

    if _local_name(root.tag) != "svg":
        raise Malformed(f"root element is <{_local_name(root.tag)}>, not <svg>")

    width = parse_length(root.get("width"))
    height = parse_length(root.get("height"))
    logger.debug("SVG root width=%r height=%r -> %sx%s", root.get("width"), root.get("height"), width, height)
    return Dimensions(width=width, height=height)
