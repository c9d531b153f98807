from __future__ import annotations
from pydantic import BaseModel


class Dimensions(BaseModel):
    # int for the binary formats (BMP height may be negative), float for SVG
    width: int | float
    height: int | float
