from __future__ import annotations
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .dimensions import Dimensions


class ImageReport(BaseModel):
    filename: str = ""
    media_type: str
    dimensions: Dimensions

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str, *, filename: str = "") -> "ImageReport":
        from ..binary.reader import parse_dimensions
        return cls(filename=filename, media_type=media_type, dimensions=parse_dimensions(data, media_type))

    @classmethod
    def from_path(cls, path: str | Path, media_type: Optional[str] = None) -> "ImageReport":
        """Read a file and sniff its dimensions.

        Without an explicit media type the file extension decides; an unknown
        extension raises UnsupportedFormat like any other unregistered type.
        """
        from ..binary.reader import guess_media_type, load_bytes
        p = Path(path)
        declared = media_type or guess_media_type(p.name)
        return cls.from_bytes(load_bytes(p), declared, filename=p.name)
