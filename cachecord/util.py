from __future__ import annotations

import json
from base64 import b64encode
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = (
    "Json",
    "Msg",
    "loads", "dumps",
    "get_mime_type",
    "to_data_uri",
)

# Swappable json encoders and decoders to be used in the library
Json = dict[str, Any]
Msg = dict[str, Any]

loads: Callable[[str], Any] = json.loads # Any allows custom type without cast
dumps: Callable[[Json], str] = lambda dat: json.dumps(dat, separators=(',', ':'))

def get_mime_type(data: bytes) -> str:
    """Sniff the image mime type from the magic number of ``data``.

    Raises
    ------
    :exc:`ValueError`
        The image format is not supported by the API.
    """
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    elif data[:3] == b"\xff\xd8\xff" or data[6:10] in (b"JFIF", b"Exif"):
        return "image/jpeg"
    elif data.startswith((b"GIF87a", b"GIF89a")):
        return "image/gif"
    elif data.startswith(b"RIFF") and data[8:12] == b"WEBP":
        return "image/webp"
    else:
        raise ValueError("Unsupported image type given")

def to_data_uri(data: bytes) -> str:
    """Encode image bytes into a ``data:`` URI accepted by the API."""
    mime = get_mime_type(data)
    return f"data:{mime};base64," + b64encode(data).decode("ascii")
