"""Base64 and data-URL encoding of media payloads."""

from __future__ import annotations

import base64
from typing import Optional

DEFAULT_VIDEO_MIME = "video/mp4"


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: str) -> bytes:
    return base64.b64decode(text)


def to_data_url(
    data: bytes,
    mime_type: Optional[str] = None,
    default_mime: str = DEFAULT_VIDEO_MIME,
) -> str:
    """Embed ``data`` in a ``data:<mime>;base64,<payload>`` URL."""
    return f"data:{mime_type or default_mime};base64,{encode_base64(data)}"
