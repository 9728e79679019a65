# image_store/infrastructure/storage/mime.py
from __future__ import annotations

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES: dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "bmp": "image/bmp",
    "ico": "image/x-icon",
}


def resolve_mime_type(filename: str) -> str:
    name = (filename or "").lower()
    if "." not in name:
        return DEFAULT_MIME_TYPE
    ext = name.rsplit(".", 1)[1]
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)
