"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId is the store-assigned integer primary key
    - BlobName is an opaque filename inside the cache directory (never a path)
    - PHOTO_MEDIA_TYPES is the whitelist of extensions kept on stored blobs
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)
BlobName = NewType("BlobName", str)


# ─── Photo media types ───────────────────────────────────────────

DEFAULT_PHOTO_MEDIA_TYPE = "image/jpeg"

PHOTO_MEDIA_TYPES: dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "heic": "image/heic",
    "heif": "image/heif",
}


def photo_extension(filename: str | None) -> str:
    """Whitelisted lowercase extension of an uploaded filename, or ""."""
    if not filename or "." not in filename:
        return ""
    ext = filename.rsplit(".", 1)[1].strip().lower()
    return ext if ext in PHOTO_MEDIA_TYPES else ""


def photo_media_type(blob_name: str) -> str:
    """Content type served for a stored blob, derived from its extension."""
    return PHOTO_MEDIA_TYPES.get(photo_extension(blob_name), DEFAULT_PHOTO_MEDIA_TYPE)
