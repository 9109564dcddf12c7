"""Domain Types: photo extension whitelist and media type mapping."""

from inventory_service.core.domain_types import (
    DEFAULT_PHOTO_MEDIA_TYPE, photo_extension, photo_media_type,
)


def test_photo_extension_whitelists_image_types():
    assert photo_extension("cat.PNG") == "png"
    assert photo_extension("archive.tar.jpeg") == "jpeg"


def test_photo_extension_rejects_unknown_or_missing():
    assert photo_extension("evil.html") == ""
    assert photo_extension("noext") == ""
    assert photo_extension(None) == ""
    assert photo_extension("") == ""


def test_photo_media_type_defaults_to_jpeg():
    assert photo_media_type("0f3a9c") == DEFAULT_PHOTO_MEDIA_TYPE
    assert photo_media_type("0f3a9c.png") == "image/png"
    assert photo_media_type("0f3a9c.webp") == "image/webp"
