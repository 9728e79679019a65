import pytest

from image_store.infrastructure.storage.mime import DEFAULT_MIME_TYPE, resolve_mime_type


@pytest.mark.unit
@pytest.mark.parametrize(
    "filename, expected",
    [
        ("photo.jpg", "image/jpeg"),
        ("photo.jpeg", "image/jpeg"),
        ("PHOTO.JPG", "image/jpeg"),
        ("icon.png", "image/png"),
        ("anim.gif", "image/gif"),
        ("pic.webp", "image/webp"),
        ("logo.svg", "image/svg+xml"),
        ("old.bmp", "image/bmp"),
        ("favicon.ico", "image/x-icon"),
        ("archive.tar.png", "image/png"),
        ("data.xyz", DEFAULT_MIME_TYPE),
        ("README", DEFAULT_MIME_TYPE),
        ("trailingdot.", DEFAULT_MIME_TYPE),
        ("", DEFAULT_MIME_TYPE),
    ],
)
def test_resolve_mime_type(filename, expected):
    assert resolve_mime_type(filename) == expected
