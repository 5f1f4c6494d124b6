"""File checks and supported image formats."""

from __future__ import annotations

import os

UNKNOWN_FORMAT = "Unknown format"

SUPPORTED_FORMATS = {
    "png": "Portable Network Graphics",
    "jpg": "JPEG Image",
    "jpeg": "JPEG Image",
    "bmp": "Bitmap Image",
    "tiff": "Tagged Image File Format",
    "webp": "WebP Image",
}


def file_exists(path):
    """Return True if the path exists."""
    if path is None:
        return False
    return os.path.exists(path)


def file_size(path):
    """Return the size of the file in bytes; raise OSError if it cannot be read."""
    if path is None:
        raise TypeError("path must not be None")
    return os.stat(path).st_size


def _extension(path):
    text = str(path)
    if "." not in text:
        return None
    return text.rpartition(".")[2].lower()


def is_format_supported(path):
    """Return True if the name's extension is a supported image format."""
    if path is None:
        return False
    ext = _extension(path)
    return ext is not None and ext in SUPPORTED_FORMATS


def format_description(path):
    """Return the description of the name's image format, or "Unknown format"."""
    if path is None:
        return None
    ext = _extension(path)
    if ext is None:
        return UNKNOWN_FORMAT
    return SUPPORTED_FORMATS.get(ext, UNKNOWN_FORMAT)