"""Writing rendered images as BMP files."""

from __future__ import annotations

import struct
from pathlib import Path

_HEADER_SIZE = 54
_INFO_SIZE = 40
_BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = 4


def encode_bmp(data: bytes, width: int, height: int) -> bytes:
    """Encode rows of BGRA pixels, top row first, as a bottom-up BMP image.

    The file size field is computed for 3 bytes per pixel while the pixel
    data itself keeps 4 bytes per pixel.
    """
    line = width * _BYTES_PER_PIXEL
    if width <= 0 or height <= 0 or len(data) != line * height:
        raise ValueError("pixel data does not match the image size")
    padding = (4 - (width * _BYTES_PER_PIXEL) % 4) % 4
    size = _HEADER_SIZE + (3 * width + padding) * height
    header = bytearray(_HEADER_SIZE)
    header[0:2] = b"BM"
    struct.pack_into("<I", header, 2, size & 0xFFFFFFFF)
    header[10] = _HEADER_SIZE
    header[14] = _INFO_SIZE
    struct.pack_into("<I", header, 18, width & 0xFFFFFFFF)
    struct.pack_into("<I", header, 22, height & 0xFFFFFFFF)
    header[26] = 1
    header[28] = _BITS_PER_PIXEL
    pad = bytes(padding)
    rows = (
        data[row * line:(row + 1) * line] + pad
        for row in reversed(range(height))
    )
    return bytes(header) + b"".join(rows)


def save_bmp(path: str | Path, data: bytes, width: int, height: int) -> None:
    """Write the image to a BMP file, replacing any existing file."""
    Path(path).write_bytes(encode_bmp(data, width, height))