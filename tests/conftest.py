"""
Pytest configuration and shared fixtures for Selective Blur tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

from io import BytesIO
import struct
import zlib

import pytest
from PIL import Image, ImageDraw

EXIF_ORIENTATION = 0x0112


def make_checkerboard(width: int = 100, height: int = 100, cell: int = 10) -> Image.Image:
    """
    Build an RGBA checkerboard so blurring visibly changes pixels.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        cell: Square size in pixels

    Returns:
        RGBA PIL Image of black and white squares
    """
    image = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    draw = ImageDraw.Draw(image)
    for top in range(0, height, cell):
        for left in range(0, width, cell):
            if (left // cell + top // cell) % 2:
                draw.rectangle([left, top, left + cell - 1, top + cell - 1], fill=(0, 0, 0, 255))
    return image


def encode_png(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def _png_chunk(chunk_type: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(chunk_type + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + chunk_type + payload + struct.pack(">I", crc)


def encode_png_header(width: int, height: int) -> bytes:
    """
    Build a PNG that declares a size in its IHDR but carries no pixel data.

    Pillow reads the size before decoding, so this is enough to trigger its
    image size limit without allocating anything.
    """
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IEND", b"")
    )


def encode_jpeg_with_orientation(width: int, height: int, orientation: int) -> bytes:
    """Encode a JPEG whose EXIF Orientation tag is set to orientation."""
    exif = Image.Exif()
    exif[EXIF_ORIENTATION] = orientation
    buffer = BytesIO()
    Image.new("RGB", (width, height), "green").save(buffer, format="JPEG", exif=exif.tobytes())
    return buffer.getvalue()


@pytest.fixture
def checkerboard():
    """Provide a 100x100 RGBA checkerboard image."""
    return make_checkerboard()


@pytest.fixture
def checkerboard_png(checkerboard):
    """
    Provide the checkerboard encoded as PNG bytes.

    Returns:
        PNG payload of a 100x100 image
    """
    return encode_png(checkerboard)


@pytest.fixture
def wide_png():
    """Provide a 200x100 PNG payload."""
    return encode_png(make_checkerboard(200, 100))
