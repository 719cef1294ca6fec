"""
Image loading for Selective Blur.

Decodes encoded image bytes (PNG, JPG, BMP, ...) into an RGBA RasterBuffer.
Decoding is forced completely before returning so a truncated file fails
here and not later during compositing. EXIF orientation is applied, so the
raster has the upright size a viewer would show.

Functions:
    load_image_bytes: Decode an in-memory image payload
    load_image_file: Read and decode an image file
    get_supported_image_formats: List of supported file extensions
    is_supported_format: Check a path's extension
    image_file_filter: File dialog filter for the supported extensions
"""

from io import BytesIO
from pathlib import Path
from typing import List, Union
import logging

from SB_Libs.constants import SUPPORTED_STANDARD_IMAGES
from SB_Libs.pillow_compat import (
    DecompressionBombError,
    Image,
    ImageOps,
    UnidentifiedImageError,
)
from SB_Libs.RenderLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Raised when image data is malformed or in an unsupported format."""


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported standard image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: Union[str, Path]) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def image_file_filter() -> str:
    """Build an "Images (*.bmp *.gif ...)" filter string for file dialogs."""
    patterns = " ".join(f"*{ext}" for ext in get_supported_image_formats())
    return f"Images ({patterns})"


def load_image_bytes(data: bytes) -> RasterBuffer:
    """
    Decode an encoded image into a raster buffer.

    Animated formats contribute their first frame.

    Args:
        data: Encoded image bytes

    Returns:
        RGBA RasterBuffer at the image's native (EXIF-upright) resolution

    Raises:
        DecodeError: If data is empty, malformed, too large to decode
                     safely or not a supported format
    """
    if not data:
        raise DecodeError("Image data is empty")

    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            upright = ImageOps.exif_transpose(img)
            raster = RasterBuffer(upright.convert("RGBA"))
    except (UnidentifiedImageError, DecompressionBombError, OSError, ValueError, SyntaxError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    if raster.width == 0 or raster.height == 0:
        raise DecodeError(f"Image has no pixels: {raster.size}")

    logger.info("Decoded %dx%d image", raster.width, raster.height)
    return raster


def load_image_file(file_path: Union[str, Path]) -> RasterBuffer:
    """
    Read and decode an image file.

    Raises:
        DecodeError: If the extension is not supported, or the file cannot
                     be read or decoded
    """
    file_path = Path(file_path)
    if not is_supported_format(file_path):
        raise DecodeError(
            f"Unsupported image format '{file_path.suffix}'. "
            f"Supported: {', '.join(get_supported_image_formats())}"
        )

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise DecodeError(f"Failed to read image from {file_path}: {e}") from e

    return load_image_bytes(data)
