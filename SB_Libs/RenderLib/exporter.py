"""
Export of composited frames.

Encodes a RasterBuffer as PNG or JPEG bytes, or writes it to a file. The
caller is responsible for passing a frame rendered without the live
selection outline.

Classes:
    ExportFormat: Supported output encodings
    EncodeError: Raised when the encoder fails

Functions:
    parse_export_format: Map a user format name to ExportFormat
    get_save_kwargs: Pillow Image.save() kwargs for a format
    export_raster: Encode a raster into bytes
    export_to_file: Encode a raster and write it to disk
    default_export_filename: Download filename for a format
"""

from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

from SB_Libs.constants import DEFAULT_JPEG_QUALITY, EXPORT_FILE_STEM
from SB_Libs.RenderLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


class EncodeError(OSError):
    """Raised when a frame cannot be encoded or written."""


class ExportFormat(Enum):
    PNG = "png"
    JPEG = "jpeg"

    @property
    def pil_format(self) -> str:
        return self.name

    @property
    def extension(self) -> str:
        return f".{self.value}"


def parse_export_format(name: Union[str, ExportFormat]) -> ExportFormat:
    """
    Map a format name ('png', 'jpeg', 'jpg', case-insensitive) to ExportFormat.

    Raises:
        ValueError: If the name is not a supported export format
    """
    if isinstance(name, ExportFormat):
        return name

    normalized = str(name).strip().lower().lstrip(".")
    # PIL uses "JPEG" not "JPG"
    if normalized == "jpg":
        normalized = "jpeg"

    try:
        return ExportFormat(normalized)
    except ValueError:
        raise ValueError(
            f"Unsupported export format: {name}. Valid formats: png, jpeg"
        ) from None


def get_save_kwargs(fmt: ExportFormat, quality: int = DEFAULT_JPEG_QUALITY) -> Dict[str, Any]:
    """Get PIL Image.save() kwargs based on format."""
    kwargs: Dict[str, Any] = {"format": fmt.pil_format}

    if fmt is ExportFormat.JPEG:
        kwargs["quality"] = max(1, min(100, quality))

    return kwargs


def default_export_filename(fmt: Union[str, ExportFormat]) -> str:
    return f"{EXPORT_FILE_STEM}.{parse_export_format(fmt).value}"


def export_raster(
    raster: RasterBuffer,
    fmt: Union[str, ExportFormat],
    quality: int = DEFAULT_JPEG_QUALITY,
) -> bytes:
    """
    Encode a raster.

    Args:
        raster: Frame to encode
        fmt: PNG or JPEG
        quality: JPEG quality 1-100 (ignored for PNG)

    Returns:
        Encoded image bytes

    Raises:
        TypeError: If raster is not a RasterBuffer
        ValueError: If fmt is not supported
        EncodeError: If the encoder fails
    """
    if not isinstance(raster, RasterBuffer):
        raise TypeError(f"Expected RasterBuffer, got {type(raster)}")

    fmt = parse_export_format(fmt)
    kwargs = get_save_kwargs(fmt, quality)

    image = raster.image
    # JPEG has no alpha channel
    if fmt is ExportFormat.JPEG and image.mode == "RGBA":
        image = image.convert("RGB")

    buffer = BytesIO()
    try:
        image.save(buffer, **kwargs)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"Failed to encode image as {fmt.pil_format}: {e}") from e

    payload = buffer.getvalue()
    logger.info("Exported %dx%d frame as %s (%d bytes)",
                raster.width, raster.height, fmt.pil_format, len(payload))
    return payload


def export_to_file(
    raster: RasterBuffer,
    output_path: Union[str, Path],
    fmt: Optional[Union[str, ExportFormat]] = None,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> Path:
    """
    Encode a raster and write it to disk.

    Args:
        raster: Frame to encode
        output_path: Destination file
        fmt: PNG or JPEG; inferred from the file suffix when None
        quality: JPEG quality 1-100

    Returns:
        Path that was written

    Raises:
        ValueError: If no supported format is given or inferable
        EncodeError: If encoding or writing fails
    """
    output_path = Path(output_path)
    if fmt is None:
        fmt = parse_export_format(output_path.suffix)

    payload = export_raster(raster, fmt, quality)

    try:
        output_path.write_bytes(payload)
    except OSError as e:
        raise EncodeError(f"Failed to save image to {output_path}: {e}") from e

    return output_path
