"""
RenderLib - Raster side of the Selective Blur editor

This module provides the raster buffer, image decoding, the region
compositor and PNG/JPEG export.
"""

from SB_Libs.RenderLib.blur_filter import apply_gaussian_blur, blur_box_in_place
from SB_Libs.RenderLib.raster_buffer import RasterBuffer
from SB_Libs.RenderLib.compositor import Compositor, OutlineStyle
from SB_Libs.RenderLib.image_loader import (
    DecodeError,
    load_image_bytes,
    load_image_file,
    get_supported_image_formats,
    is_supported_format,
    image_file_filter,
)
from SB_Libs.RenderLib.exporter import (
    EncodeError,
    ExportFormat,
    parse_export_format,
    get_save_kwargs,
    export_raster,
    export_to_file,
    default_export_filename,
)

__all__ = [
    "apply_gaussian_blur",
    "blur_box_in_place",
    "RasterBuffer",
    "Compositor",
    "OutlineStyle",
    "DecodeError",
    "load_image_bytes",
    "load_image_file",
    "get_supported_image_formats",
    "is_supported_format",
    "image_file_filter",
    "EncodeError",
    "ExportFormat",
    "parse_export_format",
    "get_save_kwargs",
    "export_raster",
    "export_to_file",
    "default_export_filename",
]
