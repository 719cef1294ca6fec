"""
Display-space to image-space coordinate conversion.

Pointer positions arrive relative to the top-left of the canvas as shown on
screen. The canvas is the image drawn at display_scale * zoom_factor, so
dividing by that product yields image pixels. No clamping is done: points
outside the image stay outside.
"""

from SB_Libs.RegionEditLib.region_models import Point


def _effective_scale(display_scale: float, zoom_factor: float) -> float:
    scale = display_scale * zoom_factor
    if scale <= 0:
        raise ValueError(
            f"effective scale must be > 0, got {display_scale} * {zoom_factor}"
        )
    return scale


def to_image_space(display_point: Point, display_scale: float, zoom_factor: float) -> Point:
    """
    Convert a canvas-relative display point to image pixels.

    Args:
        display_point: Pointer position relative to the on-screen canvas
        display_scale: Fit-to-container scale
        zoom_factor: User zoom factor

    Returns:
        Point in image-pixel coordinates

    Raises:
        ValueError: If display_scale * zoom_factor is not positive
    """
    scale = _effective_scale(display_scale, zoom_factor)
    return Point(display_point.x / scale, display_point.y / scale)


def to_display_space(image_point: Point, display_scale: float, zoom_factor: float) -> Point:
    """Inverse of to_image_space."""
    scale = _effective_scale(display_scale, zoom_factor)
    return Point(image_point.x * scale, image_point.y * scale)


class CoordinateMapper:
    """Converts points using the live scale of a viewport controller."""

    def __init__(self, viewport):
        self.viewport = viewport

    def to_image_space(self, display_point: Point) -> Point:
        return to_image_space(display_point, self.viewport.display_scale, self.viewport.zoom_factor)

    def to_display_space(self, image_point: Point) -> Point:
        return to_display_space(image_point, self.viewport.display_scale, self.viewport.zoom_factor)
