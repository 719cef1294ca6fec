"""
Viewport scale and zoom for the editor canvas.

The canvas raster always has the image's native resolution. Only its
on-screen size changes: it is fitted into the container by aspect ratio and
then multiplied by the user zoom factor.

Classes:
    ViewportController: Owns fit scale, zoom factor and the display size
"""

from typing import Optional, Tuple
import logging

from SB_Libs.constants import (
    DEFAULT_ZOOM,
    MAX_ZOOM,
    MIN_ZOOM,
    ZOOM_DECIMALS,
    ZOOM_STEP,
)

logger = logging.getLogger(__name__)


def fit_scale(image_size: Tuple[int, int], container_size: Tuple[int, int]) -> float:
    """
    Compute the aspect-fit scale of an image inside a container.

    Width-fit is used when the image is relatively wider than the container,
    height-fit otherwise.

    Args:
        image_size: (width, height) of the image in pixels
        container_size: (width, height) of the container in display pixels

    Returns:
        Display pixels per image pixel

    Raises:
        ValueError: If any dimension is not positive
    """
    img_w, img_h = image_size
    cont_w, cont_h = container_size

    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"image size must be positive, got {image_size}")
    if cont_w <= 0 or cont_h <= 0:
        raise ValueError(f"container size must be positive, got {container_size}")

    image_aspect = img_w / img_h
    container_aspect = cont_w / cont_h

    if image_aspect > container_aspect:
        return cont_w / img_w
    return cont_h / img_h


def clamp_zoom(value: float) -> float:
    """Clamp a zoom factor to MIN_ZOOM..MAX_ZOOM and snap it to one decimal."""
    return round(max(MIN_ZOOM, min(MAX_ZOOM, value)), ZOOM_DECIMALS)


class ViewportController:
    """
    Tracks image size, container size and zoom.

    Container and zoom changes made before an image is known are kept and
    take effect as soon as set_image_size() is called.
    """

    def __init__(self, container_size: Optional[Tuple[int, int]] = None):
        self._image_size: Optional[Tuple[int, int]] = None
        self._container_size: Optional[Tuple[int, int]] = container_size
        self._zoom_factor = DEFAULT_ZOOM

    @property
    def image_size(self) -> Optional[Tuple[int, int]]:
        return self._image_size

    @property
    def container_size(self) -> Optional[Tuple[int, int]]:
        return self._container_size

    @property
    def zoom_factor(self) -> float:
        return self._zoom_factor

    @property
    def zoom_percent(self) -> int:
        return int(round(self._zoom_factor * 100))

    @property
    def display_scale(self) -> float:
        """Fit scale, or 1.0 while the image or container size is unknown."""
        if self._image_size is None or self._container_size is None:
            return 1.0
        return fit_scale(self._image_size, self._container_size)

    @property
    def effective_scale(self) -> float:
        return self.display_scale * self._zoom_factor

    def display_size(self) -> Tuple[int, int]:
        """On-screen canvas size in whole display pixels."""
        if self._image_size is None:
            return (0, 0)

        scale = self.effective_scale
        img_w, img_h = self._image_size
        return (int(round(img_w * scale)), int(round(img_h * scale)))

    def set_image_size(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got ({width}, {height})")
        self._image_size = (width, height)

    def set_container_size(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"container size must be positive, got ({width}, {height})")
        self._container_size = (width, height)

    def set_zoom(self, value: float) -> float:
        self._zoom_factor = clamp_zoom(value)
        logger.debug("Zoom set to %.1f", self._zoom_factor)
        return self._zoom_factor

    def adjust_zoom(self, delta: float) -> float:
        return self.set_zoom(self._zoom_factor + delta)

    def zoom_in(self) -> float:
        return self.adjust_zoom(ZOOM_STEP)

    def zoom_out(self) -> float:
        return self.adjust_zoom(-ZOOM_STEP)

    def reset_zoom(self) -> float:
        return self.set_zoom(DEFAULT_ZOOM)
