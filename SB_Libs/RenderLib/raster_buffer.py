"""
Mutable raster buffer for compositing.

A RasterBuffer wraps one RGBA Pillow image at the source image's native
resolution. The compositor performs every blur pass as read-modify-write
on this single buffer.

Classes:
    RasterBuffer: RGBA pixel buffer with sub-rectangle blur and outline drawing
"""

from typing import Any, Optional, Sequence, Tuple
import math

from SB_Libs.constants import OUTLINE_COLOR, OUTLINE_DASH, OUTLINE_WIDTH, RASTER_MODE
from SB_Libs.pillow_compat import ImageDraw
from SB_Libs.RenderLib.blur_filter import PixelBox, blur_box_in_place


def _dash_segments(start: float, end: float, dash: Sequence[int]):
    """Yield (from, to) spans of a dashed line from start to end."""
    on, off = dash
    position = start
    while position < end:
        yield position, min(position + on, end)
        position += on + off


class RasterBuffer:
    """RGBA raster with the pixel operations the compositor needs."""

    def __init__(self, image: Any):
        if not hasattr(image, "mode"):
            raise TypeError(f"Expected PIL Image, got {type(image)}")

        if image.mode != RASTER_MODE:
            image = image.convert(RASTER_MODE)
        self._image = image

    @property
    def image(self) -> Any:
        return self._image

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def copy(self) -> "RasterBuffer":
        return RasterBuffer(self._image.copy())

    def clip_box(self, x: float, y: float, width: float, height: float) -> Optional[PixelBox]:
        """
        Convert a float rectangle to the integer pixel box it covers.

        Edges are widened to whole pixels (floor/ceil) and clipped to the
        raster.

        Returns:
            (left, top, right, bottom), or None if nothing is inside the raster
        """
        left = max(0, math.floor(x))
        top = max(0, math.floor(y))
        right = min(self.width, math.ceil(x + width))
        bottom = min(self.height, math.ceil(y + height))

        if right <= left or bottom <= top:
            return None
        return (left, top, right, bottom)

    def apply_blur(self, x: float, y: float, width: float, height: float, strength: float) -> bool:
        """
        Blur the pixels under a rectangle in place.

        Returns:
            True if any pixels were blurred, False if the rectangle lies
            entirely outside the raster
        """
        box = self.clip_box(x, y, width, height)
        if box is None:
            return False

        blur_box_in_place(self._image, box, strength)
        return True

    def draw_dashed_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color=OUTLINE_COLOR,
        line_width: int = OUTLINE_WIDTH,
        dash: Sequence[int] = OUTLINE_DASH,
    ) -> None:
        """Stroke a dashed rectangle outline. Parts outside the raster are dropped."""
        draw = ImageDraw.Draw(self._image)
        left, top = x, y
        right, bottom = x + width, y + height

        for a, b in _dash_segments(left, right, dash):
            draw.line([(a, top), (b, top)], fill=color, width=line_width)
            draw.line([(a, bottom), (b, bottom)], fill=color, width=line_width)

        for a, b in _dash_segments(top, bottom, dash):
            draw.line([(left, a), (left, b)], fill=color, width=line_width)
            draw.line([(right, a), (right, b)], fill=color, width=line_width)
