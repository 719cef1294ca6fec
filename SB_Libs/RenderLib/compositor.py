"""
Region compositor.

Renders a frame from the base image, the ordered region list and an
optional live selection. Rendering never reads a previous frame: every call
starts from a fresh copy of the base image.

Classes:
    OutlineStyle: Appearance of the live selection outline
    Compositor: Renders base image + blur regions (+ outline)
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
import logging

from SB_Libs.constants import OUTLINE_COLOR, OUTLINE_DASH, OUTLINE_WIDTH
from SB_Libs.RegionEditLib.region_models import Region, SelectionDraft
from SB_Libs.RenderLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineStyle:
    color: Tuple[int, int, int, int] = OUTLINE_COLOR
    width: int = OUTLINE_WIDTH
    dash: Tuple[int, int] = OUTLINE_DASH


class Compositor:
    """
    Builds composite frames.

    Each region blurs whatever is already on the frame inside its
    rectangle, so a region painted after an overlapping one blurs the
    already-blurred pixels again.

    Example:
        >>> compositor = Compositor()
        >>> frame = compositor.render(base, regions)
        >>> preview = compositor.render(base, regions, live_selection=draft)
    """

    def __init__(self, outline_style: Optional[OutlineStyle] = None):
        self.outline_style = outline_style or OutlineStyle()

    def render(
        self,
        base: RasterBuffer,
        regions: Iterable[Region],
        live_selection: Optional[SelectionDraft] = None,
    ) -> RasterBuffer:
        """
        Composite a frame.

        Args:
            base: Decoded source image (not modified)
            regions: Regions in paint order
            live_selection: In-progress drag to outline, or None

        Returns:
            A new RasterBuffer at the base image's resolution
        """
        if not isinstance(base, RasterBuffer):
            raise TypeError(f"Expected RasterBuffer, got {type(base)}")

        frame = base.copy()

        for region in regions:
            if region.is_degenerate:
                continue
            if not frame.apply_blur(region.x, region.y, region.width, region.height,
                                    region.blur_strength):
                logger.debug("Region %s lies outside the image; skipped", region)

        if live_selection is not None:
            self._draw_outline(frame, live_selection)

        return frame

    def _draw_outline(self, frame: RasterBuffer, draft: SelectionDraft) -> None:
        x, y, width, height = draft.normalized_box()
        style = self.outline_style
        frame.draw_dashed_rect(x, y, width, height,
                               color=style.color, line_width=style.width, dash=style.dash)
