"""
Drag selection state machine.

Tracks one in-progress rectangle drag (Idle -> Dragging -> Idle) in
image-pixel space and turns it into a Region when the drag ends.
"""

from enum import Enum
from typing import Optional
import logging

from SB_Libs.RegionEditLib.region_models import Point, Region, SelectionDraft

logger = logging.getLogger(__name__)


class SelectionState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class SelectionSession:
    """
    Tracks the start and live point of a drag.

    Example:
        >>> session = SelectionSession()
        >>> session.begin(Point(10, 10))
        >>> session.update(Point(2, 4))
        >>> session.end(blur_strength=5)
        Region(x=2, y=4, width=8, height=6, blur_strength=5)
    """

    def __init__(self):
        self._state = SelectionState.IDLE
        self._draft: Optional[SelectionDraft] = None

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state is SelectionState.DRAGGING

    @property
    def draft(self) -> Optional[SelectionDraft]:
        """Current drag, or None when idle."""
        return self._draft

    def begin(self, point: Point) -> None:
        """Start a drag at point. A drag already in progress is discarded."""
        self._draft = SelectionDraft(start=point, current=point)
        self._state = SelectionState.DRAGGING

    def update(self, point: Point) -> bool:
        """
        Move the live corner of the drag.

        Returns:
            True if the drag was updated, False when idle
        """
        if not self.is_dragging:
            return False

        self._draft = SelectionDraft(start=self._draft.start, current=point)
        return True

    def end(self, blur_strength: int) -> Optional[Region]:
        """
        Finish the drag and normalize it into a region.

        Args:
            blur_strength: Strength given to the new region

        Returns:
            The new Region, or None when idle or when the drag has zero
            width or height
        """
        if not self.is_dragging:
            return None

        x, y, width, height = self._draft.normalized_box()
        self.cancel()

        if width == 0 or height == 0:
            logger.debug("Discarded zero-area selection at (%s, %s)", x, y)
            return None

        return Region(x=x, y=y, width=width, height=height, blur_strength=blur_strength)

    def cancel(self) -> None:
        self._draft = None
        self._state = SelectionState.IDLE
