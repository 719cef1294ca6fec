"""
Region editing data models for Selective Blur.

This module defines the core data structures of the edit model. All of them
are immutable so a region list can be handed to the history log as a
snapshot without copying.

Classes:
    Point: A position in image-pixel space
    Region: A committed blur rectangle with its blur strength
    SelectionDraft: The start and live point of an in-progress drag

Type Aliases:
    RegionList: An ordered tuple of Regions (insertion order = paint order)
    Box: A (left, top, right, bottom) tuple
"""

from dataclasses import dataclass, replace
from typing import Any, Tuple

from SB_Libs.constants import MAX_BLUR_STRENGTH, MIN_BLUR_STRENGTH

Box = Tuple[float, float, float, float]


def validate_blur_strength(value: Any) -> int:
    """
    Check that a blur strength is an integer in the allowed range.

    Args:
        value: Candidate blur strength

    Returns:
        The value as an int

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is outside MIN_BLUR_STRENGTH..MAX_BLUR_STRENGTH
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"blur_strength must be an int, got {type(value).__name__}")

    if not (MIN_BLUR_STRENGTH <= value <= MAX_BLUR_STRENGTH):
        raise ValueError(
            f"blur_strength must be {MIN_BLUR_STRENGTH}-{MAX_BLUR_STRENGTH}, got {value}"
        )
    return value


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Region:
    """A rectangle in image-pixel coordinates blurred with one strength.

    Attributes:
        x: Left edge (may be negative or beyond the image)
        y: Top edge (may be negative or beyond the image)
        width: Rectangle width, never negative
        height: Rectangle height, never negative
        blur_strength: Gaussian blur radius in pixels (1-20)
    """
    x: float
    y: float
    width: float
    height: float
    blur_strength: int

    def __post_init__(self):
        """Validate region geometry and strength."""
        if self.width < 0:
            raise ValueError(f"width must be >= 0, got {self.width}")

        if self.height < 0:
            raise ValueError(f"height must be >= 0, got {self.height}")

        validate_blur_strength(self.blur_strength)

    @property
    def box(self) -> Box:
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 or self.height == 0

    def with_blur_strength(self, blur_strength: int) -> "Region":
        """Return a copy of this region with another blur strength."""
        return replace(self, blur_strength=blur_strength)


RegionList = Tuple[Region, ...]


@dataclass(frozen=True)
class SelectionDraft:
    """Transient drag state between pointer-down and pointer-up."""
    start: Point
    current: Point

    def normalized_box(self) -> Tuple[float, float, float, float]:
        """
        Normalize the drag into a top-left anchored rectangle.

        Returns:
            (x, y, width, height) where (x, y) is the minimum of both endpoints
        """
        x = min(self.start.x, self.current.x)
        y = min(self.start.y, self.current.y)
        width = abs(self.current.x - self.start.x)
        height = abs(self.current.y - self.start.y)
        return x, y, width, height
