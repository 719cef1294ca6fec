"""
Blur filter operations.

Provides the Gaussian blur used for blur regions, both on a whole image and
restricted to one rectangle of an image.

Example:
    >>> from PIL import Image
    >>> img = Image.open("photo.jpg").convert("RGBA")
    >>>
    >>> # Whole image
    >>> blurred = apply_gaussian_blur(img, radius=5)
    >>>
    >>> # In place, only inside (10, 10)-(50, 60)
    >>> blur_box_in_place(img, (10, 10, 50, 60), radius=5)
"""

from typing import Any, Tuple

from SB_Libs.pillow_compat import ImageFilter

PixelBox = Tuple[int, int, int, int]


def apply_gaussian_blur(
    image: Any,
    radius: float = 5.0,
) -> Any:
    """
    Apply Gaussian blur to image.

    Args:
        image: PIL Image
        radius: Blur radius in pixels (0-100, exclusive of 0)
                Higher values = stronger blur

    Returns:
        Blurred PIL Image (same mode as input)

    Raises:
        ValueError: If radius <= 0 or > 100
        TypeError: If image not PIL Image
    """
    if not hasattr(image, "filter"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if not (0 < radius <= 100):
        raise ValueError(f"radius must be 0 < r <= 100, got {radius}")

    # Palette images cannot be filtered directly
    if image.mode == "P":
        image = image.convert("RGBA")

    return image.filter(ImageFilter.GaussianBlur(radius=radius))


def blur_box_in_place(image: Any, box: PixelBox, radius: float) -> None:
    """
    Blur one rectangle of an image, reading and writing the same pixels.

    The rectangle is cropped from the current image content, blurred and
    pasted back at the same position, so content painted by earlier calls
    is blurred again where rectangles overlap.

    Args:
        image: PIL Image, modified in place
        box: Integer (left, top, right, bottom) inside the image
        radius: Gaussian radius in pixels
    """
    left, top, right, bottom = box
    if right <= left or bottom <= top:
        raise ValueError(f"box must have positive area, got {box}")

    section = image.crop(box)
    image.paste(apply_gaussian_blur(section, radius), (left, top))
