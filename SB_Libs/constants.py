"""
Constants and configuration values for Selective Blur.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Blur strength (pixels of Gaussian radius)
MIN_BLUR_STRENGTH = 1
MAX_BLUR_STRENGTH = 20
DEFAULT_BLUR_STRENGTH = 5

# Zoom constants
MIN_ZOOM = 0.1
MAX_ZOOM = 3.0
ZOOM_STEP = 0.1
DEFAULT_ZOOM = 1.0
ZOOM_DECIMALS = 1

# Live selection outline
OUTLINE_COLOR = (0, 0, 0, 255)
OUTLINE_WIDTH = 2
OUTLINE_DASH = (5, 5)

# Raster
RASTER_MODE = "RGBA"

# Export
EXPORT_FILE_STEM = "edited-image"
DEFAULT_JPEG_QUALITY = 95

# UI constants
DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 800

# Editor configuration file
CONFIG_FILE_NAME = "selective_blur.json"
DEFAULT_LOG_LEVEL = "INFO"

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
