"""
SB_Libs - Selective Blur Library Modules

This package contains core functionality for the Selective Blur editor,
organized into specialized sub-packages:

- RegionEditLib: Blur regions, edit history, drag selection and viewport math
- RenderLib: Raster buffer, image loading, compositing and export
- EditorLib: Editing session, editor configuration and the PyQt5 window
"""

__version__ = "0.1.0"
