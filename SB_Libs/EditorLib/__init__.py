"""
EditorLib - Editing session and editor front end

This module provides the editing session that ties the edit model to the
renderer, the editor configuration and (in blur_editor_window) the PyQt5
window that drives the session.
"""

from SB_Libs.EditorLib.editor_config import (
    EditorConfig,
    get_config_path,
    load_editor_config,
    save_editor_config,
)
from SB_Libs.EditorLib.editor_session import BlurEditorSession, PointerKind

__all__ = [
    "EditorConfig",
    "get_config_path",
    "load_editor_config",
    "save_editor_config",
    "BlurEditorSession",
    "PointerKind",
]
