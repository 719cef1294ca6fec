"""
RegionEditLib - Region-based blur edit model

This module provides the blur region data model, the region store, the
undo/redo history, the drag selection state machine and the viewport and
coordinate math used by the Selective Blur editor.
"""

from SB_Libs.RegionEditLib.region_models import (
    Point,
    Region,
    RegionList,
    SelectionDraft,
    validate_blur_strength,
)
from SB_Libs.RegionEditLib.region_store import (
    RegionStore,
    commit_region,
    set_all_blur_strength,
    clear_regions,
)
from SB_Libs.RegionEditLib.history_log import HistoryLog
from SB_Libs.RegionEditLib.selection_session import SelectionSession, SelectionState
from SB_Libs.RegionEditLib.coordinate_mapper import (
    CoordinateMapper,
    to_image_space,
    to_display_space,
)
from SB_Libs.RegionEditLib.viewport_controller import (
    ViewportController,
    fit_scale,
    clamp_zoom,
)

__all__ = [
    "Point",
    "Region",
    "RegionList",
    "SelectionDraft",
    "validate_blur_strength",
    "RegionStore",
    "commit_region",
    "set_all_blur_strength",
    "clear_regions",
    "HistoryLog",
    "SelectionSession",
    "SelectionState",
    "CoordinateMapper",
    "to_image_space",
    "to_display_space",
    "ViewportController",
    "fit_scale",
    "clamp_zoom",
]
