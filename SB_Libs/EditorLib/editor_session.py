"""
Editing session for Selective Blur.

BlurEditorSession is the one mutable object of the editor. The surrounding
UI feeds it decoded images, pointer events and commands; every state change
is followed by an explicit redraw that recomputes the frame from the base
image, the region store and the live selection.

Classes:
    PointerKind: Pointer event kinds reported by the UI
    BlurEditorSession: Region edit session with undo/redo, zoom and export
"""

from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple, Union
import logging

from SB_Libs.EditorLib.editor_config import EditorConfig
from SB_Libs.RegionEditLib.coordinate_mapper import CoordinateMapper
from SB_Libs.RegionEditLib.history_log import HistoryLog
from SB_Libs.RegionEditLib.region_models import Point, Region, RegionList, validate_blur_strength
from SB_Libs.RegionEditLib.region_store import RegionStore
from SB_Libs.RegionEditLib.selection_session import SelectionSession
from SB_Libs.RegionEditLib.viewport_controller import ViewportController
from SB_Libs.RenderLib.compositor import Compositor
from SB_Libs.RenderLib.exporter import ExportFormat, export_raster, export_to_file
from SB_Libs.RenderLib.image_loader import DecodeError, load_image_bytes, load_image_file
from SB_Libs.RenderLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)

FrameCallback = Callable[[RasterBuffer], None]


class PointerKind(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    LEAVE = "leave"


class BlurEditorSession:
    """
    Region blur editing session.

    Example:
        >>> session = BlurEditorSession()
        >>> session.load_image(png_bytes)
        >>> session.pointer_event("down", 10, 10)
        >>> session.pointer_event("move", 50, 60)
        >>> session.pointer_event("up", 50, 60)
        >>> session.undo()
        True
        >>> payload = session.export("png")
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        on_frame: Optional[FrameCallback] = None,
        container_size: Optional[Tuple[int, int]] = None,
    ):
        """
        Initialize an empty session.

        Args:
            config: Editor settings (defaults if None)
            on_frame: Called with every redrawn frame
            container_size: Initial (width, height) of the display container
        """
        self.config = config or EditorConfig()
        self.on_frame = on_frame

        self._base: Optional[RasterBuffer] = None
        self._store = RegionStore()
        self._history = HistoryLog(max_entries=self.config.history_limit)
        self._selection = SelectionSession()
        self._viewport = ViewportController(container_size)
        self._mapper = CoordinateMapper(self._viewport)
        self._compositor = Compositor()
        self._blur_strength = self.config.default_blur_strength
        self._frame: Optional[RasterBuffer] = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def is_ready(self) -> bool:
        return self._base is not None

    @property
    def regions(self) -> RegionList:
        return self._store.regions

    @property
    def history(self) -> HistoryLog:
        return self._history

    @property
    def blur_strength(self) -> int:
        return self._blur_strength

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def is_selecting(self) -> bool:
        return self._selection.is_dragging

    @property
    def viewport(self) -> ViewportController:
        return self._viewport

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def image_size(self) -> Optional[Tuple[int, int]]:
        return self._base.size if self._base is not None else None

    @property
    def frame(self) -> Optional[RasterBuffer]:
        """Most recently rendered frame (may include the live outline)."""
        return self._frame

    # ------------------------------------------------------------------
    # Image lifecycle
    # ------------------------------------------------------------------
    def load_image(self, data: bytes) -> None:
        """
        Decode data and start a fresh session on it.

        Raises:
            DecodeError: If data cannot be decoded. The previous image,
                         regions and history are kept unchanged.
        """
        try:
            raster = load_image_bytes(data)
        except DecodeError as e:
            logger.warning("Image load rejected, keeping current session: %s", e)
            raise
        self._start_session(raster)

    def load_image_file(self, file_path: Union[str, Path]) -> None:
        """File variant of load_image()."""
        try:
            raster = load_image_file(file_path)
        except DecodeError as e:
            logger.warning("Image load rejected, keeping current session: %s", e)
            raise
        self._start_session(raster)

    def _start_session(self, raster: RasterBuffer) -> None:
        replacing = self._base is not None

        self._base = raster
        self._store.clear()
        self._history.reset()
        self._selection.cancel()
        self._viewport.set_image_size(raster.width, raster.height)
        # Zoom chosen before the first image arrives is kept
        if replacing:
            self._viewport.reset_zoom()

        logger.info("Session started on %dx%d image", raster.width, raster.height)
        self.redraw()

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------
    def pointer_event(
        self,
        kind: Union[str, PointerKind],
        display_x: Optional[float] = None,
        display_y: Optional[float] = None,
    ) -> Optional[Region]:
        """
        Dispatch a pointer event in canvas-relative display coordinates.

        Returns:
            The committed Region for up/leave events that produced one,
            otherwise None

        Raises:
            ValueError: If kind is unknown, or a down/move event has no
                        coordinates
        """
        kind = PointerKind(kind)

        if kind in (PointerKind.DOWN, PointerKind.MOVE) and (display_x is None or display_y is None):
            raise ValueError(f"Pointer '{kind.value}' event requires display_x and display_y")

        if kind is PointerKind.DOWN:
            self.pointer_down(display_x, display_y)
        elif kind is PointerKind.MOVE:
            self.pointer_move(display_x, display_y)
        elif kind is PointerKind.UP:
            return self.pointer_up(display_x, display_y)
        else:
            return self.pointer_leave()
        return None

    def pointer_down(self, display_x: float, display_y: float) -> bool:
        if not self.is_ready:
            return False

        self._selection.begin(self._mapper.to_image_space(Point(display_x, display_y)))
        self.redraw()
        return True

    def pointer_move(self, display_x: float, display_y: float) -> bool:
        if not self.is_ready or not self._selection.is_dragging:
            return False

        self._selection.update(self._mapper.to_image_space(Point(display_x, display_y)))
        self.redraw()
        return True

    def pointer_up(
        self,
        display_x: Optional[float] = None,
        display_y: Optional[float] = None,
    ) -> Optional[Region]:
        """
        Finish the drag. A release position, when given, is applied first.

        Returns:
            The committed Region, or None if no drag was active or the
            drag had zero area
        """
        if not self.is_ready or not self._selection.is_dragging:
            return None

        if display_x is not None and display_y is not None:
            self._selection.update(self._mapper.to_image_space(Point(display_x, display_y)))

        return self._finish_selection()

    def pointer_leave(self) -> Optional[Region]:
        """Finish the drag at the last known position."""
        if not self.is_ready or not self._selection.is_dragging:
            return None
        return self._finish_selection()

    def _finish_selection(self) -> Optional[Region]:
        region = self._selection.end(self._blur_strength)
        if region is not None:
            self._store.commit(region)
            self._history.push(self._store.regions)

        self.redraw()
        return region

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def undo(self) -> bool:
        snapshot = self._history.undo()
        if snapshot is None:
            return False

        self._store.replace(snapshot)
        self.redraw()
        return True

    def redo(self) -> bool:
        snapshot = self._history.redo()
        if snapshot is None:
            return False

        self._store.replace(snapshot)
        self.redraw()
        return True

    def reset(self) -> None:
        """Remove every region and forget the history."""
        self._store.clear()
        self._history.reset()
        self._selection.cancel()
        self.redraw()

    def set_blur_strength(self, value: int) -> None:
        """
        Change the current blur strength and apply it to every region.

        This is a live preview: no history entry is recorded.

        Raises:
            TypeError: If value is not an int
            ValueError: If value is outside 1-20
        """
        self._blur_strength = validate_blur_strength(value)
        self._store.set_all_blur_strength(self._blur_strength)
        self.redraw()

    # ------------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------------
    def zoom_in(self) -> float:
        return self._after_viewport_change(self._viewport.zoom_in())

    def zoom_out(self) -> float:
        return self._after_viewport_change(self._viewport.zoom_out())

    def reset_zoom(self) -> float:
        return self._after_viewport_change(self._viewport.reset_zoom())

    def set_zoom(self, value: float) -> float:
        return self._after_viewport_change(self._viewport.set_zoom(value))

    def set_container_size(self, width: int, height: int) -> None:
        self._viewport.set_container_size(width, height)
        self.redraw()

    def _after_viewport_change(self, zoom: float) -> float:
        self.redraw()
        return zoom

    # ------------------------------------------------------------------
    # Rendering and export
    # ------------------------------------------------------------------
    def render(self, include_selection: bool = True) -> Optional[RasterBuffer]:
        """Composite the current state, or None before an image is loaded."""
        if self._base is None:
            return None

        draft = self._selection.draft if include_selection else None
        return self._compositor.render(self._base, self._store.regions, draft)

    def redraw(self) -> Optional[RasterBuffer]:
        self._frame = self.render()
        if self._frame is not None and self.on_frame is not None:
            self.on_frame(self._frame)
        return self._frame

    def export(self, fmt: Union[str, ExportFormat] = ExportFormat.PNG) -> bytes:
        """
        Encode the committed edits. The live selection is never included.

        Raises:
            RuntimeError: If no image is loaded
            ValueError: If fmt is not png or jpeg
            EncodeError: If encoding fails (session state is unchanged)
        """
        return export_raster(self._export_frame(), fmt, self.config.jpeg_quality)

    def export_to_file(
        self,
        output_path: Union[str, Path],
        fmt: Optional[Union[str, ExportFormat]] = None,
    ) -> Path:
        return export_to_file(self._export_frame(), output_path, fmt, self.config.jpeg_quality)

    def _export_frame(self) -> RasterBuffer:
        if self._base is None:
            raise RuntimeError("No image loaded; nothing to export")
        return self.render(include_selection=False)
