from dataclasses import replace
from io import BytesIO
from pathlib import Path
from typing import Any, Optional
import logging

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QKeySequence, QPixmap
from PyQt5.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QShortcut,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from SB_Libs.constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MAX_BLUR_STRENGTH,
    MIN_BLUR_STRENGTH,
)
from SB_Libs.EditorLib.editor_config import EditorConfig, save_editor_config
from SB_Libs.EditorLib.editor_session import BlurEditorSession, PointerKind
from SB_Libs.RenderLib.exporter import EncodeError, default_export_filename
from SB_Libs.RenderLib.image_loader import DecodeError, image_file_filter
from SB_Libs.RenderLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


class CanvasLabel(QLabel):
    """Shows the composited frame and reports pointer events in label coordinates."""

    pointer = pyqtSignal(str, float, float)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setCursor(Qt.CrossCursor)
        self._last_pos = (0.0, 0.0)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self._emit(PointerKind.DOWN, event)
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        self._emit(PointerKind.MOVE, event)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self._emit(PointerKind.UP, event)
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:
        self.pointer.emit(PointerKind.LEAVE.value, *self._last_pos)
        super().leaveEvent(event)

    def _emit(self, kind: PointerKind, event) -> None:
        self._last_pos = (float(event.x()), float(event.y()))
        self.pointer.emit(kind.value, *self._last_pos)


class BlurEditorWindow(QMainWindow):
    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        image_path: Optional[Path] = None,
        config_path: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Selective Blur Image Editor")

        self.config_path = config_path
        self.session = BlurEditorSession(config=config, on_frame=self.show_frame)

        self._build_ui()
        self._connect_signals()
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
        self.refresh_controls()

        if image_path is not None:
            self.open_path(Path(image_path))

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        toolbar = QHBoxLayout()
        zoom_bar = QHBoxLayout()
        export_bar = QHBoxLayout()

        self.btn_open = QPushButton("Open Image")
        self.btn_undo = QPushButton("Undo")
        self.btn_redo = QPushButton("Redo")
        self.btn_reset = QPushButton("Reset")
        self.btn_zoom_in = QPushButton("Zoom In")
        self.btn_zoom_out = QPushButton("Zoom Out")
        self.btn_fit = QPushButton("Fit View")
        self.btn_png = QPushButton("Download PNG")
        self.btn_jpeg = QPushButton("Download JPEG")
        self.zoom_label = QLabel("Zoom: 100%")

        self.canvas = CanvasLabel()
        self.canvas.setAlignment(Qt.AlignCenter)
        self.canvas.setText("Open an image to start")

        self.scroll_area = QScrollArea()
        self.scroll_area.setAlignment(Qt.AlignCenter)
        self.scroll_area.setWidget(self.canvas)
        self.scroll_area.setStyleSheet("background: #374151;")

        self.blur_label = QLabel()
        self.blur_slider = QSlider(Qt.Horizontal)
        self.blur_slider.setRange(MIN_BLUR_STRENGTH, MAX_BLUR_STRENGTH)
        self.blur_slider.setSingleStep(1)
        self.blur_slider.setValue(self.session.blur_strength)

        for button in (self.btn_open, self.btn_undo, self.btn_redo, self.btn_reset):
            toolbar.addWidget(button)
        toolbar.addStretch(1)

        zoom_bar.addStretch(1)
        for widget in (self.btn_zoom_in, self.btn_zoom_out, self.btn_fit, self.zoom_label):
            zoom_bar.addWidget(widget)
        zoom_bar.addStretch(1)

        export_bar.addStretch(1)
        export_bar.addWidget(self.btn_png)
        export_bar.addWidget(self.btn_jpeg)
        export_bar.addStretch(1)

        root.addLayout(toolbar)
        root.addLayout(zoom_bar)
        root.addWidget(self.scroll_area, stretch=1)
        root.addWidget(self.blur_label)
        root.addWidget(self.blur_slider)
        root.addLayout(export_bar)

    def _connect_signals(self) -> None:
        self.btn_open.clicked.connect(self.open_image)
        self.btn_undo.clicked.connect(lambda: self._run(self.session.undo))
        self.btn_redo.clicked.connect(lambda: self._run(self.session.redo))
        self.btn_reset.clicked.connect(lambda: self._run(self.session.reset))
        self.btn_zoom_in.clicked.connect(lambda: self._run(self.session.zoom_in))
        self.btn_zoom_out.clicked.connect(lambda: self._run(self.session.zoom_out))
        self.btn_fit.clicked.connect(lambda: self._run(self.session.reset_zoom))
        self.btn_png.clicked.connect(lambda: self.download("png"))
        self.btn_jpeg.clicked.connect(lambda: self.download("jpeg"))
        self.blur_slider.valueChanged.connect(self.on_blur_changed)
        self.canvas.pointer.connect(self.on_pointer)

        QShortcut(QKeySequence.Undo, self, activated=self.btn_undo.click)
        QShortcut(QKeySequence.Redo, self, activated=self.btn_redo.click)
        QShortcut(QKeySequence.Open, self, activated=self.open_image)
        QShortcut(QKeySequence("+"), self, activated=self.btn_zoom_in.click)
        QShortcut(QKeySequence("-"), self, activated=self.btn_zoom_out.click)
        QShortcut(QKeySequence("Ctrl+0"), self, activated=self.btn_fit.click)

    def open_image(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, "Select Image", "", image_file_filter())
        if file_path:
            self.open_path(Path(file_path))

    def open_path(self, image_path: Path) -> None:
        self._sync_container_size()
        try:
            self.session.load_image_file(image_path)
        except DecodeError as e:
            QMessageBox.warning(self, "Cannot Open Image", str(e))
        self.refresh_controls()

    def on_pointer(self, kind: str, x: float, y: float) -> None:
        self.session.pointer_event(kind, x, y)
        if kind in (PointerKind.UP.value, PointerKind.LEAVE.value):
            self.refresh_controls()

    def on_blur_changed(self, value: int) -> None:
        self.session.set_blur_strength(value)
        self.refresh_controls()

    def download(self, fmt: str) -> None:
        if not self.session.is_ready:
            return

        save_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Edited Image",
            default_export_filename(fmt),
            f"{fmt.upper()} Images (*.{fmt})",
        )
        if not save_path:
            return

        try:
            self.session.export_to_file(save_path, fmt)
        except EncodeError as e:
            QMessageBox.critical(self, "Export Failed", str(e))

    def show_frame(self, frame: RasterBuffer) -> None:
        pixmap = QPixmap()
        if not pixmap.loadFromData(self._to_png_bytes(frame.image), "PNG"):
            self.canvas.setText("Preview failed")
            return

        width, height = self.session.viewport.display_size()
        scaled = pixmap.scaled(
            width,
            height,
            Qt.AspectRatioMode.IgnoreAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.canvas.setPixmap(scaled)
        self.canvas.resize(width, height)

    def refresh_controls(self) -> None:
        ready = self.session.is_ready
        self.btn_undo.setEnabled(self.session.can_undo)
        self.btn_redo.setEnabled(self.session.can_redo)
        for button in (self.btn_reset, self.btn_zoom_in, self.btn_zoom_out,
                       self.btn_fit, self.btn_png, self.btn_jpeg):
            button.setEnabled(ready)
        self.zoom_label.setText(f"Zoom: {self.session.viewport.zoom_percent}%")
        self.blur_label.setText(f"Blur Amount: {self.session.blur_strength}px")

    def closeEvent(self, event) -> None:
        # Remember the last blur strength as the next session's default
        if self.config_path is not None:
            config = replace(self.session.config, default_blur_strength=self.session.blur_strength)
            try:
                save_editor_config(config, self.config_path)
            except OSError as e:
                logger.warning("Could not save settings to %s: %s", self.config_path, e)
        super().closeEvent(event)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._sync_container_size()

    def _sync_container_size(self) -> None:
        viewport = self.scroll_area.viewport().size()
        if viewport.width() > 0 and viewport.height() > 0:
            self.session.set_container_size(viewport.width(), viewport.height())

    def _run(self, action) -> Any:
        result = action()
        self.refresh_controls()
        return result

    def _to_png_bytes(self, image: Any) -> bytes:
        buffer = BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
