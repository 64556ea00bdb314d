from __future__ import annotations

from datetime import datetime
from typing import Optional

from PyQt5.QtCore import QThread, Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from auditorium.assets import AssetProvider
from auditorium.constants import DEFAULT_EXPORT_NAME, FILE_EXT_GLB, FILE_EXT_PNG
from auditorium.io import export_scene_to_glb
from auditorium.layout import InvalidParameters, LayoutParameters
from auditorium.materials import SEAT_COLOR, ColorTuple
from auditorium.scene import Scene, build_auditorium
from config import config
from .panels import LayoutPanel, OutlinerPanel, SceneExportPanel
from .viewport import ViewportWidget


CINEMA_STYLESHEET = """
QMainWindow {
    background: #14100e;
    color: #f3e6d0;
}

QWidget {
    color: #f3e6d0;
    font-family: "Avenir Next", "Gill Sans MT", "Trebuchet MS", sans-serif;
    font-size: 12px;
}

QDockWidget::title {
    text-align: left;
    background: #9e1b1b;
    padding-left: 10px;
}

QGroupBox {
    border: 1px solid #4a3b33;
    border-radius: 6px;
    margin-top: 14px;
    padding: 8px;
}

QPushButton {
    background: #3a2f2a;
    border: 1px solid #6b5648;
    border-radius: 4px;
    padding: 6px 10px;
}

QPushButton:disabled {
    color: #7d6f62;
}
"""


class GenerationThread(QThread):
    """Runs layout generation in the background to keep UI responsive."""

    generation_finished = pyqtSignal(object, str)

    def __init__(self, params: LayoutParameters, assets: AssetProvider, parent=None):
        super().__init__(parent)
        self.params = params
        self.assets = assets

    def run(self):
        new_scene: Optional[Scene] = None
        error_message = ""
        try:
            new_scene = build_auditorium(self.params, self.assets, verbose=config.VERBOSE)
        except InvalidParameters as exc:
            error_message = f"Invalid parameters: {exc}"
        except Exception as exc:
            error_message = str(exc)

        self.generation_finished.emit(new_scene, error_message)


class MainWindow(QMainWindow):
    """Main application window: parameter panel, viewport and exports."""

    def __init__(self, parent=None):
        super().__init__(parent)

        self.setWindowTitle("Auditorium Layout")
        self.setGeometry(100, 100, 1280, 820)
        self.setObjectName("MainWindow")

        self.scene = Scene()
        self._generation_thread: Optional[GenerationThread] = None

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(6, 6, 6, 6)

        self.viewport = ViewportWidget()
        self.viewport.object_picked.connect(self.handle_object_picked)
        layout.addWidget(self.viewport)

        self._create_panels()
        self.setStyleSheet(CINEMA_STYLESHEET)

        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage("Ready", 2000)

        # Initial layout from configuration defaults
        self.handle_generate_request(self.layout_panel.current_parameters(), SEAT_COLOR)

    def _add_dock(self, title: str, widget: QWidget, area) -> QDockWidget:
        dock = QDockWidget(title, self)
        dock.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)
        dock.setWidget(widget)
        self.addDockWidget(area, dock)
        return dock

    def _create_panels(self):
        self.layout_panel = LayoutPanel(LayoutParameters.from_config(config))
        self.layout_panel.generate_triggered.connect(self.handle_generate_request)
        self._add_dock("Layout", self.layout_panel, Qt.LeftDockWidgetArea)

        self.scene_export_panel = SceneExportPanel()
        self.scene_export_panel.export_glb_triggered.connect(self.handle_export_glb_request)
        self.scene_export_panel.export_snapshot_triggered.connect(self.handle_export_snapshot_request)
        self._add_dock("Export", self.scene_export_panel, Qt.LeftDockWidgetArea)

        self.outliner_panel = OutlinerPanel()
        self._add_dock("Outliner", self.outliner_panel, Qt.RightDockWidgetArea)

    def handle_object_picked(self, object_id: Optional[int]):
        if object_id is None:
            self.outliner_panel.select_object(None)
            return
        obj = self.scene.get_object_by_id(object_id)
        if obj is None:
            return
        self.outliner_panel.select_object(object_id)
        position = obj.transform[:3, 3].round(3).tolist()
        self.statusBar().showMessage(f"Selected {obj.kind} '{obj.name}' at {position}", 3000)

    def handle_generate_request(self, params: LayoutParameters, seat_color: ColorTuple):
        if self._generation_thread and self._generation_thread.isRunning():
            self.statusBar().showMessage("Generation already running.", 2000)
            return

        assets = AssetProvider(
            seat_model_path=config.SEAT_MODEL_PATH,
            seat_model_scale=config.SEAT_MODEL_SCALE,
            seat_color=seat_color,
        )

        self._set_generation_controls_enabled(False)
        self._generation_thread = GenerationThread(params, assets)
        self._generation_thread.generation_finished.connect(self.handle_generation_finished)
        self._generation_thread.finished.connect(self._on_generation_thread_finished)
        self._generation_thread.start()

        self.statusBar().showMessage(
            f"Generating: {params.row_count} rows x {params.seats_per_row} seats "
            f"(row elevation {params.row_elevation})",
            3000,
        )

    def handle_generation_finished(self, new_scene: Optional[Scene], error_message: str):
        if error_message or new_scene is None:
            self.statusBar().showMessage(f"Generation failed: {error_message}", 5000)
            return

        self.scene = new_scene
        self.viewport.display_scene(self.scene)
        self.outliner_panel.update_list(self.scene.objects)

        metrics = self.scene.last_layout_metrics or {}
        degenerate = metrics.get("degenerate_riser_rows") or []
        message = (
            f"Generation complete: {metrics.get('seat_count')} seats,"
            f" {metrics.get('riser_count')} risers"
        )
        if degenerate:
            message += f" | degenerate risers in rows {degenerate}"
        self.statusBar().showMessage(message, 4500)

    def _on_generation_thread_finished(self):
        self._generation_thread = None
        self._set_generation_controls_enabled(True)

    def _set_generation_controls_enabled(self, enabled: bool):
        self.layout_panel.generate_button.setEnabled(enabled)

    def handle_export_glb_request(self, merge: bool):
        if not self.scene.objects:
            self.statusBar().showMessage("Scene is empty. Nothing to export.", 4000)
            return

        default_path = str(config.EXPORT_DIR / f"{DEFAULT_EXPORT_NAME}{FILE_EXT_GLB}")
        file_name, _ = QFileDialog.getSaveFileName(
            self,
            "Export GLB",
            default_path,
            "GLB Files (*.glb);;All Files (*)",
        )
        if not file_name:
            self.statusBar().showMessage("Export cancelled.", 1500)
            return

        try:
            written = export_scene_to_glb(self.scene, file_name, merge=merge)
        except Exception as exc:
            QMessageBox.critical(self, "Export Error", str(exc))
            self.statusBar().showMessage(f"GLB export failed: {exc}", 5000)
            return

        self.statusBar().showMessage(f"GLB exported: {written}", 3000)

    def handle_export_snapshot_request(self):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        default_path = str(config.EXPORT_DIR / f"snapshot_{timestamp}{FILE_EXT_PNG}")
        file_name, _ = QFileDialog.getSaveFileName(
            self,
            "Export Snapshot",
            default_path,
            "PNG Files (*.png);;All Files (*)",
        )
        if not file_name:
            self.statusBar().showMessage("Snapshot export cancelled.", 1500)
            return

        try:
            self.viewport.save_snapshot(file_name)
        except Exception as exc:
            QMessageBox.critical(self, "Snapshot Error", str(exc))
            self.statusBar().showMessage(f"Snapshot export failed: {exc}", 5000)
            return

        self.statusBar().showMessage(f"Snapshot exported: {file_name}", 3000)

    def closeEvent(self, event):
        if self._generation_thread and self._generation_thread.isRunning():
            self._generation_thread.quit()
            if not self._generation_thread.wait(3000):
                self._generation_thread.terminate()
                self._generation_thread.wait()

        self.viewport.close()
        super().closeEvent(event)
