from __future__ import annotations

from typing import List

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QComboBox,
    QDoubleSpinBox,
    QFormLayout,
    QGroupBox,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSizePolicy,
    QSpacerItem,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from auditorium.layout import LayoutParameters
from auditorium.materials import SEAT_PALETTE
from auditorium.scene import PlacedObject


def _double_spin(minimum: float, maximum: float, value: float, step: float) -> QDoubleSpinBox:
    spin = QDoubleSpinBox()
    spin.setRange(minimum, maximum)
    spin.setDecimals(2)
    spin.setSingleStep(step)
    spin.setValue(value)
    return spin


class LayoutPanel(QWidget):
    """Room and seating controls. Emits a fresh LayoutParameters on Generate."""

    generate_triggered = pyqtSignal(object, object)

    def __init__(self, defaults: LayoutParameters, parent=None):
        super().__init__(parent)
        self.setObjectName("LayoutPanel")

        main_layout = QVBoxLayout(self)
        main_layout.setAlignment(Qt.AlignTop)

        room_group = QGroupBox("Room")
        room_form = QFormLayout(room_group)
        self.room_width_spin = _double_spin(1.0, 500.0, defaults.room_width, 1.0)
        self.room_depth_spin = _double_spin(1.0, 500.0, defaults.room_depth, 1.0)
        self.room_height_spin = _double_spin(1.0, 100.0, defaults.room_height, 0.5)
        room_form.addRow("Width (X):", self.room_width_spin)
        room_form.addRow("Depth (Z):", self.room_depth_spin)
        room_form.addRow("Height (Y):", self.room_height_spin)
        main_layout.addWidget(room_group)

        seating_group = QGroupBox("Seating")
        seating_form = QFormLayout(seating_group)
        self.rows_spin = QSpinBox()
        self.rows_spin.setRange(1, 200)
        self.rows_spin.setValue(defaults.row_count)
        self.seats_spin = QSpinBox()
        self.seats_spin.setRange(1, 200)
        self.seats_spin.setValue(defaults.seats_per_row)
        self.seat_spacing_spin = _double_spin(0.1, 20.0, defaults.seat_spacing, 0.1)
        self.row_spacing_spin = _double_spin(0.1, 20.0, defaults.row_spacing, 0.1)
        # Negative elevation is allowed; later risers may collapse
        self.row_elevation_spin = _double_spin(-5.0, 5.0, defaults.row_elevation, 0.05)
        self.seat_color_combo = QComboBox()
        for index, color in enumerate(SEAT_PALETTE):
            self.seat_color_combo.addItem(f"Color {index + 1} {color[:3]}")
        seating_form.addRow("Rows:", self.rows_spin)
        seating_form.addRow("Seats per row:", self.seats_spin)
        seating_form.addRow("Seat spacing:", self.seat_spacing_spin)
        seating_form.addRow("Row spacing:", self.row_spacing_spin)
        seating_form.addRow("Row elevation:", self.row_elevation_spin)
        seating_form.addRow("Seat color:", self.seat_color_combo)
        main_layout.addWidget(seating_group)

        self.generate_button = QPushButton("Generate")
        self.generate_button.clicked.connect(self._on_generate_clicked)
        main_layout.addWidget(self.generate_button)
        main_layout.addItem(QSpacerItem(20, 40, QSizePolicy.Minimum, QSizePolicy.Expanding))

    def current_parameters(self) -> LayoutParameters:
        return LayoutParameters(
            room_width=self.room_width_spin.value(),
            room_depth=self.room_depth_spin.value(),
            room_height=self.room_height_spin.value(),
            row_count=self.rows_spin.value(),
            seats_per_row=self.seats_spin.value(),
            seat_spacing=self.seat_spacing_spin.value(),
            row_spacing=self.row_spacing_spin.value(),
            row_elevation=self.row_elevation_spin.value(),
        )

    def _on_generate_clicked(self):
        self.generate_triggered.emit(self.current_parameters(), SEAT_PALETTE[self.seat_color_combo.currentIndex()])


class SceneExportPanel(QWidget):
    """Scene actions: exports."""

    export_glb_triggered = pyqtSignal(bool)
    export_snapshot_triggered = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("SceneExportPanel")

        main_layout = QVBoxLayout(self)
        main_layout.setAlignment(Qt.AlignTop)

        group = QGroupBox("Scene / Export")
        layout = QVBoxLayout(group)

        self.export_glb_button = QPushButton("Export GLB")
        self.export_glb_button.clicked.connect(lambda: self.export_glb_triggered.emit(False))
        layout.addWidget(self.export_glb_button)

        self.export_merged_button = QPushButton("Export GLB (merged by color)")
        self.export_merged_button.clicked.connect(lambda: self.export_glb_triggered.emit(True))
        layout.addWidget(self.export_merged_button)

        self.export_snapshot_button = QPushButton("Export Snapshot (PNG)")
        self.export_snapshot_button.clicked.connect(self.export_snapshot_triggered.emit)
        layout.addWidget(self.export_snapshot_button)

        main_layout.addWidget(group)
        main_layout.addItem(QSpacerItem(20, 40, QSizePolicy.Minimum, QSizePolicy.Expanding))


class OutlinerPanel(QWidget):
    """Lists the placed objects of the current scene."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        self.list_widget = QListWidget()
        layout.addWidget(self.list_widget)

    def update_list(self, objects: List[PlacedObject]):
        self.list_widget.clear()
        for obj in objects:
            item = QListWidgetItem(f"#{obj.object_id} {obj.kind}: {obj.name}")
            item.setData(Qt.UserRole, obj.object_id)
            self.list_widget.addItem(item)

    def select_object(self, object_id):
        for index in range(self.list_widget.count()):
            item = self.list_widget.item(index)
            if item.data(Qt.UserRole) == object_id:
                self.list_widget.setCurrentItem(item)
                return
        self.list_widget.clearSelection()
