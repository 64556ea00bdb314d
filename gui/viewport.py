from __future__ import annotations

import os
from typing import Dict, List, Optional

import pyvista as pv
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QVBoxLayout, QWidget
from pyvistaqt import QtInteractor

from auditorium.scene import PlacedObject, Scene

VIEWPORT_EDGE = "#1a1410"
VIEWPORT_HIGHLIGHT = "#ffd36a"
VIEWPORT_AMBIENT = 0.30
VIEWPORT_DIFFUSE = 0.65
VIEWPORT_SPECULAR = 0.08
VIEWPORT_SPECULAR_POWER = 14.0
EDGE_KINDS = ("riser",)  # Only risers show edges, so adjacent steps stay readable

pv.set_plot_theme("document")
pv.global_theme.anti_aliasing = "fxaa"
pv.global_theme.smooth_shading = False


def _rgb(color) -> List[float]:
    return [channel / 255.0 for channel in color[:3]]


class ViewportWidget(QWidget):
    """Qt widget wrapping a PyVista interactor that draws an auditorium Scene."""

    object_picked = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plotter = QtInteractor(self)
        layout.addWidget(self.plotter.interactor)
        self.plotter.add_axes()

        self._actors: Dict[pv.Actor, int] = {}
        self._highlighted_actor: Optional[pv.Actor] = None
        self._highlight_had_edges = False
        self._scene: Optional[Scene] = None

        self.plotter.enable_mesh_picking(self._handle_pick, use_actor=True, show=False)

    def _create_object_actor(self, obj: PlacedObject) -> Optional[pv.Actor]:
        if obj.mesh is None:
            return None
        try:
            return self.plotter.add_mesh(
                pv.wrap(obj.mesh),
                color=_rgb(obj.color),
                opacity=obj.color[3] / 255.0,
                show_edges=obj.kind in EDGE_KINDS,
                edge_color=VIEWPORT_EDGE,
                line_width=1,
                ambient=VIEWPORT_AMBIENT,
                diffuse=VIEWPORT_DIFFUSE,
                specular=VIEWPORT_SPECULAR,
                specular_power=VIEWPORT_SPECULAR_POWER,
            )
        except Exception as exc:
            print(f"Warning: Could not draw '{obj.name}': {exc}")
            return None

    def apply_camera(self, scene: Scene):
        settings = scene.camera
        camera = self.plotter.camera
        camera.position = settings.position
        camera.focal_point = settings.focal_point
        camera.up = settings.view_up
        camera.view_angle = settings.fov
        camera.clipping_range = (settings.near, settings.far)

    def apply_lights(self, scene: Scene):
        settings = scene.lights
        self.plotter.remove_all_lights()
        ambient = pv.Light(light_type="headlight", intensity=settings.ambient_intensity)
        spot = pv.Light(
            position=settings.spot_position,
            focal_point=scene.camera.focal_point,
            intensity=settings.spot_intensity,
            positional=True,
            cone_angle=45.0,
            light_type="scene light",
        )
        self.plotter.add_light(ambient)
        self.plotter.add_light(spot)
        if settings.cast_shadows:
            try:
                self.plotter.enable_shadows()
            except Exception as exc:
                print(f"Info: Shadows unavailable ({exc}).")

    def display_scene(self, scene: Scene):
        self.clear_viewport()
        self._scene = scene
        self.plotter.set_background(_rgb(scene.background))

        for obj in scene.objects:
            actor = self._create_object_actor(obj)
            if actor is not None:
                self._actors[actor] = obj.object_id

        self.apply_lights(scene)
        self.apply_camera(scene)
        self.plotter.render()

    def save_snapshot(self, path: str):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        if self._scene is not None:
            self.apply_camera(self._scene)
        self.plotter.screenshot(path)

    def clear_viewport(self):
        self._clear_highlight()
        self.plotter.clear_actors()
        self._actors.clear()

    def _clear_highlight(self):
        if self._highlighted_actor and self._highlighted_actor.prop:
            self._highlighted_actor.prop.edge_color = VIEWPORT_EDGE
            self._highlighted_actor.prop.line_width = 1
            self._highlighted_actor.prop.show_edges = self._highlight_had_edges
        self._highlighted_actor = None

    def _handle_pick(self, actor: Optional[pv.Actor]):
        self._clear_highlight()

        object_id = self._actors.get(actor) if actor is not None else None
        if object_id is None:
            self.object_picked.emit(None)
            return

        if actor.prop:
            self._highlight_had_edges = actor.prop.show_edges
            actor.prop.show_edges = True
            actor.prop.edge_color = VIEWPORT_HIGHLIGHT
            actor.prop.line_width = 3
            self._highlighted_actor = actor

        self.object_picked.emit(object_id)

    def closeEvent(self, event):
        self.plotter.close()
        super().closeEvent(event)
