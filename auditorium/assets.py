"""Asset provider: the seat prototype and the riser material.

The layout never looks at these values. The scene host asks for one prototype,
then clones it once per seat slot.
"""

from __future__ import annotations

import os
from typing import Optional

import trimesh

from .constants import DEFAULT_SEAT_MODEL_SCALE
from .geometry import create_seat_prototype_mesh
from .materials import RISER_COLOR, SEAT_COLOR, ColorTuple


def load_seat_model(file_path: str, scale: float = DEFAULT_SEAT_MODEL_SCALE) -> trimesh.Trimesh:
    """
    Loads a seat model (GLB/GLTF/OBJ/...) as a single mesh centered on its origin.

    Raises:
        FileNotFoundError: If file_path does not exist.
        ValueError: If the file holds no geometry.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Seat model not found: {file_path}")

    mesh = trimesh.load(file_path, force="mesh")
    if not isinstance(mesh, trimesh.Trimesh) or mesh.is_empty:
        raise ValueError(f"Seat model contains no geometry: {file_path}")

    # Center the bounding box on the origin so placement heights match the procedural seat
    mesh.apply_translation(-mesh.bounds.mean(axis=0))
    if scale != 1.0:
        mesh.apply_scale(scale)
    return mesh


class AssetProvider:
    """Supplies a reusable seat prototype and the riser color."""

    def __init__(self, seat_model_path: Optional[str] = None,
                 seat_model_scale: float = DEFAULT_SEAT_MODEL_SCALE,
                 seat_color: ColorTuple = SEAT_COLOR,
                 riser_color: ColorTuple = RISER_COLOR):
        self.seat_model_path = seat_model_path
        self.seat_model_scale = seat_model_scale
        self.seat_color = seat_color
        self.riser_color = riser_color
        self._seat_prototype: Optional[trimesh.Trimesh] = None

    @classmethod
    def from_config(cls, config) -> "AssetProvider":
        return cls(seat_model_path=config.SEAT_MODEL_PATH, seat_model_scale=config.SEAT_MODEL_SCALE)

    def get_seat_prototype(self) -> trimesh.Trimesh:
        """Returns the cached seat prototype, loading or building it on first use."""
        if self._seat_prototype is None:
            self._seat_prototype = self._build_seat_prototype()
        return self._seat_prototype

    def get_riser_material(self) -> ColorTuple:
        return self.riser_color

    def _build_seat_prototype(self) -> trimesh.Trimesh:
        if self.seat_model_path:
            try:
                mesh = load_seat_model(self.seat_model_path, self.seat_model_scale)
                print(f"Loaded seat model: {self.seat_model_path} ({len(mesh.faces)} faces)")
                return mesh
            except (OSError, ValueError) as exc:
                print(f"Warning: Could not load seat model '{self.seat_model_path}': {exc}. Using procedural seat.")
        return create_seat_prototype_mesh(self.seat_color)
