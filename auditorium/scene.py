from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import trimesh

from .assets import AssetProvider
from .constants import (
    AMBIENT_LIGHT_INTENSITY,
    CAMERA_FAR,
    CAMERA_FOCAL_POINT,
    CAMERA_FOV,
    CAMERA_NEAR,
    CAMERA_POSITION,
    CAMERA_VIEW_UP,
    FLOOR_LEVEL,
    FLOOR_THICKNESS,
    KIND_FLOOR,
    KIND_RISER,
    KIND_SCREEN,
    KIND_SEAT,
    KIND_WALL,
    SCREEN_CENTER_HEIGHT_RATIO,
    SCREEN_THICKNESS,
    SCREEN_WALL_OFFSET,
    SPOT_LIGHT_INTENSITY,
    SPOT_LIGHT_POSITION,
    WALL_THICKNESS,
    get_screen_dimensions,
)
from .geometry import create_block_mesh, instance_mesh, placement_matrix
from .layout import Layout, LayoutParameters, generate_layout, get_layout_metrics
from .materials import BACKGROUND_COLOR, FLOOR_COLOR, SCREEN_COLOR, WALL_COLOR, ColorTuple


@dataclass
class PlacedObject:
    """Represents a single renderable object in the auditorium."""
    name: str
    kind: str
    mesh: trimesh.Trimesh = field(repr=False)
    color: ColorTuple = (200, 200, 200, 255)
    transform: np.ndarray = field(default_factory=lambda: np.eye(4), repr=False)
    metadata: Dict[str, Any] = field(default_factory=dict)
    object_id: int = -1


@dataclass(frozen=True)
class CameraSettings:
    position: Tuple[float, float, float] = CAMERA_POSITION
    focal_point: Tuple[float, float, float] = CAMERA_FOCAL_POINT
    view_up: Tuple[float, float, float] = CAMERA_VIEW_UP
    fov: float = CAMERA_FOV
    near: float = CAMERA_NEAR
    far: float = CAMERA_FAR


@dataclass(frozen=True)
class LightSettings:
    ambient_intensity: float = AMBIENT_LIGHT_INTENSITY
    spot_intensity: float = SPOT_LIGHT_INTENSITY
    spot_position: Tuple[float, float, float] = SPOT_LIGHT_POSITION
    cast_shadows: bool = True


class Scene:
    """Owns every placed object plus the camera and lights used to view them."""

    def __init__(self, verbose: bool = False):
        self.objects: List[PlacedObject] = []
        self._next_object_id = 0
        self.verbose = verbose
        self.camera = CameraSettings()
        self.lights = LightSettings()
        self.background: ColorTuple = BACKGROUND_COLOR
        self.last_layout_metrics: Optional[Dict[str, Any]] = None

    def add_object(self, name: str, kind: str, mesh: trimesh.Trimesh, color: ColorTuple,
                   transform: Optional[np.ndarray] = None,
                   metadata: Optional[Dict[str, Any]] = None) -> Optional[PlacedObject]:
        """
        Adds an object to the scene.

        Returns:
            The created PlacedObject, or None if the mesh is empty.
        """
        if mesh is None or mesh.is_empty:
            print(f"Warning: Empty mesh for '{name}'. Skipping.")
            return None

        obj = PlacedObject(
            name=name,
            kind=kind,
            mesh=mesh,
            color=color,
            transform=np.eye(4) if transform is None else np.asarray(transform, dtype=float),
            metadata=metadata or {},
            object_id=self._next_object_id,
        )
        self.objects.append(obj)
        self._next_object_id += 1
        if self.verbose:
            print(f"  Added {kind} '{name}' (id={obj.object_id})")
        return obj

    def add_box(self, name: str, kind: str, position, dimensions, color: ColorTuple,
                metadata: Optional[Dict[str, Any]] = None) -> Optional[PlacedObject]:
        mesh = create_block_mesh(position, dimensions, color=color)
        transform = trimesh.transformations.translation_matrix(np.asarray(position, dtype=float))
        return self.add_object(name, kind, mesh, color, transform=transform, metadata=metadata)

    def build_room(self, params: LayoutParameters):
        """Adds floor, back wall, side walls and the screen for the room envelope."""
        width, depth, height = params.room_width, params.room_depth, params.room_height
        half_w, half_d = width / 2.0, depth / 2.0

        self.add_box("floor", KIND_FLOOR, (0.0, FLOOR_LEVEL - FLOOR_THICKNESS / 2.0, 0.0),
                     (width, FLOOR_THICKNESS, depth), FLOOR_COLOR)
        self.add_box("back_wall", KIND_WALL, (0.0, height / 2.0, -half_d - WALL_THICKNESS / 2.0),
                     (width, height, WALL_THICKNESS), WALL_COLOR, metadata={"side": "back"})
        for side, sign in (("left", -1.0), ("right", 1.0)):
            self.add_box(f"{side}_wall", KIND_WALL, (sign * (half_w + WALL_THICKNESS / 2.0), height / 2.0, 0.0),
                         (WALL_THICKNESS, height, depth), WALL_COLOR, metadata={"side": side})

        screen_width, screen_height = get_screen_dimensions(width, height)
        self.add_box("screen", KIND_SCREEN,
                     (0.0, height * SCREEN_CENTER_HEIGHT_RATIO, -half_d + SCREEN_WALL_OFFSET),
                     (screen_width, screen_height, SCREEN_THICKNESS), SCREEN_COLOR)

    def populate(self, layout: Layout, assets: AssetProvider):
        """Instantiates a riser block per RiserSpec and a seat clone per SeatSlot."""
        riser_color = assets.get_riser_material()
        for riser in layout.risers:
            if riser.size[1] <= 0:
                print(f"Warning: Riser for row {riser.row} is degenerate (thickness {riser.size[1]:.3f}). Skipping mesh.")
                continue
            self.add_box(f"riser_{riser.row}", KIND_RISER, riser.position, riser.size, riser_color,
                         metadata={"row": riser.row})

        prototype = assets.get_seat_prototype()
        for slot in layout.seats:
            transform = placement_matrix(slot.position, slot.yaw)
            self.add_object(
                f"seat_{slot.row}_{slot.seat}",
                KIND_SEAT,
                instance_mesh(prototype, transform),
                assets.seat_color,
                transform=transform,
                metadata={"row": slot.row, "seat": slot.seat},
            )

    def objects_of_kind(self, kind: str) -> List[PlacedObject]:
        return [obj for obj in self.objects if obj.kind == kind]

    def get_object_by_id(self, object_id: int) -> Optional[PlacedObject]:
        for obj in self.objects:
            if obj.object_id == object_id:
                return obj
        return None

    def get_all_meshes(self) -> List[trimesh.Trimesh]:
        return [obj.mesh for obj in self.objects if obj.mesh is not None]

    def bounds(self) -> np.ndarray:
        """(2, 3) array of min and max corners over all meshes."""
        meshes = self.get_all_meshes()
        if not meshes:
            return np.zeros((2, 3))
        stacked = np.vstack([mesh.bounds for mesh in meshes])
        return np.array([stacked.min(axis=0), stacked.max(axis=0)])


def build_auditorium(params: LayoutParameters, assets: Optional[AssetProvider] = None,
                     include_room: bool = True, verbose: bool = False) -> Scene:
    """
    Generates the seating layout and returns a populated Scene.

    Raises:
        InvalidParameters: Propagated from generate_layout().
    """
    layout = generate_layout(params)
    print(f"Building auditorium: {params.row_count} rows x {params.seats_per_row} seats, "
          f"room {params.room_width}x{params.room_height}x{params.room_depth}")

    scene = Scene(verbose=verbose)
    if include_room:
        scene.build_room(params)
    scene.populate(layout, assets or AssetProvider())
    scene.last_layout_metrics = get_layout_metrics(layout, params)

    degenerate = scene.last_layout_metrics["degenerate_riser_rows"]
    if degenerate:
        print(f"Warning: Rows {degenerate} have non-positive riser thickness (row_elevation={params.row_elevation}).")
    print(f"Auditorium complete: {len(layout.risers)} risers, {len(layout.seats)} seats, {len(scene.objects)} objects.")
    return scene
