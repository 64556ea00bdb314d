from collections import defaultdict
from typing import Iterable, List, Optional, Sequence

import numpy as np
import trimesh

from .constants import (
    SEAT_ARM_HEIGHT,
    SEAT_ARM_WIDTH,
    SEAT_BACK_THICKNESS,
    SEAT_PAN_HEIGHT,
    SEAT_PAN_THICKNESS,
    SEAT_PROTOTYPE_DEPTH,
    SEAT_PROTOTYPE_HEIGHT,
    SEAT_PROTOTYPE_WIDTH,
)
from .materials import SEAT_COLOR, ColorTuple


def apply_color(mesh: trimesh.Trimesh, color: ColorTuple) -> trimesh.Trimesh:
    """Paints every face of the mesh with a single RGBA color (in place)."""
    mesh.visual = trimesh.visual.ColorVisuals(mesh=mesh)
    mesh.visual.face_colors = np.tile(color, (len(mesh.faces), 1))
    return mesh


def create_block_mesh(position: Sequence[float] = (0.0, 0.0, 0.0),
                      dimensions: Sequence[float] = (1.0, 1.0, 1.0),
                      color: Optional[ColorTuple] = None) -> trimesh.Trimesh:
    """
    Creates a rectangular prism mesh centered at a specified position.

    Args:
        position: The center of the prism (x, y, z).
        dimensions: Width(X), height(Y), depth(Z).
        color: Optional RGBA face color.

    Returns:
        A trimesh.Trimesh object representing the prism.
    """
    primitive = trimesh.primitives.Box(extents=np.asarray(dimensions, dtype=float))
    primitive.apply_translation(np.asarray(position, dtype=float))
    mesh = trimesh.Trimesh(vertices=primitive.vertices, faces=primitive.faces)
    if color is not None:
        apply_color(mesh, color)
    return mesh


def create_seat_prototype_mesh(color: ColorTuple = SEAT_COLOR) -> trimesh.Trimesh:
    """
    Builds a box-part cinema seat: pan, backrest and two armrests.

    The seat faces +X (backrest at -X) and its bounding box is centered on the
    origin, so a placement yaw of pi/2 turns it toward the -Z screen wall.
    """
    half_h = SEAT_PROTOTYPE_HEIGHT / 2.0
    half_d = SEAT_PROTOTYPE_DEPTH / 2.0
    half_w = SEAT_PROTOTYPE_WIDTH / 2.0
    base_y = -half_h

    pan = create_block_mesh(
        position=(SEAT_BACK_THICKNESS / 2.0, base_y + SEAT_PAN_HEIGHT - SEAT_PAN_THICKNESS / 2.0, 0.0),
        dimensions=(SEAT_PROTOTYPE_DEPTH - SEAT_BACK_THICKNESS,
                    SEAT_PAN_THICKNESS,
                    SEAT_PROTOTYPE_WIDTH - 2 * SEAT_ARM_WIDTH),
    )
    # Pedestal fills the space between the floor and the pan
    pedestal_height = SEAT_PAN_HEIGHT - SEAT_PAN_THICKNESS
    pedestal = create_block_mesh(
        position=(SEAT_BACK_THICKNESS / 2.0, base_y + pedestal_height / 2.0, 0.0),
        dimensions=(SEAT_PROTOTYPE_DEPTH * 0.4, pedestal_height, SEAT_PROTOTYPE_WIDTH * 0.4),
    )
    back = create_block_mesh(
        position=(-half_d + SEAT_BACK_THICKNESS / 2.0, 0.0, 0.0),
        dimensions=(SEAT_BACK_THICKNESS, SEAT_PROTOTYPE_HEIGHT, SEAT_PROTOTYPE_WIDTH),
    )
    arms = [
        create_block_mesh(
            position=(SEAT_BACK_THICKNESS / 2.0, base_y + SEAT_ARM_HEIGHT / 2.0, side * (half_w - SEAT_ARM_WIDTH / 2.0)),
            dimensions=(SEAT_PROTOTYPE_DEPTH - SEAT_BACK_THICKNESS, SEAT_ARM_HEIGHT, SEAT_ARM_WIDTH),
        )
        for side in (-1.0, 1.0)
    ]

    seat = trimesh.util.concatenate([pan, pedestal, back] + arms)
    return apply_color(seat, color)


def placement_matrix(position: Sequence[float], yaw: float) -> np.ndarray:
    """4x4 transform: rotate by yaw about +Y, then translate to position."""
    rotation = trimesh.transformations.rotation_matrix(yaw, [0.0, 1.0, 0.0])
    translation = trimesh.transformations.translation_matrix(np.asarray(position, dtype=float))
    return trimesh.transformations.concatenate_matrices(translation, rotation)


def instance_mesh(prototype: trimesh.Trimesh, transform: np.ndarray) -> trimesh.Trimesh:
    """Returns a transformed copy of the prototype; the prototype is untouched."""
    instance = prototype.copy()
    instance.apply_transform(transform)
    return instance


def merge_meshes_by_color(objects: Iterable) -> List[trimesh.Trimesh]:
    """
    Merges placed objects that share a color into one mesh per color.

    Meshes are concatenated, not boolean-unioned.

    Args:
        objects: PlacedObject-like items exposing .mesh and .color.

    Returns:
        A list of trimesh.Trimesh objects, one per color group.
    """
    objects = list(objects)
    print("Merging meshes by color...")
    if not objects:
        return []

    meshes_by_color = defaultdict(list)
    for obj in objects:
        if obj.mesh is None or obj.mesh.is_empty:
            print(f"  Skipping '{getattr(obj, 'name', '?')}': no mesh.")
            continue
        meshes_by_color[tuple(obj.color)].append(obj.mesh)

    merged = []
    for color, mesh_list in meshes_by_color.items():
        if len(mesh_list) == 1:
            combined = mesh_list[0].copy()
        else:
            combined = trimesh.util.concatenate(mesh_list)
        merged.append(apply_color(combined, color))

    print(f"Merge finished. Reduced {len(objects)} objects to {len(merged)} meshes.")
    return merged
