import os

import trimesh

from .constants import FILE_EXT_GLB
from .geometry import merge_meshes_by_color
from .scene import Scene


def export_scene_to_glb(scene: Scene, file_path: str, merge: bool = False) -> str:
    """
    Exports every object of the scene to a single GLB file (binary glTF).

    Each placed object becomes a named node. With merge=True, meshes sharing a
    color are concatenated first and nodes are named by color group.

    Args:
        scene: The built Scene.
        file_path: Output path; ".glb" is appended if missing.
        merge: Concatenate meshes by color before export.

    Returns:
        The path written.

    Raises:
        ValueError: If the scene has no objects.
        Exception: Propagates exceptions from trimesh export.
    """
    if not scene.objects:
        raise ValueError("Cannot export an empty scene.")

    if not file_path.lower().endswith(FILE_EXT_GLB):
        file_path += FILE_EXT_GLB

    # Ensure the directory exists (if one is present)
    export_dir = os.path.dirname(file_path)
    if export_dir:
        os.makedirs(export_dir, exist_ok=True)

    export = trimesh.Scene()
    if merge:
        for index, mesh in enumerate(merge_meshes_by_color(scene.objects)):
            export.add_geometry(mesh, node_name=f"group_{index}", geom_name=f"group_{index}")
    else:
        for obj in scene.objects:
            export.add_geometry(obj.mesh, node_name=obj.name, geom_name=obj.name)

    print(f"Exporting {len(export.geometry)} meshes to: {file_path}")
    try:
        export.export(file_obj=file_path, file_type="glb")
        print("Export successful.")
    except Exception as e:
        print(f"Error during GLB export: {e}")
        raise
    return file_path
