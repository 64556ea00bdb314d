import unittest
from types import SimpleNamespace

import numpy as np
import trimesh

# Need to adjust sys.path if tests/ is not automatically recognized as part of the package
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from auditorium.constants import SEAT_PROTOTYPE_HEIGHT, SEAT_YAW
from auditorium.geometry import (
    create_block_mesh,
    create_seat_prototype_mesh,
    instance_mesh,
    merge_meshes_by_color,
    placement_matrix,
)
from auditorium.materials import ColorTuple, hex_to_rgba

RED: ColorTuple = (255, 0, 0, 255)
GREEN: ColorTuple = (0, 255, 0, 255)


class TestPrimitiveCreation(unittest.TestCase):

    def test_create_cube(self):
        """Unit cube centered at a position."""
        mesh = create_block_mesh(position=(1.0, 2.0, 3.0), dimensions=(1.0, 1.0, 1.0))
        self.assertIsInstance(mesh, trimesh.Trimesh)
        self.assertTrue(mesh.is_watertight)
        self.assertTrue(np.isclose(mesh.volume, 1.0))
        expected_bounds = np.array([[0.5, 1.5, 2.5], [1.5, 2.5, 3.5]])
        self.assertTrue(np.allclose(mesh.bounds, expected_bounds))

    def test_create_riser_sized_block(self):
        """Riser-like block: 18 wide, 1.5 thick, 2.5 deep, base on the floor."""
        mesh = create_block_mesh(position=(0.0, 0.75, 1.25), dimensions=(18.0, 1.5, 2.5), color=RED)
        self.assertTrue(np.isclose(mesh.volume, 18.0 * 1.5 * 2.5))
        self.assertTrue(np.isclose(mesh.bounds[0][1], 0.0))
        self.assertTrue(np.isclose(mesh.bounds[1][1], 1.5))
        self.assertEqual(tuple(mesh.visual.face_colors[0]), RED)

    def test_hex_to_rgba(self):
        self.assertEqual(hex_to_rgba(0x8B4513), (139, 69, 19, 255))
        self.assertEqual(hex_to_rgba(0x4A4A4A, alpha=128), (74, 74, 74, 128))


class TestSeatPrototype(unittest.TestCase):

    def setUp(self):
        self.seat = create_seat_prototype_mesh(GREEN)

    def test_centered_on_origin(self):
        center = self.seat.bounds.mean(axis=0)
        self.assertTrue(np.allclose(center, [0.0, 0.0, 0.0], atol=1e-9))
        self.assertTrue(np.isclose(self.seat.extents[1], SEAT_PROTOTYPE_HEIGHT))

    def test_faces_positive_x(self):
        """Only the backrest rises above the armrests, and it sits on the -X side."""
        high = self.seat.vertices[self.seat.vertices[:, 1] > 0.3]
        self.assertGreater(len(high), 0)
        self.assertTrue(np.all(high[:, 0] < 0.0))

    def test_colored(self):
        self.assertEqual(tuple(self.seat.visual.face_colors[0]), GREEN)


class TestPlacement(unittest.TestCase):

    def test_yaw_turns_positive_x_toward_screen(self):
        matrix = placement_matrix((0.0, 0.0, 0.0), SEAT_YAW)
        facing = matrix[:3, :3] @ np.array([1.0, 0.0, 0.0])
        self.assertTrue(np.allclose(facing, [0.0, 0.0, -1.0]))

    def test_translation(self):
        matrix = placement_matrix((-7.0, 1.0, 6.25), SEAT_YAW)
        self.assertTrue(np.allclose(matrix[:3, 3], [-7.0, 1.0, 6.25]))

    def test_instance_leaves_prototype_untouched(self):
        prototype = create_seat_prototype_mesh()
        original = prototype.vertices.copy()
        instance = instance_mesh(prototype, placement_matrix((3.0, 1.5, -2.0), SEAT_YAW))
        self.assertTrue(np.allclose(prototype.vertices, original))
        self.assertTrue(np.allclose(instance.bounds.mean(axis=0), [3.0, 1.5, -2.0]))

    def test_instanced_backrest_is_away_from_screen(self):
        instance = instance_mesh(create_seat_prototype_mesh(), placement_matrix((0.0, 0.0, 0.0), SEAT_YAW))
        high = instance.vertices[instance.vertices[:, 1] > 0.3]
        self.assertTrue(np.all(high[:, 2] > 0.0))


class TestMergeMeshesByColor(unittest.TestCase):

    def _obj(self, name, color, position):
        return SimpleNamespace(name=name, color=color, mesh=create_block_mesh(position, (1.0, 1.0, 1.0)))

    def test_empty_input(self):
        self.assertEqual(merge_meshes_by_color([]), [])

    def test_groups_by_color(self):
        objects = [
            self._obj("a", RED, (0.0, 0.5, 0.0)),
            self._obj("b", RED, (2.0, 0.5, 0.0)),
            self._obj("c", GREEN, (4.0, 0.5, 0.0)),
        ]
        merged = merge_meshes_by_color(objects)
        self.assertEqual(len(merged), 2)
        self.assertEqual(sum(len(mesh.faces) for mesh in merged), 36)
        colors = sorted(tuple(mesh.visual.face_colors[0]) for mesh in merged)
        self.assertEqual(colors, sorted([RED, GREEN]))

    def test_merged_volume(self):
        objects = [self._obj("a", RED, (0.0, 0.5, 0.0)), self._obj("b", RED, (3.0, 0.5, 0.0))]
        merged = merge_meshes_by_color(objects)
        self.assertEqual(len(merged), 1)
        self.assertTrue(np.isclose(merged[0].volume, 2.0))


if __name__ == '__main__':
    unittest.main()
