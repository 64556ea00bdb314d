import os
import sys
import tempfile
import unittest
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from auditorium.constants import DEFAULT_ROW_COUNT, DEFAULT_SEAT_SPACING
from auditorium.layout import LayoutParameters
from config import Config

SETTINGS = (
    'SEAT_MODEL_PATH', 'SEAT_MODEL_SCALE', 'DEFAULT_ROOM_WIDTH', 'DEFAULT_ROOM_HEIGHT', 'DEFAULT_ROOM_DEPTH',
    'DEFAULT_ROW_COUNT', 'DEFAULT_SEATS_PER_ROW', 'DEFAULT_SEAT_SPACING', 'DEFAULT_ROW_SPACING',
    'DEFAULT_ROW_ELEVATION', 'EXPORT_DIR', 'DEBUG', 'VERBOSE',
)


def _clean_environ(**values):
    environ = {key: value for key, value in os.environ.items() if key not in SETTINGS}
    environ.update(values)
    return mock.patch.dict(os.environ, environ, clear=True)


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        with _clean_environ():
            cfg = Config()
            self.assertEqual(cfg.DEFAULT_ROW_COUNT, DEFAULT_ROW_COUNT)
            self.assertEqual(cfg.DEFAULT_SEAT_SPACING, DEFAULT_SEAT_SPACING)
            self.assertIsNone(cfg.SEAT_MODEL_PATH)
            self.assertFalse(cfg.DEBUG)
            self.assertEqual(cfg.validate(), [])

    def test_environment_overrides(self):
        with _clean_environ(DEFAULT_ROW_COUNT='8', DEFAULT_ROW_ELEVATION='0.4', VERBOSE='yes'):
            cfg = Config()
            self.assertEqual(cfg.DEFAULT_ROW_COUNT, 8)
            self.assertEqual(cfg.DEFAULT_ROW_ELEVATION, 0.4)
            self.assertTrue(cfg.VERBOSE)

            params = LayoutParameters.from_config(cfg)
            self.assertEqual(params.row_count, 8)
            self.assertEqual(params.row_elevation, 0.4)

    def test_malformed_values_fall_back(self):
        with _clean_environ(DEFAULT_ROW_COUNT='five', DEFAULT_SEAT_SPACING='wide'):
            cfg = Config()
            self.assertEqual(cfg.DEFAULT_ROW_COUNT, DEFAULT_ROW_COUNT)
            self.assertEqual(cfg.DEFAULT_SEAT_SPACING, DEFAULT_SEAT_SPACING)
            issues = cfg.validate()
            self.assertTrue(any('DEFAULT_ROW_COUNT is not an integer' in issue for issue in issues))
            self.assertTrue(any('DEFAULT_SEAT_SPACING is not a number' in issue for issue in issues))

    def test_validate_reports_bad_values(self):
        with _clean_environ(DEFAULT_ROW_SPACING='0', DEFAULT_ROW_ELEVATION='-0.5',
                            SEAT_MODEL_PATH='/nonexistent/seat.glb'):
            issues = Config().validate()
            self.assertIn("Default seat and row spacing must be positive", issues)
            self.assertTrue(any('negative' in issue for issue in issues))
            self.assertTrue(any('does not exist' in issue for issue in issues))

    def test_export_dir_created(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            target = os.path.join(tmp_dir, 'out')
            with _clean_environ(EXPORT_DIR=target):
                export_dir = Config().EXPORT_DIR
                self.assertEqual(str(export_dir), target)
                self.assertTrue(export_dir.is_dir())


if __name__ == '__main__':
    unittest.main()
