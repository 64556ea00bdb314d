import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

import trimesh

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cli import main


class TestGenerateCommand(unittest.TestCase):

    def _run(self, *argv):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main(list(argv))
        return code, buffer.getvalue()

    def test_invalid_parameters_exit_code(self):
        code, output = self._run("generate", "--rows", "0")
        self.assertEqual(code, 2)
        self.assertIn("Error:", output)

    def test_non_positive_spacing(self):
        code, _ = self._run("generate", "--seat-spacing", "-1")
        self.assertEqual(code, 2)

    def test_export_and_summary(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            out = os.path.join(tmp_dir, "hall.glb")
            code, output = self._run(
                "generate", "--rows", "3", "--seats-per-row", "4", "--no-room",
                "--seat-model", "", "--out", out, "--summary",
            )
            self.assertEqual(code, 0)
            self.assertTrue(os.path.exists(out))
            self.assertIn("seats=12", output)
            self.assertIn("risers=2", output)

            loaded = trimesh.load(out)
            self.assertEqual(len(loaded.geometry), 14)

    def test_config_command(self):
        code, output = self._run("config")
        self.assertEqual(code, 0)
        self.assertIn("Auditorium Configuration:", output)


if __name__ == '__main__':
    unittest.main()
