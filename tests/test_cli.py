import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from trimaze import HandRule, MalformedMazeError
from trimaze.cli import Command, main, trace_file, validate

SAMPLE_PATH = Path(__file__).parent / "data" / "sample.maze"


class CommandLineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self.tmp.name)
        self.short = self.tmp_dir / "short.maze"
        self.short.write_text("2 3\n0 0 0\n", encoding="utf-8")

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def _run(self, *argv: str):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_command_names(self) -> None:
        self.assertEqual([command.value for command in Command], ["test", "rpath", "lpath", "render"])

    def test_validate(self) -> None:
        self.assertTrue(validate(SAMPLE_PATH))
        self.assertFalse(validate(self.short))
        self.assertFalse(validate(self.tmp_dir / "missing.maze"))

    def test_trace_file(self) -> None:
        self.assertEqual(trace_file(SAMPLE_PATH, 6, 7, HandRule.RIGHT_HAND).path, [(6, 7)])
        with self.assertRaises(MalformedMazeError):
            trace_file(self.short, 1, 1, HandRule.LEFT_HAND)

    def test_test_command_prints_verdict(self) -> None:
        self.assertEqual(self._run("test", str(SAMPLE_PATH))[:2], (0, "Valid\n"))
        self.assertEqual(self._run("test", str(self.short))[:2], (0, "Invalid\n"))
        broken = self.tmp_dir / "broken.maze"
        broken.write_text("1 2\n0 1\n", encoding="utf-8")
        self.assertEqual(self._run("test", str(broken))[:2], (0, "Invalid\n"))

    def test_rpath_prints_coordinates(self) -> None:
        code, out, _ = self._run("rpath", "6", "1", str(SAMPLE_PATH))
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[:4], ["6,1", "6,2", "5,2", "5,3"])
        self.assertEqual(len(lines), 15)

    def test_lpath_json_output(self) -> None:
        code, out, _ = self._run("lpath", "1", "1", str(SAMPLE_PATH), "--json")
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual(payload["rule"], "left")
        self.assertEqual(payload["path"][-1], [3, 7])
        self.assertEqual(len(payload["path"]), 15)

    def test_rejected_entry_is_reported(self) -> None:
        code, out, _ = self._run("rpath", "3", "3", str(SAMPLE_PATH))
        self.assertEqual(code, 0)
        self.assertEqual(out, "Can't enter the maze from cell on row `3` and column `3`\n")

    def test_malformed_maze_is_an_error_in_path_mode(self) -> None:
        code, out, err = self._run("lpath", "1", "1", str(self.short))
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Invalid map", err)

    def test_looping_walk_is_an_error(self) -> None:
        looping = self.tmp_dir / "looping.maze"
        looping.write_text("1 3\n0 5 6\n", encoding="utf-8")
        code, _, err = self._run("rpath", "1", "1", str(looping))
        self.assertEqual(code, 1)
        self.assertIn("did not exit", err)

    def test_render_command(self) -> None:
        output = self.tmp_dir / "maze.png"
        code, _, _ = self._run(
            "render", str(SAMPLE_PATH), "-o", str(output), "--path", "6", "1", "--rule", "left", "--cell-size", "24"
        )
        self.assertEqual(code, 0)
        self.assertTrue(output.exists())

    def test_render_rejects_unenterable_path(self) -> None:
        output = self.tmp_dir / "maze.png"
        code, _, err = self._run("render", str(SAMPLE_PATH), "-o", str(output), "--path", "3", "3")
        self.assertEqual(code, 1)
        self.assertFalse(output.exists())
        self.assertIn("Can't enter", err)


if __name__ == "__main__":
    unittest.main()
