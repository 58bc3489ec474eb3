import tempfile
import unittest
from pathlib import Path

import numpy as np

from trimaze import CellOutOfRangeError, MalformedMazeError, MazeGrid, load_maze, parse_maze
from trimaze.borders import Border

SAMPLE_PATH = Path(__file__).parent / "data" / "sample.maze"


class LoaderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self.tmp.name)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_sample_maze_dimensions_and_cells(self) -> None:
        grid = load_maze(SAMPLE_PATH)
        self.assertEqual((grid.rows, grid.cols), (6, 7))
        self.assertEqual(grid.cells.dtype, np.uint8)
        self.assertEqual(grid.to_rows()[0], [1, 4, 4, 2, 5, 0, 6])
        self.assertEqual(grid.cell_value(3, 2), 7)

    def test_separators_and_out_of_range_digits_are_skipped(self) -> None:
        grid = parse_maze("2 3 trailing words\n1,2;3\n  9 4x5 8 6\n")
        self.assertEqual(grid.to_rows(), [[1, 2, 3], [4, 5, 6]])

    def test_blank_lines_do_not_count_as_rows(self) -> None:
        grid = parse_maze("2 2\n\n0 0\n   \n0 0\n\n")
        self.assertEqual((grid.rows, grid.cols), (2, 2))

    def test_missing_row_is_malformed(self) -> None:
        with self.assertRaises(MalformedMazeError):
            parse_maze("2 3\n0 0 0\n")

    def test_extra_row_is_malformed(self) -> None:
        with self.assertRaises(MalformedMazeError):
            parse_maze("1 2\n0 0\n0 0\n")

    def test_short_row_is_malformed(self) -> None:
        with self.assertRaises(MalformedMazeError) as ctx:
            parse_maze("2 3\n0 0 0\n0 0\n")
        self.assertIn("Line 3", str(ctx.exception))

    def test_bad_header_is_malformed(self) -> None:
        for text in ("", "three four\n0\n", "0 2\n", "2\n0 0\n"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedMazeError):
                    parse_maze(text)

    def test_missing_file_is_malformed(self) -> None:
        with self.assertRaises(MalformedMazeError) as ctx:
            load_maze(self.tmp_dir / "missing.maze")
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_text_round_trip(self) -> None:
        grid = load_maze(SAMPLE_PATH)
        written = grid.write(self.tmp_dir / "nested" / "copy.maze")
        reloaded = load_maze(written)
        self.assertEqual(reloaded, grid)
        self.assertEqual(reloaded.to_rows(), grid.to_rows())


class GridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = MazeGrid.from_rows([[1, 2, 4], [3, 5, 6]])

    def test_has_border_uses_one_indexed_coordinates(self) -> None:
        self.assertTrue(self.grid.has_border(1, 1, Border.LEFT))
        self.assertFalse(self.grid.has_border(1, 1, Border.RIGHT))
        self.assertTrue(self.grid.has_border(2, 3, Border.TOP_OR_BOTTOM))
        self.assertTrue(self.grid.has_border(2, 3, Border.RIGHT))

    def test_out_of_range_access_raises(self) -> None:
        with self.assertRaises(CellOutOfRangeError):
            self.grid.cell_value(2, 0)
        with self.assertRaises(CellOutOfRangeError):
            self.grid.has_border(0, 1, Border.LEFT)
        with self.assertRaises(IndexError):
            self.grid.has_border(1, 4, Border.LEFT)

    def test_high_bits_are_masked_and_cells_are_read_only(self) -> None:
        grid = MazeGrid(np.array([[0b11111010]], dtype=np.uint8))
        self.assertEqual(grid.cell_value(0, 0), 0b010)
        with self.assertRaises(ValueError):
            grid.cells[0, 0] = 1

    def test_ragged_rows_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            MazeGrid.from_rows([[0, 0], [0]])


if __name__ == "__main__":
    unittest.main()
