import unittest
from unittest import mock

from tetris_board import Grid, collide, merge
from tetris_config import HEIGHT, WIDTH
from tetris_errors import ResourceFault


class GridTests(unittest.TestCase):
    def test_new_grid_is_empty(self):
        grid = Grid()
        self.assertEqual(grid.occupied(), 0)
        self.assertEqual(len(grid.rows()), HEIGHT)
        self.assertTrue(all(len(r) == WIDTH for r in grid.rows()))

    def test_accessors_are_bounds_checked(self):
        grid = Grid()
        for x, y in [(-1, 0), (WIDTH, 0), (0, -1), (0, HEIGHT)]:
            with self.assertRaises(IndexError):
                grid.get(x, y)
            with self.assertRaises(IndexError):
                grid.set(x, y, 1)

    def test_set_and_get_are_row_major(self):
        grid = Grid()
        grid.set(3, 2, 5)
        self.assertEqual(grid.get(3, 2), 5)
        self.assertEqual(grid.cells[2 * WIDTH + 3], 5)
        self.assertEqual(grid.row(2)[3], 5)

    def test_allocation_failure_is_resource_fault(self):
        class NoRoom:
            def __mul__(self, other):
                raise MemoryError

        with mock.patch("tetris_board.HEIGHT", NoRoom()):
            with self.assertRaises(ResourceFault):
                Grid()


class CollideTests(unittest.TestCase):
    def test_inside_empty_grid_does_not_collide(self):
        grid = Grid()
        self.assertFalse(collide(grid, [(0, 0), (WIDTH - 1, 0), (0, HEIGHT - 1), (WIDTH - 1, HEIGHT - 1)]))

    def test_each_boundary_collides(self):
        grid = Grid()
        for cell in [(0, -1), (0, HEIGHT), (-1, 0), (WIDTH, 0)]:
            self.assertTrue(collide(grid, [(4, 4), cell]), cell)

    def test_occupied_cell_collides(self):
        grid = Grid()
        grid.set(4, 10, 2)
        self.assertTrue(collide(grid, [(4, 10)]))
        self.assertFalse(collide(grid, [(5, 10), (4, 9)]))

    def test_merge_writes_color(self):
        grid = Grid()
        merge(grid, [(0, 19), (1, 19)], 7)
        self.assertEqual(grid.row(19)[:3], [7, 7, 0])


class SweepTests(unittest.TestCase):
    def fill_row(self, grid, y, color=1):
        for x in range(WIDTH):
            grid.set(x, y, color)

    def test_no_full_rows(self):
        grid = Grid()
        grid.set(0, HEIGHT - 1, 1)
        self.assertEqual(grid.sweep(), 0)
        self.assertEqual(grid.occupied(), 1)

    def test_rows_above_shift_down_unchanged(self):
        grid = Grid()
        pattern = {(0, 16): 3, (2, 16): 4, (9, 17): 5, (5, 18): 6}
        for (x, y), c in pattern.items():
            grid.set(x, y, c)
        self.fill_row(grid, HEIGHT - 1)
        self.assertEqual(grid.sweep(), 1)
        for (x, y), c in pattern.items():
            self.assertEqual(grid.get(x, y + 1), c)
        self.assertEqual(grid.occupied(), len(pattern))
        self.assertEqual(grid.row(0), [0] * WIDTH)

    def test_separated_full_rows(self):
        grid = Grid()
        self.fill_row(grid, 19)
        grid.set(1, 18, 2)
        self.fill_row(grid, 17)
        grid.set(8, 16, 3)
        self.assertEqual(grid.sweep(), 2)
        self.assertEqual(grid.get(1, 19), 2)
        self.assertEqual(grid.get(8, 18), 3)
        self.assertEqual(grid.occupied(), 2)

    def test_four_rows_at_once(self):
        grid = Grid()
        for y in range(16, 20):
            self.fill_row(grid, y)
        grid.set(0, 15, 1)
        self.assertEqual(grid.sweep(), 4)
        self.assertEqual(grid.get(0, 19), 1)
        self.assertEqual(grid.occupied(), 1)

    def test_full_top_row(self):
        grid = Grid()
        self.fill_row(grid, 0)
        self.assertEqual(grid.sweep(), 1)
        self.assertEqual(grid.occupied(), 0)


if __name__ == "__main__":
    unittest.main()
