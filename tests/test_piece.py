import unittest

from tetris_config import CELLS_IN_TETROMINO, TETROMINO_HEIGHT, TETROMINO_WIDTH, WIDTH
from tetris_piece import (COLORS, SHAPES, Kind, Tetromino, bounds, normalize, preview,
                          rotate_cw, rotated_cells, spawn_cells)
from tetris_rng import PieceRandom


class CatalogTests(unittest.TestCase):
    def test_every_kind_fits_the_box(self):
        for kind in Kind:
            cells = SHAPES[kind]
            self.assertEqual(len(set(cells)), CELLS_IN_TETROMINO, kind)
            for x, y in cells:
                self.assertTrue(0 <= x < TETROMINO_WIDTH and 0 <= y < TETROMINO_HEIGHT, kind)

    def test_colors_are_distinct_and_non_empty(self):
        self.assertEqual(len(set(COLORS.values())), len(Kind))
        self.assertNotIn(0, COLORS.values())

    def test_four_rotations_restore_layout(self):
        for kind in Kind:
            shape = normalize(SHAPES[kind])
            r = shape
            for _ in range(4):
                r = rotate_cw(r)
            self.assertEqual(r, shape, kind)

    def test_o_is_rotation_invariant(self):
        shape = normalize(SHAPES[Kind.O])
        r = shape
        for _ in range(7):
            r = rotate_cw(r)
            self.assertEqual(r, shape)

    def test_i_turns_vertical(self):
        self.assertEqual(rotate_cw(SHAPES[Kind.I]), ((0, 0), (0, 1), (0, 2), (0, 3)))

    def test_t_turns_clockwise(self):
        # .X.      X.
        # XXX  ->  XX
        #          X.
        self.assertEqual(rotate_cw(SHAPES[Kind.T]), ((0, 0), (0, 1), (1, 1), (0, 2)))

    def test_absolute_rotation_returns_home_after_four_turns(self):
        for kind in Kind:
            cells = [(x + 3, y + 5) for x, y in SHAPES[kind]]
            r = cells
            for _ in range(4):
                r = rotated_cells(r)
            self.assertEqual(sorted(r), sorted(cells), kind)

    def test_absolute_o_rotation_keeps_cells(self):
        cells = spawn_cells(Kind.O)
        self.assertEqual(sorted(rotated_cells(cells)), sorted(cells))

    def test_rotation_keeps_box_roughly_centered(self):
        cells = [(x + 3, y + 5) for x, y in SHAPES[Kind.I]]
        min_x, min_y, w, h = bounds(rotated_cells(cells))
        self.assertEqual((min_x, min_y, w, h), (4, 4, 1, 4))


class TetrominoTests(unittest.TestCase):
    def test_spawn_is_centered_on_top_row(self):
        piece = Tetromino.spawn(Kind.O)
        self.assertEqual(sorted(piece.cells), [(4, 0), (4, 1), (5, 0), (5, 1)])
        for kind in Kind:
            cells = spawn_cells(kind)
            self.assertEqual(min(y for _, y in cells), 0)
            self.assertTrue(all(0 <= x < WIDTH for x, _ in cells))

    def test_moved_does_not_mutate(self):
        piece = Tetromino.spawn(Kind.T)
        before = list(piece.cells)
        moved = piece.moved(1, 1)
        self.assertEqual(piece.cells, before)
        self.assertEqual(moved, [(x + 1, y + 1) for x, y in before])

    def test_preview_matrix(self):
        m = preview(Kind.I)
        self.assertEqual(len(m), TETROMINO_HEIGHT)
        self.assertEqual(m[0], (COLORS[Kind.I],) * TETROMINO_WIDTH)
        self.assertEqual(m[1], (0,) * TETROMINO_WIDTH)


class PieceRandomTests(unittest.TestCase):
    def test_same_seed_same_sequence(self):
        a, b = PieceRandom(42), PieceRandom(42)
        self.assertEqual([a.next_piece() for _ in range(50)], [b.next_piece() for _ in range(50)])

    def test_all_kinds_appear(self):
        rng = PieceRandom(7)
        seen = {rng.next_piece() for _ in range(500)}
        self.assertEqual(seen, set(Kind))


if __name__ == "__main__":
    unittest.main()
