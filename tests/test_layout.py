import unittest
from unittest import mock

from tetris_config import HEIGHT, TETROMINO_HEIGHT, TETROMINO_WIDTH, WIDTH
from tetris_layout import CONTROL_ROW_H, CONTROL_ROWS, HUD_ROW_H, HUD_ROWS, HUD_TEXT_W, PAD, compute_dims


class ComputeDimsTests(unittest.TestCase):
    def test_board_follows_grid_dimensions(self):
        d = compute_dims()
        self.assertEqual((d.board_w, d.board_h), (WIDTH * d.cell, HEIGHT * d.cell))
        self.assertEqual(d.panel_x, d.board_x + d.board_w + d.margin)

    def test_panel_fits_preview_and_hud(self):
        d = compute_dims()
        pv_box_w = d.pv_cell * TETROMINO_WIDTH + 12
        self.assertGreaterEqual(d.panel_w, pv_box_w + 2 * PAD)
        self.assertGreaterEqual(d.panel_w, HUD_TEXT_W + 2 * PAD)
        self.assertGreaterEqual(d.hud_y, d.pv_y + d.pv_cell * TETROMINO_HEIGHT)
        self.assertGreaterEqual(d.controls_y, d.hud_y + HUD_ROWS * HUD_ROW_H)
        self.assertLessEqual(d.controls_y + CONTROL_ROWS * CONTROL_ROW_H, d.total_h)
        self.assertEqual(d.total_w, d.panel_x + d.panel_w + d.margin)

    @mock.patch.dict("tetris_layout.CONFIG", {"CELL_SIZE": 48})
    def test_large_cells_widen_preview_panel(self):
        d = compute_dims()
        self.assertEqual(d.pv_cell, 36)
        self.assertEqual(d.panel_w, 2 * PAD + 36 * TETROMINO_WIDTH + 12)
        self.assertEqual(d.total_h, 2 * d.margin + HEIGHT * 48)


if __name__ == "__main__":
    unittest.main()
