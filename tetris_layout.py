# tetris_layout.py
from dataclasses import dataclass

from tetris_config import CONFIG, HEIGHT, TETROMINO_HEIGHT, TETROMINO_WIDTH, WIDTH

PAD = 12            # inner padding of the side panel
HUD_ROWS = 4        # score, high score, level, speed
HUD_ROW_H = 24
HUD_TEXT_W = 150    # widest HUD line ("High score: 99999")
CONTROL_ROWS = 7
CONTROL_ROW_H = 20


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    pv_cell: int
    pv_x: int
    pv_y: int
    hud_y: int
    controls_y: int


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16

    board_w = WIDTH * cell
    board_h = HEIGHT * cell

    # next-piece box holds one TETROMINO_HEIGHT x TETROMINO_WIDTH preview
    pv_cell = max(14, int(cell * 0.75))
    pv_box_w = pv_cell * TETROMINO_WIDTH + 12
    pv_box_h = pv_cell * TETROMINO_HEIGHT + 12
    panel_w = 2 * PAD + max(pv_box_w, HUD_TEXT_W)

    panel_x = margin + board_w + margin
    panel_y = margin
    pv_x = panel_x + PAD + 6
    pv_y = panel_y + 40
    hud_y = pv_y + pv_box_h + PAD
    controls_y = hud_y + HUD_ROWS * HUD_ROW_H + PAD
    panel_h = controls_y + CONTROL_ROWS * CONTROL_ROW_H + PAD - panel_y

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=panel_x + panel_w + margin,
        total_h=margin + max(board_h, panel_h) + margin,
        board_x=margin, board_y=margin,
        panel_x=panel_x, panel_y=panel_y,
        pv_cell=pv_cell, pv_x=pv_x, pv_y=pv_y,
        hud_y=hud_y, controls_y=controls_y,
    )
