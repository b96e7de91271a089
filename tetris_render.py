"""
Rendering helpers for the pygame front-end.

- Pre-render one cell Surface per color tag and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
Everything drawn comes from a GameInfo snapshot; nothing here touches the session.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_config import HEIGHT, WIDTH, TETROMINO_HEIGHT, TETROMINO_WIDTH
from tetris_layout import CONTROL_ROW_H, HUD_ROW_H, PAD, Dims
from tetris_piece import COLORS, Kind
from tetris_session import GameInfo, State

# RGB per grid color tag
PALETTE: Dict[int, Tuple[int,int,int]] = {
    COLORS[Kind.I]: (102,224,255),
    COLORS[Kind.J]: (106,119,255),
    COLORS[Kind.L]: (255,158,94),
    COLORS[Kind.O]: (255,224,102),
    COLORS[Kind.S]: (94,224,142),
    COLORS[Kind.T]: (200,119,255),
    COLORS[Kind.Z]: (255,102,119),
}

TEXT = (200,210,240)
INTRO_MESSAGE = "Press ENTER to start"


@dataclass
class HudCache:
    score: int = -1
    high_score: int = -1
    level: int = -1
    speed: int = -1
    score_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    speed_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(WIDTH+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(HEIGHT+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.total_h - 2*d.margin)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        frame = pygame.Rect(d.pv_x-6, d.pv_y-6,
                            d.pv_cell*TETROMINO_WIDTH+12, d.pv_cell*TETROMINO_HEIGHT+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.pv_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for tag, col in PALETTE.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[tag] = s
            p = pygame.Surface((self.dims.pv_cell-2, self.dims.pv_cell-2))
            p.fill(col)
            self.pv_surf[tag] = p

    def draw_cell(self, screen: pygame.Surface, tag: int, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf[tag], (rx, ry))

    # ---------- Whole frame ----------
    def draw(self, screen: pygame.Surface, info: GameInfo):
        screen.blit(self.bg, (0,0))
        if info.field is not None:
            for y, row in enumerate(info.field):
                for x, tag in enumerate(row):
                    if tag:
                        self.draw_cell(screen, tag, x, y)
        if info.kind is not None:
            tag = COLORS[info.kind]
            for x, y in info.piece:
                self.draw_cell(screen, tag, x, y)
        self.draw_panel_hud(screen, info)
        if info.state == State.START:
            self._banner(screen, INTRO_MESSAGE)
        elif info.state == State.GAMEOVER:
            self._banner(screen, "GAME OVER (Enter to restart)")
        elif info.pause:
            self._banner(screen, "PAUSED (P to resume)")

    def _banner(self, screen: pygame.Surface, text: str):
        d = self.dims
        msg = self.big_font.render(text, True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, info: GameInfo):
        d = self.dims
        f = self.font
        if info.score != self.hud.score:
            self.hud.score = info.score
            self.hud.score_s = f.render(f"Score: {info.score}", True, TEXT)
        if info.high_score != self.hud.high_score:
            self.hud.high_score = info.high_score
            self.hud.high_s = f.render(f"High score: {info.high_score}", True, TEXT)
        if info.level != self.hud.level:
            self.hud.level = info.level
            self.hud.level_s = f.render(f"Level: {info.level}", True, TEXT)
        if info.speed != self.hud.speed:
            self.hud.speed = info.speed
            self.hud.speed_s = f.render(f"Speed: {info.speed}", True, TEXT)
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + PAD, d.panel_y + PAD))
        if info.next is not None:
            for y, row in enumerate(info.next):
                for x, tag in enumerate(row):
                    if tag:
                        screen.blit(self.pv_surf[tag], (d.pv_x + x*d.pv_cell + 1, d.pv_y + y*d.pv_cell + 1))
        y = d.hud_y
        for surf in (self.hud.score_s, self.hud.high_s, self.hud.level_s, self.hud.speed_s):
            screen.blit(surf, (d.panel_x + PAD, y)); y += HUD_ROW_H
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("Enter Start", True, (165,175,215)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("↓ Drop one", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("P Pause • Esc Quit", True, (165,175,215)),
            ]
        y = d.controls_y
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + PAD, y)); y += CONTROL_ROW_H
