
"""
Rendering helpers for the pygame front end.

- Static background (grid + panel frame) is drawn once per Dims.
- Locked cells are cached on a board surface, rebuilt only when the board changes.
- Letter glyphs are rendered once per (letter, colour) and reused.
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import pygame

from letterfall_board import Board, Cell, CellKind
from letterfall_layout import Dims
from letterfall_piece import SHAPES, shape_cells

Color = Tuple[int, int, int]

KIND_COLORS: Dict[CellKind, Color] = {
    CellKind.LETTER: (102, 224, 255),
    CellKind.JUNK: (110, 110, 130),
    CellKind.WILD: (255, 224, 102),
    CellKind.BOMB: (255, 102, 119),
}
ACTIVE_COLOR: Color = (200, 119, 255)
TEXT_DARK: Color = (10, 13, 34)
TEXT_LIGHT: Color = (200, 210, 240)


class RenderAssets:
    def __init__(self, dims: Dims, font: pygame.font.Font, rows: int, cols: int):
        self.dims = dims
        self.font = font
        self.rows, self.cols = rows, cols
        self.glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}
        self._make_static()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key: Optional[Board] = None

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10, 13, 34))
        grid_col = (40, 50, 90)
        for x in range(self.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel)
        pygame.draw.rect(self.bg, (50, 60, 100), panel, 1)

    def _glyph(self, text: str, color: Color) -> pygame.Surface:
        key = (text, color)
        if key not in self.glyphs:
            self.glyphs[key] = self.font.render(text, True, color)
        return self.glyphs[key]

    def _draw_tile(self, surf: pygame.Surface, x: int, y: int, color: Color, text: str, outline=False):
        c = self.dims.cell
        rect = pygame.Rect(x + 1, y + 1, c - 2, c - 2)
        if outline:
            pygame.draw.rect(surf, color, rect.inflate(-6, -6), 2)
            return
        pygame.draw.rect(surf, color, rect)
        if text:
            g = self._glyph(text, TEXT_DARK)
            surf.blit(g, g.get_rect(center=rect.center))

    # ---------- Board ----------
    def draw_board(self, screen: pygame.Surface, board: Board):
        if board is not self._board_key:
            self.board_surface.fill((0, 0, 0, 0))
            c = self.dims.cell
            for y, row in enumerate(board):
                for x, cell in enumerate(row):
                    if not cell.is_empty:
                        self._draw_tile(self.board_surface, x * c, y * c,
                                        KIND_COLORS[cell.kind], _label(cell))
            self._board_key = board
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))

    def draw_piece(self, screen: pygame.Surface, piece, ghost_row: Optional[int] = None):
        d = self.dims
        for r, c, _ in piece.cells():
            if ghost_row is not None:
                gy = ghost_row + (r - piece.row)
                self._draw_tile(screen, d.board_x + c * d.cell, d.board_y + gy * d.cell,
                                ACTIVE_COLOR, "", outline=True)
        for r, c, letter in piece.cells():
            self._draw_tile(screen, d.board_x + c * d.cell, d.board_y + r * d.cell,
                            ACTIVE_COLOR, letter)

    # ---------- HUD / Panel ----------
    def draw_panel(self, screen: pygame.Surface, state, recent: Sequence[str]):
        d = self.dims
        x = d.panel_x + 12
        lines = [
            ("Letterfall", (197, 202, 233)),
            (f"Score: {state.score}", TEXT_LIGHT),
            (f"Level: {state.level}", TEXT_LIGHT),
            (f"Words: {state.lines_cleared}", TEXT_LIGHT),
            (f"Combo: {state.combo}", TEXT_LIGHT),
        ]
        y = d.panel_y + 12
        for text, color in lines:
            screen.blit(self._glyph(text, color), (x, y))
            y += 24
        screen.blit(self._glyph("Next:", TEXT_LIGHT), (x, y + 6))
        self._draw_queue(screen, state.queue[:3], x, y + 30)
        y = d.panel_y + 330
        screen.blit(self._glyph("Found:", TEXT_LIGHT), (x, y))
        for word in recent:
            y += 20
            screen.blit(self._glyph(word, (165, 175, 215)), (x, y))

    def _draw_queue(self, screen: pygame.Surface, queue: Sequence[int], x: int, y: int):
        pv = max(10, self.dims.cell // 2)
        for i, shape_index in enumerate(queue):
            ox = x + i * (pv * 4 + 8)
            for r, c in shape_cells(SHAPES[shape_index]):
                pygame.draw.rect(screen, KIND_COLORS[CellKind.LETTER],
                                 (ox + c * pv + 1, y + r * pv + 1, pv - 2, pv - 2))

    def draw_banner(self, screen: pygame.Surface, font: pygame.font.Font, text: str):
        d = self.dims
        msg = font.render(text, True, (255, 220, 220))
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)))


def _label(cell: Cell) -> str:
    if cell.kind is CellKind.BOMB:
        return "*"
    return cell.ch or ""
