from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tetrus.game import Snapshot, TetrominoType
from tetrus.game.pieces import box_mask


BACKGROUND = (10, 10, 14)
EMPTY = (30, 30, 36)
SETTLED = (200, 200, 200)
GAME_OVER_TEXT = (128, 128, 128)


def _color_for_kind(kind: TetrominoType) -> Tuple[int, int, int]:
    palette = {
        TetrominoType.I: (0, 240, 240),
        TetrominoType.J: (0, 0, 240),
        TetrominoType.L: (240, 160, 0),
        TetrominoType.O: (240, 240, 0),
        TetrominoType.S: (0, 240, 0),
        TetrominoType.T: (160, 0, 240),
        TetrominoType.Z: (240, 0, 0),
    }
    return palette.get(kind, SETTLED)


class Renderer:
    """Draws a snapshot: the playable interior, next piece, level and lines.

    Border columns, the floor and the spawn row 0 are not drawn.
    """

    def __init__(self, cell_size: int = 40, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def board_size(self, snapshot: Snapshot) -> Tuple[int, int]:
        rows, cols = snapshot.grid.shape
        return (cols - 2) * self.cell_size, (rows - 2) * self.cell_size

    def window_size(self, snapshot: Snapshot) -> Tuple[int, int]:
        board_w, board_h = self.board_size(snapshot)
        panel_w = 6 * self.cell_size
        return board_w + panel_w + self.margin * 3, board_h + self.margin * 2

    def _fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None or self._big_font is None:
            self._font = pygame.font.Font(None, self.cell_size)
            self._big_font = pygame.font.Font(None, self.cell_size * 2)
        return self._font, self._big_font

    def _board_surface(self, snapshot: Snapshot) -> pygame.Surface:
        surf = pygame.Surface(self.board_size(snapshot))
        surf.fill(EMPTY)
        rows, cols = snapshot.grid.shape
        active = set(snapshot.piece.cells())
        for y in range(1, rows - 1):
            for x in range(1, cols - 1):
                if snapshot.grid[y, x] <= 0:
                    continue
                color = _color_for_kind(snapshot.piece.kind) if (x, y) in active else SETTLED
                rect = pygame.Rect(
                    (x - 1) * self.cell_size,
                    (y - 1) * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _preview_surface(self, kind: TetrominoType) -> pygame.Surface:
        surf = pygame.Surface((4 * self.cell_size, 4 * self.cell_size))
        surf.fill(BACKGROUND)
        mask = box_mask(kind, 0)
        for row, col in zip(*np.nonzero(mask)):
            rect = pygame.Rect(int(col) * self.cell_size, int(row) * self.cell_size, self.cell_size - 1, self.cell_size - 1)
            pygame.draw.rect(surf, _color_for_kind(kind), rect)
        return surf

    def draw(self, screen: pygame.Surface, snapshot: Snapshot) -> None:
        font, big_font = self._fonts()
        board_w, board_h = self.board_size(snapshot)
        panel_x = self.margin * 2 + board_w

        screen.fill(BACKGROUND)
        screen.blit(self._board_surface(snapshot), (self.margin, self.margin))
        screen.blit(self._preview_surface(snapshot.next_kind), (panel_x, self.margin))

        screen.blit(font.render(f"Level {snapshot.level}", True, SETTLED), (panel_x, self.margin + 5 * self.cell_size))
        screen.blit(font.render(f"Lines {snapshot.line_count}", True, SETTLED), (panel_x, self.margin + 6 * self.cell_size))

        if snapshot.game_over:
            text = big_font.render("Game Over!", True, GAME_OVER_TEXT)
            rect = text.get_rect(center=(self.margin + board_w // 2, self.margin + board_h // 2))
            screen.blit(text, rect)
