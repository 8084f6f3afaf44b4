from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np


Coordinate = Tuple[int, int]

BORDER = 1


class Playfield:
    """Bordered occupancy grid.

    Cells hold small counts: 0 is empty, 1 is a settled block. The left and
    right columns and the bottom row are permanent border cells with value 1,
    so the walls and the floor collide exactly like settled blocks do.
    Indexing is ``[row, column]`` with row 0 at the top.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.int8)
        self.reset()

    @property
    def floor_row(self) -> int:
        return self.height - 1

    def reset(self) -> None:
        self.cells.fill(0)
        self.cells[self.floor_row, :] = BORDER
        self.cells[:, 0] = BORDER
        self.cells[:, self.width - 1] = BORDER

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def overlay(self, cells: Iterable[Coordinate]) -> np.ndarray:
        """Copy of the settled grid with +1 added at every given cell."""
        board = self.cells.copy()
        for x, y in cells:
            board[y, x] += 1
        return board

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        cells = list(cells)
        if not all(self.is_inside(x, y) for x, y in cells):
            return False
        return bool(np.all(self.overlay(cells) <= 1))

    def merge(self, cells: Iterable[Coordinate]) -> None:
        # Poses reaching here passed can_place, so counts stay at 1.
        for x, y in cells:
            self.cells[y, x] += 1

    def full_rows(self) -> List[int]:
        rows = np.where(np.all(self.cells[: self.floor_row] != 0, axis=1))[0]
        return [int(r) for r in rows]

    def clear_full_lines(self) -> int:
        """Collapse full rows top to bottom and return how many were cleared.

        Each full row takes the interior of the row above it, cascading up to
        row 1, and row 0 is emptied. Border columns are never touched.
        """
        cleared = 0
        for row in range(self.floor_row):
            if not np.all(self.cells[row] != 0):
                continue
            cleared += 1
            self.cells[1 : row + 1, 1:-1] = self.cells[0:row, 1:-1].copy()
            self.cells[0, 1:-1] = 0
        return cleared
