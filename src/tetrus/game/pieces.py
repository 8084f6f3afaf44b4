from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 0
    J = 1
    L = 2
    O = 3
    S = 4
    T = 5
    Z = 6


ROTATIONS = 4
BOX_SIZE = 4

Coordinate = Tuple[int, int]


def _freeze(table: np.ndarray) -> np.ndarray:
    table.setflags(write=False)
    return table


# [kind, rotation, cell] -> offset inside the 4x4 box, offset = row * 4 + col
SHAPE_TABLE = _freeze(np.array(
    [
        # I
        [[4, 5, 6, 7], [2, 6, 10, 14], [8, 9, 10, 11], [1, 5, 9, 13]],
        # J
        [[0, 4, 5, 6], [1, 2, 5, 9], [4, 5, 6, 10], [1, 5, 8, 9]],
        # L
        [[2, 4, 5, 6], [1, 5, 9, 10], [4, 5, 6, 8], [0, 1, 5, 9]],
        # O
        [[1, 2, 5, 6], [1, 2, 5, 6], [1, 2, 5, 6], [1, 2, 5, 6]],
        # S
        [[1, 2, 4, 5], [1, 5, 6, 10], [5, 6, 8, 9], [0, 4, 5, 9]],
        # T
        [[1, 4, 5, 6], [1, 5, 6, 9], [4, 5, 6, 9], [1, 4, 5, 9]],
        # Z
        [[0, 1, 5, 6], [2, 5, 6, 9], [4, 5, 9, 10], [1, 4, 5, 8]],
    ],
    dtype=np.int8,
))


def box_offsets(kind: TetrominoType, rotation: int) -> List[Coordinate]:
    """Return the (col, row) offsets of a shape inside its 4x4 box."""
    offsets = SHAPE_TABLE[int(kind), rotation % ROTATIONS]
    return [(int(f) % BOX_SIZE, int(f) // BOX_SIZE) for f in offsets]


def box_mask(kind: TetrominoType, rotation: int = 0) -> np.ndarray:
    mask = np.zeros((BOX_SIZE, BOX_SIZE), dtype=np.int8)
    for col, row in box_offsets(kind, rotation):
        mask[row, col] = 1
    return mask


@dataclass(frozen=True)
class Piece:
    """Pose of the falling piece: shape, rotation phase and box origin."""

    kind: TetrominoType
    rotation: int = 0  # 0..3
    column: int = 0
    row: int = 0

    def cells(self) -> List[Coordinate]:
        return [(self.column + dc, self.row + dr) for dc, dr in box_offsets(self.kind, self.rotation)]

    def moved(self, d_col: int, d_row: int) -> "Piece":
        return replace(self, column=self.column + d_col, row=self.row + d_row)

    def rotated(self, delta: int = 1) -> "Piece":
        return replace(self, rotation=(self.rotation + delta) % ROTATIONS)
