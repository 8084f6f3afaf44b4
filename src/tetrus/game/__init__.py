"""Game module for Tetrus.

Exports the rule engine and supporting classes:
- Playfield: bordered occupancy grid, overlay collision and line clearing
- Piece: falling piece pose over the static shape table
- TetrominoType: enum of the seven piece kinds
- RandomBag: seven-piece bag randomizer with a lookahead slot
- ProgressionRules: level and gravity curves
- GameEngine: tick/input driven game state
"""

from .grid import Playfield
from .pieces import Piece, TetrominoType, SHAPE_TABLE
from .bag import RandomBag
from .rules import ProgressionRules
from .core import GameEngine, GameConfig, Snapshot, Action, Direction, TICK_MS

__all__ = [
    "Playfield",
    "Piece",
    "TetrominoType",
    "SHAPE_TABLE",
    "RandomBag",
    "ProgressionRules",
    "GameEngine",
    "GameConfig",
    "Snapshot",
    "Action",
    "Direction",
    "TICK_MS",
]
