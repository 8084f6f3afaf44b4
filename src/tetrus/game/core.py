from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .bag import RandomBag
from .grid import Playfield
from .pieces import BOX_SIZE, Piece, TetrominoType
from .rules import ProgressionRules


logger = logging.getLogger(__name__)

# Wall-clock length of one tick; gravity thresholds are counted in ticks.
TICK_MS = 10


class Direction(IntEnum):
    LEFT = -1
    RIGHT = 1


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3


@dataclass
class GameConfig:
    width: int = 12
    height: int = 19
    spawn_column: int = 4
    spawn_row: int = 0
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 2:
            raise ValueError(f"board {self.width}x{self.height} leaves no playable cells")
        if not (0 <= self.spawn_column and self.spawn_column + BOX_SIZE <= self.width):
            raise ValueError(f"spawn column {self.spawn_column} does not fit a {self.width}-wide board")
        if not (0 <= self.spawn_row and self.spawn_row + BOX_SIZE <= self.height):
            raise ValueError(f"spawn row {self.spawn_row} does not fit a {self.height}-high board")


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only view of one engine state, safe to hand to a renderer."""

    grid: np.ndarray
    piece: Piece
    next_kind: TetrominoType
    level: int
    line_count: int
    game_over: bool

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid)) and (
            self.piece, self.next_kind, self.level, self.line_count, self.game_over
        ) == (other.piece, other.next_kind, other.level, other.line_count, other.game_over)


class GameEngine:
    """Rule engine for one falling-block session.

    The engine is driven from outside: ``tick()`` once per ``TICK_MS`` quantum,
    and ``move``/``rotate``/``soft_drop`` on input events. Every call is a
    bounded synchronous state change; renderers read ``snapshot()``.

    Once ``game_over`` is set the four commands do nothing until
    ``new_game()`` is called.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ProgressionRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ProgressionRules()
        self.rng = random.Random(self.config.random_seed)
        self.playfield = Playfield(self.config.width, self.config.height)
        self.bag = RandomBag(self.rng)
        self.piece = Piece(TetrominoType.I)
        self.level = 1
        self.line_count = 0
        self.gravity = 1.0
        self.ticks = 0
        self.game_over = False
        self.new_game()

    def new_game(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.playfield.reset()
        self.bag.reset()
        self.level = 1
        self.line_count = 0
        self.ticks = 0
        self.game_over = False
        self._spawn_piece()
        logger.info("new game, first piece %s, next %s", self.piece.kind.name, self.next_kind.name)

    @property
    def next_kind(self) -> TetrominoType:
        return self.bag.upcoming

    @property
    def tick_threshold(self) -> float:
        return self.rules.threshold(self.gravity)

    def _spawn_piece(self) -> None:
        self.piece = Piece(
            kind=self.bag.current,
            rotation=0,
            column=self.config.spawn_column,
            row=self.config.spawn_row,
        )
        self.gravity = self.rules.gravity_for_level(self.level)

    def is_valid(self, column: int, row: int, rotation: int) -> bool:
        pose = Piece(self.piece.kind, rotation % 4, column, row)
        return self.playfield.can_place(pose.cells())

    def _fits(self, pose: Piece) -> bool:
        return self.is_valid(pose.column, pose.row, pose.rotation)

    def tick(self) -> None:
        if self.game_over:
            return
        self.ticks += 1
        # Threshold follows the live gravity so soft drops apply mid-fall.
        if self.ticks < self.tick_threshold:
            return
        below = self.piece.moved(0, 1)
        if self._fits(below):
            self.piece = below
        else:
            self._lock_piece()
        self.ticks = 0

    def _lock_piece(self) -> None:
        self.playfield.merge(self.piece.cells())
        logger.debug(
            "locked %s rot=%d at col=%d row=%d",
            self.piece.kind.name, self.piece.rotation, self.piece.column, self.piece.row,
        )
        self.bag.advance()
        self.level = self.rules.level_for_lines(self.line_count)
        self._spawn_piece()

        if not self._fits(self.piece):
            self.game_over = True
            logger.info("game over at level %d with %d lines", self.level, self.line_count)
            return

        cleared = self.playfield.clear_full_lines()
        if cleared:
            self.line_count += cleared
            self.level = self.rules.level_for_lines(self.line_count)
            logger.debug("cleared %d line(s), total %d", cleared, self.line_count)

    def move(self, direction: Direction) -> None:
        if self.game_over:
            return
        target = self.piece.moved(int(Direction(direction)), 0)
        if self._fits(target):
            self.piece = target

    def rotate(self) -> None:
        if self.game_over:
            return
        target = self.piece.rotated(1)
        if self._fits(target):
            self.piece = target

    def soft_drop(self) -> None:
        """Speed up gravity; stacks with earlier drops until the next spawn."""
        if self.game_over:
            return
        self.gravity = self.rules.soft_dropped(self.gravity)

    def apply(self, action: Action) -> None:
        action = Action(action)
        if action == Action.LEFT:
            self.move(Direction.LEFT)
        elif action == Action.RIGHT:
            self.move(Direction.RIGHT)
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()

    def snapshot(self) -> Snapshot:
        grid = self.playfield.overlay(self.piece.cells())
        grid.setflags(write=False)
        return Snapshot(
            grid=grid,
            piece=self.piece,
            next_kind=self.next_kind,
            level=self.level,
            line_count=self.line_count,
            game_over=self.game_over,
        )
