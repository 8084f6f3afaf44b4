"""
Pytest configuration and fixtures for Tetrus tests.

Pygame is pointed at SDL's dummy drivers so renderer tests can draw onto
off-screen surfaces without a display.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tetrus.game import GameConfig, GameEngine, Piece, TetrominoType


@pytest.fixture
def engine():
    """Seeded engine on the default 12x19 board."""
    return GameEngine(GameConfig(random_seed=1234))


def place(engine, kind, rotation=0, column=None, row=None):
    """Replace the falling piece with a chosen pose (test setup only)."""
    engine.piece = Piece(
        kind=TetrominoType(kind),
        rotation=rotation,
        column=engine.config.spawn_column if column is None else column,
        row=engine.config.spawn_row if row is None else row,
    )
    return engine.piece


def run_ticks(engine, count):
    for _ in range(count):
        engine.tick()


@pytest.fixture
def place_piece():
    return place


@pytest.fixture
def tick_n():
    return run_ticks
