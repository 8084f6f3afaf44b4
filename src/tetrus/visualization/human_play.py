from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from tetrus.game import TICK_MS, Action, GameConfig, GameEngine
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_SPACE: Action.SOFT_DROP,
}


class TickClock:
    """Turns elapsed frame time into whole engine ticks."""

    def __init__(self, tick_ms: int = TICK_MS) -> None:
        self.tick_ms = tick_ms
        self.pending_ms = 0

    def advance(self, elapsed_ms: int) -> int:
        self.pending_ms += elapsed_ms
        ticks, self.pending_ms = divmod(self.pending_ms, self.tick_ms)
        return ticks


def handle_key(engine: GameEngine, key: int) -> bool:
    """Apply one key press. Returns False when the player asked to quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_r:
        engine.new_game()
        return True
    action = KEY_TO_ACTION.get(key)
    if action is not None:
        engine.apply(action)
    return True


def run(seed: Optional[int] = None, cell_size: int = 40, fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        engine = GameEngine(GameConfig(random_seed=seed))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(engine.snapshot()))
        pygame.display.set_caption("Tetrus")

        ticker = TickClock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_key(engine, event.key) and running

            for _ in range(ticker.advance(clock.tick(fps))):
                engine.tick()

            renderer.draw(screen, engine.snapshot())
            pygame.display.flip()
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Tetrus with the keyboard.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=40)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("starting with seed=%s", args.seed)
    run(seed=args.seed, cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
