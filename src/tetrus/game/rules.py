from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressionRules:
    lines_per_level: int = 8
    gravity_base: float = 0.8
    gravity_decay: float = 0.007
    tick_threshold: int = 100
    soft_drop_divisor: float = 30.0

    def __post_init__(self) -> None:
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if self.tick_threshold <= 0:
            raise ValueError("tick_threshold must be positive")
        if self.soft_drop_divisor <= 0:
            raise ValueError("soft_drop_divisor must be positive")

    def level_for_lines(self, lines: int) -> int:
        return lines // self.lines_per_level + 1

    def gravity_for_level(self, level: int) -> float:
        """Speed curve: 1.0 at level 1, shrinking geometrically afterwards."""
        steps = level - 1
        return (self.gravity_base - steps * self.gravity_decay) ** steps

    def threshold(self, gravity: float) -> float:
        # Ticks that must elapse before gravity forces a one-row descent.
        return self.tick_threshold * gravity

    def soft_dropped(self, gravity: float) -> float:
        return gravity / self.soft_drop_divisor
