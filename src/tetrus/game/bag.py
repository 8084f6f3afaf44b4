from __future__ import annotations

import logging
import random
from typing import List, Optional

from .pieces import TetrominoType


logger = logging.getLogger(__name__)

KIND_COUNT = len(TetrominoType)


class RandomBag:
    """Seven-piece bag randomizer with one lookahead slot.

    ``slots[0:7]`` hold one shuffled bag and ``slots[7]`` is drawn on its own;
    it is what the preview shows while the cursor sits on slot 6, and it
    becomes slot 0 of the following bag. Because that draw is not checked
    against anything, the first piece of a bag may repeat the last piece of
    the previous one.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.slots: List[int] = [0] * (KIND_COUNT + 1)
        self.cursor = 0

    def reset(self) -> None:
        self.fill(carry_last=False)
        self.cursor = 0

    def fill(self, carry_last: bool = True) -> None:
        count = 0
        if carry_last:
            self.slots[0] = self.slots[KIND_COUNT]
            count = 1
        while count < KIND_COUNT:
            value = self.rng.randrange(KIND_COUNT)
            if value not in self.slots[:count]:
                self.slots[count] = value
                count += 1
        self.slots[KIND_COUNT] = self.rng.randrange(KIND_COUNT)
        logger.debug("bag refilled: %s", self.slots)

    def advance(self) -> None:
        self.cursor += 1
        if self.cursor >= KIND_COUNT:
            self.fill(carry_last=True)
            self.cursor = 0

    @property
    def current(self) -> TetrominoType:
        return TetrominoType(self.slots[self.cursor])

    @property
    def upcoming(self) -> TetrominoType:
        return TetrominoType(self.slots[self.cursor + 1])

    def drawn(self) -> List[TetrominoType]:
        return [TetrominoType(v) for v in self.slots[:KIND_COUNT]]
