"""Freeze pick-up that stops the ghosts for a few seconds."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .screen import SCRENDY, SCRSTARTX, SCRSTARTY, Color, Screen

FREEZE_SECONDS = 5.0


@dataclass
class FreezeItem:
    x: int = 0
    y: int = 0
    active: bool = False

    def spawn(self, rng: Optional[random.Random] = None) -> None:
        chooser = rng if rng is not None else random
        self.x = 3 + chooser.randrange(30)
        self.y = 3 + chooser.randrange(15)
        self.active = True

    def draw(self, screen: Screen) -> None:
        if not self.active:
            return
        screen.set_color(Color.LIGHTBLUE, Color.BLACK)
        screen.goto_xy(SCRSTARTX + 1 + self.x, SCRSTARTY + 1 + self.y)
        screen.write("🥶")


class FreezeState:
    """Tracks whether the ghosts are frozen and since when."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.time
        self.frozen = False
        self.frozen_at = 0.0

    def check(self, item: FreezeItem, player_x: int, player_y: int,
              screen: Optional[Screen] = None) -> bool:
        """Freeze the ghosts if the player picks up the item; return whether it happened."""
        if not (item.active and item.x == player_x and item.y == player_y):
            return False
        self.frozen = True
        self.frozen_at = self._clock()
        item.active = False
        if screen is not None:
            screen.goto_xy(SCRSTARTX + 2, SCRENDY + 1)
            screen.set_color(Color.CYAN, Color.BLACK)
            screen.write("🥶 Fantasmas congelados por 5s!")
        return True

    def update(self, screen: Optional[Screen] = None) -> bool:
        """Unfreeze once the freeze has lasted long enough; return whether it ended now."""
        if not self.frozen or self._clock() - self.frozen_at < FREEZE_SECONDS:
            return False
        self.frozen = False
        if screen is not None:
            screen.goto_xy(SCRSTARTX + 2, SCRENDY + 2)
            screen.set_color(Color.WHITE, Color.BLACK)
            screen.write("Fantasmas descongelados!      ")
        return True