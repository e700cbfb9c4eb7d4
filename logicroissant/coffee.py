"""Coffee pick-up that grants an extra life."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .screen import SCRSTARTX, SCRSTARTY, Color, Screen


@dataclass
class CoffeeItem:
    x: int = 0
    y: int = 0
    active: bool = False

    def spawn(self, max_cols: int, max_rows: int, player_x: int, player_y: int,
              rng: Optional[random.Random] = None) -> None:
        """Place the item inside the map border, never on the player."""
        chooser = rng if rng is not None else random
        while True:
            x = chooser.randrange(max_cols - 2) + 1
            y = chooser.randrange(max_rows - 2) + 1
            if (x, y) != (player_x, player_y):
                break
        self.x, self.y = x, y
        self.active = True

    def draw(self, screen: Screen) -> None:
        if not self.active:
            return
        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.goto_xy(SCRSTARTX + 1 + self.x, SCRSTARTY + 1 + self.y)
        screen.write("☕")

    def collect(self, player_x: int, player_y: int) -> bool:
        """Deactivate and return True if the player stands on the active item."""
        if self.active and self.x == player_x and self.y == player_y:
            self.active = False
            return True
        return False