"""Ghosts that slowly chase the player."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .screen import Color, Screen

GHOST_COUNT = 2
GHOST_DELAY = 6


@dataclass
class Ghost:
    x: int = 0
    y: int = 0
    direction: int = 1
    origin_x: int = 0
    origin_y: int = 0

    def reset(self) -> None:
        self.x, self.y = self.origin_x, self.origin_y


class GhostPack:
    """A group of ghosts that take one step towards the player every ``delay`` ticks."""

    def __init__(self, count: int = GHOST_COUNT, delay: int = GHOST_DELAY) -> None:
        self.delay = delay
        self._counter = 0
        self.ghosts = [Ghost() for _ in range(count)]

    def initialize(self, width: int, height: int, rng: Optional[random.Random] = None) -> None:
        """Place ghosts on staggered rows at random columns and remember their origins."""
        chooser = rng if rng is not None else random
        for i, ghost in enumerate(self.ghosts):
            ghost.y = 2 + i * 3
            ghost.x = chooser.randrange(width - 2) + 1
            ghost.direction = 1 if i % 2 == 0 else -1
            ghost.origin_x, ghost.origin_y = ghost.x, ghost.y

    def is_occupied(self, x: int, y: int, index: int) -> bool:
        """Return True if a ghost other than ``index`` stands on (x, y)."""
        return any(
            j != index and ghost.x == x and ghost.y == y
            for j, ghost in enumerate(self.ghosts)
        )

    def move_towards(self, player_x: int, player_y: int, width: int, height: int) -> bool:
        """Advance the slowness counter; on the step tick move ghosts and return True."""
        self._counter += 1
        if self._counter < self.delay:
            return False
        self._counter = 0

        for i, ghost in enumerate(self.ghosts):
            new_x = ghost.x + (ghost.x < player_x) - (ghost.x > player_x)
            new_y = ghost.y + (ghost.y < player_y) - (ghost.y > player_y)

            if not self.is_occupied(new_x, new_y, i):
                ghost.x, ghost.y = new_x, new_y

            if ghost.x < 1:
                ghost.x = 1
            if ghost.x >= width - 1:
                ghost.x = width - 2
            if ghost.y < 1:
                ghost.y = 1
            if ghost.y >= height - 1:
                ghost.y = height - 2
        return True

    def draw(self, screen: Screen, offset_x: int, offset_y: int) -> None:
        screen.set_color(Color.RED, Color.BLACK)
        for ghost in self.ghosts:
            screen.goto_xy(offset_x + 1 + ghost.x, offset_y + 1 + ghost.y)
            screen.write("👻")

    def check_collision(self, player_x: int, player_y: int) -> bool:
        """If a ghost caught the player, send every ghost home and return True."""
        if not any(g.x == player_x and g.y == player_y for g in self.ghosts):
            return False
        for ghost in self.ghosts:
            ghost.reset()
        return True