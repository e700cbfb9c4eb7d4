"""Interstitial screen shown when the player reaches a new stage."""

from __future__ import annotations

import time
from typing import Callable, Optional

from .screen import SCRENDX, SCRENDY, SCRSTARTX, SCRSTARTY, Color, Screen

STAGE_PAUSE_SECONDS = 2


def stage_title(stage: int) -> str:
    """Return the banner text for a stage; unknown stages get the first stage's banner."""
    if stage == 2:
        return "🌟 FASE 2  🌟"
    if stage == 3:
        return "🔥 FASE FINAL 🔥"
    return "🌱 FASE 1 🌱"


def show_stage(screen: Screen, stage: int,
               sleep: Optional[Callable[[float], None]] = None) -> None:
    """Draw the stage banner inside a frame and pause briefly."""
    pause = sleep if sleep is not None else time.sleep
    screen.clear()
    screen.set_color(Color.WHITE, Color.BLACK)
    screen.draw_box(SCRSTARTX, SCRSTARTY, SCRENDX, SCRENDY)
    screen.set_color(Color.LIGHTCYAN, Color.BLACK)
    screen.goto_xy(30, 10)
    screen.write(stage_title(stage))

    screen.goto_xy(30, 12)
    screen.set_color(Color.YELLOW, Color.BLACK)
    screen.write("Prepare-se...")
    screen.update()
    pause(STAGE_PAUSE_SECONDS)