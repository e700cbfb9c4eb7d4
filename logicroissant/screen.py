"""ANSI terminal drawing primitives for an 80x24 playfield."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, TextIO

ESC = "\033"
NORMAL_TEXT = "[0m"
BOLD_TEXT = "[1m"
ITALIC_TEXT = "[3m"
BLINK_TEXT = "[5m"
REVERSE_TEXT = "[7m"
HOME_CURSOR = "[f"
SHOW_CURSOR = "[?25h"
HIDE_CURSOR = "[?25l"
CLEAR_SCREEN = "[2J"

BOX_ENABLE = "(0"
BOX_DISABLE = "(B"
BOX_VLINE = 0x78
BOX_HLINE = 0x71
BOX_UPLEFT = 0x6C
BOX_UPRIGHT = 0x6B
BOX_DWNLEFT = 0x6D
BOX_DWNRIGHT = 0x6A
BOX_CROSS = 0x6E
BOX_TLEFT = 0x74
BOX_TRIGHT = 0x75
BOX_TUP = 0x77
BOX_TDOWN = 0x76
BOX_DIAMOND = 0x60
BOX_BLOCK = 0x61
BOX_DOT = 0x7E

SCRSTARTX = 3
SCRENDX = 75
SCRSTARTY = 1
SCRENDY = 23

MINX = 1
MINY = 1
MAXX = 80
MAXY = 24

RESET_COLORS = "[0;39;49m"


class Color(IntEnum):
    """Terminal colours; values above LIGHTGRAY are the bright variants."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTRED = 9
    LIGHTGREEN = 10
    YELLOW = 11
    LIGHTBLUE = 12
    LIGHTMAGENTA = 13
    LIGHTCYAN = 14
    WHITE = 15


def goto_xy_sequence(x: int, y: int) -> str:
    """Return the escape sequence that moves the cursor to (x, y), clamped to the screen."""
    x = 0 if x < 0 else (MAXX - 1 if x >= MAXX else x)
    y = 0 if y < 0 else (MAXY if y > MAXY else y)
    return f"{ESC}[f{ESC}[{y}B{ESC}[{x}C"


def color_sequence(fg: int, bg: int) -> str:
    """Return the escape sequence selecting foreground and background colours."""
    fg = int(fg)
    bg = int(bg)
    attribute = "0"
    if fg > Color.LIGHTGRAY:
        attribute = "1"
        fg -= 8
    return f"{ESC}[{attribute};{fg + 30};{bg + 40}m"


class Screen:
    """Writes drawing commands to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def _escape(self, code: str) -> None:
        self.write(ESC + code)

    def home_cursor(self) -> None:
        self._escape(HOME_CURSOR)

    def show_cursor(self) -> None:
        self._escape(SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self._escape(HIDE_CURSOR)

    def clear(self) -> None:
        self.home_cursor()
        self._escape(CLEAR_SCREEN)

    def update(self) -> None:
        self.stream.flush()

    def set_normal(self) -> None:
        self._escape(NORMAL_TEXT)

    def set_bold(self) -> None:
        self._escape(BOLD_TEXT)

    def set_blink(self) -> None:
        self._escape(BLINK_TEXT)

    def set_reverse(self) -> None:
        self._escape(REVERSE_TEXT)

    def box_enable(self) -> None:
        self._escape(BOX_ENABLE)

    def box_disable(self) -> None:
        self._escape(BOX_DISABLE)

    def _put(self, x: int, y: int, text: str) -> None:
        self.goto_xy(x, y)
        self.write(text)

    def draw_borders(self) -> None:
        """Clear the screen and draw a line-drawing frame around it."""
        hline = chr(BOX_HLINE)
        vline = chr(BOX_VLINE)

        self.clear()
        self.box_enable()

        self._put(MINX, MINY, chr(BOX_UPLEFT))
        for x in range(MINX + 1, MAXX):
            self._put(x, MINY, hline)
        self._put(MAXX, MINY, chr(BOX_UPRIGHT))

        for y in range(MINY + 1, MAXY):
            self._put(MINX, y, vline)
            self._put(MAXX, y, vline)

        self._put(MINX, MAXY, chr(BOX_DWNLEFT))
        for x in range(MINX + 1, MAXX):
            self._put(x, MAXY, hline)
        self._put(MAXX, MAXY, chr(BOX_DWNRIGHT))

        self.box_disable()

    def draw_box(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a Unicode box with corners at (x1, y1) and (x2, y2)."""
        self._put(x1, y1, "┌")
        self._put(x2, y1, "┐")
        self._put(x1, y2, "└")
        self._put(x2, y2, "┘")

        for x in range(x1 + 1, x2):
            self._put(x, y1, "─")
            self._put(x, y2, "─")

        for y in range(y1 + 1, y2):
            self._put(x1, y, "│")
            self._put(x2, y, "│")

    def init(self, draw_borders: bool) -> None:
        """Clear the screen, optionally draw borders, and hide the cursor."""
        self.clear()
        if draw_borders:
            self.draw_borders()
        self.home_cursor()
        self.hide_cursor()

    def destroy(self) -> None:
        """Restore default colours, clear the screen and show the cursor."""
        self._escape(RESET_COLORS)
        self.set_normal()
        self.clear()
        self.home_cursor()
        self.show_cursor()

    def goto_xy(self, x: int, y: int) -> None:
        self.write(goto_xy_sequence(x, y))

    def set_color(self, fg: int, bg: int) -> None:
        self.write(color_sequence(fg, bg))