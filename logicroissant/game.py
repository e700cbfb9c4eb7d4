"""Game rules, rendering, ranking file and the command-line entry point."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from .coffee import CoffeeItem
from .expressions import LogicalExpression, random_expression
from .freeze import FreezeItem, FreezeState
from .ghosts import GhostPack
from .keyboard import Keyboard
from .screen import MAXY, SCRENDX, SCRENDY, SCRSTARTX, SCRSTARTY, Color, Screen
from .stage_screen import show_stage
from .timer import Timer

MAP_ROWS = SCRENDY - SCRSTARTY - 1
MAP_COLS = SCRENDX - SCRSTARTX - 1
MAX_ENTRIES = 100
RANKING_SHOWN = 10
RANKING_FILE = "ranking.txt"
ITEM_COUNT = 4
MAX_LEVEL = 3
MAX_TICKS = 1000
START_LIVES = 3
TICK_MS = 100
NAME_LIMIT = 49


@dataclass
class Player:
    x: int = 0
    y: int = 0
    points: int = 0


@dataclass
class LogicItem:
    x: int = 0
    y: int = 0
    expected_value: int = 0
    active: bool = False


@dataclass
class TemporaryMessage:
    line1: str = ""
    line2: str = ""
    expires_at: float = 0.0
    active: bool = False


@dataclass
class RankingEntry:
    name: str
    points: int


def save_ranking(path, name: str, points: int) -> None:
    """Append one score line to the ranking file; an unwritable file is ignored."""
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(f"{name} {points}\n")
    except OSError:
        pass


def load_ranking(path) -> List[RankingEntry]:
    """Read "name points" pairs, stopping at the first malformed one; best first."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    entries: List[RankingEntry] = []
    for name, points in zip(tokens[0::2], tokens[1::2]):
        if len(entries) >= MAX_ENTRIES:
            break
        try:
            value = int(points)
        except ValueError:
            break
        entries.append(RankingEntry(name, value))
    entries.sort(key=lambda entry: entry.points, reverse=True)
    return entries


def show_ranking(screen: Screen, path=RANKING_FILE) -> List[RankingEntry]:
    """Draw the top of the ranking and return the entries shown."""
    try:
        entries = load_ranking(path)
    except OSError:
        screen.goto_xy(5, 4)
        screen.write("Sem ranking salvo ainda.")
        return []
    screen.goto_xy(5, 4)
    screen.write("=== RANKING ===")
    shown = entries[:RANKING_SHOWN]
    for rank, entry in enumerate(shown, start=1):
        screen.goto_xy(5, 4 + rank)
        screen.write(f"{rank}° {entry.name} - {entry.points} pontos")
    return shown


def _as_char(key: Union[int, str, None]) -> Optional[str]:
    if isinstance(key, int):
        return chr(key)
    return key


class Game:
    """State and rules of one play-through."""

    def __init__(self, screen: Optional[Screen] = None, rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], float]] = None,
                 sleep: Optional[Callable[[float], None]] = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.time
        self._sleep = sleep if sleep is not None else time.sleep
        self.ranking_path = RANKING_FILE

        self.player = Player(MAP_COLS // 2, MAP_ROWS // 2, 0)
        self.lives = START_LIVES
        self.level = 1
        self.multiplier = 1
        self.current_step = 0
        self.won = False
        self.message = TemporaryMessage()
        self.logic_items = [LogicItem() for _ in range(ITEM_COUNT)]
        self.freeze_item = FreezeItem()
        self.freeze = FreezeState(self._clock)
        self.coffee = CoffeeItem()
        self.ghosts = GhostPack()

        self.expression: LogicalExpression = random_expression(self.level, self.rng)
        self.place_logic_items()
        self.freeze_item.spawn(self.rng)
        self.coffee.spawn(MAP_COLS, MAP_ROWS, self.player.x, self.player.y, self.rng)
        self.ghosts.initialize(MAP_COLS, MAP_ROWS, self.rng)

    def show_temporary_message(self, line1: str, line2: str, seconds: float) -> None:
        self.message = TemporaryMessage(line1, line2, self._clock() + seconds, True)

    def _item_at(self, x: int, y: int) -> Optional[LogicItem]:
        return next(
            (item for item in self.logic_items if item.active and item.x == x and item.y == y),
            None,
        )

    def place_logic_items(self) -> None:
        """Scatter one V/F item per truth-table row, off the player and each other."""
        for i, value in enumerate(self.expression.truth_table):
            while True:
                x = self.rng.randrange(MAP_COLS - 2) + 1
                y = self.rng.randrange(MAP_ROWS - 2) + 1
                if self._item_at(x, y) is None and (x, y) != (self.player.x, self.player.y):
                    break
            self.logic_items[i] = LogicItem(x, y, value, True)
        self.current_step = 0

    def _draw_expression(self) -> None:
        self.screen.set_color(Color.LIGHTCYAN, Color.BLACK)
        self.screen.goto_xy(SCRSTARTX + 2, SCRSTARTY)
        self.screen.write(f"Resolva: {self.expression.text}")

    def new_level(self) -> None:
        """Show the stage screen and set up a fresh expression and pick-ups."""
        show_stage(self.screen, self.level, self._sleep)
        self.expression = random_expression(self.level, self.rng)
        self._draw_expression()
        self.place_logic_items()
        self.freeze_item.spawn(self.rng)
        self.coffee.spawn(MAP_COLS, MAP_ROWS, self.player.x, self.player.y, self.rng)

    def move_player(self, key: Union[int, str]) -> None:
        """Move one cell for w/a/s/d, staying inside the map."""
        dx, dy = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}.get(_as_char(key), (0, 0))
        new_x, new_y = self.player.x + dx, self.player.y + dy
        if 0 <= new_x < MAP_COLS and 0 <= new_y < MAP_ROWS:
            self.player.x, self.player.y = new_x, new_y

    def check_logic_collision(self) -> bool:
        """Apply coffee and V/F item pick-ups; return True if anything happened."""
        if self.coffee.collect(self.player.x, self.player.y):
            self.lives += 1
            self.show_temporary_message("☕ Vida extra!", "", 2)
            return True

        item = self._item_at(self.player.x, self.player.y)
        if item is None:
            return False

        if item.expected_value == self.expression.truth_table[self.current_step]:
            item.active = False
            self.current_step += 1
            self.player.points += 100 * self.multiplier
            self.multiplier += 1
            self.show_temporary_message("✔ Correto!", "", 2)

            if self.current_step == ITEM_COUNT:
                self.show_temporary_message("Expressão resolvida!", "Avançando fase...", 2)
                self.level += 1
                if self.level > MAX_LEVEL:
                    self.screen.goto_xy(SCRSTARTX + 2, SCRENDY + 3)
                    self.screen.write("Parabéns! Você zerou o jogo!")
                    self._sleep(2)
                    self.won = True
                    self.lives = 0
                else:
                    self.new_level()
        else:
            self.multiplier = 1
            self.show_temporary_message("✘ Ordem errada!", "Reiniciando...", 3)
            self.place_logic_items()
            self.freeze_item.spawn(self.rng)
            self.current_step = 0
            self.lives -= 1
        return True

    def tick(self) -> bool:
        """Advance the timed world by one step; return True if a ghost caught the player."""
        self.freeze.update(self.screen)
        if not self.freeze.frozen:
            self.ghosts.move_towards(self.player.x, self.player.y, MAP_COLS, MAP_ROWS)
        if not self.ghosts.check_collision(self.player.x, self.player.y):
            return False
        self.lives -= 1
        self.multiplier = 1
        self.player.x, self.player.y = MAP_COLS // 2, MAP_ROWS // 2
        self.screen.goto_xy(3, 24)
        self.screen.set_color(Color.RED, Color.BLACK)
        self.screen.write(f"💀 Você perdeu 1 vida! Vidas restantes: {self.lives}")
        return True

    def render(self) -> None:
        """Redraw the map, the pieces, the status line and any temporary message."""
        screen = self.screen
        for row in range(MAP_ROWS):
            for col in range(MAP_COLS):
                screen.goto_xy(SCRSTARTX + 1 + col, SCRSTARTY + 1 + row)
                screen.write(" ")

        screen.set_color(Color.WHITE, Color.BLACK)
        for item in self.logic_items:
            if item.active:
                screen.goto_xy(SCRSTARTX + 1 + item.x, SCRSTARTY + 1 + item.y)
                screen.write("V" if item.expected_value else "F")
        self.freeze_item.draw(screen)
        self.coffee.draw(screen)
        self.ghosts.draw(screen, SCRSTARTX, SCRSTARTY)

        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.goto_xy(SCRSTARTX + 1 + self.player.x, SCRSTARTY + 1 + self.player.y)
        screen.write("🥐")

        screen.set_color(Color.CYAN, Color.BLACK)
        screen.goto_xy(SCRSTARTX + 2, SCRENDY)
        screen.write(f"Pontuação: {self.player.points}  x{self.multiplier}")

        screen.set_color(Color.LIGHTRED, Color.BLACK)
        screen.goto_xy(SCRSTARTX + 25, SCRENDY)
        screen.write(f"Vidas: {self.lives}")

        if self.message.active:
            if self._clock() <= self.message.expires_at:
                screen.goto_xy(SCRSTARTX + 2, SCRENDY + 1)
                screen.set_color(Color.GREEN, Color.BLACK)
                screen.write(f"{self.message.line1:<30}")
                screen.goto_xy(SCRSTARTX + 2, SCRENDY + 2)
                screen.write(f"{self.message.line2:<30}")
            else:
                self.message.active = False
                blank = " " * 30
                screen.goto_xy(SCRSTARTX + 2, SCRENDY + 1)
                screen.write(blank)
                screen.goto_xy(SCRSTARTX + 2, SCRENDY + 2)
                screen.write(blank)

        screen.update()

    def run(self, name: str, keyboard, timer) -> int:
        """Play until quit, out of lives or out of time; save the score and return it."""
        self._draw_expression()
        key: Optional[str] = None
        ticks = 0
        needs_render = True

        while key != "q" and ticks <= MAX_TICKS and self.lives > 0:
            if needs_render:
                self.render()
                needs_render = False

            if keyboard.keyhit():
                key = _as_char(keyboard.readch())
                self.move_player(key)
                self.freeze.check(self.freeze_item, self.player.x, self.player.y, self.screen)
                needs_render = True
                self.check_logic_collision()

            if timer.time_over():
                ticks += 1
                self.tick()
                needs_render = True

        save_ranking(self.ranking_path, name, self.player.points)

        screen = self.screen
        screen.clear()
        screen.set_color(Color.CYAN, Color.BLACK)
        screen.goto_xy(5, 2)
        screen.write(f"🎮 Fim de jogo, {name}! Sua pontuação final: {self.player.points}")
        show_ranking(screen, self.ranking_path)
        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.goto_xy(5, MAXY - 2)
        screen.write("Pressione ENTER para sair...")
        screen.show_cursor()
        screen.update()
        return self.player.points


def _read_name(stream) -> Optional[str]:
    for line in stream:
        tokens = line.split()
        if tokens:
            return tokens[0][:NAME_LIMIT]
    return None


def _wait_for_enter(keyboard: Keyboard) -> None:
    try:
        while keyboard.readch() != ord("\n"):
            pass
    except EOFError:
        pass


def main(argv=None) -> int:
    """Ask for the player's name, play one game and show the ranking."""
    screen = Screen()
    screen.init(True)
    screen.hide_cursor()
    screen.goto_xy(10, 10)
    screen.set_color(Color.WHITE, Color.BLACK)
    screen.write("Digite seu nome: ")
    screen.update()

    name = _read_name(sys.stdin)
    if name is None:
        screen.destroy()
        screen.update()
        return 1

    game = Game(screen)
    keyboard = Keyboard()
    keyboard.init()
    timer = Timer(TICK_MS)
    try:
        game.run(name, keyboard, timer)
        _wait_for_enter(keyboard)
    finally:
        keyboard.destroy()
        timer.destroy()
        screen.destroy()
        screen.update()
    return 0