# logicroissant

A small terminal puzzle game. You are a croissant 🥐 on a board. At the top of
the screen is a logical expression such as `A ∧ B` or `A → B`. Its truth table
is scattered on the board as four `V` (true) and `F` (false) tiles, one per row
of the table (rows in the order VV, VF, FV, FF for A and B). Walk over tiles
whose values follow the truth table's rows in order to solve the expression.

- Each correct tile is worth `100 × multiplier` points, and the multiplier goes
  up by one each time.
- Stepping on a tile whose value is not the next one in the table costs a life,
  resets the multiplier and reshuffles the tiles.
- Two ghosts 👻 slowly chase you. If one catches you, you lose a life, the
  multiplier resets, you go back to the centre of the board and the ghosts go
  back to where they started.
- A coffee ☕ gives an extra life.
- The freeze item 🥶 stops the ghosts for five seconds.

Solve three expressions, one per level (easy, medium, hard), to win. A stage
screen is shown between levels. The game also ends when you run out of lives,
press `q`, or the time runs out (1000 ticks of just over 100 ms each).

## Installing

```
pip install .
```

The game needs a POSIX terminal (it uses `termios` for key input) at least 80
columns by 24 rows that understands ANSI escape sequences.

## Playing

```
logicroissant
```

Type your name and press ENTER. Only the first word is kept, cut to 49
characters. Then move with:

| Key | Move  |
|-----|-------|
| `w` | up    |
| `s` | down  |
| `a` | left  |
| `d` | right |
| `q` | quit  |

When the game ends, your score is appended to `ranking.txt` in the current
directory, and the ten best scores are shown. Press ENTER to leave.

## Modules

- `logicroissant.screen` – `Screen`, which writes ANSI drawing commands to a
  stream, the `Color` enum, and `goto_xy_sequence` / `color_sequence`.
- `logicroissant.keyboard` – `Keyboard`, non-blocking single-key input
  (`keyhit`, `readch`); usable as a context manager.
- `logicroissant.timer` – `Timer`, a millisecond interval timer (`time_over`).
- `logicroissant.expressions` – `LogicalExpression`, `expressions_for_level`,
  `random_expression`.
- `logicroissant.coffee`, `logicroissant.freeze`, `logicroissant.ghosts` – the
  pick-ups (`CoffeeItem`, `FreezeItem`, `FreezeState`) and the chasing ghosts
  (`Ghost`, `GhostPack`).
- `logicroissant.stage_screen` – `stage_title` and `show_stage`.
- `logicroissant.game` – `Game` with the rules and rendering, the ranking file
  helpers `save_ranking`, `load_ranking`, `show_ranking`, and `main`.

For example, the expression tables:

```python
import random
from logicroissant.expressions import expressions_for_level, random_expression

for expr in expressions_for_level(1):
    print(expr.text, expr.truth_table)

print(random_expression(3, random.Random(42)))
```

and the ranking file:

```python
from logicroissant.game import save_ranking, load_ranking

save_ranking("ranking.txt", "ana", 300)
print(load_ranking("ranking.txt"))
```

`Game` takes an optional screen, random generator, clock and sleep function, so
it can be driven without a terminal:

```python
import io
import random
from logicroissant.game import Game
from logicroissant.screen import Screen

game = Game(Screen(io.StringIO()), random.Random(1), sleep=lambda s: None)
game.move_player("d")
game.check_logic_collision()
game.tick()
print(game.player, game.lives, game.level)
```

## What it does not do

There is no pause, no saved game and no settings: each run is one game from
level 1. The ranking is a plain text file of `name points` lines; there is no
way to clear or edit it from the game. Key input depends on `termios`, so the
game does not run on Windows.

## Running the tests

```
pip install .[test]
pytest
```