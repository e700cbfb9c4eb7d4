import io
import random

from logicroissant.coffee import CoffeeItem
from logicroissant.screen import SCRSTARTX, SCRSTARTY, Screen, goto_xy_sequence


def test_spawn_within_bounds():
    rng = random.Random(3)
    item = CoffeeItem()
    for _ in range(300):
        item.spawn(20, 10, 5, 5, rng)
        assert item.active
        assert 1 <= item.x <= 18
        assert 1 <= item.y <= 8
        assert (item.x, item.y) != (5, 5)


def test_spawn_avoids_player():
    rng = random.Random(0)
    item = CoffeeItem()
    for _ in range(20):
        item.spawn(4, 3, 1, 1, rng)
        assert (item.x, item.y) == (2, 1)


def test_collect_once():
    item = CoffeeItem(4, 6, True)
    assert item.collect(4, 5) is False
    assert item.collect(4, 6) is True
    assert item.active is False
    assert item.collect(4, 6) is False


def test_draw_inactive_writes_nothing():
    out = io.StringIO()
    CoffeeItem(1, 1, False).draw(Screen(out))
    assert out.getvalue() == ""


def test_draw_active_places_cup():
    out = io.StringIO()
    item = CoffeeItem(7, 2, True)
    item.draw(Screen(out))
    expected_tail = goto_xy_sequence(SCRSTARTX + 1 + 7, SCRSTARTY + 1 + 2) + "☕"
    assert out.getvalue().endswith(expected_tail)