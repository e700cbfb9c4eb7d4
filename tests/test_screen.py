import io

from logicroissant.screen import (
    BOX_DISABLE,
    BOX_HLINE,
    BOX_VLINE,
    CLEAR_SCREEN,
    ESC,
    HIDE_CURSOR,
    HOME_CURSOR,
    MAXX,
    MAXY,
    MINX,
    MINY,
    SHOW_CURSOR,
    Color,
    Screen,
    color_sequence,
    goto_xy_sequence,
)


def make_screen():
    out = io.StringIO()
    return Screen(out), out


def test_goto_sequence_format():
    assert goto_xy_sequence(5, 4) == "\x1b[f\x1b[4B\x1b[5C"


def test_goto_clamps_negative_coordinates():
    assert goto_xy_sequence(-3, -1) == goto_xy_sequence(0, 0)


def test_goto_clamps_large_coordinates():
    assert goto_xy_sequence(200, 99) == goto_xy_sequence(MAXX - 1, MAXY)
    assert goto_xy_sequence(MAXX, 1) == goto_xy_sequence(MAXX - 1, 1)
    assert goto_xy_sequence(1, MAXY) != goto_xy_sequence(1, MAXY - 1)


def test_color_sequence_normal():
    assert color_sequence(Color.RED, Color.BLACK) == "\x1b[0;31;40m"


def test_bright_color_uses_bold_attribute():
    for dark, bright in [(Color.RED, Color.LIGHTRED), (Color.BROWN, Color.YELLOW),
                         (Color.LIGHTGRAY, Color.WHITE)]:
        expected = color_sequence(dark, Color.BLUE).replace("[0;", "[1;", 1)
        assert color_sequence(bright, Color.BLUE) == expected


def test_clear_writes_home_then_clear():
    screen, out = make_screen()
    screen.clear()
    assert out.getvalue() == ESC + HOME_CURSOR + ESC + CLEAR_SCREEN


def test_cursor_visibility():
    screen, out = make_screen()
    screen.hide_cursor()
    screen.show_cursor()
    assert out.getvalue() == ESC + HIDE_CURSOR + ESC + SHOW_CURSOR


def test_set_color_writes_sequence():
    screen, out = make_screen()
    screen.set_color(Color.CYAN, Color.BLACK)
    assert out.getvalue() == color_sequence(Color.CYAN, Color.BLACK)


def test_draw_box_line_counts():
    screen, out = make_screen()
    screen.draw_box(2, 3, 10, 7)
    text = out.getvalue()
    for corner in "┌┐└┘":
        assert text.count(corner) == 1
    assert text.count("─") == 2 * (10 - 2 - 1)
    assert text.count("│") == 2 * (7 - 3 - 1)


def test_draw_borders_frame():
    screen, out = make_screen()
    screen.draw_borders()
    text = out.getvalue()
    assert text.startswith(ESC + HOME_CURSOR + ESC + CLEAR_SCREEN)
    assert text.endswith(ESC + BOX_DISABLE)
    assert text.count(chr(BOX_HLINE)) == 2 * (MAXX - MINX - 1)
    assert text.count(chr(BOX_VLINE)) == 2 * (MAXY - MINY - 1)


def test_init_without_borders():
    screen, out = make_screen()
    screen.init(False)
    expected = ESC + HOME_CURSOR + ESC + CLEAR_SCREEN + ESC + HOME_CURSOR + ESC + HIDE_CURSOR
    assert out.getvalue() == expected


def test_init_with_borders_draws_frame():
    screen, out = make_screen()
    screen.init(True)
    assert chr(BOX_HLINE) in out.getvalue()
    assert out.getvalue().endswith(ESC + HIDE_CURSOR)


def test_destroy_restores_terminal():
    screen, out = make_screen()
    screen.destroy()
    text = out.getvalue()
    assert text.startswith(ESC + "[0;39;49m")
    assert text.endswith(ESC + SHOW_CURSOR)


def test_update_flushes_stream():
    class Recorder(io.StringIO):
        flushed = 0

        def flush(self):
            self.flushed += 1
            super().flush()

    out = Recorder()
    Screen(out).update()
    assert out.flushed == 1