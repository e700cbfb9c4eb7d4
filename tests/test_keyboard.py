import copy
import os
import termios

import pytest

from logicroissant.keyboard import Keyboard

FAKE_FD = 97


def _as_int(value):
    if isinstance(value, (bytes, bytearray)):
        return value[0] if value else 0
    return int(value)


class FakeTerminal:
    """In-memory stand-in for a terminal device driven through termios."""

    def __init__(self):
        cc = [b"\x00"] * termios.NCCS
        cc[termios.VMIN] = b"\x01"
        cc[termios.VTIME] = b"\x00"
        lflag = termios.ICANON | termios.ECHO | termios.ISIG
        self.attrs = [0, 0, 0, lflag, 0, 0, cc]
        self.pending = bytearray()

    def tcgetattr(self, fd):
        assert fd == FAKE_FD
        return copy.deepcopy(self.attrs)

    def tcsetattr(self, fd, when, attrs):
        assert fd == FAKE_FD
        self.attrs = copy.deepcopy(list(attrs))

    def read(self, size):
        if not self.pending:
            if _as_int(self.attrs[6][termios.VMIN]) == 0:
                return b""
            raise AssertionError("read would block on an empty terminal")
        chunk = bytes(self.pending[:size])
        del self.pending[:size]
        return chunk

    def feed(self, data):
        self.pending.extend(data)

    @property
    def lflag(self):
        return self.attrs[3]


@pytest.fixture
def terminal(monkeypatch):
    fake = FakeTerminal()
    real_read = os.read

    def fake_read(fd, size):
        if fd == FAKE_FD:
            return fake.read(size)
        return real_read(fd, size)

    monkeypatch.setattr(termios, "tcgetattr", fake.tcgetattr)
    monkeypatch.setattr(termios, "tcsetattr", fake.tcsetattr)
    monkeypatch.setattr(os, "read", fake_read)
    return fake


def test_init_disables_canonical_mode(terminal):
    with Keyboard(FAKE_FD) as keyboard:
        lflag = terminal.lflag
        assert lflag & termios.ICANON == 0
        assert lflag & termios.ECHO == 0
        assert lflag & termios.ISIG == 0
        terminal.feed(b"s")
        assert keyboard.keyhit() is True
        assert keyboard.readch() == ord("s")


def test_destroy_restores_settings(terminal):
    before = terminal.lflag
    keyboard = Keyboard(FAKE_FD)
    keyboard.init()
    assert terminal.lflag != before
    terminal.feed(b"q")
    assert keyboard.readch() == ord("q")
    keyboard.destroy()
    assert terminal.lflag == before


def test_keyhit_without_input_is_false(terminal):
    with Keyboard(FAKE_FD) as keyboard:
        assert keyboard.keyhit() is False


def test_keyhit_then_readch_returns_key(terminal):
    with Keyboard(FAKE_FD) as keyboard:
        terminal.feed(b"w")
        assert keyboard.keyhit() is True
        assert keyboard.keyhit() is True
        assert keyboard.readch() == ord("w")
        assert keyboard.keyhit() is False


def test_readch_blocks_for_key(terminal):
    with Keyboard(FAKE_FD) as keyboard:
        terminal.feed(b"ad")
        assert keyboard.readch() == ord("a")
        assert keyboard.readch() == ord("d")


def test_keyhit_requires_init(terminal):
    with pytest.raises(RuntimeError):
        Keyboard(FAKE_FD).keyhit()