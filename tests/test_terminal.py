import curses

import pytest

from termsnake import terminal
from termsnake.config import GRID_W, GRID_H, TICK_MS
from termsnake.controls import Command
from termsnake.game import Engine
from termsnake.render import GAME_OVER_LINE, QUIT_LINE
from termsnake.terminal import TerminalError, TerminalScreen, key_to_command, required_size


class FakeScreen:
    """Just enough of a curses window to record what gets drawn."""

    def __init__(self, rows=40, cols=100, keys=()):
        self.rows, self.cols = rows, cols
        self.keys = list(keys)
        self.lines = {}
        self.timeout_ms = None
        self.cursor = (0, 0)

    def getmaxyx(self):
        return self.rows, self.cols

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeout_ms = ms

    def erase(self):
        self.lines.clear()

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def addstr(self, y, x, text):
        line = self.lines.get(y, "")
        self.lines[y] = line[:x].ljust(x) + text + line[x + len(text):]
        self.cursor = (y, x + len(text))

    def move(self, y, x):
        self.cursor = (y, x)

    def clrtoeol(self):
        y, x = self.cursor
        kept = self.lines.get(y, "")[:x]
        if kept:
            self.lines[y] = kept
        else:
            self.lines.pop(y, None)

    def refresh(self):
        pass


@pytest.fixture
def no_curses(monkeypatch):
    for name in ("curs_set", "noecho", "cbreak"):
        monkeypatch.setattr(curses, name, lambda *a: None)


def test_key_mapping():
    assert key_to_command(-1) is None
    assert key_to_command(curses.KEY_UP) is Command.MOVE_UP
    assert key_to_command(ord("a")) is Command.MOVE_LEFT
    assert key_to_command(ord("D")) is Command.MOVE_RIGHT
    assert key_to_command(ord("r")) is Command.RESTART
    assert key_to_command(ord("q")) is Command.QUIT
    assert key_to_command(27) is Command.QUIT
    assert key_to_command(ord("x")) is None


def test_screen_too_small(no_curses):
    rows, cols = required_size()
    with pytest.raises(TerminalError):
        TerminalScreen(FakeScreen(rows=rows - 1, cols=cols))
    with pytest.raises(TerminalError):
        TerminalScreen(FakeScreen(rows=rows, cols=cols - 1))


def test_poll_uses_tick_timeout(no_curses):
    fake = FakeScreen(keys=[curses.KEY_DOWN])
    screen = TerminalScreen(fake)
    assert fake.timeout_ms == TICK_MS
    assert screen.poll() is Command.MOVE_DOWN
    assert screen.poll() is None


def test_present_draws_grid_and_status(no_curses):
    fake = FakeScreen()
    screen = TerminalScreen(fake)
    engine = Engine(width=GRID_W, height=GRID_H, start_snake=[(GRID_W - 2, 0), (GRID_W - 1, 0)])
    screen.present(engine.snapshot())
    assert fake.lines[0].endswith("##")
    assert all(len(fake.lines[y]) == GRID_W for y in range(GRID_H))
    assert fake.lines[GRID_H + 1] == "Score: 0"
    assert GRID_H + 2 not in fake.lines
    assert fake.lines[GRID_H + 3] == QUIT_LINE

    engine.update()
    screen.present(engine.snapshot())
    assert fake.lines[GRID_H + 2] == GAME_OVER_LINE

    engine.restart()
    screen.present(engine.snapshot())
    assert GRID_H + 2 not in fake.lines


def test_play_refuses_without_a_tty(monkeypatch):
    class NotATty:
        def isatty(self):
            return False

    monkeypatch.setattr(terminal.sys, "stdin", NotATty())
    with pytest.raises(TerminalError):
        terminal.play(terminal.Config())


def test_clrtoeol_keeps_text_left_of_cursor():
    fake = FakeScreen()
    fake.addstr(3, 0, "Score: 12")
    fake.addstr(3, 0, "Score: 3")
    fake.clrtoeol()
    assert fake.lines[3] == "Score: 3"


def test_setup_error_becomes_terminal_error(no_curses, monkeypatch):
    def broken():
        raise curses.error("cbreak() returned ERR")

    monkeypatch.setattr(curses, "cbreak", broken)
    with pytest.raises(TerminalError, match="setup failed"):
        TerminalScreen(FakeScreen())


def test_curses_error_during_play_is_reported(monkeypatch):
    class Tty:
        def isatty(self):
            return True

    def lost_terminal(func, *args):
        raise curses.error("addwstr() returned ERR")

    monkeypatch.setattr(terminal.sys, "stdin", Tty())
    monkeypatch.setattr(terminal.sys, "stdout", Tty())
    monkeypatch.setattr(curses, "wrapper", lost_terminal)
    with pytest.raises(TerminalError) as excinfo:
        terminal.play(terminal.Config())
    assert "setup" not in str(excinfo.value)
    assert "addwstr" in str(excinfo.value)
