# terminal.py
import curses
import logging
import sys
from typing import Optional

from .config import Config, GRID_W, GRID_H, TICK_MS, HUD_LINES
from .controls import Command, FrontendError, run
from .game import Engine, Snapshot
from .render import grid_rows, status_lines, GAME_OVER_LINE

log = logging.getLogger(__name__)

ESC = 27

KEYMAP = {
    curses.KEY_UP: Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord("w"): Command.MOVE_UP,
    ord("s"): Command.MOVE_DOWN,
    ord("a"): Command.MOVE_LEFT,
    ord("d"): Command.MOVE_RIGHT,
    ord("r"): Command.RESTART,
    ord("q"): Command.QUIT,
    ESC: Command.QUIT,
}


class TerminalError(FrontendError):
    """The terminal can't host the game."""


def key_to_command(key: int) -> Optional[Command]:
    """Map a curses key code to a command; -1 (poll timeout) and unknown keys give None."""
    if key < 0:
        return None
    if 0 < key < 256:
        key = ord(chr(key).lower())
    return KEYMAP.get(key)


def required_size(width: int = GRID_W, height: int = GRID_H):
    """(rows, cols) needed: the grid, a spacer row and the status lines."""
    return height + 1 + HUD_LINES, width + 1


class TerminalScreen:
    """curses-backed input poll and frame drawing."""

    def __init__(self, stdscr, width: int = GRID_W, height: int = GRID_H,
                 tick_ms: int = TICK_MS):
        self.stdscr = stdscr
        self.width = width
        self.height = height

        rows, cols = stdscr.getmaxyx()
        need_rows, need_cols = required_size(width, height)
        if rows < need_rows or cols < need_cols:
            raise TerminalError(
                f"terminal is {cols}x{rows}, the game needs at least {need_cols}x{need_rows}"
            )
        try:
            curses.curs_set(0)
        except curses.error:
            log.debug("terminal cannot hide the cursor")
        try:
            curses.noecho()
            curses.cbreak()
            stdscr.keypad(True)
            stdscr.timeout(tick_ms)
            stdscr.erase()
        except curses.error as exc:
            raise TerminalError(f"terminal setup failed: {exc}") from exc

    def poll(self) -> Optional[Command]:
        return key_to_command(self.stdscr.getch())

    def present(self, snapshot: Snapshot) -> None:
        for y, row in enumerate(grid_rows(snapshot)):
            self.stdscr.addstr(y, 0, row)

        status = status_lines(snapshot)
        base = self.height + 1
        self.stdscr.addstr(base, 0, status[0])
        self.stdscr.clrtoeol()
        self.stdscr.move(base + 1, 0)
        self.stdscr.clrtoeol()
        if GAME_OVER_LINE in status:
            self.stdscr.addstr(base + 1, 0, GAME_OVER_LINE)
        self.stdscr.addstr(base + 2, 0, status[-1])
        self.stdscr.refresh()


def _session(stdscr, config: Config) -> int:
    screen = TerminalScreen(stdscr)
    engine = Engine(seed=config.seed)
    log.info("terminal session started (%dx%d grid, %d ms tick)", GRID_W, GRID_H, TICK_MS)
    return run(engine, screen.poll, screen.present)


def play(config: Config) -> int:
    """Run the game in the current terminal; returns the ticks played."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise TerminalError("termsnake needs an interactive terminal")
    try:
        return curses.wrapper(_session, config)
    except curses.error as exc:
        raise TerminalError(f"terminal error: {exc}") from exc
