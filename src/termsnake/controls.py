# controls.py
from enum import Enum
from typing import Callable, Optional
import logging

from .game import Engine, Snapshot
from .geometry import Direction

log = logging.getLogger(__name__)


class FrontendError(RuntimeError):
    """A frontend could not start; raised before any Engine exists."""


class Command(Enum):
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    RESTART = "restart"
    QUIT = "quit"


MOVES = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


def apply_command(engine: Engine, command: Optional[Command]) -> bool:
    """Feed one command to the engine. Return False to quit."""
    if command is None:
        return True
    if command is Command.QUIT:
        return False
    if command is Command.RESTART:
        if engine.is_over:
            log.info("restart after score %d", engine.score)
        engine.restart()
        return True
    engine.change_direction(MOVES[command])
    return True


def run(
    engine: Engine,
    poll: Callable[[], Optional[Command]],
    present: Callable[[Snapshot], None],
    max_ticks: Optional[int] = None,
) -> int:
    """
    Drive the engine until a Quit command (or max_ticks) and return the
    number of ticks played.

    Per tick:
      1) poll() for at most one command; the frontend blocks up to one tick
      2) apply it
      3) update() once if the round is still running
      4) present() the new snapshot
    """
    present(engine.snapshot())
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        if not apply_command(engine, poll()):
            log.info("quit requested after %d ticks", ticks)
            break
        if not engine.is_over:
            engine.update()
        present(engine.snapshot())
        ticks += 1
    return ticks
