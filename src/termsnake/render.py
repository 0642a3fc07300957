# render.py
from typing import List

from .config import SNAKE_GLYPH, FOOD_GLYPH, EMPTY_GLYPH
from .game import GameState, Snapshot

SCORE_LINE = "Score: {score}"
GAME_OVER_LINE = "Game over! Press r to restart"
QUIT_LINE = "Press q to quit"


def grid_rows(snapshot: Snapshot) -> List[str]:
    """One string per grid row, one glyph per cell. Off-grid segments are skipped."""
    occupied = set(snapshot.snake)
    rows = []
    for y in range(snapshot.height):
        row = []
        for x in range(snapshot.width):
            if (x, y) in occupied:
                row.append(SNAKE_GLYPH)
            elif (x, y) == snapshot.food:
                row.append(FOOD_GLYPH)
            else:
                row.append(EMPTY_GLYPH)
        rows.append("".join(row))
    return rows


def status_lines(snapshot: Snapshot) -> List[str]:
    lines = [SCORE_LINE.format(score=snapshot.score)]
    if snapshot.state is GameState.OVER:
        lines.append(GAME_OVER_LINE)
    lines.append(QUIT_LINE)
    return lines


def render_frame(snapshot: Snapshot) -> List[str]:
    return grid_rows(snapshot) + status_lines(snapshot)
