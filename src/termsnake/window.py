# window.py
from typing import Optional, Tuple
import logging

import pygame # type: ignore

from .config import (
    Config, GRID_W, GRID_H, CELL_SIZE, TICK_MS, HUD_LINES,
    BG, GREEN, RED, TEXT,
)
from .controls import Command, FrontendError, run
from .game import Engine, GameState, Snapshot
from .geometry import in_bounds
from .render import SCORE_LINE, GAME_OVER_LINE, QUIT_LINE

log = logging.getLogger(__name__)

LINE_H = 24
WIDTH, HEIGHT = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE
HUD_H = HUD_LINES * LINE_H

KEYMAP = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_w: Command.MOVE_UP,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_r: Command.RESTART,
    pygame.K_q: Command.QUIT,
    pygame.K_ESCAPE: Command.QUIT,
}


# ---------- Input ----------
def event_to_command(event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEYMAP.get(event.key)
    return None


def poll_command(tick_ms: int = TICK_MS) -> Optional[Command]:
    """Wait up to one tick for a key; the first mapped key wins."""
    event = pygame.event.wait(tick_ms)
    return event_to_command(event)


# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    # food
    draw_cell(screen, snap.food.x, snap.food.y, RED)
    # snake; a head that left the grid is not drawn
    for x, y in snap.snake:
        if in_bounds((x, y), snap.width, snap.height):
            draw_cell(screen, x, y, GREEN)
    # hud
    score = font.render(SCORE_LINE.format(score=snap.score), True, TEXT)
    screen.blit(score, (8, HEIGHT + 4))
    hint = font.render(QUIT_LINE, True, TEXT)
    screen.blit(hint, (8, HEIGHT + 4 + 2 * LINE_H))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    # Dim the grid with a translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("GAME OVER", True, (240, 240, 250))
    sco   = font.render(SCORE_LINE.format(score=score), True, TEXT)
    sub   = font.render(GAME_OVER_LINE, True, TEXT)

    tx = title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16))
    cx = sco.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 16))

    screen.blit(title, tx)
    screen.blit(sco, cx)
    screen.blit(sub, (8, HEIGHT + 4 + LINE_H))


class WindowScreen:
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self.screen = screen
        self.font = font

    def present(self, snap: Snapshot) -> None:
        draw_game(self.screen, self.font, snap)
        if snap.state is GameState.OVER:
            draw_game_over(self.screen, self.font, snap.score)
        pygame.display.flip()


def play(config: Config) -> int:
    """Run the game in a pygame window; returns the ticks played."""
    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT + HUD_H))
    except pygame.error as exc:
        pygame.quit()
        raise FrontendError(f"could not open a window: {exc}") from exc

    try:
        pygame.display.set_caption("Snake")
        font = pygame.font.SysFont(None, LINE_H)
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
        view = WindowScreen(screen, font)
        engine = Engine(seed=config.seed)
        log.info("window session started (%dx%d grid, %d ms tick)", GRID_W, GRID_H, TICK_MS)
        return run(engine, poll_command, view.present)
    finally:
        pygame.quit()
