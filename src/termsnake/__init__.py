"""Terminal Snake: a snake on a fixed grid, steered from the keyboard."""

from .geometry import Direction, Position, in_bounds
from .game import Engine, GameState, Snapshot

__all__ = ["Direction", "Engine", "GameState", "Position", "Snapshot", "in_bounds"]
