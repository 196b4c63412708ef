"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, replace
from typing import Tuple

from .constants import BIRD_X, BIRD_WIDTH, BIRD_HEIGHT, RESPAWN_Y, PIPE_WIDTH, PIPE_GAP


class Phase(enum.Enum):
    """Which part of the game is running; only PLAYING advances the simulation."""
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Command(enum.Enum):
    """Normalized input signal. Every device collapses into ACTIVATE."""
    ACTIVATE = "activate"


@dataclass
class Bird:
    """The player-controlled actor. x never changes during a round."""
    x: float = BIRD_X
    y: float = RESPAWN_Y
    velocity: float = 0.0
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT
    rotation: float = 0.0          # Radians, visual only

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def respawn(self):
        self.y = RESPAWN_Y
        self.velocity = 0.0
        self.rotation = 0.0


@dataclass
class Pipe:
    """A pair of barriers. The opening runs from top_height down to bottom_y."""
    x: float
    top_height: float
    passed: bool = False
    gap: float = PIPE_GAP

    @property
    def bottom_y(self) -> float:
        return self.top_height + self.gap

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH


@dataclass
class Cloud:
    """Cosmetic background decoration."""
    x: float
    y: float
    size: float
    speed: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of one tick's state, handed to the renderer."""
    phase: Phase
    bird: Bird
    pipes: Tuple[Pipe, ...]
    clouds: Tuple[Cloud, ...]
    score: int
    best_score: int

    @classmethod
    def capture(cls, phase, bird, pipes, clouds, score, best_score) -> "FrameSnapshot":
        """Copies every entity so drawing code cannot reach back into the session."""
        return cls(
            phase=phase,
            bird=replace(bird),
            pipes=tuple(replace(p) for p in pipes),
            clouds=tuple(replace(c) for c in clouds),
            score=score,
            best_score=best_score,
        )
