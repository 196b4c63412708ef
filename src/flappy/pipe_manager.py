"""
pipe_manager.py: Spawning, scrolling, scoring and recycling of pipes.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import (
    SCREEN_WIDTH, GROUND_Y, PIPE_GAP, PIPE_SPACING, PIPE_SPEED, PIPE_MARGIN
)
from .data_models import Pipe

logger = logging.getLogger(__name__)


@dataclass
class PipeManager:
    """
    Owns the active pipe list. Pipes are kept in spawn order, so the last
    element is always the most recently spawned one.
    """
    rng: random.Random = field(default_factory=random.Random)
    pipes: List[Pipe] = field(default_factory=list)
    speed: float = PIPE_SPEED
    spacing: float = PIPE_SPACING

    def reset(self):
        self.pipes = []
        self.spawn_pipe()

    def random_top_height(self) -> float:
        """Leaves at least PIPE_MARGIN of barrier above and below the gap."""
        return self.rng.uniform(PIPE_MARGIN, GROUND_Y - PIPE_GAP - PIPE_MARGIN)

    def spawn_pipe(self, top_height: Optional[float] = None) -> Pipe:
        """Generates a new pipe off-screen to the right."""
        if top_height is None:
            top_height = self.random_top_height()
        pipe = Pipe(x=float(SCREEN_WIDTH), top_height=top_height)
        self.pipes.append(pipe)
        logger.debug("Spawned pipe with gap %.1f-%.1f", pipe.top_height, pipe.bottom_y)
        return pipe

    def advance(self):
        for pipe in self.pipes:
            pipe.x -= self.speed

    def score_passed(self, bird_left: float) -> int:
        """Marks pipes whose right edge is now left of the bird. Returns points earned."""
        earned = 0
        for pipe in self.pipes:
            if not pipe.passed and pipe.right < bird_left:
                pipe.passed = True
                earned += 1
        return earned

    def recycle(self):
        self.pipes = [p for p in self.pipes if p.right >= 0]

    def maybe_spawn(self) -> Optional[Pipe]:
        if not self.pipes or self.pipes[-1].x < SCREEN_WIDTH - self.spacing:
            return self.spawn_pipe()
        return None

    def step(self, bird_left: float) -> int:
        """
        One tick of pipe upkeep: move, score, drop off-screen pipes, spawn.
        Scoring runs before removal so a pipe is never dropped unscored.
        """
        self.advance()
        earned = self.score_passed(bird_left)
        self.recycle()
        self.maybe_spawn()
        return earned
