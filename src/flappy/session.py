"""
session.py: The game session. Owns every entity and runs the phase machine.
"""

import logging
import random
from collections import deque
from typing import Deque, List, Optional

from .clouds import CloudLayer
from .data_models import Bird, Cloud, Command, FrameSnapshot, Phase, Pipe
from .physics_core import PhysicsCore
from .pipe_manager import PipeManager

logger = logging.getLogger(__name__)


class GameSession:
    """
    A single-player round manager.

    Input is queued with submit() and drained at the start of tick(), so a
    tick always runs to completion against a fixed set of commands.
    """

    def __init__(self, store, rng: Optional[random.Random] = None,
                 physics: Optional[PhysicsCore] = None):
        self.store = store
        self.rng = rng or random.Random()
        self.physics = physics or PhysicsCore()

        self.phase = Phase.MENU
        self.score = 0
        self.best_score = store.get_best()

        self.bird = Bird()
        self.pipe_manager = PipeManager(rng=self.rng)
        # Separate stream: pipe gaps depend only on the seed, never on frame count.
        self.cloud_layer = CloudLayer(rng=random.Random(self.rng.random()))
        self.cloud_layer.generate()

        self.commands: Deque[Command] = deque()

    @property
    def pipes(self) -> List[Pipe]:
        return self.pipe_manager.pipes

    @property
    def clouds(self) -> List[Cloud]:
        return self.cloud_layer.clouds

    # -------- Transitions --------

    def submit(self, command: Command):
        """Queues a command for the next tick."""
        self.commands.append(command)

    def activate(self):
        """Primary action: start from the menu, flap while playing, restart after a crash."""
        if self.phase in (Phase.MENU, Phase.GAME_OVER):
            self.start_game()
        elif self.phase is Phase.PLAYING:
            self.bird.velocity = self.physics.flap()
        else:
            logger.debug("Ignoring activate in phase %s", self.phase)

    def start_game(self):
        """Start/restart control. Does nothing while a round is in progress."""
        if self.phase is Phase.PLAYING:
            logger.debug("Ignoring start request during play")
            return

        self.phase = Phase.PLAYING
        self.score = 0
        self.bird.respawn()
        self.pipe_manager.reset()
        logger.info("Round started")

    def game_over(self):
        self.phase = Phase.GAME_OVER
        logger.info("Game over with score %d (best %d)", self.score, self.best_score)

        if self.score > self.best_score:
            self.best_score = self.score
            self.store.set_best(self.best_score)
            logger.info("New best score %d", self.best_score)

    # -------- Simulation --------

    def _drain_commands(self):
        while self.commands:
            command = self.commands.popleft()
            if command is Command.ACTIVATE:
                self.activate()

    def tick(self):
        """Advances the session by one frame."""
        self._drain_commands()

        # Clouds drift in every phase.
        self.cloud_layer.step()

        if self.phase is not Phase.PLAYING:
            return

        self.physics.step_bird(self.bird)

        if self.physics.hits_ground(self.bird):
            self.game_over()
            return

        if self.physics.collides_with_any(self.bird, self.pipes):
            self.game_over()
            return

        self.score += self.pipe_manager.step(self.bird.left)

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot.capture(
            self.phase, self.bird, self.pipes, self.clouds,
            self.score, self.best_score)
