"""
client.py: pygame window, event pump and main loop.
"""

import logging
import random
from typing import Optional

import pygame

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, WINDOW_TITLE, DB_FILE
from .driver import FrameDriver
from .input_adapter import InputAdapter
from .renderer import Renderer
from .score_db import open_store
from .session import GameSession

logger = logging.getLogger(__name__)


class FlappyClient:
    def __init__(self, db_file: str = DB_FILE, fps: int = FPS, seed: Optional[int] = None):
        self.store = open_store(db_file)

        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        self.session = GameSession(self.store, rng=random.Random(seed))
        self.input = InputAdapter()
        self.renderer = Renderer(self.screen)
        self.driver = FrameDriver(
            self.session, self.renderer, pygame.time.Clock(), fps,
            present=pygame.display.flip)

        self.running = False

    def _handle_events(self) -> bool:
        """Feeds input into the session queue. Returns False when the player quits."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

            command = self.input.translate(event)
            if command is not None:
                self.session.submit(command)
        return True

    def _should_continue(self) -> bool:
        self.running = self.running and self._handle_events()
        return self.running

    def run(self):
        """The main client execution loop."""
        logger.info("Starting client (best score %d)", self.session.best_score)
        self.running = True
        try:
            self.driver.run(self._should_continue)
        finally:
            self.store.close()
            pygame.quit()
            logger.info("Client stopped after %d frames", self.driver.frames)
