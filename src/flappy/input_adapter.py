"""
input_adapter.py: Collapses keyboard, mouse and touch events into Command.ACTIVATE.
"""

from typing import Optional, Set

import pygame

from .data_models import Command

ACTIVATE_KEYS = (pygame.K_SPACE,)


class InputAdapter:
    """
    Translates raw pygame events. A held key fires once per physical press,
    even when key repeat is enabled.
    """

    def __init__(self, keys=ACTIVATE_KEYS):
        self.keys = tuple(keys)
        self.held: Set[int] = set()

    def translate(self, event: pygame.event.Event) -> Optional[Command]:
        if event.type == pygame.KEYDOWN and event.key in self.keys:
            if event.key in self.held:
                return None
            self.held.add(event.key)
            return Command.ACTIVATE

        if event.type == pygame.KEYUP:
            self.held.discard(event.key)
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # SDL mirrors touches as mouse clicks; FINGERDOWN already counted them.
            if getattr(event, "touch", False):
                return None
            return Command.ACTIVATE

        if event.type == pygame.FINGERDOWN:
            return Command.ACTIVATE

        if event.type == pygame.WINDOWFOCUSLOST:
            self.release_all()

        return None

    def release_all(self):
        """Forget held keys, e.g. when the window loses focus and KEYUP never arrives."""
        self.held.clear()
