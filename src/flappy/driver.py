"""
driver.py: Fixed-step frame driver. Owns no game state.
"""

from typing import Callable, Optional

from .constants import FPS


class FrameDriver:
    """
    Runs update-then-render once per frame and waits on the clock.

    The clock only needs tick(fps); pygame.time.Clock fits, and tests can pass
    any object with that method.
    """

    def __init__(self, session, renderer, clock, fps: int = FPS,
                 present: Optional[Callable[[], None]] = None):
        self.session = session
        self.renderer = renderer
        self.clock = clock
        self.fps = fps
        self.present = present
        self.frames = 0

    def step(self):
        """One complete frame: tick fully, then draw fully."""
        self.session.tick()
        if self.renderer is not None:
            self.renderer.draw(self.session.snapshot())
        if self.present is not None:
            self.present()
        self.frames += 1
        self.clock.tick(self.fps)

    def run(self, should_continue: Callable[[], bool]):
        while should_continue():
            self.step()
