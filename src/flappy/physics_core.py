"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable

from .constants import (
    GRAVITY, JUMP_POWER, GROUND_Y, PIPE_WIDTH,
    ROTATION_FACTOR, MIN_ROTATION, MAX_ROTATION
)
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Per-tick bird physics and collision tests.
    All quantities are in pixels per tick; there is no delta time.
    """

    def __init__(self, gravity: float = GRAVITY, jump_power: float = JUMP_POWER,
                 ground_y: float = GROUND_Y):
        self.gravity = gravity
        self.jump_power = jump_power
        self.ground_y = ground_y

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Velocity is updated first, then position moves by the new velocity."""
        velocity += self.gravity
        y += velocity
        return y, velocity

    def rotation_for(self, velocity: float) -> float:
        return min(MAX_ROTATION, max(MIN_ROTATION, velocity * ROTATION_FACTOR))

    def flap(self) -> float:
        """Returns the velocity after a flap. It replaces the current velocity."""
        return self.jump_power

    def clamp_to_ceiling(self, bird: Bird) -> bool:
        # Upward momentum is zeroed, not reflected.
        if bird.y < 0:
            bird.y = 0.0
            bird.velocity = 0.0
            return True
        return False

    def step_bird(self, bird: Bird):
        """Steps 1-4 of a tick: gravity, movement, tilt and the ceiling clamp."""
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)
        bird.rotation = self.rotation_for(bird.velocity)
        self.clamp_to_ceiling(bird)

    def hits_ground(self, bird: Bird) -> bool:
        return bird.bottom >= self.ground_y

    def check_collision(self, bird: Bird, pipe: Pipe) -> bool:
        """Axis-aligned box against the two barrier rectangles of one pipe."""
        pipe_left = pipe.x
        pipe_right = pipe.x + PIPE_WIDTH

        if bird.right > pipe_left and bird.left < pipe_right:
            if bird.top < pipe.top_height or bird.bottom > pipe.bottom_y:
                return True

        return False

    def collides_with_any(self, bird: Bird, pipes: Iterable[Pipe]) -> bool:
        return any(self.check_collision(bird, pipe) for pipe in pipes)
