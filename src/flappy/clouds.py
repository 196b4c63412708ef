"""
clouds.py: Background clouds. Purely cosmetic, no effect on gameplay.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CLOUD_COUNT,
    CLOUD_MIN_SIZE, CLOUD_SIZE_RANGE, CLOUD_MIN_SPEED, CLOUD_SPEED_RANGE
)
from .data_models import Cloud


@dataclass
class CloudLayer:
    rng: random.Random = field(default_factory=random.Random)
    clouds: List[Cloud] = field(default_factory=list)

    def _random_y(self) -> float:
        return self.rng.random() * (SCREEN_HEIGHT / 2)

    def generate(self, count: int = CLOUD_COUNT):
        self.clouds = [
            Cloud(
                x=self.rng.random() * SCREEN_WIDTH,
                y=self._random_y(),
                size=self.rng.random() * CLOUD_SIZE_RANGE + CLOUD_MIN_SIZE,
                speed=self.rng.random() * CLOUD_SPEED_RANGE + CLOUD_MIN_SPEED,
            )
            for _ in range(count)
        ]

    def step(self):
        """Drift left; clouds leaving the screen re-enter on the right at a new height."""
        for cloud in self.clouds:
            cloud.x -= cloud.speed
            if cloud.x + cloud.size < 0:
                cloud.x = SCREEN_WIDTH + cloud.size
                cloud.y = self._random_y()
