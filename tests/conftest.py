import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from flappy.data_models import Phase
from flappy.session import GameSession


class RecordingStore:
    """Score store double that remembers every set_best call."""
    def __init__(self, best=0):
        self.best = best
        self.saved = []

    def get_best(self):
        return self.best

    def set_best(self, value):
        self.saved.append(value)
        self.best = value


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def session(store):
    return GameSession(store, rng=random.Random(1234))


@pytest.fixture
def playing(session):
    session.activate()
    assert session.phase is Phase.PLAYING
    return session
