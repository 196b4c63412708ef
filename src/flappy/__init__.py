"""
flappy: single-player Flappy Bird built on pygame.
"""

from .data_models import Bird, Cloud, Command, FrameSnapshot, Phase, Pipe
from .physics_core import PhysicsCore
from .pipe_manager import PipeManager
from .score_db import MemoryScoreStore, ScoreDatabase
from .session import GameSession

__all__ = [
    "Bird", "Cloud", "Command", "FrameSnapshot", "Phase", "Pipe",
    "PhysicsCore", "PipeManager", "MemoryScoreStore", "ScoreDatabase",
    "GameSession",
]
