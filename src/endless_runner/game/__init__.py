"""Game simulation: physics, obstacles, collisions and the session."""

from .entities import FrameSnapshot, Obstacle, Player, Viewport
from .scoring import ScoreKeeper
from .session import GameSession
from .input import InputMapper

__all__ = [
    "FrameSnapshot",
    "Obstacle",
    "Player",
    "Viewport",
    "ScoreKeeper",
    "GameSession",
    "InputMapper",
]
