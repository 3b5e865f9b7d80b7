"""Game entities: player, obstacles, viewport and the per-frame snapshot."""

from dataclasses import dataclass
from typing import Protocol

from endless_runner.core.state import GameState


class Rect(Protocol):
    """Anything with an axis-aligned box."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Box:
    """Immutable rectangle handed to the renderer."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Viewport:
    """Current drawable area. The ground line sits ground_margin above the bottom."""
    width: float
    height: float
    ground_margin: float = 50.0

    @property
    def ground_y(self) -> float:
        return max(0.0, self.height - self.ground_margin)

    def max_x(self, entity_width: float) -> float:
        """Largest x that keeps an entity of this width on screen."""
        return max(0.0, self.width - entity_width)


@dataclass
class Player:
    x: float
    y: float
    width: float = 30.0
    height: float = 30.0
    velocity_y: float = 0.0
    is_jumping: bool = False
    jumps_available: int = 1
    max_jumps: int = 2
    jumps_since_landing: int = 0  # jumps made since last touching the ground

    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class Obstacle:
    x: float
    y: float
    width: float = 30.0
    height: float = 40.0

    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of one frame, consumed by the renderer."""
    state: GameState
    viewport: Viewport
    ground_y: float
    player: Box
    obstacles: tuple[Box, ...]
    score: int
    best_score: int
    game_speed: float
