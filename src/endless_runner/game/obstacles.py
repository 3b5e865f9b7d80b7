"""Obstacle spawning, scrolling and pruning."""

import logging
from typing import Iterator, Protocol

from endless_runner.config.settings import ObstacleSettings
from endless_runner.game.entities import Obstacle, Viewport

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


class ObstacleManager:
    """Owns the live obstacles in spawn order."""

    def __init__(self, settings: ObstacleSettings, rng: RandomSource) -> None:
        self._settings = settings
        self._rng = rng
        self._obstacles: list[Obstacle] = []

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    @property
    def obstacles(self) -> tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    def clear(self) -> None:
        self._obstacles = []

    def add(self, obstacle: Obstacle) -> None:
        self._obstacles.append(obstacle)

    def maybe_spawn(self, spawn_rate: float, viewport: Viewport) -> Obstacle | None:
        """One Bernoulli trial: spawn at the right edge if the sample falls under spawn_rate."""
        if self._rng.random() >= spawn_rate:
            return None

        obstacle = Obstacle(
            x=viewport.width,
            y=viewport.ground_y - self._settings.height,
            width=self._settings.width,
            height=self._settings.height,
        )
        self._obstacles.append(obstacle)
        logger.debug(f"Spawned obstacle at x={obstacle.x:.0f} ({len(self._obstacles)} live)")
        return obstacle

    def advance(self, speed: float) -> None:
        """Scroll every obstacle left and drop the ones fully past the left edge."""
        for obstacle in self._obstacles:
            obstacle.x -= speed
        self.prune()

    def prune(self) -> int:
        """Remove obstacles with x + width < 0. Returns how many were removed."""
        before = len(self._obstacles)
        self._obstacles = [o for o in self._obstacles if o.x + o.width >= 0]
        return before - len(self._obstacles)
