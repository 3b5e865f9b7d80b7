"""Frame renderer: paints a FrameSnapshot into an RGB buffer."""

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from endless_runner.game.entities import Box, FrameSnapshot
from endless_runner.graphics.primitives import (
    Color,
    draw_circle,
    draw_line,
    draw_rect,
    vertical_gradient,
)

logger = logging.getLogger(__name__)


class RunnerRenderer:
    """Draws sky, ground, obstacles and player. Text is left to the window."""

    SKY_TOP: Color = (135, 206, 235)
    SKY_BOTTOM: Color = (224, 246, 255)
    GROUND: Color = (46, 204, 113)
    GROUND_STRIPE: Color = (39, 174, 96)
    OBSTACLE_TOP: Color = (255, 107, 107)
    OBSTACLE_BOTTOM: Color = (238, 90, 111)
    OBSTACLE_OUTLINE: Color = (204, 0, 0)
    PLAYER: Color = (0, 212, 255)
    PLAYER_OUTLINE: Color = (0, 255, 255)
    EYE: Color = (0, 0, 0)

    STRIPE_SPACING = 40

    def __init__(self) -> None:
        self._sky: Optional[NDArray[np.uint8]] = None

    @staticmethod
    def buffer_for(snapshot: FrameSnapshot) -> NDArray[np.uint8]:
        """Allocate a buffer matching the snapshot's viewport."""
        w = max(0, int(snapshot.viewport.width))
        h = max(0, int(snapshot.viewport.height))
        return np.zeros((h, w, 3), dtype=np.uint8)

    def render(
        self,
        snapshot: FrameSnapshot,
        buffer: Optional[NDArray[np.uint8]] = None,
    ) -> NDArray[np.uint8]:
        if buffer is None or buffer.shape[:2] != (int(snapshot.viewport.height), int(snapshot.viewport.width)):
            buffer = self.buffer_for(snapshot)

        self._draw_sky(buffer)
        self._draw_ground(buffer, int(snapshot.ground_y))
        for obstacle in snapshot.obstacles:
            self._draw_obstacle(buffer, obstacle)
        self._draw_player(buffer, snapshot.player)
        return buffer

    def _draw_sky(self, buffer: NDArray[np.uint8]) -> None:
        # Gradient only changes with the buffer size
        if self._sky is None or self._sky.shape != buffer.shape:
            self._sky = np.empty_like(buffer)
            vertical_gradient(self._sky, self.SKY_TOP, self.SKY_BOTTOM)
        buffer[:] = self._sky

    def _draw_ground(self, buffer: NDArray[np.uint8], ground_y: int) -> None:
        h, w = buffer.shape[:2]
        draw_rect(buffer, 0, ground_y, w, h - ground_y, self.GROUND)
        for x in range(0, w, self.STRIPE_SPACING):
            draw_line(buffer, x, ground_y, x + 20, ground_y + 10, self.GROUND_STRIPE, thickness=2)

    def _draw_obstacle(self, buffer: NDArray[np.uint8], box: Box) -> None:
        x, y = int(box.x), int(box.y)
        w, h = int(box.width), int(box.height)
        if h <= 0:
            return
        # Row-by-row gradient, clipped by draw_rect
        for row in range(h):
            t = row / max(1, h - 1)
            color = tuple(
                int(a + (b - a) * t) for a, b in zip(self.OBSTACLE_TOP, self.OBSTACLE_BOTTOM)
            )
            draw_rect(buffer, x, y + row, w, 1, color)
        draw_rect(buffer, x, y, w, h, self.OBSTACLE_OUTLINE, filled=False, thickness=2)

    def _draw_player(self, buffer: NDArray[np.uint8], box: Box) -> None:
        cx = int(box.x + box.width / 2)
        cy = int(box.y + box.height / 2)
        radius = int(box.width / 2)

        draw_circle(buffer, cx, cy, radius, self.PLAYER)
        draw_circle(buffer, cx, cy, radius, self.PLAYER_OUTLINE, filled=False, thickness=2)

        # Eyes
        draw_circle(buffer, cx - 5, cy - 3, 3, self.EYE)
        draw_circle(buffer, cx + 5, cy - 3, 3, self.EYE)
