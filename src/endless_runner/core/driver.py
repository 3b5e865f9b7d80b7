"""
Tick driver: one update-then-render step per frame.

The driver does not own a clock. Whatever paces the frames (the
pygame window loop, a test harness) calls tick(); run() fast-forwards
a fixed number of frames.
"""

from typing import Callable, Generic, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)

V = TypeVar("V")


class TickDriver(Generic[V]):
    """Calls update then render once per tick."""

    def __init__(
        self,
        update_fn: Callable[[V], object],
        render_fn: Optional[Callable[[], None]] = None,
    ) -> None:
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def tick(self, viewport: V) -> None:
        try:
            self._update_fn(viewport)
            if self._render_fn is not None:
                self._render_fn()
        except Exception:
            # Fail fast rather than keep ticking on corrupt state
            logger.exception(f"Tick {self._frame_count} failed")
            raise
        self._frame_count += 1

    def run(self, frames: int, viewport: V) -> None:
        """Fast-forward a fixed number of ticks."""
        for _ in range(frames):
            self.tick(viewport)
