"""Graphics module for Endless Runner rendering."""

from endless_runner.graphics.renderer import RunnerRenderer
from endless_runner.graphics.primitives import (
    draw_rect,
    draw_circle,
    draw_line,
    fill,
    vertical_gradient,
)

__all__ = [
    # Renderer
    "RunnerRenderer",
    # Primitives
    "draw_rect",
    "draw_circle",
    "draw_line",
    "fill",
    "vertical_gradient",
]
