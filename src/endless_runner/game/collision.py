"""Axis-aligned bounding box collision."""

from typing import Iterable, TypeVar

from endless_runner.game.entities import Rect

R = TypeVar("R", bound=Rect)


def is_colliding(a: Rect, b: Rect) -> bool:
    # Strict: touching edges do not collide
    return (a.x < b.x + b.width
            and a.x + a.width > b.x
            and a.y < b.y + b.height
            and a.y + a.height > b.y)


def first_hit(player: Rect, obstacles: Iterable[R]) -> R | None:
    """Return the first obstacle the player overlaps, or None."""
    for obstacle in obstacles:
        if is_colliding(player, obstacle):
            return obstacle
    return None
