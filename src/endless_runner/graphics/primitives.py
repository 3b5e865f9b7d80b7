"""Basic drawing primitives on numpy RGB buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def vertical_gradient(buffer: Buffer, top: Color, bottom: Color) -> None:
    """Fill the buffer with a top-to-bottom linear gradient."""
    h = buffer.shape[0]
    if h == 0:
        return
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    rows = np.asarray(top, dtype=np.float32) * (1 - t) + np.asarray(bottom, dtype=np.float32) * t
    buffer[:, :] = rows.astype(np.uint8)[:, None, :]


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
    else:
        t = max(1, thickness)
        buffer[y1:min(y1 + t, y2), x1:x2] = color
        buffer[max(y2 - t, y1):y2, x1:x2] = color
        buffer[y1:y2, x1:min(x1 + t, x2)] = color
        buffer[y1:y2, max(x2 - t, x1):x2] = color


def draw_circle(
    buffer: Buffer,
    cx: int,
    cy: int,
    radius: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a circle on the buffer.

    Only the circle's bounding box is scanned, so small circles on a
    large buffer stay cheap.
    """
    h, w = buffer.shape[:2]
    x1, x2 = max(0, cx - radius - 1), min(w, cx + radius + 2)
    y1, y2 = max(0, cy - radius - 1), min(h, cy + radius + 2)
    if x2 <= x1 or y2 <= y1:
        return

    y_indices, x_indices = np.ogrid[y1:y2, x1:x2]
    dist_sq = (x_indices - cx) ** 2 + (y_indices - cy) ** 2
    if filled:
        mask = dist_sq <= radius ** 2
    else:
        inner = max(0, radius - thickness)
        mask = (dist_sq <= radius ** 2) & (dist_sq > inner ** 2)
    buffer[y1:y2, x1:x2][mask] = color


def draw_line(
    buffer: Buffer,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
    thickness: int = 1,
) -> None:
    """Draw a line using Bresenham's algorithm.

    Args:
        buffer: Target numpy array (height, width, 3)
        x1, y1: Start point
        x2, y2: End point
        color: RGB color tuple
        thickness: Line thickness in pixels
    """
    h, w = buffer.shape[:2]

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1

    while True:
        # Draw point with thickness
        for tx in range(-thickness // 2, (thickness + 1) // 2):
            for ty in range(-thickness // 2, (thickness + 1) // 2):
                px, py = x + tx, y + ty
                if 0 <= px < w and 0 <= py < h:
                    buffer[py, px] = color

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
