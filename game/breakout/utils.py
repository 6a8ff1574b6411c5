"""
Geometry helpers for ball/rectangle collisions
"""

from __future__ import annotations
import math
from typing import NamedTuple


class BounceAxis(NamedTuple):
    """Which velocity components a collision response flips"""
    dx_flip: bool
    dy_flip: bool


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def circle_intersects_rect(ball, rect) -> bool:
    """Check if the ball's bounding circle overlaps an axis-aligned rectangle.

    Expanded-edge test: the rectangle edges are pushed out by the radius on
    both axes, so corners count as a square overlap.
    """
    r = ball.radius
    return (ball.x + r > rect.x and
            ball.x - r < rect.x + rect.width and
            ball.y + r > rect.y and
            ball.y - r < rect.y + rect.height)


def resolve_axis(ball, rect) -> BounceAxis:
    """Pick the velocity component to flip after hitting ``rect``.

    If the ball's vertical extent pokes past the rectangle's top or bottom
    edge it is a top/bottom hit and dy flips; otherwise dx flips. Corner hits
    are classified as top/bottom whenever the vertical extent crosses an edge.
    """
    r = ball.radius
    crosses_top_or_bottom = (ball.y + r > rect.y + rect.height or
                             ball.y - r < rect.y)
    if crosses_top_or_bottom:
        return BounceAxis(dx_flip=False, dy_flip=True)
    return BounceAxis(dx_flip=True, dy_flip=False)
