"""Geometry primitives and the AABB collision resolver."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple


def _sign(value: float) -> float:
    # Zero counts as positive, matching ``copysign`` semantics.
    return math.copysign(1.0, value)


@dataclass
class Vector2:
    """Direction or position on the board; normalises to a unit heading."""

    x: float
    y: float

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        length = self.length()
        if length == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def point(self) -> Vector2:
        return Vector2(self.x, self.y)

    def size(self) -> Vector2:
        return Vector2(self.w, self.h)

    def center(self) -> Vector2:
        return Vector2(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def copy(self) -> "Rect":
        return Rect(self.x, self.y, self.w, self.h)

    def intersect(self, other: "Rect") -> Optional["Rect"]:
        """Return the overlapping region, or ``None`` when the rectangles only
        touch or are apart."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)


def resolve_collision(rect: Rect, velocity: Vector2, target: Rect) -> bool:
    """Push ``rect`` out of ``target`` along the shallowest axis.

    ``rect`` and ``velocity`` are updated in place: the position is corrected
    by the penetration depth and the velocity component on that axis is made
    to point away from the target's centre.  Returns ``True`` when the two
    rectangles overlapped so callers can apply gameplay effects.
    """
    intersection = rect.intersect(target)
    if intersection is None:
        return False
    rect_center = rect.center()
    target_center = target.center()
    to_x = _sign(target_center.x - rect_center.x)
    to_y = _sign(target_center.y - rect_center.y)
    if intersection.w > intersection.h:
        rect.y -= to_y * intersection.h
        velocity.y = -to_y * abs(velocity.y)
    else:
        rect.x -= to_x * intersection.w
        velocity.x = -to_x * abs(velocity.x)
    return True


__all__ = ["Rect", "Vector2", "resolve_collision"]
