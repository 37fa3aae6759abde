"""
Renderable primitives: zero-length points and directed line segments.

A primitive owns exactly one behavior. ``update(dt)`` advances it and
copies the resulting position into the primitive's transform; the renderer
reads ``get_transform()`` every tick.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import MalformedSizeError
from ..core.vecmath import IDENTITY, Quat, Vec3, add, quat_rotate
from .behaviors import Behavior, StaticBehavior, update_behavior


@dataclass(frozen=True)
class Transform:
    """Position + orientation handed to the renderer."""
    position: Vec3
    orientation: Quat = IDENTITY


def _to_float(value, original) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise MalformedSizeError(original) from None
    if math.isnan(result):
        raise MalformedSizeError(original)
    return result


def parse_point_size(size) -> float:
    """Point size from a number or numeric string."""
    if isinstance(size, bool):
        raise MalformedSizeError(size)
    return _to_float(size, size)


def parse_line_size(size) -> Tuple[float, float]:
    """(width, length) from ``"WxL"``; a bare number is used for both."""
    if isinstance(size, bool):
        raise MalformedSizeError(size)
    if isinstance(size, (int, float)):
        return float(size), float(size)
    parts = str(size).split("x")
    if len(parts) != 2:
        raise MalformedSizeError(size)
    return _to_float(parts[0], size), _to_float(parts[1], size)


class Point:
    """A marker at a position."""

    object_type = "point"

    def __init__(self, position: Vec3, size: float, color: str,
                 behavior: Optional[Behavior] = None,
                 orientation: Quat = IDENTITY):
        self.position = (float(position[0]), float(position[1]), float(position[2]))
        self.size = size
        self.color = color
        self.orientation = orientation
        self.behavior = behavior or StaticBehavior(
            initial_position=self.position, current_position=self.position)

    def update(self, dt: float) -> None:
        self.position = update_behavior(self.behavior, dt)

    def get_transform(self) -> Transform:
        return Transform(position=self.position, orientation=self.orientation)

    def set_behavior(self, behavior: Behavior) -> None:
        """Swap the active behavior; the next update may jump."""
        self.behavior = behavior

    def __repr__(self):
        return f"Point(position={self.position}, size={self.size}, color={self.color!r})"


class Line:
    """A segment from the anchor along the rotated local +z axis.

    The canonical segment runs from ``(0, 0, 0)`` to ``(0, 0, length)`` and
    is placed in the world by ``orientation`` then ``position``.
    """

    object_type = "line"

    def __init__(self, position: Vec3, width: float, length: float, color: str,
                 orientation: Quat = IDENTITY,
                 behavior: Optional[Behavior] = None):
        self.position = (float(position[0]), float(position[1]), float(position[2]))
        self.width = width
        self.length = length
        self.color = color
        self.orientation = orientation
        self.behavior = behavior or StaticBehavior(
            initial_position=self.position, current_position=self.position)

    @property
    def size(self) -> str:
        return f"{self.width:g}x{self.length:g}"

    def update(self, dt: float) -> None:
        self.position = update_behavior(self.behavior, dt)

    def get_transform(self) -> Transform:
        return Transform(position=self.position, orientation=self.orientation)

    def set_behavior(self, behavior: Behavior) -> None:
        """Swap the active behavior; the next update may jump."""
        self.behavior = behavior

    def endpoints(self) -> Tuple[Vec3, Vec3]:
        """World-space (start, end) of the segment."""
        tip = quat_rotate(self.orientation, (0.0, 0.0, self.length))
        return self.position, add(self.position, tip)

    def __repr__(self):
        return (f"Line(position={self.position}, width={self.width}, "
                f"length={self.length}, color={self.color!r})")
