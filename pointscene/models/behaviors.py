"""
Closed-form per-object motion models.

Each behavior is a plain dataclass tagged with a ``BehaviorKind``; the
shared update contract is ``update_behavior(behavior, dt)``, which advances
``elapsed_time`` and recomputes ``current_position``. The per-variant
formulas are exposed as pure functions so they can be exercised on their
own:

- Static:      position never changes
- Rotation:    rotate the world-space position by ``speed`` radians about
               ``axis`` every tick (not scaled by dt, orbits the world origin)
- Translation: ping-pong along ``direction`` within ``distance`` of the start
- Orbit:       ``initial + (r cos a, r sin(a/2), r sin a)`` with ``a = t * speed``
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..core.errors import UnsupportedBehaviorError
from ..core.vecmath import Vec3, add, length, normalize, rotate_about_axis, scale, sub

# Construction-time parameter ranges, [low, high)
ROTATION_SPEED_RANGE = (0.01, 0.03)
TRANSLATION_DISTANCE_RANGE = (0.5, 2.0)
TRANSLATION_SPEED_RANGE = (0.02, 0.05)
ORBIT_RADIUS_RANGE = (1.0, 3.0)
ORBIT_SPEED_RANGE = (0.02, 0.04)


class BehaviorKind(str, Enum):
    """Motion model variants."""
    STATIC = "static"
    ROTATION = "rotation"
    TRANSLATION = "translation"
    ORBIT = "orbit"


@dataclass
class StaticBehavior:
    initial_position: Vec3
    current_position: Vec3
    elapsed_time: float = 0.0
    kind: BehaviorKind = BehaviorKind.STATIC


@dataclass
class RotationBehavior:
    initial_position: Vec3
    current_position: Vec3
    axis: Vec3
    speed: float
    elapsed_time: float = 0.0
    kind: BehaviorKind = BehaviorKind.ROTATION


@dataclass
class TranslationBehavior:
    initial_position: Vec3
    current_position: Vec3
    direction: Vec3
    distance: float
    speed: float
    elapsed_time: float = 0.0
    kind: BehaviorKind = BehaviorKind.TRANSLATION


@dataclass
class OrbitBehavior:
    initial_position: Vec3
    current_position: Vec3
    radius: float
    speed: float
    elapsed_time: float = 0.0
    kind: BehaviorKind = BehaviorKind.ORBIT


Behavior = Union[StaticBehavior, RotationBehavior, TranslationBehavior, OrbitBehavior]


def rotation_step(position: Vec3, axis: Vec3, speed: float) -> Vec3:
    """One tick of Rotation: fixed angle ``speed`` about ``axis`` through the origin."""
    return rotate_about_axis(position, axis, speed)


def translation_step(initial: Vec3, current: Vec3, direction: Vec3,
                     distance: float, speed: float, dt: float) -> Tuple[Vec3, Vec3]:
    """One tick of Translation.

    Returns:
        (new_position, new_direction). The direction is negated once the
        offset from ``initial`` has reached ``distance``; no overshoot
        correction is applied.
    """
    offset = sub(current, initial)
    if length(offset) >= distance:
        direction = scale(direction, -1.0)
    return add(current, scale(direction, speed * dt)), direction


def orbit_position(initial: Vec3, radius: float, speed: float, elapsed_time: float) -> Vec3:
    """Orbit position at ``elapsed_time``; deliberately non-planar."""
    angle = elapsed_time * speed
    return add(initial, (
        radius * math.cos(angle),
        radius * math.sin(angle / 2.0),
        radius * math.sin(angle),
    ))


def update_behavior(behavior: Behavior, dt: float) -> Vec3:
    """Advance ``behavior`` by ``dt`` in place and return its new position."""
    behavior.elapsed_time += dt
    kind = behavior.kind

    if kind == BehaviorKind.STATIC:
        pass

    elif kind == BehaviorKind.ROTATION:
        behavior.current_position = rotation_step(
            behavior.current_position, behavior.axis, behavior.speed)

    elif kind == BehaviorKind.TRANSLATION:
        behavior.current_position, behavior.direction = translation_step(
            behavior.initial_position, behavior.current_position,
            behavior.direction, behavior.distance, behavior.speed, dt)

    elif kind == BehaviorKind.ORBIT:
        behavior.current_position = orbit_position(
            behavior.initial_position, behavior.radius, behavior.speed,
            behavior.elapsed_time)

    else:
        raise UnsupportedBehaviorError(str(kind))

    return behavior.current_position


def _random_unit_vector(rng) -> Vec3:
    # Uniform per component then normalized; retry on the (unlikely) zero draw
    for _ in range(8):
        v = normalize((rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)))
        if v != (0.0, 0.0, 0.0):
            return v
    return (0.0, 1.0, 0.0)


def create_behavior(kind, position: Vec3, rng) -> Behavior:
    """Build a behavior of ``kind`` anchored at ``position``.

    Args:
        kind: BehaviorKind or its string value
        position: Initial (and current) position
        rng: Object exposing ``uniform(a, b)`` (e.g. NumpyRngAdapter)

    Raises:
        UnsupportedBehaviorError: If ``kind`` is not a known variant
    """
    if not isinstance(kind, BehaviorKind):
        try:
            kind = BehaviorKind(str(kind).lower())
        except ValueError:
            raise UnsupportedBehaviorError(str(kind)) from None

    position = (float(position[0]), float(position[1]), float(position[2]))

    if kind == BehaviorKind.STATIC:
        return StaticBehavior(initial_position=position, current_position=position)

    elif kind == BehaviorKind.ROTATION:
        return RotationBehavior(
            initial_position=position,
            current_position=position,
            axis=_random_unit_vector(rng),
            speed=rng.uniform(*ROTATION_SPEED_RANGE),
        )

    elif kind == BehaviorKind.TRANSLATION:
        direction = _random_unit_vector(rng)
        return TranslationBehavior(
            initial_position=position,
            current_position=position,
            direction=direction,
            distance=rng.uniform(*TRANSLATION_DISTANCE_RANGE),
            speed=rng.uniform(*TRANSLATION_SPEED_RANGE),
        )

    else:
        return OrbitBehavior(
            initial_position=position,
            current_position=position,
            radius=rng.uniform(*ORBIT_RADIUS_RANGE),
            speed=rng.uniform(*ORBIT_SPEED_RANGE),
        )
