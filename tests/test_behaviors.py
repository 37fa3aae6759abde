from __future__ import annotations

import math

import numpy as np
import pytest

from pointscene.core.errors import UnsupportedBehaviorError
from pointscene.core.vecmath import length, rotate_about_axis, sub
from pointscene.models.behaviors import (
    BehaviorKind,
    OrbitBehavior,
    RotationBehavior,
    StaticBehavior,
    TranslationBehavior,
    create_behavior,
    orbit_position,
    translation_step,
    update_behavior,
)
from pointscene.scene.loader import NumpyRngAdapter


def _rng(seed: int = 0) -> NumpyRngAdapter:
    return NumpyRngAdapter(np.random.RandomState(seed))


def test_static_never_moves() -> None:
    b = create_behavior("static", (1.0, 2.0, 3.0), _rng())
    assert isinstance(b, StaticBehavior)
    for _ in range(5):
        update_behavior(b, 0.5)
    assert b.current_position == (1.0, 2.0, 3.0)
    assert b.elapsed_time == pytest.approx(2.5)


@pytest.mark.parametrize("seed", range(10))
def test_randomized_parameters_in_range(seed) -> None:
    rng = _rng(seed)
    rot = create_behavior(BehaviorKind.ROTATION, (0.0, 0.0, 0.0), rng)
    trans = create_behavior("translation", (0.0, 0.0, 0.0), rng)
    orbit = create_behavior("ORBIT", (0.0, 0.0, 0.0), rng)

    assert isinstance(rot, RotationBehavior)
    assert 0.01 <= rot.speed < 0.03
    assert length(rot.axis) == pytest.approx(1.0)

    assert isinstance(trans, TranslationBehavior)
    assert 0.5 <= trans.distance < 2.0
    assert 0.02 <= trans.speed < 0.05
    assert length(trans.direction) == pytest.approx(1.0)

    assert isinstance(orbit, OrbitBehavior)
    assert 1.0 <= orbit.radius < 3.0
    assert 0.02 <= orbit.speed < 0.04


def test_unknown_behavior_rejected() -> None:
    with pytest.raises(UnsupportedBehaviorError):
        create_behavior("wobble", (0.0, 0.0, 0.0), _rng())


def test_rotation_is_constant_angle_per_tick_about_world_origin() -> None:
    fast = RotationBehavior((1.0, 0.0, 0.0), (1.0, 0.0, 0.0), axis=(0.0, 0.0, 1.0), speed=0.02)
    slow = RotationBehavior((1.0, 0.0, 0.0), (1.0, 0.0, 0.0), axis=(0.0, 0.0, 1.0), speed=0.02)

    update_behavior(fast, 1.0)
    update_behavior(slow, 0.001)

    assert fast.current_position == pytest.approx(slow.current_position)
    assert fast.current_position == pytest.approx((math.cos(0.02), math.sin(0.02), 0.0))
    # Distance from the world origin is preserved
    assert length(fast.current_position) == pytest.approx(1.0)


def test_rotation_accumulates() -> None:
    b = RotationBehavior((0.0, 2.0, 0.0), (0.0, 2.0, 0.0), axis=(1.0, 0.0, 0.0), speed=0.03)
    for _ in range(10):
        update_behavior(b, 0.016)
    assert b.current_position == pytest.approx(
        rotate_about_axis((0.0, 2.0, 0.0), (1.0, 0.0, 0.0), 0.3))


def test_translation_reverses_at_distance() -> None:
    pos, direction = translation_step(
        (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0, 0.0), distance=1.0, speed=0.5, dt=1.0)
    assert direction == (-1.0, 0.0, 0.0)
    assert pos == pytest.approx((0.5, 0.0, 0.0))


def test_translation_moves_by_speed_dt() -> None:
    pos, direction = translation_step(
        (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0), distance=1.0, speed=0.04, dt=0.5)
    assert direction == (0.0, 1.0, 0.0)
    assert pos == pytest.approx((0.0, 0.02, 0.0))


@pytest.mark.parametrize("seed", range(5))
def test_translation_ping_pong_stays_bounded(seed) -> None:
    dt = 1.0
    b = create_behavior("translation", (0.5, -1.0, 2.0), _rng(seed))
    reversals = 0
    last_direction = b.direction
    for _ in range(2000):
        update_behavior(b, dt)
        offset = length(sub(b.current_position, b.initial_position))
        assert offset <= b.distance + b.speed * dt + 1e-9
        if b.direction != last_direction:
            reversals += 1
            last_direction = b.direction
    assert reversals > 2


def test_orbit_formula() -> None:
    b = OrbitBehavior((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), radius=2.0, speed=0.03)
    update_behavior(b, 10.0)
    angle = 10.0 * 0.03
    assert b.current_position == pytest.approx((
        1.0 + 2.0 * math.cos(angle),
        1.0 + 2.0 * math.sin(angle / 2.0),
        1.0 + 2.0 * math.sin(angle),
    ))
    assert orbit_position((0.0, 0.0, 0.0), 2.0, 0.03, 10.0) == pytest.approx(
        sub(b.current_position, (1.0, 1.0, 1.0)))


def test_seeded_creation_is_reproducible() -> None:
    a = create_behavior("orbit", (0.0, 0.0, 0.0), _rng(42))
    b = create_behavior("orbit", (0.0, 0.0, 0.0), _rng(42))
    assert a == b
