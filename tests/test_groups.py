from __future__ import annotations

import math

import pytest

from pointscene.models.behaviors import OrbitBehavior
from pointscene.models.primitives import Point
from pointscene.scene.animation import tick
from pointscene.scene.config import GroupConfig, RegionConfig
from pointscene.scene.groups import resolve_group, resolve_index_group, resolve_spatial_group


def test_index_group_inclusive_range() -> None:
    assert resolve_index_group("p", [0, 2]) == ["p/0", "p/1", "p/2"]


def test_index_group_empty_when_range_reversed() -> None:
    assert resolve_index_group("p", [3, 1]) == []


def test_spatial_group_membership_is_distance_le_radius() -> None:
    objects = {
        "p/0": Point((0.0, 0.0, 0.0), 0.1, "#fff"),
        "p/1": Point((1.0, 0.0, 0.0), 0.1, "#fff"),      # on the boundary
        "p/2": Point((0.8, 0.8, 0.0), 0.1, "#fff"),      # just outside
        "p/3": Point((0.0, -0.5, 0.5), 0.1, "#fff"),
        "q/0": Point((0.0, 0.0, 0.0), 0.1, "#fff"),      # other generator
    }
    members = resolve_spatial_group(
        "p", RegionConfig(region="sphere", center=[0, 0, 0], radius=1.0), objects)
    assert members == ["p/0", "p/1", "p/3"]

    for object_id, obj in objects.items():
        if object_id.startswith("p"):
            inside = math.dist(obj.position, (0.0, 0.0, 0.0)) <= 1.0
            assert (object_id in members) == inside


def test_spatial_group_is_a_snapshot() -> None:
    objects = {
        f"p/{i}": Point((0.1 * i, 0.0, 0.0), 0.1, "#fff",
                        behavior=OrbitBehavior((0.1 * i, 0.0, 0.0), (0.1 * i, 0.0, 0.0),
                                               radius=2.5, speed=0.03))
        for i in range(5)
    }
    group = GroupConfig(type="spatial", generator="p",
                        condition=RegionConfig(center=[0, 0, 0], radius=1.0))
    members = resolve_group("near", group, objects)
    assert members == [f"p/{i}" for i in range(5)]

    tick(objects, 0.016)
    # Everything has moved well outside the sphere; resolved members stay put
    assert all(math.dist(o.position, (0.0, 0.0, 0.0)) > 1.0 for o in objects.values())
    assert members == [f"p/{i}" for i in range(5)]


def test_unknown_region_yields_empty_group() -> None:
    objects = {"p/0": Point((0.0, 0.0, 0.0), 0.1, "#fff")}
    with pytest.warns(UserWarning, match="region"):
        members = resolve_spatial_group("p", RegionConfig(region="box", radius=5.0), objects)
    assert members == []


def test_dangling_members_are_kept_with_warning() -> None:
    objects = {"p/0": Point((0.0, 0.0, 0.0), 0.1, "#fff")}
    with pytest.warns(UserWarning, match="unknown object"):
        members = resolve_group("g", GroupConfig(type="index", generator="p", id_range=[0, 2]), objects)
    assert members == ["p/0", "p/1", "p/2"]


def test_explicit_group_preserves_order_and_duplicates() -> None:
    objects = {"a": Point((0.0, 0.0, 0.0), 0.1, "#fff"), "b": Point((1.0, 0.0, 0.0), 0.1, "#fff")}
    group = GroupConfig(type="explicit", members=["b", "a", "b"])
    assert resolve_group("g", group, objects) == ["b", "a", "b"]


def test_unsupported_group_type_is_skipped() -> None:
    with pytest.warns(UserWarning, match="unsupported type"):
        assert resolve_group("g", GroupConfig(type="pattern", generator="p"), {}) is None
