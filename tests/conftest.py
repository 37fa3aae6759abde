from __future__ import annotations

import copy

import pytest

FLAT_SCENE = {
    "objects": {
        "tgt1": {
            "type": "point", "size": 1, "rgba": "#ffffffff",
            "pos": [0.0, 0.0, 0.0], "rot": {"euler": [0.0, 0.0, 0.0]},
        },
        "tgt2": {
            "type": "point", "size": 1, "rgba": "#ffffffff",
            "pos": [1.0, 0.0, 0.0], "rot": {"axis": [1.0, 0.0, 0.0], "angle": 1.57},
        },
        "tgt3": {
            "type": "line", "size": "1x3", "rgba": "#ff0000ff",
            "pos": [0.0, 0.0, 0.0], "rot": {"quaternion": [0.0, 0.0, 0.0, 1.0]},
        },
        "tgt4": {
            "type": "line", "size": "1x3", "rgba": "#ff0000ff",
            "pos": [1.0, 0.0, 0.0], "rot": {"euler": [0.0, 0.0, 0.0]},
        },
    },
    "groups": {
        "g1": ["tgt1", "tgt2"],
        "g2": ["tgt3", "tgt4"],
    },
}

PATTERN_SCENE = {
    "metadata": {"version": "1.0", "description": "Test scene with pattern-based objects"},
    "environment": {"axis": True, "camera": {"position": [-2, 4, 2], "type": "perspective"}},
    "objectDefinitions": [
        {
            "id": "points/grid/0", "type": "point", "count": 100,
            "template": {"size": 0.1, "rgba": "#ffffffff"},
            "positions": {"type": "pattern", "pattern": "grid", "parameters": {
                "spacing": 0.5, "dimensions": [10, 10, 1], "origin": [-2, -2, 0], "style": "plane",
            }},
        },
        {
            "id": "points/circle/0", "type": "point", "count": 36,
            "template": {"size": 0.1, "rgba": "#ff0000ff"},
            "positions": {"type": "pattern", "pattern": "circle", "parameters": {
                "radius": 2.0, "count": 36, "plane": "xy", "origin": [0, 0, 0],
            }},
        },
        {
            "id": "points/cube/0", "type": "point", "count": 8,
            "template": {"size": 0.1, "rgba": "#00ff00ff"},
            "positions": {"type": "pattern", "pattern": "cube", "parameters": {
                "edgeCount": 4, "size": 2.0, "origin": [-1, -1, -1],
            }},
        },
        {
            "id": "lines/grid/0", "type": "line", "count": 20,
            "template": {"size": "0.02x1.0", "rgba": "#0000ffff"},
            "positions": {"type": "pattern", "pattern": "grid", "parameters": {
                "spacing": 0.5, "dimensions": [5, 5, 1], "origin": [0, 0, 2], "style": "plane",
            }},
        },
    ],
    "groups": {
        "grid_points": {"type": "index", "generator": "points/grid/0", "idRange": [0, 99]},
        "circle_points": {"type": "index", "generator": "points/circle/0", "idRange": [0, 35]},
        "central_region": {
            "type": "spatial", "generator": "points/grid/0",
            "condition": {"region": "sphere", "center": [0, 0, 0], "radius": 1.0},
        },
    },
}


@pytest.fixture
def flat_scene():
    return copy.deepcopy(FLAT_SCENE)


@pytest.fixture
def pattern_scene():
    return copy.deepcopy(PATTERN_SCENE)
