"""
Procedural point/line scene generation and animation

Turns a declarative scene document into positioned, animated primitives:
- Pattern generators (grid, circle, cube, sphere, line)
- Per-object behaviors (static, rotation, translation, orbit)
- Index and spatial groups resolved at load time

Usage:
    from pointscene import build_scene, AnimationLoop

    scene = build_scene(document)
    loop = AnimationLoop(scene.objects, sink=renderer.present)
    loop.tick()

CLI:
    python -m pointscene.pipeline --scene scene.yaml --frames 100 --output ./output
"""

from .pipeline import ScenePipeline, PlaybackConfig
from .scene import Scene, SceneLoader, build_scene, load_scene, parse_scene, AnimationLoop, tick
from .models import Point, Line, Transform, BehaviorKind, create_behavior
from .core import SceneError, UnsupportedTypeError, UnsupportedPatternError, MalformedSizeError

__all__ = [
    'ScenePipeline',
    'PlaybackConfig',
    'Scene',
    'SceneLoader',
    'build_scene',
    'load_scene',
    'parse_scene',
    'AnimationLoop',
    'tick',
    'Point',
    'Line',
    'Transform',
    'BehaviorKind',
    'create_behavior',
    'SceneError',
    'UnsupportedTypeError',
    'UnsupportedPatternError',
    'MalformedSizeError',
]
