"""
Scene object models

- behaviors: Static / Rotation / Translation / Orbit motion models
- primitives: Point and Line renderables with their transforms
"""

from .behaviors import (
    BehaviorKind,
    Behavior,
    StaticBehavior,
    RotationBehavior,
    TranslationBehavior,
    OrbitBehavior,
    create_behavior,
    update_behavior,
    rotation_step,
    translation_step,
    orbit_position,
)
from .primitives import Point, Line, Transform, parse_point_size, parse_line_size

__all__ = [
    # Behaviors
    'BehaviorKind',
    'Behavior',
    'StaticBehavior',
    'RotationBehavior',
    'TranslationBehavior',
    'OrbitBehavior',
    'create_behavior',
    'update_behavior',
    'rotation_step',
    'translation_step',
    'orbit_position',
    # Primitives
    'Point',
    'Line',
    'Transform',
    'parse_point_size',
    'parse_line_size',
]
