"""
Core building blocks: vector/quaternion math and scene errors.
"""

from .vecmath import (
    Vec3,
    Quat,
    ZERO,
    IDENTITY,
    vec3,
    add,
    sub,
    scale,
    dot,
    cross,
    length,
    distance,
    normalize,
    quat_normalize,
    quat_from_euler,
    quat_from_axis_angle,
    quat_from_unit_vectors,
    quat_rotate,
    rotate_about_axis,
)
from .errors import (
    SceneError,
    SceneConfigError,
    UnsupportedTypeError,
    UnsupportedPatternError,
    UnsupportedBehaviorError,
    MalformedSizeError,
    DuplicateObjectIdError,
    ConstraintViolationError,
)

__all__ = [
    # vecmath
    'Vec3', 'Quat', 'ZERO', 'IDENTITY', 'vec3', 'add', 'sub', 'scale', 'dot',
    'cross', 'length', 'distance', 'normalize', 'quat_normalize',
    'quat_from_euler', 'quat_from_axis_angle',
    'quat_from_unit_vectors', 'quat_rotate', 'rotate_about_axis',
    # errors
    'SceneError', 'SceneConfigError', 'UnsupportedTypeError',
    'UnsupportedPatternError', 'UnsupportedBehaviorError', 'MalformedSizeError',
    'DuplicateObjectIdError', 'ConstraintViolationError',
]
