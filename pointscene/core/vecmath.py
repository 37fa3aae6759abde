"""3D vector and quaternion helpers on plain tuples.

Vectors are ``(x, y, z)`` and quaternions ``(x, y, z, w)``. Nothing here
depends on a rendering library; every function returns a fresh tuple.
"""

import math
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]
Quat = Tuple[float, float, float, float]

ZERO: Vec3 = (0.0, 0.0, 0.0)
IDENTITY: Quat = (0.0, 0.0, 0.0, 1.0)


def vec3(values: Sequence[float]) -> Vec3:
    """Coerce a 3-element sequence to a float triple."""
    return (float(values[0]), float(values[1]), float(values[2]))


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(a: Vec3) -> float:
    return math.sqrt(dot(a, a))


def distance(a: Vec3, b: Vec3) -> float:
    return length(sub(a, b))


def normalize(a: Vec3) -> Vec3:
    """Unit vector along ``a``; the zero vector is returned unchanged."""
    n = length(a)
    if n == 0.0:
        return ZERO
    return (a[0] / n, a[1] / n, a[2] / n)


def quat_normalize(q: Quat) -> Quat:
    n = math.sqrt(q[0] * q[0] + q[1] * q[1] + q[2] * q[2] + q[3] * q[3])
    if n == 0.0:
        return IDENTITY
    return (q[0] / n, q[1] / n, q[2] / n, q[3] / n)


def quat_from_euler(x: float, y: float, z: float) -> Quat:
    """Quaternion for intrinsic XYZ Euler angles in radians."""
    c1, c2, c3 = math.cos(x / 2.0), math.cos(y / 2.0), math.cos(z / 2.0)
    s1, s2, s3 = math.sin(x / 2.0), math.sin(y / 2.0), math.sin(z / 2.0)
    return (
        s1 * c2 * c3 + c1 * s2 * s3,
        c1 * s2 * c3 - s1 * c2 * s3,
        c1 * c2 * s3 + s1 * s2 * c3,
        c1 * c2 * c3 - s1 * s2 * s3,
    )


def quat_from_axis_angle(axis: Vec3, angle: float) -> Quat:
    """Quaternion rotating by ``angle`` radians about ``axis`` (normalized here)."""
    ux, uy, uz = normalize(axis)
    half = angle / 2.0
    s = math.sin(half)
    return (ux * s, uy * s, uz * s, math.cos(half))


def quat_from_unit_vectors(v_from: Vec3, v_to: Vec3) -> Quat:
    """Shortest-arc rotation taking unit vector ``v_from`` onto ``v_to``."""
    r = dot(v_from, v_to) + 1.0
    if r < 1e-9:
        # Opposite vectors: rotate 180 degrees about any orthogonal axis
        if abs(v_from[0]) > abs(v_from[2]):
            q = (-v_from[1], v_from[0], 0.0, 0.0)
        else:
            q = (0.0, -v_from[2], v_from[1], 0.0)
    else:
        c = cross(v_from, v_to)
        q = (c[0], c[1], c[2], r)
    return quat_normalize(q)


def quat_rotate(q: Quat, v: Vec3) -> Vec3:
    """Rotate vector ``v`` by unit quaternion ``q``."""
    qv = (q[0], q[1], q[2])
    t = scale(cross(qv, v), 2.0)
    return add(add(v, scale(t, q[3])), cross(qv, t))


def rotate_about_axis(v: Vec3, axis: Vec3, angle: float) -> Vec3:
    """Rotate ``v`` about an axis through the world origin."""
    return quat_rotate(quat_from_axis_angle(axis, angle), v)
