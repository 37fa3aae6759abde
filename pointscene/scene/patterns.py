"""Pattern Engine — expands parametric pattern descriptors into placements."""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.errors import ConstraintViolationError, SceneConfigError, UnsupportedPatternError
from ..core.vecmath import IDENTITY, Quat, Vec3, quat_from_euler, quat_from_unit_vectors
from .config import as_number, as_vector

POINT_PATTERNS = ("grid", "circle", "cube", "sphere", "line")
LINE_PATTERNS = ("grid", "circle", "cube")

# Orientations taking the canonical +z segment onto each world axis
ALONG_X: Quat = quat_from_euler(0.0, math.pi / 2.0, 0.0)
ALONG_Y: Quat = quat_from_euler(-math.pi / 2.0, 0.0, 0.0)
ALONG_Z: Quat = IDENTITY

_Z_AXIS: Vec3 = (0.0, 0.0, 1.0)


@dataclass
class Placement:
    """Where one generated primitive goes; ``length`` is set for lines only."""
    position: Vec3
    orientation: Quat = IDENTITY
    length: Optional[float] = None


def _param(params: Dict[str, Any], name: str, default, object_id: str, cast=float):
    return as_number(params.get(name, default), f"'{object_id}' parameter '{name}'", cast)


def _vector_param(params: Dict[str, Any], name: str, object_id: str, size: int = 3,
                  default=(0.0, 0.0, 0.0)) -> Vec3:
    return tuple(as_vector(params.get(name, list(default)), size,
                           f"'{object_id}' parameter '{name}'"))


def _origin(params: Dict[str, Any], object_id: str = "") -> Vec3:
    return _vector_param(params, "origin", object_id)


def _require_positive(object_id: str, name: str, value) -> None:
    if not value > 0:
        raise ConstraintViolationError(object_id, name, value)


def generate_placements(object_type: str, pattern: str, parameters: Dict[str, Any],
                        rng=None, object_id: str = "",
                        validate: bool = False) -> List[Placement]:
    """Expand a pattern descriptor into an ordered list of placements.

    Args:
        object_type: "point" or "line"
        pattern: Pattern name (grid, circle, cube, sphere, line)
        parameters: Pattern-specific parameters from the document
        rng: Random source, needed only by ``line`` with random spacing
        object_id: Base id, used in error messages
        validate: Reject non-positive sizes and counts up front

    Raises:
        UnsupportedPatternError: If the pattern is not defined for the object type
    """
    if object_type == "point":
        if pattern == "grid":
            return _grid_points(parameters, object_id, validate)
        elif pattern == "circle":
            return _circle_points(parameters, object_id, validate)
        elif pattern == "cube":
            return _cube_points(parameters, object_id, validate)
        elif pattern == "sphere":
            return _sphere_points(parameters, object_id, validate)
        elif pattern == "line":
            return _line_points(parameters, rng, object_id, validate)
    elif object_type == "line":
        if pattern == "grid":
            return _grid_lines(parameters, object_id, validate)
        elif pattern == "circle":
            return _radial_lines(parameters, object_id, validate)
        elif pattern == "cube":
            return _cube_lines(parameters, object_id, validate)
    raise UnsupportedPatternError(pattern, object_type)


def _grid_params(params, object_id, validate):
    spacing = _param(params, "spacing", 1.0, object_id)
    nx, ny, nz = (int(n) for n in _vector_param(params, "dimensions", object_id, default=(1, 1, 1)))
    style = str(params.get("style", "plane"))
    if validate:
        _require_positive(object_id, "spacing", spacing)
        for name, n in (("dimensions[0]", nx), ("dimensions[1]", ny), ("dimensions[2]", nz)):
            _require_positive(object_id, name, n)
    return spacing, nx, ny, nz, style


def _grid_points(params, object_id="", validate=False) -> List[Placement]:
    """Plane: nx*ny at origin z; volume: nx*ny*nz. x outer, y inner, z innermost."""
    spacing, nx, ny, nz, style = _grid_params(params, object_id, validate)
    ox, oy, oz = _origin(params, object_id)

    placements = []
    for x in range(nx):
        for y in range(ny):
            if style == "plane":
                placements.append(Placement((ox + x * spacing, oy + y * spacing, oz)))
            else:
                for z in range(nz):
                    placements.append(Placement(
                        (ox + x * spacing, oy + y * spacing, oz + z * spacing)))
    return placements


def _grid_lines(params, object_id="", validate=False) -> List[Placement]:
    """One line per row (+x), one per column (+y), plus depth lines (+z) for volumes."""
    spacing, nx, ny, nz, style = _grid_params(params, object_id, validate)
    ox, oy, oz = _origin(params, object_id)

    placements = []
    for y in range(ny):
        placements.append(Placement(
            (ox, oy + y * spacing, oz), ALONG_X, (nx - 1) * spacing))

    for x in range(nx):
        placements.append(Placement(
            (ox + x * spacing, oy, oz), ALONG_Y, (ny - 1) * spacing))

    if style == "volume" and nz > 1:
        for x in range(nx):
            for y in range(ny):
                placements.append(Placement(
                    (ox + x * spacing, oy + y * spacing, oz), ALONG_Z, (nz - 1) * spacing))
    return placements


def _circle_params(params, object_id, validate):
    radius = _param(params, "radius", 1.0, object_id)
    count = _param(params, "count", 0, object_id, int)
    plane = str(params.get("plane", "xy"))
    if validate:
        _require_positive(object_id, "radius", radius)
        _require_positive(object_id, "count", count)
    if plane not in ("xy", "yz", "xz"):
        raise SceneConfigError(f"Unknown circle plane '{plane}' for '{object_id}'")
    return radius, count, plane


def _in_plane(plane: str, a: float, b: float) -> Vec3:
    """Map the (cos, sin) pair onto the chosen plane; the omitted axis is 0."""
    if plane == "xy":
        return (a, b, 0.0)
    elif plane == "yz":
        return (0.0, a, b)
    return (a, 0.0, b)


def _circle_points(params, object_id="", validate=False) -> List[Placement]:
    radius, count, plane = _circle_params(params, object_id, validate)
    ox, oy, oz = _origin(params, object_id)

    placements = []
    for i in range(count):
        angle = 2.0 * math.pi * i / count
        dx, dy, dz = _in_plane(plane, radius * math.cos(angle), radius * math.sin(angle))
        placements.append(Placement((ox + dx, oy + dy, oz + dz)))
    return placements


def _radial_lines(params, object_id="", validate=False) -> List[Placement]:
    """``count`` segments of length ``radius`` from origin, one per angle."""
    radius, count, plane = _circle_params(params, object_id, validate)
    origin = _origin(params, object_id)

    placements = []
    for i in range(count):
        angle = 2.0 * math.pi * i / count
        direction = _in_plane(plane, math.cos(angle), math.sin(angle))
        placements.append(Placement(
            origin, quat_from_unit_vectors(_Z_AXIS, direction), radius))
    return placements


def _cube_params(params, object_id, validate):
    edge_count = _param(params, "edgeCount", 2, object_id, int)
    size = _param(params, "size", 1.0, object_id)
    if validate:
        _require_positive(object_id, "size", size)
        _require_positive(object_id, "edgeCount - 1", edge_count - 1)
    return edge_count, size


def _cube_points(params, object_id="", validate=False) -> List[Placement]:
    """``edgeCount`` points along each of the 12 edges; corners repeat per edge."""
    edge_count, size = _cube_params(params, object_id, validate)
    ox, oy, oz = _origin(params, object_id)
    # A single point per edge has no spacing; NaN propagates like other bad input
    spacing = size / (edge_count - 1) if edge_count != 1 else float("nan")

    placements = []
    for z in (oz, oz + size):
        # Front face, then back face
        for i in range(edge_count):
            d = i * spacing
            placements.append(Placement((ox + d, oy, z)))
            placements.append(Placement((ox + d, oy + size, z)))
            placements.append(Placement((ox, oy + d, z)))
            placements.append(Placement((ox + size, oy + d, z)))

    # Connecting edges
    for i in range(edge_count):
        d = i * spacing
        placements.append(Placement((ox, oy, oz + d)))
        placements.append(Placement((ox + size, oy, oz + d)))
        placements.append(Placement((ox, oy + size, oz + d)))
        placements.append(Placement((ox + size, oy + size, oz + d)))
    return placements


def _cube_lines(params, object_id="", validate=False) -> List[Placement]:
    """The 12 cube edges, each anchored at its lower endpoint."""
    size = _param(params, "size", 1.0, object_id)
    if validate:
        _require_positive(object_id, "size", size)
    ox, oy, oz = _origin(params, object_id)

    placements = []
    for z in (oz, oz + size):
        placements.append(Placement((ox, oy, z), ALONG_X, size))
        placements.append(Placement((ox, oy + size, z), ALONG_X, size))
        placements.append(Placement((ox, oy, z), ALONG_Y, size))
        placements.append(Placement((ox + size, oy, z), ALONG_Y, size))

    for x, y in ((ox, oy), (ox + size, oy), (ox, oy + size), (ox + size, oy + size)):
        placements.append(Placement((x, y, oz), ALONG_Z, size))
    return placements


def _sphere_points(params, object_id="", validate=False) -> List[Placement]:
    """(latitudeCount + 1) * longitudeCount points; each pole repeats longitudeCount times."""
    radius = _param(params, "radius", 1.0, object_id)
    lat_count = _param(params, "latitudeCount", 1, object_id, int)
    lon_count = _param(params, "longitudeCount", 1, object_id, int)
    if validate:
        _require_positive(object_id, "radius", radius)
        _require_positive(object_id, "latitudeCount", lat_count)
        _require_positive(object_id, "longitudeCount", lon_count)
    ox, oy, oz = _origin(params, object_id)

    placements = []
    for lat in range(lat_count + 1):
        phi = math.pi * lat / lat_count if lat_count else float("nan")
        for lon in range(lon_count):
            theta = 2.0 * math.pi * lon / lon_count
            placements.append(Placement((
                ox + radius * math.sin(phi) * math.cos(theta),
                oy + radius * math.sin(phi) * math.sin(theta),
                oz + radius * math.cos(phi),
            )))
    return placements


def _line_points(params, rng=None, object_id="", validate=False) -> List[Placement]:
    """``count`` points from ``start`` to ``end``, evenly or randomly spaced."""
    start = _vector_param(params, "start", object_id)
    end = _vector_param(params, "end", object_id)
    count = _param(params, "count", 0, object_id, int)
    spacing = str(params.get("spacing", "uniform"))
    if validate:
        _require_positive(object_id, "count", count)

    if spacing == "uniform":
        ts = [i / (count - 1) if count > 1 else 0.0 for i in range(count)]
    elif spacing == "random":
        if rng is None:
            raise SceneConfigError(f"Random line spacing for '{object_id}' needs a random source")
        ts = sorted(rng.random() for _ in range(count))
    else:
        raise SceneConfigError(f"Unknown line spacing '{spacing}' for '{object_id}'")

    return [
        Placement(tuple(s + t * (e - s) for s, e in zip(start, end)))
        for t in ts
    ]
