"""Scene Configuration — YAML/JSON loader and dataclasses for scene documents."""

import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.errors import SceneConfigError


@dataclass
class RotationConfig:
    """Orientation spec; precedence is euler > quaternion > axis + angle."""
    euler: Optional[List[float]] = None        # [x, y, z] radians, XYZ order
    quaternion: Optional[List[float]] = None   # [x, y, z, w]
    axis: Optional[List[float]] = None         # [x, y, z]
    angle: Optional[float] = None              # radians


@dataclass
class BehaviorConfig:
    type: str = "static"                       # static | rotation | translation | orbit


@dataclass
class ObjectSpecConfig:
    """Flat-form object: one primitive per entry."""
    id: str = ""
    type: str = "point"                        # point | line
    size: Any = 1.0                            # number, or "WxL" for lines
    rgba: str = "#ffffffff"
    position: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    rotation: RotationConfig = field(default_factory=RotationConfig)
    behavior: Optional[BehaviorConfig] = None


@dataclass
class TemplateConfig:
    size: Any = 1.0
    rgba: str = "#ffffffff"


@dataclass
class PositionsConfig:
    type: str = "pattern"
    pattern: str = ""                          # grid | circle | cube | sphere | line
    parameters: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ObjectDefinitionConfig:
    """Pattern-form object: expands into ``<id>/<index>`` primitives."""
    id: str = ""
    type: str = "point"
    count: Optional[int] = None                # informational only
    template: TemplateConfig = field(default_factory=TemplateConfig)
    positions: PositionsConfig = field(default_factory=PositionsConfig)
    behavior: Optional[BehaviorConfig] = None


@dataclass
class RegionConfig:
    region: str = "sphere"
    center: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    radius: float = 0.0


@dataclass
class GroupConfig:
    type: str = "index"                        # index | spatial | explicit
    generator: str = ""
    id_range: List[int] = field(default_factory=lambda: [0, 0])
    condition: RegionConfig = field(default_factory=RegionConfig)
    members: List[str] = field(default_factory=list)


@dataclass
class CameraConfig:
    position: List[float] = field(default_factory=lambda: [-2.0, 4.0, 2.0])
    type: str = "perspective"


@dataclass
class EnvironmentConfig:
    """Presentation hints only; the core never reads these."""
    axis: bool = False
    camera: CameraConfig = field(default_factory=CameraConfig)


@dataclass
class MetadataConfig:
    version: str = ""
    description: str = ""


@dataclass
class DebugConfig:
    validate_constraints: bool = False
    log_level: str = ""
    perf_metrics: bool = False


@dataclass
class PlaybackSceneConfig:
    frames: int = 100
    delta_time: float = 0.016


@dataclass
class SceneConfig:
    seed: Optional[int] = None
    objects: List[ObjectSpecConfig] = field(default_factory=list)
    object_definitions: List[ObjectDefinitionConfig] = field(default_factory=list)
    groups: Dict[str, GroupConfig] = field(default_factory=dict)
    metadata: MetadataConfig = field(default_factory=MetadataConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    playback: PlaybackSceneConfig = field(default_factory=PlaybackSceneConfig)


def as_number(value, where: str, cast=float):
    """Coerce a scalar field, raising SceneConfigError naming ``where``."""
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise SceneConfigError(f"{where} must be a number, got {value!r}") from None


def as_vector(value, size: int, where: str) -> List[float]:
    """Coerce a ``size``-element list field to floats."""
    if not isinstance(value, (list, tuple)) or len(value) != size:
        raise SceneConfigError(f"{where} must be a list of {size} numbers, got {value!r}")
    return [as_number(v, where) for v in value]


def _mapping(d, where: str) -> Dict:
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise SceneConfigError(f"{where} must be a mapping, got {d!r}")
    return d


def _optional_vector(value, size: int, where: str) -> Optional[List[float]]:
    if value is None:
        return None
    return as_vector(value, size, where)


def _parse_rotation(d: Optional[Dict], owner: str) -> RotationConfig:
    d = _mapping(d, f"{owner} rotation")
    angle = d.get("angle")
    return RotationConfig(
        euler=_optional_vector(d.get("euler"), 3, f"{owner} rotation.euler"),
        quaternion=_optional_vector(d.get("quaternion"), 4, f"{owner} rotation.quaternion"),
        axis=_optional_vector(d.get("axis"), 3, f"{owner} rotation.axis"),
        angle=as_number(angle, f"{owner} rotation.angle") if angle is not None else None,
    )


def _parse_behavior(d, owner: str) -> Optional[BehaviorConfig]:
    if d is None:
        return None
    if isinstance(d, str):
        return BehaviorConfig(type=d)
    d = _mapping(d, f"{owner} behavior")
    return BehaviorConfig(type=str(d.get("type", "static")))


def _parse_object_spec(object_id: str, d: Dict) -> ObjectSpecConfig:
    owner = f"Object '{object_id}'"
    if not isinstance(d, dict):
        raise SceneConfigError(f"{owner} must be a mapping")
    position = d.get("position", d.get("pos", [0.0, 0.0, 0.0]))
    return ObjectSpecConfig(
        id=str(object_id),
        type=str(d.get("type", "point")),
        size=d.get("size", 1.0),
        rgba=str(d.get("rgba", "#ffffffff")),
        position=as_vector(position, 3, f"{owner} position"),
        rotation=_parse_rotation(d.get("rotation", d.get("rot")), owner),
        behavior=_parse_behavior(d.get("behavior"), owner),
    )


def _parse_template(d: Optional[Dict], owner: str) -> TemplateConfig:
    d = _mapping(d, f"{owner} template")
    return TemplateConfig(
        size=d.get("size", 1.0),
        rgba=str(d.get("rgba", "#ffffffff")),
    )


def _parse_positions(d: Optional[Dict], owner: str) -> PositionsConfig:
    d = _mapping(d, f"{owner} positions")
    return PositionsConfig(
        type=str(d.get("type", "pattern")),
        pattern=str(d.get("pattern", "")),
        parameters=dict(_mapping(d.get("parameters"), f"{owner} parameters")),
    )


def _parse_object_definition(d: Dict) -> ObjectDefinitionConfig:
    if not isinstance(d, dict):
        raise SceneConfigError(f"Object definition must be a mapping, got {d!r}")
    object_id = str(d.get("id", ""))
    owner = f"Object definition '{object_id}'"
    count = d.get("count")
    return ObjectDefinitionConfig(
        id=object_id,
        type=str(d.get("type", "point")),
        count=as_number(count, f"{owner} count", int) if count is not None else None,
        template=_parse_template(d.get("template"), owner),
        positions=_parse_positions(d.get("positions"), owner),
        behavior=_parse_behavior(d.get("behavior"), owner),
    )


def _parse_region(d: Optional[Dict], owner: str) -> RegionConfig:
    d = _mapping(d, f"{owner} condition")
    return RegionConfig(
        region=str(d.get("region", "sphere")),
        center=as_vector(d.get("center", [0.0, 0.0, 0.0]), 3, f"{owner} condition.center"),
        radius=as_number(d.get("radius", 0.0), f"{owner} condition.radius"),
    )


def _parse_group(group_id: str, d) -> GroupConfig:
    owner = f"Group '{group_id}'"
    # Flat documents list members directly
    if isinstance(d, (list, tuple)):
        return GroupConfig(type="explicit", members=[str(m) for m in d])
    if not isinstance(d, dict):
        raise SceneConfigError(f"{owner} must be a mapping or a list of ids")
    id_range = d.get("idRange", d.get("id_range", [0, 0]))
    if not isinstance(id_range, (list, tuple)) or len(id_range) != 2:
        raise SceneConfigError(f"{owner} idRange must be [lo, hi], got {id_range!r}")
    members = d.get("members", [])
    if not isinstance(members, (list, tuple)):
        raise SceneConfigError(f"{owner} members must be a list, got {members!r}")
    return GroupConfig(
        type=str(d.get("type", "index")),
        generator=str(d.get("generator", "")),
        id_range=[as_number(v, f"{owner} idRange", int) for v in id_range],
        condition=_parse_region(d.get("condition"), owner),
        members=[str(m) for m in members],
    )


def _parse_environment(d: Optional[Dict]) -> EnvironmentConfig:
    d = _mapping(d, "'environment'")
    camera = d.get("camera")
    camera_cfg = CameraConfig()
    if camera is not None:
        camera = _mapping(camera, "'environment.camera'")
        camera_cfg = CameraConfig(
            position=as_vector(camera.get("position", [-2.0, 4.0, 2.0]), 3,
                               "'environment.camera.position'"),
            type=str(camera.get("type", "perspective")),
        )
    return EnvironmentConfig(axis=bool(d.get("axis", False)), camera=camera_cfg)


def _parse_metadata(d: Optional[Dict]) -> MetadataConfig:
    d = _mapping(d, "'metadata'")
    return MetadataConfig(
        version=str(d.get("version", "")),
        description=str(d.get("description", "")),
    )


def _parse_debug(d: Optional[Dict]) -> DebugConfig:
    d = _mapping(d, "'debug'")
    return DebugConfig(
        validate_constraints=bool(d.get("validateConstraints", False)),
        log_level=str(d.get("logLevel", "")),
        perf_metrics=bool(d.get("perfMetrics", False)),
    )


def _parse_playback(d: Optional[Dict]) -> PlaybackSceneConfig:
    d = _mapping(d, "'playback'")
    return PlaybackSceneConfig(
        frames=as_number(d.get("frames", 100), "'playback.frames'", int),
        delta_time=as_number(d.get("deltaTime", 0.016), "'playback.deltaTime'"),
    )


def parse_scene(raw: Optional[Dict]) -> SceneConfig:
    """Build a SceneConfig from an already-decoded document."""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise SceneConfigError("Scene document must be a mapping")

    objects_raw = raw.get("objects")
    if objects_raw is None:
        objects_raw = {}
    if not isinstance(objects_raw, dict):
        raise SceneConfigError("'objects' must be a mapping of id -> object")
    definitions_raw = raw.get("objectDefinitions")
    if definitions_raw is None:
        definitions_raw = []
    if not isinstance(definitions_raw, list):
        raise SceneConfigError("'objectDefinitions' must be a list")
    groups_raw = raw.get("groups")
    if groups_raw is None:
        groups_raw = {}
    if not isinstance(groups_raw, dict):
        raise SceneConfigError("'groups' must be a mapping of id -> group")

    seed = raw.get("seed")
    return SceneConfig(
        seed=as_number(seed, "'seed'", int) if seed is not None else None,
        objects=[_parse_object_spec(k, v) for k, v in objects_raw.items()],
        object_definitions=[_parse_object_definition(d) for d in definitions_raw],
        groups={str(k): _parse_group(k, v) for k, v in groups_raw.items()},
        metadata=_parse_metadata(raw.get("metadata")),
        debug=_parse_debug(raw.get("debug")),
        environment=_parse_environment(raw.get("environment")),
        playback=_parse_playback(raw.get("playback")),
    )


def load_scene(path: str) -> SceneConfig:
    """Load a scene document from a YAML (or JSON) file."""
    with open(path, "r") as f:
        raw = yaml.safe_load(f)
    return parse_scene(raw)
