"""Scene Loader — builds the object and group registries from a scene document."""

import logging
import time
import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import numpy as np

from ..core.errors import DuplicateObjectIdError, SceneConfigError, UnsupportedTypeError
from ..core.vecmath import IDENTITY, Quat, quat_from_axis_angle, quat_from_euler, quat_normalize
from ..models.behaviors import create_behavior
from ..models.primitives import Line, Point, parse_line_size, parse_point_size
from .config import (
    BehaviorConfig,
    DebugConfig,
    EnvironmentConfig,
    MetadataConfig,
    ObjectDefinitionConfig,
    ObjectSpecConfig,
    PlaybackSceneConfig,
    RotationConfig,
    SceneConfig,
    parse_scene,
)
from .groups import resolve_group
from .patterns import generate_placements

logger = logging.getLogger(__name__)

OBJECT_TYPES = ("point", "line")

Primitive = Union[Point, Line]


class NumpyRngAdapter:
    """Wraps np.random.RandomState behind the small stdlib-style interface
    used by behaviors and pattern generators."""

    def __init__(self, rng: np.random.RandomState):
        self._rng = rng

    def random(self) -> float:
        return float(self._rng.random_sample())

    def uniform(self, a: float, b: float) -> float:
        return float(self._rng.uniform(a, b))


@dataclass
class Scene:
    """Result of a scene load: registries plus presentation hints."""
    objects: Dict[str, Primitive] = field(default_factory=dict)
    groups: Dict[str, List[str]] = field(default_factory=dict)
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    metadata: MetadataConfig = field(default_factory=MetadataConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)
    playback: PlaybackSceneConfig = field(default_factory=PlaybackSceneConfig)
    seed: Optional[int] = None

    def get_object(self, object_id: str) -> Optional[Primitive]:
        return self.objects.get(object_id)

    def get_group(self, group_id: str) -> List[str]:
        return self.groups.get(group_id, [])

    def get_group_objects(self, group_id: str) -> List[Primitive]:
        """Member primitives of a group; dangling ids are dropped."""
        return [self.objects[m] for m in self.get_group(group_id) if m in self.objects]


def resolve_orientation(rotation: Optional[RotationConfig]) -> Quat:
    """Orientation from a rotation spec: euler, then quaternion, then axis + angle.

    A missing or empty spec yields the identity orientation.
    """
    if rotation is None:
        return IDENTITY
    if rotation.euler is not None:
        x, y, z = rotation.euler[:3]
        return quat_from_euler(x, y, z)
    if rotation.quaternion is not None:
        qx, qy, qz, qw = rotation.quaternion[:4]
        return quat_normalize((qx, qy, qz, qw))
    if rotation.axis is not None and rotation.angle is not None:
        ax, ay, az = rotation.axis[:3]
        return quat_from_axis_angle((ax, ay, az), rotation.angle)
    return IDENTITY


def _apply_log_level(level_name: str):
    if not level_name:
        return
    level = logging.getLevelName(level_name.upper())
    if isinstance(level, int):
        logging.getLogger("pointscene").setLevel(level)
    else:
        warnings.warn(f"Unknown debug.logLevel '{level_name}', ignored")


class SceneLoader:
    """Builds primitives and groups from a SceneConfig.

    Objects are registered first (flat entries, then pattern definitions),
    then groups are resolved against the finished object registry. Nothing
    is exposed until the whole document has been processed.
    """

    def __init__(self, scene_config: SceneConfig, rng: Optional[NumpyRngAdapter] = None):
        self.scene = scene_config
        self._rng = rng or NumpyRngAdapter(np.random.RandomState(scene_config.seed))
        self._validate = scene_config.debug.validate_constraints
        self.objects: Dict[str, Primitive] = {}
        self.groups: Dict[str, List[str]] = {}

    def load(self) -> Scene:
        _apply_log_level(self.scene.debug.log_level)
        started = time.perf_counter()

        objects: Dict[str, Primitive] = {}
        for spec in self.scene.objects:
            self._register(objects, spec.id, self._build_flat_object(spec))

        for definition in self.scene.object_definitions:
            for object_id, obj in self._build_pattern_objects(definition):
                self._register(objects, object_id, obj)

        groups: Dict[str, List[str]] = {}
        for group_id, group in self.scene.groups.items():
            members = resolve_group(group_id, group, objects)
            if members is not None:
                groups[group_id] = members

        self.objects = objects
        self.groups = groups

        logger.debug("Scene loaded: %d objects, %d groups", len(objects), len(groups))
        if self.scene.debug.perf_metrics:
            logger.info("Scene load took %.3f ms", (time.perf_counter() - started) * 1000.0)

        return Scene(
            objects=objects,
            groups=groups,
            environment=self.scene.environment,
            metadata=self.scene.metadata,
            debug=self.scene.debug,
            playback=self.scene.playback,
            seed=self.scene.seed,
        )

    @staticmethod
    def _register(objects: Dict[str, Primitive], object_id: str, obj: Primitive):
        if object_id in objects:
            raise DuplicateObjectIdError(object_id)
        objects[object_id] = obj

    def _behavior(self, behavior: Optional[BehaviorConfig], position):
        kind = behavior.type if behavior is not None else "static"
        return create_behavior(kind, position, self._rng)

    def _build_flat_object(self, spec: ObjectSpecConfig) -> Primitive:
        if spec.type not in OBJECT_TYPES:
            raise UnsupportedTypeError(spec.id, spec.type)

        position = tuple(spec.position[:3])
        orientation = resolve_orientation(spec.rotation)
        behavior = self._behavior(spec.behavior, position)

        if spec.type == "point":
            return Point(position, parse_point_size(spec.size), spec.rgba,
                         behavior=behavior, orientation=orientation)
        width, length = parse_line_size(spec.size)
        return Line(position, width, length, spec.rgba,
                    orientation=orientation, behavior=behavior)

    def _build_pattern_objects(self, definition: ObjectDefinitionConfig):
        if definition.type not in OBJECT_TYPES:
            raise UnsupportedTypeError(definition.id, definition.type)
        if definition.positions.type != "pattern":
            raise SceneConfigError(
                f"Object definition '{definition.id}' has unsupported positions type "
                f"'{definition.positions.type}'"
            )

        placements = generate_placements(
            definition.type,
            definition.positions.pattern,
            definition.positions.parameters,
            rng=self._rng,
            object_id=definition.id,
            validate=self._validate,
        )
        if definition.count is not None and definition.count != len(placements):
            logger.debug("Definition '%s' declares count=%d but pattern produced %d",
                         definition.id, definition.count, len(placements))

        template = definition.template
        if definition.type == "point":
            size = parse_point_size(template.size)
        else:
            width, _ = parse_line_size(template.size)

        built = []
        for index, placement in enumerate(placements):
            behavior = self._behavior(definition.behavior, placement.position)
            if definition.type == "point":
                obj = Point(placement.position, size, template.rgba, behavior=behavior)
            else:
                obj = Line(placement.position, width, placement.length, template.rgba,
                           orientation=placement.orientation, behavior=behavior)
            built.append((f"{definition.id}/{index}", obj))
        return built


def build_scene(document: Union[Dict, SceneConfig],
                rng: Optional[NumpyRngAdapter] = None) -> Scene:
    """Build a Scene from a decoded document or a parsed SceneConfig."""
    scene_config = document if isinstance(document, SceneConfig) else parse_scene(document)
    return SceneLoader(scene_config, rng).load()
