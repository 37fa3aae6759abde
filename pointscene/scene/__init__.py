"""
Scene generation: document config, patterns, groups, loading and animation.
"""

from .config import (
    SceneConfig,
    ObjectSpecConfig,
    ObjectDefinitionConfig,
    TemplateConfig,
    PositionsConfig,
    RotationConfig,
    BehaviorConfig,
    GroupConfig,
    RegionConfig,
    EnvironmentConfig,
    CameraConfig,
    MetadataConfig,
    DebugConfig,
    PlaybackSceneConfig,
    parse_scene,
    load_scene,
)
from .patterns import Placement, generate_placements, POINT_PATTERNS, LINE_PATTERNS
from .groups import resolve_group, resolve_index_group, resolve_spatial_group
from .loader import Scene, SceneLoader, NumpyRngAdapter, build_scene, resolve_orientation
from .animation import AnimationLoop, tick, DEFAULT_DELTA_TIME

__all__ = [
    # config
    'SceneConfig', 'ObjectSpecConfig', 'ObjectDefinitionConfig', 'TemplateConfig',
    'PositionsConfig', 'RotationConfig', 'BehaviorConfig', 'GroupConfig',
    'RegionConfig', 'EnvironmentConfig', 'CameraConfig', 'MetadataConfig',
    'DebugConfig', 'PlaybackSceneConfig', 'parse_scene', 'load_scene',
    # patterns
    'Placement', 'generate_placements', 'POINT_PATTERNS', 'LINE_PATTERNS',
    # groups
    'resolve_group', 'resolve_index_group', 'resolve_spatial_group',
    # loader
    'Scene', 'SceneLoader', 'NumpyRngAdapter', 'build_scene', 'resolve_orientation',
    # animation
    'AnimationLoop', 'tick', 'DEFAULT_DELTA_TIME',
]
