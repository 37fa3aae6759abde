"""Group resolution: index ranges and spatial predicates over the object registry.

Groups are snapshots. They are resolved once when the scene is built and
are not re-evaluated as objects move.
"""

import warnings
from typing import Dict, List, Optional, Sequence

from ..core.vecmath import distance, vec3
from .config import GroupConfig, RegionConfig


def resolve_index_group(generator: str, id_range: Sequence[int]) -> List[str]:
    """``generator/lo`` .. ``generator/hi`` inclusive; existence is not checked."""
    lo, hi = int(id_range[0]), int(id_range[1])
    return [f"{generator}/{i}" for i in range(lo, hi + 1)]


def resolve_spatial_group(generator: str, condition: RegionConfig, objects: Dict) -> List[str]:
    """Ids starting with ``generator`` whose current position satisfies ``condition``."""
    if condition.region != "sphere":
        warnings.warn(f"Unknown spatial region '{condition.region}', group is empty")
        return []

    center = vec3(condition.center)
    members = []
    for object_id, obj in objects.items():
        if not object_id.startswith(generator):
            continue
        if distance(obj.get_transform().position, center) <= condition.radius:
            members.append(object_id)
    return members


def resolve_group(group_id: str, group: GroupConfig, objects: Dict) -> Optional[List[str]]:
    """Resolve one group; returns None for group types that are not supported."""
    if group.type == "index":
        members = resolve_index_group(group.generator, group.id_range)
    elif group.type == "spatial":
        members = resolve_spatial_group(group.generator, group.condition, objects)
    elif group.type == "explicit":
        members = list(group.members)
    else:
        warnings.warn(f"Group '{group_id}' has unsupported type '{group.type}', skipped")
        return None

    dangling = [m for m in members if m not in objects]
    if dangling:
        warnings.warn(
            f"Group '{group_id}' references {len(dangling)} unknown object(s), "
            f"e.g. '{dangling[0]}'"
        )
    return members
