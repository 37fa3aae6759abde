"""Write per-frame transform CSVs and the group manifest."""

import csv
from pathlib import Path
from typing import Dict, List

import yaml

from ..models.primitives import Transform

TRANSFORM_HEADER = [
    "id", "type", "x", "y", "z", "qx", "qy", "qz", "qw", "size", "rgba",
]


def write_transforms_csv(path, objects: Dict, transforms: Dict[str, Transform]) -> None:
    """One row per object: id, type, position, orientation, size, color."""
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(TRANSFORM_HEADER)
        for object_id, tf in transforms.items():
            obj = objects[object_id]
            x, y, z = tf.position
            qx, qy, qz, qw = tf.orientation
            writer.writerow([
                object_id, obj.object_type,
                f"{x:.6f}", f"{y:.6f}", f"{z:.6f}",
                f"{qx:.6f}", f"{qy:.6f}", f"{qz:.6f}", f"{qw:.6f}",
                obj.size, obj.color,
            ])


def read_transforms_csv(path) -> List[Dict[str, str]]:
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def write_group_manifest(path, groups: Dict[str, List[str]], environment=None,
                         metadata=None) -> None:
    """Dump groups (and optional presentation hints) as YAML."""
    manifest = {"groups": {k: list(v) for k, v in groups.items()}}
    if metadata is not None:
        manifest["metadata"] = {
            "version": metadata.version,
            "description": metadata.description,
        }
    if environment is not None:
        manifest["environment"] = {
            "axis": environment.axis,
            "camera": {
                "position": list(environment.camera.position),
                "type": environment.camera.type,
            },
        }
    with open(path, "w") as f:
        yaml.safe_dump(manifest, f, sort_keys=False)


class TransformCSVSink:
    """Frame sink for AnimationLoop writing ``frame_XXXX.csv`` files."""

    def __init__(self, output_dir, objects: Dict):
        self.csv_dir = Path(output_dir) / "csv"
        self.csv_dir.mkdir(parents=True, exist_ok=True)
        self.objects = objects

    def __call__(self, frame_idx: int, transforms: Dict[str, Transform]) -> None:
        write_transforms_csv(self.csv_dir / f"frame_{frame_idx:04d}.csv",
                             self.objects, transforms)
