"""
Output pipeline: per-frame transform CSVs and the group manifest.
"""

from .csv_writer import (
    TRANSFORM_HEADER,
    TransformCSVSink,
    write_transforms_csv,
    read_transforms_csv,
    write_group_manifest,
)

__all__ = [
    'TRANSFORM_HEADER',
    'TransformCSVSink',
    'write_transforms_csv',
    'read_transforms_csv',
    'write_group_manifest',
]
