"""
Schema merge package.
"""

from .engine import (
    merge_object_types,
    merge_schema,
    merge_type,
    merge_union_types,
    overwrite_type,
)

__all__ = [
    "merge_schema",
    "merge_type",
    "merge_object_types",
    "merge_union_types",
    "overwrite_type",
]
