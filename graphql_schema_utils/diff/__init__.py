"""
Schema diff package.
"""

from .engine import (
    diff_enum_types,
    diff_object_types,
    diff_scalar_types,
    diff_schema,
    diff_type,
    diff_union_types,
)
from .report import DiffReport, build_report
from .types import DiffKind, DiffLevel, DiffOptions, DiffRecord

__all__ = [
    "diff_schema",
    "diff_type",
    "diff_scalar_types",
    "diff_enum_types",
    "diff_union_types",
    "diff_object_types",
    "build_report",
    "DiffReport",
    "DiffKind",
    "DiffLevel",
    "DiffOptions",
    "DiffRecord",
]
