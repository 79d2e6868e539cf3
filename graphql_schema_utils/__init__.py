"""
graphql-schema-utils.

Compare and merge GraphQL schemas: report breaking and backward compatible
changes between two schema revisions, or combine two schemas into one.
"""

from .defaults import LIBRARY_VERSION as __version__
from .diff import DiffKind, DiffOptions, DiffRecord, DiffReport, build_report, diff_schema, diff_type
from .exceptions import (
    IncompatibleKindMerge,
    InvalidComparisonTarget,
    SchemaLoadError,
    SchemaUtilsError,
)
from .graph import SchemaGraph, TypeDef, TypeKind, load_schema, load_schema_file, print_graph
from .merge import merge_schema, merge_type

__all__ = [
    "__version__",
    "SchemaGraph",
    "TypeDef",
    "TypeKind",
    "load_schema",
    "load_schema_file",
    "print_graph",
    "diff_schema",
    "diff_type",
    "build_report",
    "merge_schema",
    "merge_type",
    "DiffKind",
    "DiffOptions",
    "DiffRecord",
    "DiffReport",
    "SchemaUtilsError",
    "InvalidComparisonTarget",
    "IncompatibleKindMerge",
    "SchemaLoadError",
]
