"""
Schema graph package.
"""

from .loader import load_schema, load_schema_file, load_type
from .printer import print_graph, to_graphql_schema
from .types import (
    ArgumentDef,
    EnumValueDef,
    FieldDef,
    SchemaGraph,
    TypeDef,
    TypeKind,
    TypeRef,
)

__all__ = [
    "SchemaGraph",
    "TypeDef",
    "TypeKind",
    "TypeRef",
    "FieldDef",
    "ArgumentDef",
    "EnumValueDef",
    "load_schema",
    "load_schema_file",
    "load_type",
    "print_graph",
    "to_graphql_schema",
]
