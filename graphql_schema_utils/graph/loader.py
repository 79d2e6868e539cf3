"""
Build schema graphs from graphql-core and graphene schemas.

This is the only module that reads graphql-core type objects; everything
downstream works on the owned ``SchemaGraph`` model.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from graphql import (
    GraphQLError,
    GraphQLField,
    GraphQLInputField,
    GraphQLNamedType,
    GraphQLSchema,
    ast_from_value,
    build_client_schema,
    build_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
    print_ast,
)
from graphql.pyutils import Undefined

from ..config_proxy import get_setting
from ..exceptions import SchemaLoadError
from .types import (
    ArgumentDef,
    EnumValueDef,
    FieldDef,
    SchemaGraph,
    TypeDef,
    TypeKind,
    TypeRef,
)

logger = logging.getLogger(__name__)

SchemaSource = Union[SchemaGraph, GraphQLSchema, str, dict, Any]


def load_schema(source: SchemaSource) -> SchemaGraph:
    """
    Build a SchemaGraph from any supported source.

    Args:
        source: A SchemaGraph (returned unchanged), a graphql-core schema, a
            graphene schema (anything exposing ``graphql_schema``), SDL text or
            an introspection result dict

    Returns:
        The loaded graph

    Raises:
        SchemaLoadError: The source is unsupported or cannot be parsed
    """
    if isinstance(source, SchemaGraph):
        return source
    if isinstance(source, GraphQLSchema):
        return from_graphql_schema(source)
    graphql_schema = getattr(source, "graphql_schema", None)
    if isinstance(graphql_schema, GraphQLSchema):
        return from_graphql_schema(graphql_schema)
    if isinstance(source, str):
        return from_sdl(source)
    if isinstance(source, dict):
        return from_introspection(source)
    raise SchemaLoadError(f"Cannot load a schema from {type(source).__name__}.")


def from_sdl(sdl: str) -> SchemaGraph:
    try:
        schema = build_schema(sdl)
    except GraphQLError as e:
        raise SchemaLoadError(f"Invalid schema definition: {e.message}") from e
    return from_graphql_schema(schema)


def from_introspection(data: dict[str, Any]) -> SchemaGraph:
    """Load an introspection result, with or without the ``data`` envelope."""
    if "data" in data and isinstance(data["data"], dict):
        data = data["data"]
    if "__schema" not in data:
        raise SchemaLoadError("Introspection result has no '__schema' key.")
    try:
        schema = build_client_schema(data)
    except (GraphQLError, KeyError, TypeError, ValueError) as e:
        raise SchemaLoadError(f"Invalid introspection result: {e}") from e
    return from_graphql_schema(schema)


def from_graphql_schema(schema: GraphQLSchema) -> SchemaGraph:
    include_introspection = get_setting("loader_settings.include_introspection_types", False)
    graph = SchemaGraph(
        query_type=schema.query_type.name if schema.query_type else None,
        mutation_type=schema.mutation_type.name if schema.mutation_type else None,
        subscription_type=schema.subscription_type.name if schema.subscription_type else None,
    )
    skipped = 0
    for name, named_type in schema.type_map.items():
        if name.startswith("__") and not include_introspection:
            skipped += 1
            continue
        graph.types[name] = load_type(named_type)
    logger.debug(
        f"Loaded schema graph with {len(graph.types)} types "
        f"({skipped} introspection types skipped)"
    )
    return graph


def load_type(named_type: GraphQLNamedType) -> TypeDef:
    """Convert one graphql-core named type into a TypeDef."""
    name, description = named_type.name, named_type.description
    if is_scalar_type(named_type):
        return TypeDef(name=name, kind=TypeKind.SCALAR, description=description)
    if is_object_type(named_type):
        return TypeDef(
            name=name,
            kind=TypeKind.OBJECT,
            description=description,
            fields={n: _load_field(n, f) for n, f in named_type.fields.items()},
            interfaces=[interface.name for interface in named_type.interfaces],
        )
    if is_interface_type(named_type):
        return TypeDef(
            name=name,
            kind=TypeKind.INTERFACE,
            description=description,
            fields={n: _load_field(n, f) for n, f in named_type.fields.items()},
        )
    if is_input_object_type(named_type):
        return TypeDef(
            name=name,
            kind=TypeKind.INPUT_OBJECT,
            description=description,
            fields={n: _load_input_field(n, f) for n, f in named_type.fields.items()},
        )
    if is_enum_type(named_type):
        return TypeDef(
            name=name,
            kind=TypeKind.ENUM,
            description=description,
            enum_values=[
                EnumValueDef(
                    name=value_name,
                    description=value.description,
                    deprecated=value.deprecation_reason is not None,
                    deprecation_reason=value.deprecation_reason,
                )
                for value_name, value in named_type.values.items()
            ],
        )
    if is_union_type(named_type):
        return TypeDef(
            name=name,
            kind=TypeKind.UNION,
            description=description,
            possible_types=[member.name for member in named_type.types],
        )
    raise SchemaLoadError(f"Unsupported GraphQL type '{name}'.")


def load_type_ref(type_: Any) -> TypeRef:
    """Convert a possibly wrapped graphql-core type into a TypeRef."""
    if is_non_null_type(type_):
        return TypeRef(kind=TypeKind.NON_NULL, of_type=load_type_ref(type_.of_type))
    if is_list_type(type_):
        return TypeRef(kind=TypeKind.LIST, of_type=load_type_ref(type_.of_type))
    return TypeRef(kind=_named_kind(type_), name=type_.name)


def load_schema_file(path: Union[str, Path]) -> SchemaGraph:
    """Load a schema file: ``.json`` files hold introspection results, anything else SDL."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file '{path}': {e}", source=str(path)) from e

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(content)
        except ValueError as e:
            raise SchemaLoadError(f"Invalid JSON in '{path}': {e}", source=str(path)) from e
        if not isinstance(data, dict):
            raise SchemaLoadError(f"'{path}' does not hold an introspection result.", source=str(path))
        return from_introspection(data)
    return from_sdl(content)


def _load_field(name: str, graphql_field: GraphQLField) -> FieldDef:
    return FieldDef(
        name=name,
        type=load_type_ref(graphql_field.type),
        description=graphql_field.description,
        args=[
            ArgumentDef(
                name=arg_name,
                type=load_type_ref(arg.type),
                description=arg.description,
                default_value=_render_default(arg.default_value, arg.type),
            )
            for arg_name, arg in graphql_field.args.items()
        ],
    )


def _load_input_field(name: str, input_field: GraphQLInputField) -> FieldDef:
    return FieldDef(
        name=name,
        type=load_type_ref(input_field.type),
        description=input_field.description,
        args=None,
        default_value=_render_default(input_field.default_value, input_field.type),
    )


def _render_default(value: Any, type_: Any) -> Optional[str]:
    """Render a default value as a GraphQL literal."""
    if value is Undefined:
        return None
    try:
        node = ast_from_value(value, type_)
    except (GraphQLError, TypeError, ValueError) as e:
        logger.warning(f"Cannot render default value {value!r} as {type_}: {e}")
        return str(value)
    return print_ast(node) if node is not None else None


def _named_kind(type_: Any) -> TypeKind:
    if is_scalar_type(type_):
        return TypeKind.SCALAR
    if is_object_type(type_):
        return TypeKind.OBJECT
    if is_interface_type(type_):
        return TypeKind.INTERFACE
    if is_input_object_type(type_):
        return TypeKind.INPUT_OBJECT
    if is_enum_type(type_):
        return TypeKind.ENUM
    if is_union_type(type_):
        return TypeKind.UNION
    raise SchemaLoadError(f"Unsupported GraphQL type reference '{type_}'.")
