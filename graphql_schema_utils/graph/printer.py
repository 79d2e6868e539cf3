"""
Convert schema graphs back into graphql-core schemas and SDL.
"""

import logging
from typing import Any, Optional

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLError,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    parse_value,
    print_schema,
    specified_scalar_types,
    value_from_ast,
)
from graphql.pyutils import Undefined
from graphql.type import DEFAULT_DEPRECATION_REASON

from ..exceptions import SchemaLoadError
from .types import SchemaGraph, TypeDef, TypeKind, TypeRef

logger = logging.getLogger(__name__)

STANDARD_SCALARS = dict(specified_scalar_types)


def print_graph(graph: SchemaGraph) -> str:
    """Render a schema graph as SDL."""
    return print_schema(to_graphql_schema(graph))


def to_graphql_schema(graph: SchemaGraph) -> GraphQLSchema:
    """
    Build a graphql-core schema from a schema graph.

    Raises:
        SchemaLoadError: A field references a type missing from the graph, or
            a root operation type is not an object type
    """
    _check_references(graph)
    builder = _SchemaBuilder(graph)
    try:
        return GraphQLSchema(
            query=builder.root(graph.query_type),
            mutation=builder.root(graph.mutation_type),
            subscription=builder.root(graph.subscription_type),
            types=list(builder.types.values()),
        )
    except (GraphQLError, TypeError) as e:
        raise SchemaLoadError(f"Cannot build GraphQL schema: {e}") from e


def _check_references(graph: SchemaGraph) -> None:
    def check(owner: str, ref: TypeRef) -> None:
        name = ref.named_type
        if name not in graph.types and name not in STANDARD_SCALARS:
            raise SchemaLoadError(f"Unknown type '{name}' referenced by {owner}.")

    for type_def in graph.types.values():
        for field in type_def.fields.values():
            check(f"{type_def.name}.{field.name}", field.type)
            for arg in field.args or []:
                check(f"{type_def.name}.{field.name}({arg.name})", arg.type)
        for name in type_def.interfaces + type_def.possible_types:
            if name not in graph.types:
                raise SchemaLoadError(f"Unknown type '{name}' referenced by {type_def.name}.")


class _SchemaBuilder:
    """Creates graphql-core named types; fields are resolved lazily via thunks."""

    def __init__(self, graph: SchemaGraph):
        self.types: dict[str, GraphQLNamedType] = {}
        for name, type_def in graph.types.items():
            # graphql-core supplies its own introspection types
            if name.startswith("__"):
                continue
            self.types[name] = self._build_named(type_def)

    def root(self, name: Optional[str]) -> Optional[GraphQLObjectType]:
        if not name:
            return None
        root_type = self.types.get(name)
        if not isinstance(root_type, GraphQLObjectType):
            raise SchemaLoadError(f"Root operation type '{name}' must be an object type.")
        return root_type

    def resolve(self, ref: TypeRef) -> Any:
        if ref.kind == TypeKind.NON_NULL:
            return GraphQLNonNull(self.resolve(ref.of_type))
        if ref.kind == TypeKind.LIST:
            return GraphQLList(self.resolve(ref.of_type))
        return self.types.get(ref.name) or STANDARD_SCALARS[ref.name]

    def _build_named(self, type_def: TypeDef) -> GraphQLNamedType:
        name, description = type_def.name, type_def.description
        if type_def.kind == TypeKind.SCALAR:
            if name in STANDARD_SCALARS:
                return STANDARD_SCALARS[name]
            return GraphQLScalarType(name, description=description)
        if type_def.kind == TypeKind.OBJECT:
            return GraphQLObjectType(
                name,
                fields=lambda: self._output_fields(type_def),
                interfaces=lambda: [self.types[i] for i in type_def.interfaces],
                description=description,
            )
        if type_def.kind == TypeKind.INTERFACE:
            return GraphQLInterfaceType(
                name, fields=lambda: self._output_fields(type_def), description=description
            )
        if type_def.kind == TypeKind.INPUT_OBJECT:
            return GraphQLInputObjectType(
                name, fields=lambda: self._input_fields(type_def), description=description
            )
        if type_def.kind == TypeKind.ENUM:
            return GraphQLEnumType(
                name,
                values={
                    value.name: GraphQLEnumValue(
                        value.name,
                        description=value.description,
                        deprecation_reason=(
                            value.deprecation_reason or DEFAULT_DEPRECATION_REASON
                            if value.deprecated else None
                        ),
                    )
                    for value in type_def.enum_values
                },
                description=description,
            )
        if type_def.kind == TypeKind.UNION:
            return GraphQLUnionType(
                name,
                types=lambda: [self.types[member] for member in type_def.possible_types],
                description=description,
            )
        raise SchemaLoadError(f"Type '{name}' has unsupported kind {type_def.kind.value}.")

    def _output_fields(self, type_def: TypeDef) -> dict[str, GraphQLField]:
        return {
            name: GraphQLField(
                self.resolve(field.type),
                args={
                    arg.name: GraphQLArgument(
                        self.resolve(arg.type),
                        default_value=self._default(arg.type, arg.default_value),
                        description=arg.description,
                    )
                    for arg in field.args or []
                },
                description=field.description,
            )
            for name, field in type_def.fields.items()
        }

    def _input_fields(self, type_def: TypeDef) -> dict[str, GraphQLInputField]:
        return {
            name: GraphQLInputField(
                self.resolve(field.type),
                default_value=self._default(field.type, field.default_value),
                description=field.description,
            )
            for name, field in type_def.fields.items()
        }

    def _default(self, ref: TypeRef, literal: Optional[str]) -> Any:
        if literal is None:
            return Undefined
        return value_from_ast(parse_value(literal), self.resolve(ref))
