"""
Schema merge engine.

Produces a new graph holding every type of both inputs. On conflicts the
other graph wins: its scalar/enum definitions replace ours and its field
definitions replace same-named fields. Interface lists and union members are
combined instead. Neither input is modified.
"""

import logging
from typing import Optional, Union

from ..exceptions import IncompatibleKindMerge, InvalidComparisonTarget
from ..graph.types import SchemaGraph, TypeDef, TypeKind, TypeRef

logger = logging.getLogger(__name__)

Mergeable = Union[TypeDef, TypeRef]


def merge_schema(this: SchemaGraph, other: Optional[SchemaGraph]) -> SchemaGraph:
    """
    Merge two schema graphs into a new one.

    Args:
        this: Base schema
        other: Schema overlaid on ``this``; None returns a copy of ``this``

    Returns:
        A newly allocated graph

    Raises:
        InvalidComparisonTarget: ``other`` is defined but not a SchemaGraph
        IncompatibleKindMerge: a type name has different kinds on each side
    """
    if not isinstance(this, SchemaGraph):
        raise InvalidComparisonTarget(
            f"Cannot merge receiver of type {type(this).__name__}; expected SchemaGraph.", this
        )
    if other is None:
        return this.copy()
    if not isinstance(other, SchemaGraph):
        raise InvalidComparisonTarget(
            f"Cannot merge with {type(other).__name__}; expected SchemaGraph.", other
        )

    logger.info(f"Merging schemas: {len(this.types)} + {len(other.types)} types")
    merged = SchemaGraph(
        query_type=other.query_type or this.query_type,
        mutation_type=other.mutation_type or this.mutation_type,
        subscription_type=other.subscription_type or this.subscription_type,
    )
    try:
        for name, this_type in this.types.items():
            merged.types[name] = merge_type(this_type, other.get_type(name))
        for name, other_type in other.types.items():
            if name not in this.types:
                merged.types[name] = other_type.copy()
    except Exception as e:
        logger.error(f"Error during schema merge: {e}")
        raise

    logger.info(f"Schema merge completed: {len(merged.types)} types")
    return merged


def merge_type(this: Mergeable, other: Optional[Mergeable]) -> Mergeable:
    """Merge two types, dispatching on the kind of ``this``."""
    if not isinstance(this, (TypeDef, TypeRef)):
        raise InvalidComparisonTarget(
            f"Cannot merge receiver of type {type(this).__name__}.", this
        )
    if other is None:
        return this.copy()
    if not isinstance(other, (TypeDef, TypeRef)) or type(other) is not type(this):
        raise InvalidComparisonTarget(
            f"Cannot merge {type(this).__name__} with {type(other).__name__}.", other
        )
    if isinstance(this, TypeRef):
        return overwrite_type(this, other)
    if this.kind != other.kind:
        raise IncompatibleKindMerge(
            f"Cannot merge with different base type. this: {this.kind.value}, "
            f"other: {other.kind.value}.",
            type_name=this.name,
            this_kind=this.kind,
            other_kind=other.kind,
        )

    if this.kind.has_fields:
        return merge_object_types(this, other)
    if this.kind == TypeKind.UNION:
        return merge_union_types(this, other)
    return overwrite_type(this, other)


def overwrite_type(this: Mergeable, other: Optional[Mergeable]) -> Mergeable:
    """Scalars, enums and wrappers are not merged: other replaces this when present."""
    logger.debug(f"Overwriting type '{this}'")
    return (other if other is not None else this).copy()


def merge_object_types(this: TypeDef, other: Optional[TypeDef]) -> TypeDef:
    """
    Union of the fields of both types; other's definition of a shared field
    replaces ours. Object types also get the union of their interfaces.
    """
    merged = this.copy()
    if other is None:
        return merged
    logger.debug(f"Merging fields of {this.kind.value} type '{this.name}'")

    for name, other_field in other.fields.items():
        merged.fields[name] = other_field.copy()

    if this.kind == TypeKind.OBJECT:
        for interface in other.interfaces:
            if interface not in merged.interfaces:
                merged.interfaces.append(interface)
    return merged


def merge_union_types(this: TypeDef, other: Optional[TypeDef]) -> TypeDef:
    """Members of this union followed by other's members not already present."""
    merged = this.copy()
    if other is None:
        return merged
    for member in other.possible_types:
        if member not in merged.possible_types:
            merged.possible_types.append(member)
    return merged
