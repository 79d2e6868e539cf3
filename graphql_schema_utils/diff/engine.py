"""
Schema diff engine.

Walks two schema graphs type by type and reports every structural or
descriptive difference as a ``DiffRecord``. Each record is read as "this"
changing into "other": removals are breaking, additions and description edits
are backward compatible.
"""

import logging
from typing import Any, Optional, Union

from ..config_proxy import get_setting
from ..exceptions import InvalidComparisonTarget
from ..graph.types import ArgumentDef, FieldDef, SchemaGraph, TypeDef, TypeKind
from ..utils import dedupe, format_template
from .types import DiffKind, DiffLevel, DiffOptions, DiffRecord

logger = logging.getLogger(__name__)

OptionsLike = Union[DiffOptions, dict[str, Any], None]

TYPE_DESCRIPTION_TEMPLATE = 'Description diff on type {0}. {1}: `"{2}"` vs. {3}: `"{4}"`.'


def diff_schema(
    this: SchemaGraph, other: Optional[SchemaGraph], options: OptionsLike = None
) -> list[DiffRecord]:
    """
    Report differences between two schema graphs by diffing all of their types.

    A missing ``other`` is compared as an empty graph, so every type of
    ``this`` is reported as removed.

    Args:
        this: Schema the comparison starts from
        other: Schema compared against ``this``
        options: Optional labels for the rendered descriptions

    Returns:
        Differences in the order they were found

    Raises:
        InvalidComparisonTarget: ``this`` or ``other`` is not a SchemaGraph
    """
    _check_target(this, SchemaGraph, "receiver")
    _check_target(other, SchemaGraph, "other")
    options = resolve_options(options, DiffLevel.SCHEMA)
    logger.info(f"Comparing schemas: {options.label_for_this} -> {options.label_for_other}")

    if other is None:
        other = SchemaGraph()
    diffs: list[DiffRecord] = []
    try:
        for name, this_type in this.types.items():
            diffs.extend(diff_type(this_type, other.get_type(name), options))
        for name, other_type in other.types.items():
            if name not in this.types:
                description = format_template(
                    'Type missing from {0}: `{1}`.', options.label_for_this, name
                )
                diffs.append(DiffRecord(None, other_type, DiffKind.TYPE_MISSING, description, True))
    except Exception as e:
        logger.error(f"Error during schema diff: {e}")
        raise

    breaking = sum(1 for d in diffs if not d.backward_compatible)
    logger.info(f"Schema diff completed: {len(diffs)} differences found ({breaking} breaking)")
    return diffs


def diff_type(
    this: TypeDef, other: Optional[TypeDef], options: OptionsLike = None
) -> list[DiffRecord]:
    """Compare two named types, dispatching on the kind of ``this``."""
    _check_target(this, TypeDef, "receiver")
    comparator = _COMPARATORS.get(this.kind)
    if comparator is None:
        raise InvalidComparisonTarget(
            f"Cannot diff type '{this.name}' of kind {this.kind.value}.", this
        )
    logger.debug(f"Diffing {this.kind.value} type '{this.name}'")
    return comparator(this, other, options)


def diff_scalar_types(
    this: TypeDef, other: Optional[TypeDef], options: OptionsLike = None
) -> list[DiffRecord]:
    """Compare two scalar types; only the description is compared."""
    options = _prepare(this, other, options)
    common = common_type_diffs(this, other, options)
    if common:
        return common
    if this.description != other.description:
        return [_type_description_diff(this, other, options)]
    return []


def diff_enum_types(
    this: TypeDef, other: Optional[TypeDef], options: OptionsLike = None
) -> list[DiffRecord]:
    """Compare two enum types value by value."""
    options = _prepare(this, other, options)
    common = common_type_diffs(this, other, options)
    if common:
        return common
    diffs = _diff_enum_values(this, other, options)
    if this.description != other.description:
        diffs.append(_type_description_diff(this, other, options))
    return dedupe(diffs)


def diff_union_types(
    this: TypeDef, other: Optional[TypeDef], options: OptionsLike = None
) -> list[DiffRecord]:
    """
    Compare two union types.

    Member sets are compared as sorted, joined strings, so any membership
    change yields a single ``UnionTypeDiff``.
    """
    options = _prepare(this, other, options)
    common = common_type_diffs(this, other, options)
    if common:
        return common
    diffs = []
    if this.description != other.description:
        diffs.append(_type_description_diff(this, other, options))

    separator = get_setting("diff_settings.union_separator", " | ")
    this_members = separator.join(sorted(this.possible_types))
    other_members = separator.join(sorted(other.possible_types))
    if this_members != other_members:
        description = format_template(
            'Difference in union type {0}. {1}: `{2}` vs. {3}: `{4}`.',
            this.name, options.label_for_this, this_members,
            options.label_for_other, other_members,
        )
        diffs.append(DiffRecord(this, other, DiffKind.UNION_TYPE_DIFF, description, True))
    return diffs


def diff_object_types(
    this: TypeDef, other: Optional[TypeDef], options: OptionsLike = None
) -> list[DiffRecord]:
    """Compare two object, interface or input object types field by field."""
    options = _prepare(this, other, options)
    common = common_type_diffs(this, other, options)
    if common:
        return common
    diffs = _diff_fields(this, other, options)
    if this.description != other.description:
        diffs.append(_type_description_diff(this, other, options))
    if this.kind == TypeKind.OBJECT:
        diffs.extend(_diff_interfaces(this, other, options))
    return diffs


def common_type_diffs(
    this: TypeDef, other: Optional[TypeDef], options: DiffOptions
) -> Optional[list[DiffRecord]]:
    """
    Checks shared by every type comparison, stopping at the first hit.

    Returns:
        A single-record list, or None when the kind-specific checks should run
    """
    if other is None:
        description = format_template(
            'Type missing from {0}: `{1}`.', options.label_for_other, this.name
        )
        return [DiffRecord(this, other, DiffKind.TYPE_MISSING, description, False)]
    if this.kind != other.kind:
        description = format_template(
            'Type mismatch: {0}: `{1}: {2}` vs. {3}: `{4}: {5}`.',
            options.label_for_this, this.name, this.kind.value,
            options.label_for_other, other.name, other.kind.value,
        )
        return [DiffRecord(this, other, DiffKind.BASE_TYPE_DIFF, description, True)]
    if this.name != other.name:
        description = format_template(
            'Type name difference. {0}: `{1}` vs. {2}: `{3}`.',
            options.label_for_this, this.name, options.label_for_other, other.name,
        )
        return [DiffRecord(this, other, DiffKind.TYPE_NAME_DIFF, description, True)]
    return None


def _diff_fields(this_type: TypeDef, other_type: TypeDef, options: DiffOptions) -> list[DiffRecord]:
    diffs = []
    for name, this_field in this_type.fields.items():
        other_field = other_type.fields.get(name)
        if other_field is None:
            description = format_template(
                'Field missing from {0}: `{1}.{2}`.',
                options.label_for_other, this_type.name, this_field,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.FIELD_MISSING, description, False))
            continue

        this_signature, other_signature = str(this_field.type), str(other_field.type)
        if this_signature != other_signature:
            description = format_template(
                'Field type changed on field {0}.{1} from `"{2}"` to `"{3}"`.',
                this_type.name, name, this_signature, other_signature,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.FIELD_DIFF, description, False))
        if this_field.description != other_field.description:
            description = format_template(
                'Description diff on field {0}.{1}. {2}: `"{3}"` vs. {4}: `"{5}"`.',
                this_type.name, name, options.label_for_this, this_field.description,
                options.label_for_other, other_field.description,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.FIELD_DESCRIPTION_DIFF, description, True))
        diffs.extend(_diff_arguments(this_type, other_type, this_field, other_field, options))
        diffs.extend(_diff_arg_descriptions(this_type, other_type, this_field, other_field, options))

    for name, other_field in other_type.fields.items():
        if name not in this_type.fields:
            description = format_template(
                'Field missing from {0}: `{1}.{2}`.',
                options.label_for_this, this_type.name, other_field,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.FIELD_MISSING, description, True))
    return diffs


def _diff_arguments(
    this_type: TypeDef, other_type: TypeDef,
    this_field: FieldDef, other_field: FieldDef, options: DiffOptions,
) -> list[DiffRecord]:
    if this_field.args is None or other_field.args is None:
        return []
    diffs = []
    this_args = _argument_map(this_field.args)
    other_args = _argument_map(other_field.args)

    for name, signature in this_args.items():
        if name not in other_args:
            description = format_template(
                'Argument missing from {0}: `{1}.{2}({3}: {4})`.',
                options.label_for_other, this_type.name, this_field.name, name, signature,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.ARG_DIFF, description, False))
        elif other_args[name] != signature:
            description = format_template(
                'Argument type diff on field {0}.{1}. {2}: `{3}: {4}` vs. {5}: `{6}: {7}`.',
                this_type.name, this_field.name, options.label_for_this, name, signature,
                options.label_for_other, name, other_args[name],
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.ARG_DIFF, description, False))

    for name, signature in other_args.items():
        if name not in this_args:
            description = format_template(
                'Argument missing from {0}: `{1}.{2}({3}: {4})`.',
                options.label_for_this, other_type.name, other_field.name, name, signature,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.ARG_DIFF, description, True))
    return diffs


def _diff_arg_descriptions(
    this_type: TypeDef, other_type: TypeDef,
    this_field: FieldDef, other_field: FieldDef, options: DiffOptions,
) -> list[DiffRecord]:
    if this_field.args is None or other_field.args is None:
        return []
    diffs = []
    for arg in other_field.args:
        this_arg = this_field.get_arg(arg.name)
        if this_arg is None or this_arg.description == arg.description:
            continue
        description = format_template(
            'Description diff on argument {0}.{1}({2}). {3}: `"{4}"` vs. {5}: `"{6}"`.',
            this_type.name, this_field.name, arg.name, options.label_for_this,
            this_arg.description, options.label_for_other, arg.description,
        )
        diffs.append(DiffRecord(
            this_type, other_type, DiffKind.ARG_DESCRIPTION_DIFF, description, True,
            this_field=this_field, other_field=other_field,
        ))
    return diffs


def _diff_interfaces(this_type: TypeDef, other_type: TypeDef, options: DiffOptions) -> list[DiffRecord]:
    """
    One breaking record per direction that has interfaces the other side lacks.

    A direction with nothing missing produces no record, so adding a single
    interface yields one record rather than a pair.
    """
    separator = get_setting("diff_settings.interface_separator", ", ")
    diffs = []
    directions = (
        (this_type.interfaces, other_type.interfaces, options.label_for_this, options.label_for_other),
        (other_type.interfaces, this_type.interfaces, options.label_for_other, options.label_for_this),
    )
    for source, target, source_label, target_label in directions:
        missing = [name for name in source if name not in target]
        if not missing:
            continue
        description = format_template(
            'Interface diff on type {0}. Implemented in {1} but not in {2}: `{3}`. '
            '{4}: `{5}` vs. {6}: `{7}`.',
            this_type.name, source_label, target_label, separator.join(missing),
            options.label_for_this, separator.join(this_type.interfaces),
            options.label_for_other, separator.join(other_type.interfaces),
        )
        diffs.append(DiffRecord(this_type, other_type, DiffKind.INTERFACE_DIFF, description, False))
    return diffs


def _diff_enum_values(this_type: TypeDef, other_type: TypeDef, options: DiffOptions) -> list[DiffRecord]:
    diffs = []
    for this_value in this_type.enum_values:
        name = this_value.name
        other_value = other_type.get_enum_value(name)
        if other_value is None:
            description = format_template(
                'Enum value missing from {0}: `"{1}.{2}"`.',
                options.label_for_other, this_type.name, name,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.ENUM_DIFF, description, False))
            continue
        if this_value.description != other_value.description:
            description = format_template(
                'Description diff on enum value {0}.{1}. {2}: `"{3}"` vs. {4}: `"{5}"`.',
                this_type.name, name, options.label_for_this, this_value.description,
                options.label_for_other, other_value.description,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.ENUM_DIFF, description, True))
        if this_value.deprecation_status != other_value.deprecation_status:
            description = format_template(
                'Deprecation diff on enum value {0}.{1}. {2}: `{3}` vs. {4}: `{5}`.',
                this_type.name, name, options.label_for_this, this_value.deprecation_status,
                options.label_for_other, other_value.deprecation_status,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.ENUM_DIFF, description, True))

    for other_value in other_type.enum_values:
        name = other_value.name
        if this_type.get_enum_value(name) is None:
            description = format_template(
                'Enum value missing from {0}: `"{1}.{2}"`.',
                options.label_for_this, other_type.name, name,
            )
            diffs.append(DiffRecord(this_type, other_type, DiffKind.ENUM_DIFF, description, True))
    return diffs


def _type_description_diff(this: TypeDef, other: TypeDef, options: DiffOptions) -> DiffRecord:
    description = format_template(
        TYPE_DESCRIPTION_TEMPLATE, this.name, options.label_for_this, this.description,
        options.label_for_other, other.description,
    )
    return DiffRecord(this, other, DiffKind.TYPE_DESCRIPTION_DIFF, description, True)


def _argument_map(args: list[ArgumentDef]) -> dict[str, str]:
    """Map argument names to their rendered type."""
    return {arg.name: str(arg.type) for arg in args}


def _prepare(this: TypeDef, other: Optional[TypeDef], options: OptionsLike) -> DiffOptions:
    _check_target(this, TypeDef, "receiver")
    _check_target(other, TypeDef, "other")
    return resolve_options(options, DiffLevel.TYPE)


def resolve_options(options: OptionsLike, level: DiffLevel) -> DiffOptions:
    if options is None:
        options = DiffOptions()
    elif isinstance(options, dict):
        options = DiffOptions(
            label_for_this=options.get("label_for_this"),
            label_for_other=options.get("label_for_other"),
        )
    elif not isinstance(options, DiffOptions):
        raise TypeError(f"Unsupported diff options: {type(options).__name__}")
    return options.resolve(level)


def _check_target(value: Any, expected: type, role: str) -> None:
    # None is handled by the callers (missing type / empty graph)
    if role == "other" and value is None:
        return
    if not isinstance(value, expected):
        raise InvalidComparisonTarget(
            f"Cannot diff {role} of type {type(value).__name__}; expected {expected.__name__}.",
            value,
        )


_COMPARATORS = {
    TypeKind.SCALAR: diff_scalar_types,
    TypeKind.ENUM: diff_enum_types,
    TypeKind.UNION: diff_union_types,
    TypeKind.OBJECT: diff_object_types,
    TypeKind.INTERFACE: diff_object_types,
    TypeKind.INPUT_OBJECT: diff_object_types,
}
