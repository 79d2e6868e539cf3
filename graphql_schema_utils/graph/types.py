"""
Data classes for the owned schema graph model.

Every type carries an explicit ``TypeKind`` set when the graph is loaded, so
the diff and merge engines dispatch on that tag instead of on the classes of
the graphql-core objects the graph was built from.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class TypeKind(Enum):
    """Closed set of GraphQL type kinds."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    INPUT_OBJECT = "INPUT_OBJECT"
    ENUM = "ENUM"
    UNION = "UNION"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)

    @property
    def has_fields(self) -> bool:
        return self in (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.INPUT_OBJECT)


@dataclass
class TypeRef:
    """
    Reference to a type from a field or an argument.

    Named references carry a ``name``; ``LIST`` and ``NON_NULL`` wrappers carry
    the wrapped reference in ``of_type`` instead.
    """
    kind: TypeKind
    name: Optional[str] = None
    of_type: Optional["TypeRef"] = None

    def __str__(self) -> str:
        if self.kind == TypeKind.NON_NULL:
            return f"{self.of_type}!"
        if self.kind == TypeKind.LIST:
            return f"[{self.of_type}]"
        return self.name or ""

    @property
    def named_type(self) -> str:
        """Name of the innermost named type."""
        ref = self
        while ref.of_type is not None:
            ref = ref.of_type
        return ref.name

    def copy(self) -> "TypeRef":
        return TypeRef(
            kind=self.kind,
            name=self.name,
            of_type=self.of_type.copy() if self.of_type is not None else None,
        )

    def merge(self, other: Optional["TypeRef"]) -> "TypeRef":
        from ..merge.engine import merge_type

        return merge_type(self, other)

    def to_dict(self) -> dict[str, Any]:
        return {
            'kind': self.kind.value,
            'name': self.name,
            'of_type': self.of_type.to_dict() if self.of_type is not None else None,
        }


@dataclass
class ArgumentDef:
    """A field argument."""
    name: str
    type: TypeRef
    description: Optional[str] = None
    default_value: Optional[str] = None  # GraphQL literal, e.g. '"abc"' or '10'

    def __str__(self) -> str:
        default = f" = {self.default_value}" if self.default_value else ""
        return f"{self.name}: {self.type}{default}"

    def copy(self) -> "ArgumentDef":
        return ArgumentDef(
            name=self.name,
            type=self.type.copy(),
            description=self.description,
            default_value=self.default_value,
        )


@dataclass
class FieldDef:
    """
    A field of an object, interface or input object type.

    ``args`` is ``None`` for input object fields, which cannot take arguments.
    """
    name: str
    type: TypeRef
    description: Optional[str] = None
    args: Optional[list[ArgumentDef]] = field(default_factory=list)
    default_value: Optional[str] = None

    def __str__(self) -> str:
        args = ""
        if self.args:
            args = "(" + ", ".join(str(arg) for arg in self.args) + ")"
        return f"{self.name}{args}: {self.type}"

    def get_arg(self, name: str) -> Optional[ArgumentDef]:
        for arg in self.args or []:
            if arg.name == name:
                return arg
        return None

    def copy(self) -> "FieldDef":
        return FieldDef(
            name=self.name,
            type=self.type.copy(),
            description=self.description,
            args=[arg.copy() for arg in self.args] if self.args is not None else None,
            default_value=self.default_value,
        )


@dataclass
class EnumValueDef:
    """A value of an enum type."""
    name: str
    description: Optional[str] = None
    deprecated: bool = False
    deprecation_reason: Optional[str] = None

    @property
    def deprecation_status(self) -> str:
        if self.deprecated:
            return f"is deprecated ({self.deprecation_reason})"
        return "is not deprecated"

    def copy(self) -> "EnumValueDef":
        return EnumValueDef(
            name=self.name,
            description=self.description,
            deprecated=self.deprecated,
            deprecation_reason=self.deprecation_reason,
        )


@dataclass
class TypeDef:
    """A named type of a schema graph."""
    name: str
    kind: TypeKind
    description: Optional[str] = None
    fields: dict[str, FieldDef] = field(default_factory=dict)  # object/interface/input
    interfaces: list[str] = field(default_factory=list)  # object only
    possible_types: list[str] = field(default_factory=list)  # union only
    enum_values: list[EnumValueDef] = field(default_factory=list)  # enum only

    def __str__(self) -> str:
        return self.name

    def get_enum_value(self, name: str) -> Optional[EnumValueDef]:
        for value in self.enum_values:
            if value.name == name:
                return value
        return None

    def copy(self) -> "TypeDef":
        return TypeDef(
            name=self.name,
            kind=self.kind,
            description=self.description,
            fields={name: f.copy() for name, f in self.fields.items()},
            interfaces=list(self.interfaces),
            possible_types=list(self.possible_types),
            enum_values=[value.copy() for value in self.enum_values],
        )

    def diff(self, other: Optional["TypeDef"], options: Optional[Any] = None) -> list:
        from ..diff.engine import diff_type

        return diff_type(self, other, options)

    def merge(self, other: Optional["TypeDef"]) -> "TypeDef":
        from ..merge.engine import merge_type

        return merge_type(self, other)

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'kind': self.kind.value,
            'description': self.description,
            'fields': {
                name: {
                    'name': f.name,
                    'type': str(f.type),
                    'description': f.description,
                    'args': [
                        {'name': a.name, 'type': str(a.type), 'description': a.description,
                         'default_value': a.default_value}
                        for a in f.args
                    ] if f.args is not None else None,
                    'default_value': f.default_value,
                }
                for name, f in self.fields.items()
            },
            'interfaces': self.interfaces,
            'possible_types': self.possible_types,
            'enum_values': [
                {'name': v.name, 'description': v.description, 'deprecated': v.deprecated,
                 'deprecation_reason': v.deprecation_reason}
                for v in self.enum_values
            ],
        }


@dataclass
class SchemaGraph:
    """Name-keyed collection of the types of one schema."""
    types: dict[str, TypeDef] = field(default_factory=dict)
    query_type: Optional[str] = None
    mutation_type: Optional[str] = None
    subscription_type: Optional[str] = None

    def get_type(self, name: str) -> Optional[TypeDef]:
        return self.types.get(name)

    def copy(self) -> "SchemaGraph":
        return SchemaGraph(
            types={name: type_def.copy() for name, type_def in self.types.items()},
            query_type=self.query_type,
            mutation_type=self.mutation_type,
            subscription_type=self.subscription_type,
        )

    def diff(self, other: Optional["SchemaGraph"], options: Optional[Any] = None) -> list:
        from ..diff.engine import diff_schema

        return diff_schema(self, other, options)

    def merge(self, other: Optional["SchemaGraph"]) -> "SchemaGraph":
        from ..merge.engine import merge_schema

        return merge_schema(self, other)

    def to_dict(self) -> dict[str, Any]:
        return {
            'query_type': self.query_type,
            'mutation_type': self.mutation_type,
            'subscription_type': self.subscription_type,
            'types': {name: type_def.to_dict() for name, type_def in self.types.items()},
        }
