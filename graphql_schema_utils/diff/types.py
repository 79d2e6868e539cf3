"""
Type definitions for schema diffs.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from ..config_proxy import get_label
from ..graph.types import FieldDef, TypeDef


class DiffKind(Enum):
    """Kinds of differences between two schemas or types."""
    TYPE_DESCRIPTION_DIFF = "TypeDescriptionDiff"
    TYPE_MISSING = "TypeMissing"
    TYPE_NAME_DIFF = "TypeNameDiff"
    BASE_TYPE_DIFF = "BaseTypeDiff"
    UNION_TYPE_DIFF = "UnionTypeDiff"
    INTERFACE_DIFF = "InterfaceDiff"
    FIELD_DESCRIPTION_DIFF = "FieldDescriptionDiff"
    FIELD_MISSING = "FieldMissing"
    FIELD_DIFF = "FieldDiff"
    ARG_DESCRIPTION_DIFF = "ArgDescriptionDiff"
    ARG_DIFF = "ArgDiff"
    ENUM_DIFF = "EnumDiff"


class DiffLevel(Enum):
    """Level a comparison starts at; selects the default labels."""
    SCHEMA = "schema_labels"
    TYPE = "type_labels"


@dataclass(frozen=True)
class DiffRecord:
    """
    One difference between two types.

    ``backward_compatible`` is read as "this" changing into "other": removing
    something is breaking, adding it is not.
    """
    this_type: Optional[TypeDef]
    other_type: Optional[TypeDef]
    diff_kind: DiffKind
    description: str
    backward_compatible: bool
    this_field: Optional[FieldDef] = None
    other_field: Optional[FieldDef] = None

    def __str__(self) -> str:
        return f'[diffType={self.diff_kind.value}, description="{self.description}"]'

    @property
    def dedupe_key(self) -> tuple[DiffKind, str]:
        return (self.diff_kind, self.description)

    @property
    def type_name(self) -> Optional[str]:
        source = self.this_type or self.other_type
        return source.name if source is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            'diff_kind': self.diff_kind.value,
            'type_name': self.type_name,
            'description': self.description,
            'backward_compatible': self.backward_compatible,
            'this_field': self.this_field.name if self.this_field else None,
            'other_field': self.other_field.name if self.other_field else None,
        }


@dataclass(frozen=True)
class DiffOptions:
    """Display labels used in rendered descriptions. They never change what is reported."""
    label_for_this: Optional[str] = None
    label_for_other: Optional[str] = None

    def resolve(self, level: DiffLevel) -> "DiffOptions":
        """Fill missing labels with the configured defaults for ``level``."""
        return replace(
            self,
            label_for_this=self.label_for_this or get_label(level.value, "this"),
            label_for_other=self.label_for_other or get_label(level.value, "other"),
        )
