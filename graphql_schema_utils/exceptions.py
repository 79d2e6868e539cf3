"""
Custom exceptions for schema comparison and merging.

This module defines the error types raised by the diff and merge engines
and by the schema loader.
"""

from typing import Any, Optional


class SchemaUtilsError(Exception):
    """Base exception for graphql-schema-utils errors."""

    pass


class InvalidComparisonTarget(SchemaUtilsError, TypeError):
    """Raised when the other side of a diff/merge is not a comparable graph or type."""

    def __init__(self, message: str, target: Optional[Any] = None):
        self.target = target
        super().__init__(message)


class IncompatibleKindMerge(SchemaUtilsError, TypeError):
    """Raised when two same-named types of different kinds are merged."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        this_kind: Optional[Any] = None,
        other_kind: Optional[Any] = None,
    ):
        self.type_name = type_name
        self.this_kind = this_kind
        self.other_kind = other_kind
        super().__init__(message)


class SchemaLoadError(SchemaUtilsError, ValueError):
    """Raised when a source cannot be turned into a schema graph."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)
