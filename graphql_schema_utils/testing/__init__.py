"""
Public test utilities for graphql-schema-utils.
"""

from .harness import override_schema_utils_settings

__all__ = [
    "override_schema_utils_settings",
]
