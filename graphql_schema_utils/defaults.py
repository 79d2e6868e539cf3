"""
Default configuration for the graphql-schema-utils library.

Projects override any of these values through the ``GRAPHQL_SCHEMA_UTILS``
Django setting, using the same nested layout.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"


LIBRARY_DEFAULTS: dict[str, Any] = {
    "diff_settings": {
        # Labels used in rendered descriptions for graph-level comparisons
        "schema_labels": {"this": "this schema", "other": "other schema"},
        # Labels used when two single types are compared directly
        "type_labels": {"this": "this type", "other": "other type"},
        "union_separator": " | ",
        "interface_separator": ", ",
    },
    "loader_settings": {
        "include_introspection_types": False,
    },
    "report_settings": {
        "default_format": "text",
        "json_indent": 2,
        "fail_on_breaking": False,
    },
}
