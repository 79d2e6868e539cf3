"""
Configuration management for graphql-schema-utils.

This module provides a settings proxy that resolves configuration from
runtime overrides, the Django ``GRAPHQL_SCHEMA_UTILS`` setting and the
library defaults.
"""

import copy
from typing import Any, Optional

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS

SETTINGS_NAME = "GRAPHQL_SCHEMA_UTILS"

# Runtime overrides (avoids modifying Django settings)
_RUNTIME_SETTINGS: dict[str, Any] = {}


class SettingsProxy:
    """
    Proxy for accessing graphql-schema-utils settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Runtime overrides (via configure_runtime_settings)
    2. Django settings (GRAPHQL_SCHEMA_UTILS), when Django is configured
    3. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self):
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve (dot notation)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        if key in self._cache:
            return self._cache[key]

        for source in (_RUNTIME_SETTINGS, self._get_django_settings(), LIBRARY_DEFAULTS):
            value = self._get_nested_value(source, key)
            if value is not None:
                self._cache[key] = value
                return value

        self._cache[key] = default
        return default

    def _get_django_settings(self) -> dict[str, Any]:
        # Plain library use (no Django project) only sees runtime and defaults
        if not settings.configured:
            return {}
        return getattr(settings, SETTINGS_NAME, {}) or {}

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def clear_cache(self) -> None:
        """
        Clear the settings cache.
        """
        self._cache.clear()

    def validate(self) -> dict[str, Any]:
        """
        Validate current settings configuration.

        Returns:
            Dictionary with validation results
        """
        validation_results = {"valid": True, "errors": [], "warnings": []}

        for section in ("schema_labels", "type_labels"):
            labels = self.get(f"diff_settings.{section}")
            if not isinstance(labels, dict):
                validation_results["errors"].append(
                    f"Setting 'diff_settings.{section}' must be a dict"
                )
                validation_results["valid"] = False
                continue
            for side in ("this", "other"):
                if not isinstance(labels.get(side), str) or not labels.get(side):
                    validation_results["warnings"].append(
                        f"Setting 'diff_settings.{section}.{side}' is empty, "
                        f"falling back to the library default"
                    )

        report_format = self.get("report_settings.default_format")
        if report_format not in ("text", "json", "markdown"):
            validation_results["errors"].append(
                f"Unknown report format '{report_format}'"
            )
            validation_results["valid"] = False

        return validation_results


# Global settings proxy instance
settings_proxy = SettingsProxy()


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found

    Returns:
        The setting value from the highest priority source
    """
    return SettingsProxy().get(key, default)


def get_label(section: str, side: str) -> str:
    """Resolve a diff label, falling back to the library default when blank."""
    label = get_setting(f"diff_settings.{section}.{side}")
    if not isinstance(label, str) or not label:
        label = LIBRARY_DEFAULTS["diff_settings"][section][side]
    return label


def configure_runtime_settings(clear_existing: bool = False, **overrides: Any) -> None:
    """
    Configure runtime settings overrides.

    Args:
        clear_existing: Whether to clear existing runtime settings
        **overrides: Top-level sections to override (merged one level deep)
    """
    if clear_existing:
        _RUNTIME_SETTINGS.clear()

    for section, values in overrides.items():
        current = _RUNTIME_SETTINGS.get(section)
        if isinstance(current, dict) and isinstance(values, dict):
            merged = copy.deepcopy(current)
            merged.update(values)
            _RUNTIME_SETTINGS[section] = merged
        else:
            _RUNTIME_SETTINGS[section] = values

    settings_proxy.clear_cache()


def clear_runtime_settings() -> None:
    """
    Clear runtime settings overrides.
    """
    _RUNTIME_SETTINGS.clear()
    settings_proxy.clear_cache()
