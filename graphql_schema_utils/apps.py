"""
Django app configuration for graphql-schema-utils.

Installing the app exposes the ``diff_schema`` and ``merge_schema``
management commands and validates the ``GRAPHQL_SCHEMA_UTILS`` setting.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for graphql-schema-utils."""

    name = "graphql_schema_utils"
    verbose_name = "GraphQL Schema Utils"
    label = "graphql_schema_utils"

    def ready(self):
        """Validate library configuration after Django has loaded."""
        from .config_proxy import settings_proxy

        settings_proxy.clear_cache()
        results = settings_proxy.validate()
        for warning in results["warnings"]:
            logger.warning(f"GRAPHQL_SCHEMA_UTILS: {warning}")
        for error in results["errors"]:
            logger.error(f"GRAPHQL_SCHEMA_UTILS: {error}")
