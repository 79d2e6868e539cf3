"""
Settings used by the graphql-schema-utils test suite.
"""

SECRET_KEY = "graphql-schema-utils-test-key"
DEBUG = False

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "graphene_django",
    "graphql_schema_utils",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True

GRAPHENE = {
    "SCHEMA": None,
}

GRAPHQL_SCHEMA_UTILS = {}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "graphql_schema_utils": {"handlers": ["console"], "level": "WARNING"},
    },
}
