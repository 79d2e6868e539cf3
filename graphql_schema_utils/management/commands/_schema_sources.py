"""
Shared loading logic for the schema management commands.
"""

from typing import Optional

from django.core.management.base import CommandError
from graphene_django.settings import graphene_settings

from ...exceptions import SchemaLoadError
from ...graph import SchemaGraph, load_schema, load_schema_file


def load_receiver(path: Optional[str]) -> SchemaGraph:
    """Load ``path``, or the project's GRAPHENE schema when no path is given."""
    if path:
        return load_path(path)
    schema = graphene_settings.SCHEMA
    if not schema:
        raise CommandError("GRAPHENE.SCHEMA is not configured; pass --this explicitly.")
    try:
        return load_schema(schema)
    except SchemaLoadError as e:
        raise CommandError(str(e)) from e


def load_path(path: str) -> SchemaGraph:
    try:
        return load_schema_file(path)
    except SchemaLoadError as e:
        raise CommandError(str(e)) from e


def write_output(command, output: str, output_file: Optional[str]) -> None:
    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(output)
        command.stdout.write(command.style.SUCCESS(f"Output written to {output_file}"))
    else:
        command.stdout.write(output)
