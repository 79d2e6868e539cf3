import json
from io import StringIO
from unittest.mock import patch

import graphene
import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from graphql_schema_utils.graph import load_schema

pytestmark = pytest.mark.integration


class Query(graphene.ObjectType):
    pet = graphene.String(name=graphene.String())


@pytest.fixture
def schema_files(tmp_path, pet_sdl):
    this_file = tmp_path / "this.graphql"
    this_file.write_text(pet_sdl, encoding="utf-8")
    other_file = tmp_path / "other.graphql"
    other_file.write_text(
        pet_sdl.replace("union Pet = Cat | Dog", "union Pet = Fish").replace("    leash: String\n", ""),
        encoding="utf-8",
    )
    return this_file, other_file


def test_diff_schema_text_output(schema_files):
    this_file, other_file = schema_files
    out = StringIO()

    call_command("diff_schema", str(other_file), this_file=str(this_file), stdout=out)
    output = out.getvalue()

    assert "BREAKING FieldMissing: Field missing from other schema: `Dog.leash: String`." in output
    assert "UnionTypeDiff" in output
    assert "2 differences (1 breaking)" in output


def test_diff_schema_json_output_with_labels(schema_files):
    this_file, other_file = schema_files
    out = StringIO()

    call_command(
        "diff_schema",
        str(other_file),
        this_file=str(this_file),
        format="json",
        label_this="v1",
        label_other="v2",
        stdout=out,
    )
    data = json.loads(out.getvalue())

    assert data["this_label"] == "v1"
    assert data["summary"]["breaking_changes"] == 1
    assert "Field missing from v2: `Dog.leash: String`." in [r["description"] for r in data["records"]]


def test_diff_schema_markdown_to_file(schema_files, tmp_path):
    this_file, other_file = schema_files
    report_file = tmp_path / "report.md"

    call_command(
        "diff_schema",
        str(other_file),
        this_file=str(this_file),
        format="markdown",
        output_file=str(report_file),
        stdout=StringIO(),
    )

    content = report_file.read_text(encoding="utf-8")
    assert content.startswith("# Schema Diff Report")
    assert "## Breaking Changes" in content


def test_diff_schema_fail_on_breaking(schema_files):
    this_file, other_file = schema_files

    with pytest.raises(CommandError, match="1 breaking changes found"):
        call_command(
            "diff_schema",
            str(other_file),
            this_file=str(this_file),
            fail_on_breaking=True,
            stdout=StringIO(),
        )

    # identical schemas never fail
    call_command(
        "diff_schema", str(this_file), this_file=str(this_file), fail_on_breaking=True, stdout=StringIO()
    )


def test_diff_schema_defaults_to_graphene_schema(tmp_path):
    other_file = tmp_path / "other.graphql"
    other_file.write_text("type Query { pet(name: String): String }", encoding="utf-8")

    with patch("graphql_schema_utils.management.commands._schema_sources.graphene_settings") as mock_settings:
        mock_settings.SCHEMA = graphene.Schema(query=Query)
        out = StringIO()
        call_command("diff_schema", str(other_file), stdout=out)

    assert "0 differences (0 breaking)" in out.getvalue()


def test_missing_receiver_schema_raises(tmp_path):
    other_file = tmp_path / "other.graphql"
    other_file.write_text("type Query { a: String }", encoding="utf-8")

    with patch("graphql_schema_utils.management.commands._schema_sources.graphene_settings") as mock_settings:
        mock_settings.SCHEMA = None
        with pytest.raises(CommandError, match="GRAPHENE.SCHEMA"):
            call_command("diff_schema", str(other_file), stdout=StringIO())


def test_unreadable_schema_file_raises(tmp_path):
    with pytest.raises(CommandError):
        call_command(
            "diff_schema", str(tmp_path / "missing.graphql"), this_file=str(tmp_path / "x.graphql")
        )


def test_merge_schema_sdl_output(schema_files):
    this_file, other_file = schema_files
    out = StringIO()

    call_command("merge_schema", str(other_file), this_file=str(this_file), stdout=out)
    output = out.getvalue()

    assert "union Pet = Cat | Dog | Fish" in output
    assert "leash: String" in output


def test_merge_schema_json_output(schema_files):
    this_file, other_file = schema_files
    out = StringIO()

    call_command("merge_schema", str(other_file), this_file=str(this_file), json=True, stdout=out)
    data = json.loads(out.getvalue())

    assert data["query_type"] == "Query"
    assert "Pet" in data["types"]


def test_merge_schema_kind_mismatch_raises(tmp_path):
    this_file = tmp_path / "this.graphql"
    this_file.write_text("type Query { a: Thing } scalar Thing", encoding="utf-8")
    other_file = tmp_path / "other.graphql"
    other_file.write_text("type Query { a: Thing } type Thing { b: String }", encoding="utf-8")

    with pytest.raises(CommandError, match="Cannot merge"):
        call_command("merge_schema", str(other_file), this_file=str(this_file), stdout=StringIO())


def test_merged_output_loads_back(schema_files, tmp_path):
    this_file, other_file = schema_files
    merged_file = tmp_path / "merged.graphql"

    call_command(
        "merge_schema",
        str(other_file),
        this_file=str(this_file),
        output_file=str(merged_file),
        stdout=StringIO(),
    )

    merged = load_schema(merged_file.read_text(encoding="utf-8"))
    assert merged.types["Pet"].possible_types == ["Cat", "Dog", "Fish"]
