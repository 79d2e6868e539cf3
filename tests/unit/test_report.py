import pytest

from graphql_schema_utils.diff import DiffKind, DiffOptions, DiffReport, build_report
from graphql_schema_utils.graph import load_schema

THIS = """
type Query {
    item(id: ID!): Item
}
type Item {
    id: ID!
    name: String
}
"""

OTHER = """
type Query {
    item(id: ID!): Item
}
"Catalog entry"
type Item {
    id: ID!
    title: String
}
"""


@pytest.fixture
def report():
    return build_report(load_schema(THIS), load_schema(OTHER), DiffOptions("v1", "v2"))


@pytest.mark.unit
def test_report_counts(report):
    assert report.this_label == "v1"
    assert report.other_label == "v2"
    assert report.total_changes == 3
    assert len(report.breaking_changes) == 1
    assert len(report.compatible_changes) == 2
    assert not report.is_backward_compatible
    assert len(report.get_records_by_kind(DiffKind.FIELD_MISSING)) == 2
    assert len(report.get_records_by_kind(DiffKind.TYPE_DESCRIPTION_DIFF)) == 1


@pytest.mark.unit
def test_report_to_dict(report):
    data = report.to_dict()

    assert data["summary"] == {
        "total_changes": 3,
        "breaking_changes": 1,
        "compatible_changes": 2,
        "backward_compatible": False,
    }
    breaking = [r for r in data["records"] if not r["backward_compatible"]]
    assert breaking == [
        {
            "diff_kind": "FieldMissing",
            "type_name": "Item",
            "description": "Field missing from v2: `Item.name: String`.",
            "backward_compatible": False,
            "this_field": None,
            "other_field": None,
        }
    ]


@pytest.mark.unit
def test_report_text_and_markdown(report):
    text = report.to_text()
    markdown = report.to_markdown()

    assert "BREAKING FieldMissing: Field missing from v2: `Item.name: String`." in text
    assert text.endswith("3 differences (1 breaking)")
    assert markdown.startswith("# Schema Diff Report")
    assert "**From:** v1" in markdown
    assert "## Breaking Changes" in markdown
    assert "## Backward Compatible Changes" in markdown
    assert "- **Backward Compatible:** No" in markdown


@pytest.mark.unit
def test_empty_report_is_backward_compatible():
    graph = load_schema(THIS)

    report = build_report(graph, graph)

    assert report.records == []
    assert report.is_backward_compatible
    assert report.this_label == "this schema"
    assert "## Breaking Changes" not in report.to_markdown()
    assert isinstance(report, DiffReport)
