import pytest

from graphql_schema_utils.config_proxy import (
    SettingsProxy,
    clear_runtime_settings,
    configure_runtime_settings,
    get_label,
    get_setting,
)
from graphql_schema_utils.diff import diff_schema, diff_type
from graphql_schema_utils.graph import load_schema
from graphql_schema_utils.testing import override_schema_utils_settings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_runtime_settings():
    clear_runtime_settings()
    yield
    clear_runtime_settings()


def test_defaults_are_used_without_overrides():
    assert get_setting("diff_settings.schema_labels.this") == "this schema"
    assert get_setting("diff_settings.type_labels.other") == "other type"
    assert get_setting("report_settings.default_format") == "text"
    assert get_setting("diff_settings.unknown", "fallback") == "fallback"


def test_django_setting_changes_default_labels():
    this = load_schema("type Query { a: String }")
    other = load_schema("type Query { b: String }")

    with override_schema_utils_settings(
        diff_settings={"schema_labels": {"this": "main", "other": "feature"}}
    ):
        descriptions = [d.description for d in diff_schema(this, other)]
        assert get_setting("diff_settings.union_separator") == " | "

    assert "Field missing from feature: `Query.a: String`." in descriptions
    assert "Field missing from main: `Query.b: String`." in descriptions


def test_type_labels_apply_to_type_level_diffs():
    this = load_schema('"Old" scalar Date').types["Date"]
    other = load_schema('"New" scalar Date').types["Date"]

    with override_schema_utils_settings(
        diff_settings={"type_labels": {"this": "left", "other": "right"}}
    ):
        (record,) = diff_type(this, other)

    assert record.description == 'Description diff on type Date. left: `"Old"` vs. right: `"New"`.'


def test_blank_label_falls_back_to_default():
    with override_schema_utils_settings(
        diff_settings={"type_labels": {"this": "", "other": "right"}}
    ):
        assert get_label("type_labels", "this") == "this type"
        assert get_label("type_labels", "other") == "right"


def test_runtime_settings_take_precedence_and_merge():
    with override_schema_utils_settings(report_settings={"json_indent": 8}):
        assert get_setting("report_settings.json_indent") == 8

    configure_runtime_settings(report_settings={"json_indent": 4})
    configure_runtime_settings(report_settings={"fail_on_breaking": True})

    assert get_setting("report_settings.json_indent") == 4
    assert get_setting("report_settings.fail_on_breaking") is True
    assert get_setting("report_settings.default_format") == "text"

    configure_runtime_settings(clear_existing=True, loader_settings={"include_introspection_types": True})
    assert get_setting("report_settings.json_indent") == 2


def test_override_helper_suspends_runtime_settings():
    configure_runtime_settings(report_settings={"json_indent": 4})

    with override_schema_utils_settings(report_settings={"json_indent": 6}):
        assert get_setting("report_settings.json_indent") == 6

    assert get_setting("report_settings.json_indent") == 4


def test_validate_reports_errors_and_warnings():
    assert SettingsProxy().validate()["valid"] is True

    configure_runtime_settings(
        diff_settings={"schema_labels": {"this": "", "other": "x"}, "type_labels": "bad"},
        report_settings={"default_format": "pdf"},
    )
    results = SettingsProxy().validate()

    assert results["valid"] is False
    assert "Unknown report format 'pdf'" in results["errors"]
    assert "Setting 'diff_settings.type_labels' must be a dict" in results["errors"]
    assert any("schema_labels.this" in warning for warning in results["warnings"])
