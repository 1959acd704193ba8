"""
Tests for the audit log diff engine.

System role: Verification of change detection and display compaction
"""

from franchise_site.core.audit_diff import (
    FieldChange,
    build_compact_changes,
    build_delete_summary,
    format_value_for_display,
    get_changed_fields,
)

AGENT_ID = "3f2b8c1e-4a5d-4e6f-9a8b-7c6d5e4f3a2b"


class TestGetChangedFields:
    def test_create_reports_every_field(self) -> None:
        changes = get_changed_fields(None, {"name": "Acme", "status": "draft"})

        assert changes == [
            FieldChange("name", None, "Acme"),
            FieldChange("status", None, "draft"),
        ]

    def test_ignores_bookkeeping_fields(self) -> None:
        before = {"name": "Acme", "updated_at": "2026-01-01", "updatedBy": "a"}
        after = {"name": "Acme", "updated_at": "2026-02-01", "updatedBy": "b"}

        assert get_changed_fields(before, after) == []

    def test_nested_dicts_use_dotted_paths(self) -> None:
        before = {"investment": {"min": 50000, "max": 90000}}
        after = {"investment": {"min": 60000, "max": 90000}}

        assert get_changed_fields(before, after) == [FieldChange("investment.min", 50000, 60000)]

    def test_key_order_does_not_count_as_change(self) -> None:
        before = {"tags": [{"a": 1, "b": 2}]}
        after = {"tags": [{"b": 2, "a": 1}]}

        assert get_changed_fields(before, after) == []

    def test_list_changes_are_whole_values(self) -> None:
        changes = get_changed_fields({"tag_ids": ["x"]}, {"tag_ids": ["x", "y"]})

        assert changes == [FieldChange("tag_ids", ["x"], ["x", "y"])]


class TestFormatValueForDisplay:
    def test_id_list_becomes_count(self) -> None:
        assert format_value_for_display([AGENT_ID]) == "[1 item]"
        assert format_value_for_display([AGENT_ID, AGENT_ID]) == "[2 items]"

    def test_single_id_is_masked(self) -> None:
        assert format_value_for_display(AGENT_ID) == "[ID]"

    def test_large_dict_is_collapsed(self) -> None:
        value = {f"key{i}": "x" * 20 for i in range(10)}
        assert format_value_for_display(value) == "[Complex Object]"

    def test_plain_values_pass_through(self) -> None:
        assert format_value_for_display("Acme Fitness") == "Acme Fitness"
        assert format_value_for_display(42) == 42
        assert format_value_for_display({"min": 1}) == {"min": 1}
        assert format_value_for_display(["Low Cost"]) == ["Low Cost"]


def test_build_compact_changes() -> None:
    compact = build_compact_changes(
        [FieldChange("agent_id", None, AGENT_ID), FieldChange("status", "draft", "published")]
    )

    assert compact == {
        "agent_id": {"before": None, "after": "[ID]"},
        "status": {"before": "draft", "after": "published"},
    }


def test_build_delete_summary_keeps_identifying_fields() -> None:
    summary = build_delete_summary(
        {"id": "abc", "business_name": "Acme", "description": "long text", "email": None}
    )

    assert summary == {"summary": "Record deleted", "id": "abc", "business_name": "Acme"}
