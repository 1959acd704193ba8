"""
Audit log diff engine.

Computes field-level differences between two snapshots of a record and
compacts them for storage in the audit_logs collection.

Dependencies: None (pure domain layer)
System role: Change detection for audit logging hooks
"""

import json
from dataclasses import dataclass
from typing import Any

EXCLUDED_FIELDS = frozenset(
    {
        "updated_at",
        "created_at",
        "updated_by",
        "created_by",
        "updated_by_id",
        "created_by_id",
        "updatedAt",
        "createdAt",
        "updatedBy",
        "createdBy",
    }
)

DELETE_SUMMARY_FIELDS = ("id", "name", "title", "business_name", "email")

COMPLEX_OBJECT_LIMIT = 200


@dataclass(frozen=True)
class FieldChange:
    """A single changed field with its dotted path."""

    field: str
    before: Any
    after: Any


def _is_plain_dict(value: Any) -> bool:
    return isinstance(value, dict)


def _canonical(value: Any) -> str:
    # Key order must not produce spurious diffs
    return json.dumps(value, sort_keys=True, default=str)


def _nested_changes(before: dict | None, after: dict | None, prefix: str) -> list[FieldChange]:
    before = before or {}
    after = after or {}
    changes: list[FieldChange] = []

    for key in dict.fromkeys([*before.keys(), *after.keys()]):
        path = f"{prefix}.{key}" if prefix else key
        old, new = before.get(key), after.get(key)
        if _is_plain_dict(old) and _is_plain_dict(new):
            changes.extend(_nested_changes(old, new, path))
        elif _canonical(old) != _canonical(new):
            changes.append(FieldChange(path, old, new))
    return changes


def get_changed_fields(before: dict | None, after: dict | None) -> list[FieldChange]:
    """
    Compare two record snapshots.

    Top-level bookkeeping fields (timestamps and created/updated by) are
    ignored. When both sides of a field are dicts the comparison recurses and
    reports dotted paths (``investment.min``). Everything else is compared by
    canonical JSON equality.

    Args:
        before: Snapshot prior to the change (None for creates)
        after: Snapshot after the change

    Returns:
        list[FieldChange]: Changed fields in first-seen key order
    """
    before = before or {}
    after = after or {}
    changes: list[FieldChange] = []

    for key in dict.fromkeys([*before.keys(), *after.keys()]):
        if key in EXCLUDED_FIELDS:
            continue
        old, new = before.get(key), after.get(key)
        if _is_plain_dict(old) and _is_plain_dict(new):
            changes.extend(_nested_changes(old, new, key))
        elif _canonical(old) != _canonical(new):
            changes.append(FieldChange(key, old, new))
    return changes


def _looks_like_id(value: Any) -> bool:
    return isinstance(value, str) and "-" in value and len(value) > 20


def format_value_for_display(value: Any) -> Any:
    """
    Simplify a value for the audit log view.

    - a non-empty list of id-like strings becomes ``"[N item(s)]"``
    - a single id-like string becomes ``"[ID]"``
    - a dict whose JSON exceeds 200 characters becomes ``"[Complex Object]"``
    """
    if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
        if all("-" in v or len(v) > 20 for v in value):
            count = len(value)
            return f"[{count} item{'' if count == 1 else 's'}]"

    if _looks_like_id(value):
        return "[ID]"

    if _is_plain_dict(value) and len(_canonical(value)) > COMPLEX_OBJECT_LIMIT:
        return "[Complex Object]"

    return value


def build_compact_changes(changes: list[FieldChange]) -> dict[str, dict[str, Any]]:
    """Map each changed field to its display-formatted before/after pair."""
    return {
        change.field: {
            "before": format_value_for_display(change.before),
            "after": format_value_for_display(change.after),
        }
        for change in changes
    }


def build_delete_summary(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Summary stored for deletions: key identifying fields that are present."""
    summary: dict[str, Any] = {"summary": "Record deleted"}
    for field in DELETE_SUMMARY_FIELDS:
        if snapshot.get(field) is not None:
            summary[field] = snapshot[field]
    return summary
