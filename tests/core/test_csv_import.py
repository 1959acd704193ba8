"""
Tests for franchise CSV parsing and row validation.

System role: Verification of bulk import validation
"""

import csv
import io

import pytest

from franchise_site.core.csv_import import (
    TEMPLATE_COLUMNS,
    parse_bool,
    read_csv,
    template_csv,
    validate_row,
)
from franchise_site.core.exceptions import ImportFileError, ValidationError

HEADER = "businessName,description,category,minInvestment,maxInvestment,tags,status"


def valid_row(**overrides: str) -> dict[str, str]:
    row = {
        "businessName": "Acme Fitness",
        "description": "Gyms",
        "category": "Fitness",
        "minInvestment": "$50,000",
        "maxInvestment": "90000",
    }
    row.update(overrides)
    return row


class TestReadCsv:
    def test_parses_rows_and_strips_bom(self) -> None:
        content = ("\ufeff" + HEADER + "\nAcme , Gyms,Fitness,1,2,Low Cost,draft\n").encode("utf-8")

        rows = read_csv(content)

        assert rows == [
            {
                "businessName": "Acme",
                "description": "Gyms",
                "category": "Fitness",
                "minInvestment": "1",
                "maxInvestment": "2",
                "tags": "Low Cost",
                "status": "draft",
            }
        ]

    def test_missing_columns(self) -> None:
        with pytest.raises(ImportFileError) as exc_info:
            read_csv(b"businessName,description\nA,B\n")

        assert "category" in exc_info.value.message
        assert exc_info.value.details["missing_columns"] == ["category", "minInvestment", "maxInvestment"]

    def test_empty_file(self) -> None:
        with pytest.raises(ImportFileError, match="empty"):
            read_csv(b"")

    def test_non_utf8(self) -> None:
        with pytest.raises(ImportFileError, match="UTF-8"):
            read_csv(b"\xff\xfe\x00bad")


@pytest.mark.parametrize("value", ["true", "YES", "1", "y"])
def test_parse_bool_true(value: str) -> None:
    assert parse_bool(value, "isFeatured") is True


@pytest.mark.parametrize("value", ["false", "No", "0", "n", "", None])
def test_parse_bool_false(value) -> None:
    assert parse_bool(value, "isFeatured") is False


def test_parse_bool_rejects_other_values() -> None:
    with pytest.raises(ValidationError, match="isSponsored"):
        parse_bool("maybe", "isSponsored")


class TestValidateRow:
    def test_valid_row_defaults(self) -> None:
        row = validate_row(2, valid_row(tags="Low Cost; Home Based;Low Cost", agentEmail="Agent@Example.com"))

        assert row.row_number == 2
        assert row.investment_min == 50000.0
        assert row.investment_max == 90000.0
        assert row.tags == ["Low Cost", "Home Based"]
        assert row.agent_email == "agent@example.com"
        assert row.status == "draft"
        assert row.is_featured is False

    def test_missing_required_fields(self) -> None:
        with pytest.raises(ValidationError, match="Missing required fields: description, category"):
            validate_row(3, valid_row(description="", category=""))

    def test_min_greater_than_max(self) -> None:
        with pytest.raises(ValidationError, match="cannot be greater"):
            validate_row(2, valid_row(minInvestment="100", maxInvestment="50"))

    def test_non_numeric_amount(self) -> None:
        with pytest.raises(ValidationError, match="maxInvestment must be a number"):
            validate_row(2, valid_row(maxInvestment="lots"))

    @pytest.mark.parametrize(
        ("column", "value"),
        [("minInvestment", "nan"), ("maxInvestment", "inf"), ("maxInvestment", "-Infinity")],
    )
    def test_non_finite_amount(self, column: str, value: str) -> None:
        with pytest.raises(ValidationError, match=f"{column} must be a number"):
            validate_row(2, valid_row(**{column: value}))

    def test_invalid_status(self) -> None:
        with pytest.raises(ValidationError, match="Invalid status 'live'"):
            validate_row(2, valid_row(status="live"))

    def test_status_is_case_insensitive(self) -> None:
        assert validate_row(2, valid_row(status="Published")).status == "published"


def test_template_csv_has_header_and_example() -> None:
    rows = list(csv.reader(io.StringIO(template_csv())))

    assert tuple(rows[0]) == TEMPLATE_COLUMNS
    assert len(rows) == 2
    # The example row must itself be importable
    validate_row(2, dict(zip(rows[0], rows[1])))
