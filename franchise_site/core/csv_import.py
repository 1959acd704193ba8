"""
Franchise CSV parsing and row validation.

Turns an uploaded CSV into validated ImportRow records. Lookups that need
the database (industry, tags, agent) are resolved by the import service.

Dependencies: franchise_site.core.exceptions
System role: Bulk franchise import validation
"""

import csv
import io
import math
from dataclasses import dataclass, field

from franchise_site.core.exceptions import ImportFileError, ValidationError

REQUIRED_COLUMNS = ("businessName", "description", "category", "minInvestment", "maxInvestment")
OPTIONAL_COLUMNS = ("tags", "agentEmail", "isFeatured", "isSponsored", "isTopPick", "status")
TEMPLATE_COLUMNS = REQUIRED_COLUMNS + OPTIONAL_COLUMNS

VALID_STATUSES = ("draft", "published", "archived")
TRUE_VALUES = {"true", "yes", "1", "y"}
FALSE_VALUES = {"false", "no", "0", "n", ""}

# Header occupies line 1 of the file
FIRST_DATA_ROW = 2

TEMPLATE_EXAMPLE_ROW = {
    "businessName": "Example Fitness Studio",
    "description": "Boutique fitness franchise with a proven membership model.",
    "category": "Fitness",
    "minInvestment": "150000",
    "maxInvestment": "350000",
    "tags": "Low Cost;Home Based",
    "agentEmail": "",
    "isFeatured": "false",
    "isSponsored": "false",
    "isTopPick": "false",
    "status": "draft",
}


@dataclass
class ImportRow:
    """A validated CSV row ready to be written."""

    row_number: int
    business_name: str
    description: str
    category: str
    investment_min: float
    investment_max: float
    tags: list[str] = field(default_factory=list)
    agent_email: str | None = None
    is_featured: bool = False
    is_sponsored: bool = False
    is_top_pick: bool = False
    status: str = "draft"


@dataclass
class RowError:
    """A row that could not be imported."""

    row: int
    business_name: str
    error: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"row": self.row, "business_name": self.business_name, "error": self.error}


def read_csv(content: bytes) -> list[dict[str, str]]:
    """
    Decode and parse an uploaded CSV.

    Args:
        content: Raw upload bytes (UTF-8, optional BOM)

    Returns:
        list[dict[str, str]]: One dict per data row keyed by header

    Raises:
        ImportFileError: Undecodable content, empty file or missing columns
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ImportFileError("File must be UTF-8 encoded CSV") from e

    try:
        reader = csv.DictReader(io.StringIO(text))
        header = [name.strip() for name in (reader.fieldnames or [])]
        rows = [
            {(key or "").strip(): (value or "").strip() for key, value in raw.items() if key}
            for raw in reader
        ]
    except csv.Error as e:
        raise ImportFileError(f"Could not parse CSV: {e}") from e

    if not header:
        raise ImportFileError("CSV file is empty")

    missing = [column for column in REQUIRED_COLUMNS if column not in header]
    if missing:
        raise ImportFileError(
            f"Missing required columns: {', '.join(missing)}",
            details={"missing_columns": missing},
        )
    return rows


def parse_bool(value: str | None, column: str) -> bool:
    """Parse true/false/yes/no/1/0 (empty is false)."""
    normalized = (value or "").strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValidationError(f"Invalid boolean for {column}: {value}", field=column)


def _parse_amount(value: str, column: str) -> float:
    cleaned = value.replace("$", "").replace(",", "").strip()
    try:
        amount = float(cleaned)
    except ValueError as e:
        raise ValidationError(f"{column} must be a number", field=column) from e
    if not math.isfinite(amount):
        raise ValidationError(f"{column} must be a number", field=column)
    if amount < 0:
        raise ValidationError(f"{column} cannot be negative", field=column)
    return amount


def validate_row(row_number: int, raw: dict[str, str]) -> ImportRow:
    """
    Validate a single parsed CSV row.

    Args:
        row_number: Spreadsheet row number (data starts at 2)
        raw: Row values keyed by header

    Returns:
        ImportRow: Typed row

    Raises:
        ValidationError: First problem found in the row
    """
    missing = [column for column in REQUIRED_COLUMNS if not raw.get(column)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    investment_min = _parse_amount(raw["minInvestment"], "minInvestment")
    investment_max = _parse_amount(raw["maxInvestment"], "maxInvestment")
    if investment_min > investment_max:
        raise ValidationError(
            "minInvestment cannot be greater than maxInvestment", field="minInvestment"
        )

    status = (raw.get("status") or "draft").lower()
    if status not in VALID_STATUSES:
        raise ValidationError(
            f"Invalid status '{raw.get('status')}'. Must be one of: {', '.join(VALID_STATUSES)}",
            field="status",
        )

    tags = [tag.strip() for tag in (raw.get("tags") or "").split(";") if tag.strip()]

    return ImportRow(
        row_number=row_number,
        business_name=raw["businessName"],
        description=raw["description"],
        category=raw["category"],
        investment_min=investment_min,
        investment_max=investment_max,
        tags=list(dict.fromkeys(tags)),
        agent_email=(raw.get("agentEmail") or "").lower() or None,
        is_featured=parse_bool(raw.get("isFeatured"), "isFeatured"),
        is_sponsored=parse_bool(raw.get("isSponsored"), "isSponsored"),
        is_top_pick=parse_bool(raw.get("isTopPick"), "isTopPick"),
        status=status,
    )


def template_csv() -> str:
    """CSV template with the header and one example row."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=TEMPLATE_COLUMNS, lineterminator="\n")
    writer.writeheader()
    writer.writerow(TEMPLATE_EXAMPLE_ROW)
    return buffer.getvalue()
