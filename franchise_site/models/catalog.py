"""
Franchise catalog view models.

Card representation used by the catalog page, the franchise grid block and
the public listing endpoint, plus the filter state driving them.

Dependencies: pydantic
System role: Catalog API contracts
"""

import enum
import uuid

from pydantic import BaseModel, Field


class SortOption(str, enum.Enum):
    """
    Catalog sort orders.

    RELEVANCE: Keep the incoming order
    BEST: Highest "Best Score" tag first, unscored last
    CASH: Lowest cash required first
    """

    RELEVANCE = "relevance"
    BEST = "best"
    CASH = "cash"


class CardTag(BaseModel):
    """Tag badge shown on a franchise card."""

    name: str
    color: str | None = None
    text_color: str | None = "#ffffff"


class FranchiseCard(BaseModel):
    """Flattened franchise as rendered in grids and listings."""

    id: uuid.UUID | None = None
    name: str
    category: str = "Uncategorized"
    category_icon: str | None = None
    description: str = "View details for this franchise"
    cash_required: str = ""
    min_investment: float | None = None
    max_investment: float | None = None
    tags: list[CardTag] = Field(default_factory=list)
    logo_url: str | None = None
    is_featured: bool = False
    is_sponsored: bool = False
    is_top_pick: bool = False
    agent_name: str | None = None
    agent_title: str | None = None

    @property
    def href(self) -> str:
        return f"/franchises/{self.id}" if self.id else "/franchises"

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]


class FilterState(BaseModel):
    """Catalog filter and sort selection."""

    search: str = ""
    categories: list[str] = Field(default_factory=list, description="Empty or ['all'] for no filter")
    max_cash: str | None = Field(None, description="Raw max cash input; non-numeric values are ignored")
    sort_by: SortOption = SortOption.RELEVANCE
    only_featured: bool = False
    only_sponsored: bool = False
    only_top_pick: bool = False


class CatalogPage(BaseModel):
    """Filtered, paginated catalog listing."""

    items: list[FranchiseCard]
    total: int = Field(description="Number of cards matching the filters")
    total_unfiltered: int = Field(description="Number of published franchises")
    page: int
    per_page: int
    pages: int
    has_more: bool
    categories: list[str]
