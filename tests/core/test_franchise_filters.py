"""
Tests for the catalog filter and sort engine.

System role: Verification of catalog search, filtering and ordering
"""

import pytest

from franchise_site.core.franchise_filters import (
    apply_filters,
    available_categories,
    extract_best_score,
    paginate,
    parse_currency_to_number,
)
from franchise_site.models.catalog import CardTag, FilterState, FranchiseCard, SortOption


def card(name: str, **kwargs) -> FranchiseCard:
    tags = [CardTag(name=tag) for tag in kwargs.pop("tags", [])]
    return FranchiseCard(name=name, tags=tags, **kwargs)


@pytest.fixture
def cards() -> list[FranchiseCard]:
    return [
        card("Burger Barn", category="Food", cash_required="$80,000", tags=["Best Score 72"], is_featured=True),
        card("Clean Team", category="Home Services", min_investment=40000, tags=["Low Cost"]),
        card(
            "Fit Lab",
            category="Fitness",
            description="Boutique gym with burger-free menu",
            cash_required="$50,000 - $90,000",
            tags=["Best Score 91"],
            is_sponsored=True,
        ),
        card("Pizza Point", category="Food", is_top_pick=True),
    ]


def names(result: list[FranchiseCard]) -> list[str]:
    return [c.name for c in result]


@pytest.mark.parametrize(
    ("text", "expected"),
    [("$50,000", 50000.0), ("$50,000 - $90,000", 50000.0), ("Call us", 0.0), (None, 0.0), ("12.5k", 12.5)],
)
def test_parse_currency_to_number(text, expected) -> None:
    assert parse_currency_to_number(text) == expected


def test_extract_best_score() -> None:
    assert extract_best_score(["Low Cost", "Best Score 88"]) == 88
    assert extract_best_score(["best score: 7", "Best Score 99"]) == 7
    assert extract_best_score(["Low Cost"]) is None


def test_available_categories(cards) -> None:
    assert available_categories(cards) == ["all", "Food", "Home Services", "Fitness"]


class TestApplyFilters:
    def test_default_state_keeps_order(self, cards) -> None:
        assert names(apply_filters(cards, FilterState())) == names(cards)

    def test_search_matches_name_category_and_description(self, cards) -> None:
        result = apply_filters(cards, FilterState(search="  BURGER "))
        assert names(result) == ["Burger Barn", "Fit Lab"]

    def test_category_filter_ignores_all(self, cards) -> None:
        result = apply_filters(cards, FilterState(categories=["all", "Food"]))
        assert names(result) == ["Burger Barn", "Pizza Point"]

    def test_max_cash_prefers_min_investment(self, cards) -> None:
        result = apply_filters(cards, FilterState(max_cash="50000"))
        # Pizza Point has no amount at all and compares as 0
        assert names(result) == ["Clean Team", "Fit Lab", "Pizza Point"]

    def test_non_numeric_max_cash_is_ignored(self, cards) -> None:
        assert len(apply_filters(cards, FilterState(max_cash="lots"))) == 4

    def test_flag_toggles(self, cards) -> None:
        assert names(apply_filters(cards, FilterState(only_featured=True))) == ["Burger Barn"]
        assert names(apply_filters(cards, FilterState(only_sponsored=True))) == ["Fit Lab"]
        assert names(apply_filters(cards, FilterState(only_top_pick=True))) == ["Pizza Point"]

    def test_sort_best_puts_unscored_last(self, cards) -> None:
        result = apply_filters(cards, FilterState(sort_by=SortOption.BEST))
        assert names(result) == ["Fit Lab", "Burger Barn", "Clean Team", "Pizza Point"]

    def test_sort_cash_ascending(self, cards) -> None:
        result = apply_filters(cards, FilterState(sort_by=SortOption.CASH))
        assert names(result) == ["Pizza Point", "Clean Team", "Fit Lab", "Burger Barn"]


class TestPaginate:
    def test_middle_page(self) -> None:
        page = paginate(list(range(25)), page=2, per_page=10)

        assert page["items"] == list(range(10, 20))
        assert page["total"] == 25
        assert page["pages"] == 3
        assert page["has_more"] is True

    def test_last_page(self) -> None:
        page = paginate(list(range(25)), page=3, per_page=10)
        assert page["items"] == [20, 21, 22, 23, 24]
        assert page["has_more"] is False

    def test_empty_list_has_one_page(self) -> None:
        page = paginate([], page=0, per_page=0)
        assert page == {"items": [], "total": 0, "page": 1, "per_page": 1, "pages": 1, "has_more": False}
