"""
Franchise catalog filter and sort engine.

Operates on in-memory lists of FranchiseCard view models. Used by the
catalog page, the public listing endpoint and the franchise grid block.

Dependencies: franchise_site.models.catalog
System role: Catalog search, filtering, sorting and pagination
"""

import math
import re
from typing import Sequence, TypeVar

from franchise_site.models.catalog import FilterState, FranchiseCard, SortOption

T = TypeVar("T")

_BEST_SCORE_TAG = re.compile(r"^Best Score\s*", re.IGNORECASE)
_FIRST_INT = re.compile(r"(\d+)")
_NUMBER = re.compile(r"\d[\d,]*(?:\.\d+)?")


def parse_currency_to_number(text: str | None) -> float:
    """
    Extract a numeric amount from a currency string.

    Ranges resolve to their lower bound so "$50,000 - $90,000" compares as
    50000. Strings without digits yield 0.

    Args:
        text: Display string such as "$50,000" or "$50,000 - $90,000"

    Returns:
        float: Parsed amount
    """
    if not text:
        return 0.0
    match = _NUMBER.search(text)
    if not match:
        return 0.0
    return float(match.group(0).replace(",", ""))


def extract_best_score(tags: Sequence[str]) -> int | None:
    """
    Find the first "Best Score N" tag and return N.

    Example:
        >>> extract_best_score(["Low Cost", "Best Score 88"])
        88
    """
    for tag in tags:
        if _BEST_SCORE_TAG.match(tag):
            match = _FIRST_INT.search(tag)
            return int(match.group(1)) if match else None
    return None


def available_categories(cards: Sequence[FranchiseCard]) -> list[str]:
    """Return "all" followed by the distinct card categories in first-seen order."""
    return ["all", *dict.fromkeys(card.category for card in cards)]


def _cash_value(card: FranchiseCard) -> float:
    if card.min_investment is not None:
        return float(card.min_investment)
    return parse_currency_to_number(card.cash_required)


def _best_score_key(card: FranchiseCard) -> tuple[bool, int]:
    # Unscored cards sort after every scored card
    score = extract_best_score(card.tag_names)
    return (score is None, -(score or 0))


def _parse_max_cash(raw: str | None) -> float | None:
    if raw is None or not str(raw).strip():
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    return None if math.isnan(value) else value


def apply_filters(cards: Sequence[FranchiseCard], state: FilterState) -> list[FranchiseCard]:
    """
    Filter then sort catalog cards.

    Filters applied in order: search (case-insensitive substring of name,
    category or description), category, max cash, and the flag toggles.
    Sorting is stable so ``relevance`` preserves input order and ties keep
    their relative order.

    Args:
        cards: Cards in their natural (newest-first) order
        state: Filter selection

    Returns:
        list[FranchiseCard]: Matching cards in display order
    """
    result = list(cards)

    query = state.search.strip().lower()
    if query:
        result = [
            card
            for card in result
            if query in card.name.lower()
            or query in card.category.lower()
            or query in card.description.lower()
        ]

    selected = {c for c in state.categories if c and c != "all"}
    if selected:
        result = [card for card in result if card.category in selected]

    max_cash = _parse_max_cash(state.max_cash)
    if max_cash is not None:
        result = [card for card in result if _cash_value(card) <= max_cash]

    if state.only_featured:
        result = [card for card in result if card.is_featured]
    if state.only_sponsored:
        result = [card for card in result if card.is_sponsored]
    if state.only_top_pick:
        result = [card for card in result if card.is_top_pick]

    if state.sort_by == SortOption.BEST:
        result.sort(key=_best_score_key)
    elif state.sort_by == SortOption.CASH:
        result.sort(key=_cash_value)

    return result


def paginate(items: Sequence[T], page: int = 1, per_page: int = 12) -> dict:
    """
    Slice a list into a page.

    Args:
        items: Full result list
        page: 1-based page number (values below 1 are treated as 1)
        per_page: Page size (at least 1)

    Returns:
        dict: ``items``, ``total``, ``page``, ``per_page``, ``pages``, ``has_more``
    """
    per_page = max(per_page, 1)
    page = max(page, 1)
    total = len(items)
    pages = max(math.ceil(total / per_page), 1)
    start = (page - 1) * per_page
    return {
        "items": list(items[start : start + per_page]),
        "total": total,
        "page": page,
        "per_page": per_page,
        "pages": pages,
        "has_more": start + per_page < total,
    }
