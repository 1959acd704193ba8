"""
Pagination helpers for list endpoints.

Dependencies: franchise_site.models.common
System role: Page/offset translation for admin listings
"""

from math import ceil
from typing import Sequence, TypeVar

from franchise_site.models.common import PaginatedResponse

T = TypeVar("T")

DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100


def offset_for(page: int, per_page: int) -> int:
    return (max(page, 1) - 1) * per_page


def build_page(items: Sequence[T], total: int, page: int, per_page: int) -> PaginatedResponse[T]:
    """
    Wrap one page of results.

    Args:
        items: Records on this page (already converted to response models)
        total: Number of matching records
        page: 1-based page number
        per_page: Page size

    Returns:
        PaginatedResponse: Items plus page counters
    """
    pages = max(1, ceil(total / per_page)) if per_page else 1
    return PaginatedResponse(
        items=list(items),
        total=total,
        page=page,
        per_page=per_page,
        pages=pages,
        has_more=page < pages,
    )
