"""
Franchise response mapping utilities.

Transforms ORM franchises into Pydantic response models.

Dependencies: franchise_site.models.franchise
System role: Franchise response transformation
"""

from typing import Sequence

from franchise_site.boundary.db.models.franchise_model import FranchiseModel
from franchise_site.models.franchise import FranchiseResponse


def map_franchise_to_response(franchise: FranchiseModel) -> FranchiseResponse:
    """
    Transform a franchise record into FranchiseResponse.

    Args:
        franchise: Franchise with industry, tags and agent loaded

    Returns:
        FranchiseResponse: Pydantic model for API response
    """
    return FranchiseResponse.model_validate(franchise)


def map_franchises_to_response(franchises: Sequence[FranchiseModel]) -> list[FranchiseResponse]:
    return [map_franchise_to_response(f) for f in franchises]
