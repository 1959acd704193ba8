"""
Media CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Media metadata persistence operations
"""

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.media_model import MediaModel


class MediaCRUD(BaseCRUD[MediaModel]):
    """CRUD operations for MediaModel."""

    def __init__(self) -> None:
        """Initialize MediaCRUD with MediaModel."""
        super().__init__(MediaModel)


media_crud = MediaCRUD()
