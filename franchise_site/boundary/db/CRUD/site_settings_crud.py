"""
Site settings CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Site settings singleton persistence
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.site_settings_model import SiteSettingsModel


class SiteSettingsCRUD(BaseCRUD[SiteSettingsModel]):
    """CRUD operations for the SiteSettingsModel singleton."""

    def __init__(self) -> None:
        """Initialize SiteSettingsCRUD with SiteSettingsModel."""
        super().__init__(SiteSettingsModel)

    async def get_singleton(self, session: AsyncSession) -> SiteSettingsModel | None:
        """Return the oldest settings row, if any exists."""
        stmt = select(SiteSettingsModel).order_by(SiteSettingsModel.created_at).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


site_settings_crud = SiteSettingsCRUD()
