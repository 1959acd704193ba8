"""
Site settings service.

Reads and updates the site settings singleton. The row is created with
defaults the first time it is read.

Dependencies: franchise_site.boundary.db.CRUD, franchise_site.models.site_settings
System role: Global site configuration orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService, snapshot
from franchise_site.boundary.db.CRUD.site_settings_crud import site_settings_crud
from franchise_site.boundary.db.models.site_settings_model import SiteSettingsModel
from franchise_site.models.site_settings import SiteSettingsData, UpdateSiteSettingsRequest

logger = logging.getLogger(__name__)

COLLECTION = "site_settings"
SECTIONS = ("navbar", "footer", "ticker", "general", "seo")


def _to_data(row: SiteSettingsModel) -> SiteSettingsData:
    # Missing keys in stored sections fall back to schema defaults
    return SiteSettingsData.model_validate(
        {section: getattr(row, section) or {} for section in SECTIONS}
    )


class SiteSettingsService:
    """Site settings singleton access."""

    def __init__(self, db: AsyncSession, audit: AuditService | None = None) -> None:
        self.db = db
        self.audit = audit or AuditService(db)

    async def _get_or_create(self) -> SiteSettingsModel:
        row = await site_settings_crud.get_singleton(self.db)
        if row is None:
            defaults = SiteSettingsData().model_dump(mode="json")
            row = await site_settings_crud.create(self.db, **defaults)
            logger.info("Site settings initialised with defaults")
        return row

    async def get_settings(self) -> SiteSettingsData:
        """Current site settings (defaults on a fresh install)."""
        return _to_data(await self._get_or_create())

    async def update_settings(self, request: UpdateSiteSettingsRequest) -> SiteSettingsData:
        """
        Replace the provided sections.

        Args:
            request: Sections to replace; omitted sections are kept

        Returns:
            SiteSettingsData: Settings after the update
        """
        row = await self._get_or_create()
        before = snapshot(row)

        updates = {
            section: getattr(request, section).model_dump(mode="json")
            for section in SECTIONS
            if getattr(request, section) is not None
        }
        if not updates:
            return _to_data(row)

        row = await site_settings_crud.update(
            self.db, row, updated_by_id=self.audit.meta.user_id, **updates
        )
        logger.info("Site settings updated", extra={"sections": sorted(updates)})
        await self.audit.record_update(COLLECTION, row.id, before, snapshot(row))
        return _to_data(row)
