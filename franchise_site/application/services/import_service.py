"""
Franchise CSV import service.

Validates each row, resolves its industry, tags and agent, and creates the
franchise inside a savepoint so a failing row leaves the others intact.

Dependencies: franchise_site.core.csv_import, franchise_site.boundary.db.CRUD
System role: Bulk franchise import orchestration
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService
from franchise_site.application.services.taxonomy_service import TaxonomyService
from franchise_site.boundary.db.CRUD.agent_crud import agent_crud
from franchise_site.boundary.db.CRUD.franchise_crud import franchise_crud
from franchise_site.boundary.db.models.franchise_model import FranchiseModel, FranchiseStatus
from franchise_site.core.csv_import import (
    FIRST_DATA_ROW,
    ImportRow,
    RowError,
    read_csv,
    validate_row,
)
from franchise_site.core.exceptions import FranchiseSiteException, ValidationError
from franchise_site.models.franchise import ImportResult, ImportRowError

logger = logging.getLogger(__name__)


class ImportService:
    """CSV import of franchises."""

    def __init__(self, db: AsyncSession, audit: AuditService | None = None) -> None:
        """
        Initialize import service.

        Args:
            db: Async SQLAlchemy session
            audit: Audit recorder (carries the importing user)
        """
        self.db = db
        self.audit = audit or AuditService(db)
        self.taxonomy = TaxonomyService(db, audit=self.audit)

    async def _create_from_row(self, row: ImportRow) -> FranchiseModel:
        agent_id = None
        if row.agent_email:
            agent = await agent_crud.get_by_email(self.db, row.agent_email)
            if agent is None:
                raise ValidationError(
                    f"Agent with email '{row.agent_email}' not found", field="agentEmail"
                )
            agent_id = agent.id

        industry = await self.taxonomy.find_or_create_industry(row.category)
        resolved = [await self.taxonomy.find_or_create_tag(name) for name in row.tags]
        # Case or slug variants resolve to the same tag
        tags = list({tag.id: tag for tag in resolved}.values())

        user_id = self.audit.meta.user_id
        franchise = await franchise_crud.create(
            self.db,
            business_name=row.business_name,
            description=row.description,
            industry_id=industry.id,
            tags=tags,
            investment_min=row.investment_min,
            investment_max=row.investment_max,
            assigned_agent_id=agent_id,
            is_featured=row.is_featured,
            is_sponsored=row.is_sponsored,
            is_top_pick=row.is_top_pick,
            status=FranchiseStatus(row.status),
            created_by_id=user_id,
            updated_by_id=user_id,
        )
        await self.audit.record_create("franchises", franchise.id)
        return franchise

    async def import_csv(self, content: bytes) -> ImportResult:
        """
        Import franchises from CSV bytes.

        Args:
            content: Uploaded file contents

        Returns:
            ImportResult: Created count and per-row errors (data rows start at 2)

        Raises:
            ImportFileError: The file itself is unreadable or lacks required columns
        """
        rows = read_csv(content)
        created = 0
        errors: list[RowError] = []

        for index, raw in enumerate(rows):
            row_number = index + FIRST_DATA_ROW
            business_name = raw.get("businessName", "")
            try:
                row = validate_row(row_number, raw)
                async with self.db.begin_nested():
                    await self._create_from_row(row)
                created += 1
            except (FranchiseSiteException, SQLAlchemyError) as e:
                message = e.message if isinstance(e, FranchiseSiteException) else "Database error"
                errors.append(RowError(row=row_number, business_name=business_name, error=message))
                logger.warning(
                    "Import row failed",
                    extra={"row": row_number, "business_name": business_name, "error": str(e)},
                )

        logger.info(
            "Franchise import finished",
            extra={"created_count": created, "failed_count": len(errors), "row_count": len(rows)},
        )
        return ImportResult(
            success=not errors,
            created=created,
            errors=[ImportRowError(**error.to_dict()) for error in errors],
        )
