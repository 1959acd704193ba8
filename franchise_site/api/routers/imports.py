"""
Franchise CSV import endpoints.

Routes:
- POST /api/franchises/import - Import franchises from an uploaded CSV
- GET /api/franchises/import/template - Download the CSV template

Dependencies: franchise_site.application.services, franchise_site.core.csv_import
System role: Bulk franchise import HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response

from franchise_site.api.deps.dependencies import get_current_user, get_import_service
from franchise_site.api.routers.router_utils import handle_import_errors
from franchise_site.application.services.import_service import ImportService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.core.csv_import import template_csv
from franchise_site.core.exceptions import ValidationError
from franchise_site.models.franchise import ImportResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/franchises/import", tags=["import"])

CSV_CONTENT_TYPES = {"text/csv", "application/csv", "application/vnd.ms-excel", "text/plain"}
TEMPLATE_FILENAME = "franchise-import-template.csv"


def is_csv_upload(file: UploadFile) -> bool:
    if (file.filename or "").lower().endswith(".csv"):
        return True
    return (file.content_type or "").split(";")[0].strip() in CSV_CONTENT_TYPES


@router.post("", response_model=ImportResult)
@handle_import_errors
async def import_franchises(
    file: UploadFile | None = File(None),
    user: UserModel = Depends(get_current_user),
    import_service: ImportService = Depends(get_import_service),
) -> ImportResult:
    """
    Import franchises from a CSV upload.

    Args:
        file: Multipart CSV file
        user: Authenticated admin
        import_service: Injected ImportService

    Returns:
        ImportResult: Created count and per-row errors

    Raises:
        400: No file, not a CSV, undecodable or missing required columns
    """
    if file is None:
        raise ValidationError("No file provided", field="file")
    if not is_csv_upload(file):
        raise ValidationError("File must be a CSV", field="file")

    content = await file.read()
    logger.info(
        "Importing franchises",
        extra={"upload_filename": file.filename, "filesize": len(content), "user_id": str(user.id)},
    )
    return await import_service.import_csv(content)


@router.get("/template")
async def download_template(user: UserModel = Depends(get_current_user)) -> Response:
    return Response(
        content=template_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"'},
    )
