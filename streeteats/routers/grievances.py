"""Grievance endpoints: thin HTTP layer over :mod:`streeteats.services.grievance`.

This router handles multipart parsing and stages each uploaded part to the
upload directory; encoding, persistence and the ordering rules live in the
service.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.core.config import Settings, get_settings
from streeteats.db.base import get_db
from streeteats.schemas.grievance import GrievanceCreate, GrievanceOut, GrievanceSubmitted
from streeteats.services.attachments import UploadStage
from streeteats.services.grievance import GrievanceService

router = APIRouter(tags=["Grievances"])


def _svc(
    session: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> GrievanceService:
    return GrievanceService(session, settings.max_attachment_size_bytes)


# ---------------------------------------------------------------------------
# POST /api/grievance: multipart submission, files under "attachments"
# ---------------------------------------------------------------------------

@router.post("/grievance", response_model=GrievanceSubmitted)
async def submit_grievance(
    posted_by: Optional[str] = Form(default=None, alias="postedBy"),
    supplier_name: Optional[str] = Form(default=None, alias="supplierName"),
    supplier_shop: Optional[str] = Form(default=None, alias="supplierShop"),
    vendor_name: Optional[str] = Form(default=None, alias="vendorName"),
    vendor_location: Optional[str] = Form(default=None, alias="vendorLocation"),
    issue_date: Optional[datetime] = Form(default=None, alias="issueDate"),
    issue_type: Optional[str] = Form(default=None, alias="issueType"),
    issue_details: Optional[str] = Form(default=None, alias="issueDetails"),
    attachments: Optional[list[UploadFile]] = File(default=None),
    svc: GrievanceService = Depends(_svc),
    settings: Settings = Depends(get_settings),
):
    body = GrievanceCreate(
        posted_by=posted_by,
        supplier_name=supplier_name,
        supplier_shop=supplier_shop,
        vendor_name=vendor_name,
        vendor_location=vendor_location,
        issue_date=issue_date,
        issue_type=issue_type,
        issue_details=issue_details,
    )
    with UploadStage(settings.upload_dir) as stage:
        for upload in attachments or []:
            stage.add(await upload.read(), upload.filename, upload.content_type)
        grievance = await svc.submit(body, stage.files)
    return GrievanceSubmitted(id=grievance.id)


# ---------------------------------------------------------------------------
# GET /api/grievances: newest first, optional ?postedBy=vendor|supplier|all
# ---------------------------------------------------------------------------

@router.get("/grievances", response_model=list[GrievanceOut])
async def list_grievances(
    posted_by: Optional[str] = Query(default=None, alias="postedBy"),
    svc: GrievanceService = Depends(_svc),
):
    items = await svc.list_grievances(posted_by)
    return [GrievanceOut.model_validate(g) for g in items]


@router.get("/grievances/{grievance_id}", response_model=GrievanceOut)
async def get_grievance(grievance_id: str, svc: GrievanceService = Depends(_svc)):
    return GrievanceOut.model_validate(await svc.get_grievance(grievance_id))


@router.get("/grievances/{grievance_id}/attachments/{index}")
async def download_attachment(
    grievance_id: str,
    index: int,
    svc: GrievanceService = Depends(_svc),
):
    """Decode one stored attachment back into its original bytes."""
    attachment, data = await svc.get_attachment(grievance_id, index)
    return Response(
        content=data,
        media_type=attachment.mimetype,
        headers={
            "Content-Disposition": (
                f"attachment; filename*=UTF-8''{quote(attachment.filename)}"
            ),
        },
    )
