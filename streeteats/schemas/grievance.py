"""Grievance Pydantic schemas."""


from datetime import datetime, timezone

from pydantic import field_validator

from streeteats.schemas.common import CamelModel

class GrievanceCreate(CamelModel):
    """Descriptive fields of a submission; attachments travel separately."""
    posted_by: str | None = None
    supplier_name: str | None = None
    supplier_shop: str | None = None
    vendor_name: str | None = None
    vendor_location: str | None = None
    issue_date: datetime | None = None
    issue_type: str | None = None
    issue_details: str | None = None

class AttachmentOut(CamelModel):
    filename: str
    mimetype: str
    content: str

class GrievanceOut(CamelModel):
    id: str
    posted_by: str
    supplier_name: str | None = None
    supplier_shop: str | None = None
    vendor_name: str | None = None
    vendor_location: str | None = None
    issue_date: datetime
    issue_type: str
    issue_details: str | None = None
    attachments: list[AttachmentOut]
    created_at: datetime

    @field_validator("issue_date", "created_at")
    @classmethod
    def _label_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive values for UTC columns
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

class GrievanceSubmitted(CamelModel):
    message: str = "Grievance submitted successfully"
    id: str
