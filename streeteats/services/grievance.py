"""Grievance service: the dispute ledger.

Submissions are appended together with their encoded attachments in one
flush; nothing is ever updated or deleted afterwards. The filer's role
(``posted_by``) is taken from the submission as declared: there is no
session to cross-check it against.
"""


import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.core.exceptions import NotFoundError, ValidationError
from streeteats.domain.account import Role
from streeteats.domain.grievance import Grievance, GrievanceAttachment
from streeteats.repositories.grievance import GrievanceRepository
from streeteats.schemas.grievance import GrievanceCreate
from streeteats.services import attachments as codec
from streeteats.services.attachments import StagedFile

logger = logging.getLogger(__name__)

ALL_FILTER = "all"


def _as_utc(value: datetime | None) -> datetime:
    """Stored issue dates are UTC; a value without an offset is read as UTC."""
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _normalize_poster(value: str | None) -> str:
    poster = (value or "").strip().lower()
    if not poster:
        raise ValidationError("postedBy is required")
    if poster not in {r.value for r in Role}:
        raise ValidationError(f"postedBy must be 'vendor' or 'supplier', got '{value}'")
    return poster


class GrievanceService:
    def __init__(self, session: AsyncSession, max_attachment_bytes: int | None = None):
        self._repo = GrievanceRepository(session)
        self._max_attachment_bytes = max_attachment_bytes

    async def submit(
        self, data: GrievanceCreate, files: Sequence[StagedFile] = ()
    ) -> Grievance:
        """Validate, encode every staged file, and append one ledger entry.

        Staged files are removed before returning, on success and on error.
        """
        try:
            posted_by = _normalize_poster(data.posted_by)
            if not (data.issue_type or "").strip():
                raise ValidationError("issueType is required")

            encoded = [
                codec.encode(f, max_bytes=self._max_attachment_bytes).as_dict()
                for f in files
            ]
            fields = data.model_dump(exclude={"posted_by", "issue_date"}, exclude_none=True)
            grievance = await self._repo.create_with_attachments(
                encoded,
                posted_by=posted_by,
                issue_date=_as_utc(data.issue_date),
                **fields,
            )
        finally:
            for f in files:
                codec.cleanup(f)

        logger.info(
            "Grievance %s filed by %s with %d attachment(s)",
            grievance.id, posted_by, len(encoded),
        )
        return grievance

    async def list_grievances(self, posted_by: str | None = None) -> list[Grievance]:
        """All grievances, newest issue date first.

        ``None``, empty or ``"all"`` means no filter; any other value is
        matched case-insensitively against ``posted_by``.
        """
        poster = (posted_by or "").strip()
        if not poster or poster.lower() == ALL_FILTER:
            return await self._repo.list_newest_first()
        return await self._repo.list_newest_first(poster)

    async def get_grievance(self, grievance_id: str) -> Grievance:
        grievance = await self._repo.get_by_id(grievance_id)
        if not grievance:
            raise NotFoundError("Grievance", grievance_id)
        return grievance

    async def get_attachment(
        self, grievance_id: str, index: int
    ) -> tuple[GrievanceAttachment, bytes]:
        """Return the attachment at *index* together with its decoded bytes."""
        grievance = await self.get_grievance(grievance_id)
        if index < 0 or index >= len(grievance.attachments):
            raise NotFoundError("Attachment", f"{grievance_id}/{index}")
        attachment = grievance.attachments[index]
        return attachment, codec.decode(attachment.content)
