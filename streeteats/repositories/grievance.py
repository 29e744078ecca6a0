"""Grievance repository: append and filtered, newest-first reads."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select

from streeteats.domain.grievance import Grievance, GrievanceAttachment
from streeteats.repositories.base import BaseRepository


class GrievanceRepository(BaseRepository[Grievance]):
    model = Grievance

    async def create_with_attachments(
        self, attachments: list[dict[str, str]], **fields: Any
    ) -> Grievance:
        """Insert the grievance and its attachments in a single flush."""
        grievance = Grievance(
            **fields,
            attachments=[
                GrievanceAttachment(position=i, **attachment)
                for i, attachment in enumerate(attachments)
            ],
        )
        self._session.add(grievance)
        await self._session.flush()
        return grievance

    async def list_newest_first(self, posted_by: str | None = None) -> list[Grievance]:
        q = select(Grievance)
        if posted_by is not None:
            q = q.where(func.lower(Grievance.posted_by) == posted_by.lower())
        q = q.order_by(Grievance.issue_date.desc(), Grievance.created_at.asc())
        result = await self._session.execute(q)
        return list(result.scalars().all())
