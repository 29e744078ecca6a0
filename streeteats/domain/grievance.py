"""SQLAlchemy ORM models for grievances and their inline attachments."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from streeteats.db.base import Base
from streeteats.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin, _now


class Grievance(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """One filed dispute. Immutable once written."""

    __tablename__ = "grievances"

    supplier_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    supplier_shop: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    vendor_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    vendor_location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    issue_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, nullable=False, index=True
    )
    issue_type: Mapped[str] = mapped_column(String(100), nullable=False)
    issue_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # "vendor" | "supplier": self-declared by the filer
    posted_by: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    attachments: Mapped[List["GrievanceAttachment"]] = relationship(
        back_populates="grievance",
        lazy="selectin",
        order_by="GrievanceAttachment.position",
        cascade="all, delete-orphan",
    )


class GrievanceAttachment(Base, UUIDPrimaryKeyMixin):
    """Evidence file stored inline as base64 text."""

    __tablename__ = "grievance_attachments"

    grievance_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("grievances.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    mimetype: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    grievance: Mapped["Grievance"] = relationship(back_populates="attachments")
