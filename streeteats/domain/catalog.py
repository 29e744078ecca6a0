"""SQLAlchemy ORM models for supplier menus and the vendor cart log."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from streeteats.db.base import Base
from streeteats.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin, _now


class MenuItem(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "menu_items"

    # Owning supplier's login phone (plain reference, no FK)
    phone: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    shop_name: Mapped[str] = mapped_column(String(255), nullable=False)
    tax_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    item_cost: Mapped[float] = mapped_column(Float, nullable=False)
    todays_stock: Mapped[int] = mapped_column(Integer, nullable=False)


class CartEntry(Base, UUIDPrimaryKeyMixin):
    """Append-only: entries are never updated or removed."""

    __tablename__ = "vendor_cart"

    # Menu item id stored as plain reference; the item may since be gone
    item_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    item_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    supplier_shop: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    supplier_gst: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    vendor_name: Mapped[str] = mapped_column(String(255), nullable=False)
    vendor_shop: Mapped[str] = mapped_column(String(255), nullable=False)
    vendor_gst: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, nullable=False
    )
