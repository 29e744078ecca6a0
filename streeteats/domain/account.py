"""SQLAlchemy ORM models for marketplace accounts.

Vendors (buyers) and suppliers (sellers) share one shape but live in two
tables. Nothing else holds a foreign key to an account: menu items, cart
entries and grievances refer to accounts by phone, tax id or name only, so
rejecting (deleting) an account never cascades.
"""

from __future__ import annotations

import enum
from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from streeteats.db.base import Base
from streeteats.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Role(str, enum.Enum):
    VENDOR = "vendor"
    SUPPLIER = "supplier"


class AccountMixin(UUIDPrimaryKeyMixin, TimestampMixin):
    """Identity columns shared by vendors and suppliers."""

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    # Hashed or plaintext depending on CREDENTIAL_SCHEME
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    government_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    tax_id: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    shop_location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    shop_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    verified: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False, index=True
    )


class Vendor(Base, AccountMixin):
    __tablename__ = "vendors"


class Supplier(Base, AccountMixin):
    __tablename__ = "suppliers"

    # Open/closed toggle, independent of verification
    shop_status: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
