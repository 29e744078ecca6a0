"""Account repositories: one per role table, same query surface."""

from __future__ import annotations

from typing import TypeVar

from sqlalchemy import or_, select

from streeteats.domain.account import Supplier, Vendor
from streeteats.repositories.base import BaseRepository

AccountT = TypeVar("AccountT", Vendor, Supplier)


class AccountRepository(BaseRepository[AccountT]):
    async def find_by_identifier(self, identifier: str) -> AccountT | None:
        """First account whose email OR phone equals *identifier*."""
        result = await self._session.execute(
            select(self.model)
            .where(or_(self.model.email == identifier, self.model.phone == identifier))
            .order_by(self.model.created_at.asc())
        )
        return result.scalars().first()

    async def contact_taken(self, email: str, phone: str) -> bool:
        result = await self._session.execute(
            select(self.model.id)
            .where(or_(self.model.email == email, self.model.phone == phone))
            .limit(1)
        )
        return result.first() is not None

    async def list_unverified(self) -> list[AccountT]:
        result = await self._session.execute(
            select(self.model)
            .where(self.model.verified.is_not(True))
            .order_by(self.model.created_at.asc())
        )
        return list(result.scalars().all())

    async def mark_verified(self, account_id: str) -> AccountT | None:
        return await self.update(account_id, verified=True)


class VendorRepository(AccountRepository[Vendor]):
    model = Vendor


class SupplierRepository(AccountRepository[Supplier]):
    model = Supplier

    async def find_by_phone(self, phone: str) -> Supplier | None:
        result = await self._session.execute(
            select(Supplier).where(Supplier.phone == phone)
        )
        return result.scalars().first()
