"""Verification service: moves accounts from pending to verified or deleted.

Approve is idempotent. Reject is a hard delete with no tombstone; menu
items, cart entries and grievances that mention the account are left as
they are.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.core.exceptions import InvalidRoleError, NotFoundError
from streeteats.domain.account import Role, Supplier, Vendor
from streeteats.repositories.account import (
    AccountRepository,
    SupplierRepository,
    VendorRepository,
)

logger = logging.getLogger(__name__)


def parse_role(value: str | None) -> Role:
    """Map a client-supplied role string onto :class:`Role`."""
    try:
        return Role((value or "").strip().lower())
    except ValueError:
        raise InvalidRoleError(value) from None


class VerificationService:
    def __init__(self, session: AsyncSession):
        self._repos: dict[Role, AccountRepository] = {
            Role.VENDOR: VendorRepository(session),
            Role.SUPPLIER: SupplierRepository(session),
        }

    async def list_pending(self) -> tuple[list[Vendor], list[Supplier]]:
        vendors = await self._repos[Role.VENDOR].list_unverified()
        suppliers = await self._repos[Role.SUPPLIER].list_unverified()
        return vendors, suppliers

    async def list_all(self) -> tuple[list[Vendor], list[Supplier]]:
        vendors = await self._repos[Role.VENDOR].list()
        suppliers = await self._repos[Role.SUPPLIER].list()
        return vendors, suppliers

    async def approve(self, role: str, account_id: str) -> Vendor | Supplier:
        kind = parse_role(role)
        repo = self._repos[kind]
        account = await repo.get_by_id(account_id)
        if account is None:
            raise NotFoundError(kind.value.capitalize(), account_id)
        if account.verified:
            return account

        account = await repo.mark_verified(account_id)
        logger.info("Verified %s %s", kind.value, account_id)
        return account  # type: ignore[return-value]

    async def reject(self, role: str, account_id: str) -> None:
        kind = parse_role(role)
        deleted = await self._repos[kind].delete(account_id)
        if not deleted:
            raise NotFoundError(kind.value.capitalize(), account_id)
        logger.info("Rejected and deleted %s %s", kind.value, account_id)
