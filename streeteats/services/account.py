"""Account service: registration, login, and the supplier shop toggle."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from streeteats.core.security import CredentialVerifier
from streeteats.domain.account import Role, Supplier, Vendor
from streeteats.repositories.account import (
    AccountRepository,
    SupplierRepository,
    VendorRepository,
)
from streeteats.schemas.account import AccountCreate

logger = logging.getLogger(__name__)

class AccountService:
    def __init__(
        self,
        session: AsyncSession,
        verifier: CredentialVerifier,
        require_verified: bool = False,
    ):
        self._repos: dict[Role, AccountRepository] = {
            Role.VENDOR: VendorRepository(session),
            Role.SUPPLIER: SupplierRepository(session),
        }
        self._verifier = verifier
        self._require_verified = require_verified

    async def register(self, role: Role, data: AccountCreate) -> Vendor | Supplier:
        """Create an unverified account; email and phone must be unused for *role*."""
        repo = self._repos[role]
        if await repo.contact_taken(data.email, data.phone):
            raise ConflictError(
                f"A {role.value} with this email or phone is already registered"
            )

        fields = data.model_dump(exclude_none=True)
        fields["password"] = self._verifier.hash(data.password)
        account = await repo.create(**fields, verified=False)
        logger.info("Registered %s %s (pending verification)", role.value, account.id)
        return account

    async def login(self, role: Role, user_id: str, password: str) -> Vendor | Supplier:
        account = await self._repos[role].find_by_identifier(user_id)
        if account is None or not self._verifier.verify(password, account.password):
            logger.info("Failed %s login for %s", role.value, user_id)
            raise UnauthorizedError("Invalid credentials")
        if self._require_verified and not account.verified:
            raise ForbiddenError("Account is pending verification")
        return account

    async def set_shop_status(self, phone: str, is_open: bool) -> Supplier:
        repo: SupplierRepository = self._repos[Role.SUPPLIER]  # type: ignore[assignment]
        supplier = await repo.find_by_phone(phone)
        if supplier is None:
            raise NotFoundError("Supplier", phone)
        updated = await repo.update(supplier.id, shop_status=is_open)
        return updated  # type: ignore[return-value]
