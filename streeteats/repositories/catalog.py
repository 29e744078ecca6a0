"""Menu and cart repositories. Plain CRUD; no invariants beyond field presence."""

from streeteats.domain.catalog import CartEntry, MenuItem
from streeteats.repositories.base import BaseRepository


class MenuItemRepository(BaseRepository[MenuItem]):
    model = MenuItem

    async def list_by_phone(self, phone: str, newest_first: bool = False) -> list[MenuItem]:
        return await self.list(
            filters={"phone": phone},
            order="desc" if newest_first else "asc",
        )

    async def list_by_tax_id(self, tax_id: str) -> list[MenuItem]:
        return await self.list(filters={"tax_id": tax_id})


class CartEntryRepository(BaseRepository[CartEntry]):
    model = CartEntry
