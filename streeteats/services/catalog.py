"""Catalog service: supplier menus and the vendor cart log.

Simple record creation and lookup. Menu items point at their supplier by
phone and tax id only; cart entries point at a menu item id that may no
longer exist. Adding to the cart never touches stock.
"""


from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.core.exceptions import NotFoundError
from streeteats.domain.catalog import CartEntry, MenuItem
from streeteats.repositories.catalog import CartEntryRepository, MenuItemRepository
from streeteats.schemas.catalog import CartEntryCreate, MenuItemCreate

class CatalogService:
    def __init__(self, session: AsyncSession):
        self._menu = MenuItemRepository(session)
        self._cart = CartEntryRepository(session)

    async def add_menu_item(self, data: MenuItemCreate) -> MenuItem:
        return await self._menu.create(**data.model_dump())

    async def supplier_menu(self, phone: str) -> list[MenuItem]:
        """Newest first; raises NotFoundError when the supplier lists nothing."""
        items = await self._menu.list_by_phone(phone, newest_first=True)
        if not items:
            raise NotFoundError("Menu items for supplier", phone)
        return items

    async def supplier_store(self, phone: str) -> list[MenuItem]:
        return await self._menu.list_by_phone(phone)

    async def menus_by_tax_id(self, tax_id: str) -> list[MenuItem]:
        return await self._menu.list_by_tax_id(tax_id)

    async def add_to_cart(self, data: CartEntryCreate) -> CartEntry:
        return await self._cart.create(**data.model_dump(exclude_none=True))
