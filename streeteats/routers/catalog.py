"""Menu and vendor-cart endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.db.base import get_db
from streeteats.schemas.catalog import (
    CartEntryCreate,
    MenuItemCreate,
    MenuItemCreated,
    MenuItemCreatedOut,
    MenuItemOut,
    MenuItemSummary,
    SupplierMenu,
)
from streeteats.schemas.common import MessageResponse
from streeteats.services.catalog import CatalogService

router = APIRouter(tags=["Catalog"])


def _svc(session: AsyncSession = Depends(get_db)) -> CatalogService:
    return CatalogService(session)


# ------------------------------------------------------------------
# Supplier menu
# ------------------------------------------------------------------

@router.post(
    "/supplier/menu",
    response_model=MenuItemCreated,
    status_code=status.HTTP_201_CREATED,
)
async def add_menu_item(body: MenuItemCreate, svc: CatalogService = Depends(_svc)):
    item = await svc.add_menu_item(body)
    return MenuItemCreated(
        menu_item=MenuItemCreatedOut(
            id=item.id,
            itemname=item.item_name,
            price=item.item_cost,
            stock=item.todays_stock,
        )
    )


@router.get("/supplier/menu/{phone}", response_model=SupplierMenu)
async def get_supplier_menu(phone: str, svc: CatalogService = Depends(_svc)):
    """Menu of one supplier, newest first. 404 when nothing is listed."""
    items = await svc.supplier_menu(phone)
    return SupplierMenu(
        count=len(items),
        menu_items=[
            MenuItemSummary(
                id=i.id,
                name=i.item_name,
                price=i.item_cost,
                stock=i.todays_stock,
                added_on=i.created_at,
            )
            for i in items
        ],
    )


@router.get("/supplier/store/{phone}", response_model=list[MenuItemOut])
async def get_supplier_store(phone: str, svc: CatalogService = Depends(_svc)):
    return [MenuItemOut.model_validate(i) for i in await svc.supplier_store(phone)]


@router.get("/menus/{tax_id}", response_model=list[MenuItemOut])
async def get_menus_by_tax_id(tax_id: str, svc: CatalogService = Depends(_svc)):
    return [MenuItemOut.model_validate(i) for i in await svc.menus_by_tax_id(tax_id)]


# ------------------------------------------------------------------
# Vendor cart
# ------------------------------------------------------------------

@router.post("/vendorcart", response_model=MessageResponse)
async def add_to_cart(body: CartEntryCreate, svc: CatalogService = Depends(_svc)):
    await svc.add_to_cart(body)
    return {"message": "Item added to cart successfully"}
