"""Menu and vendor-cart Pydantic schemas.

Wire names follow the storefront client (``itemname``, ``itemcost``,
``todaysstock``, ``shopname``, ``gst``), hence the explicit aliases.
"""


from datetime import datetime

from pydantic import Field

from streeteats.schemas.common import CamelModel

class MenuItemCreate(CamelModel):
    phone: str = Field(min_length=1)
    shop_name: str = Field(min_length=1, alias="shopname")
    tax_id: str = Field(min_length=1, alias="gst")
    item_name: str = Field(min_length=1, alias="itemname")
    item_cost: float = Field(gt=0, alias="itemcost")
    todays_stock: int = Field(ge=0, alias="todaysstock")

class MenuItemOut(CamelModel):
    id: str
    phone: str
    shop_name: str = Field(alias="shopname")
    tax_id: str = Field(alias="gst")
    item_name: str = Field(alias="itemname")
    item_cost: float = Field(alias="itemcost")
    todays_stock: int = Field(alias="todaysstock")
    created_at: datetime

class MenuItemCreatedOut(CamelModel):
    id: str
    itemname: str
    price: float
    stock: int

class MenuItemCreated(CamelModel):
    success: bool = True
    message: str = "Menu item added successfully"
    menu_item: MenuItemCreatedOut

class MenuItemSummary(CamelModel):
    id: str
    name: str
    price: float
    stock: int
    added_on: datetime

class SupplierMenu(CamelModel):
    success: bool = True
    count: int
    menu_items: list[MenuItemSummary]

class CartEntryCreate(CamelModel):
    item_id: str = Field(min_length=1)
    item_name: str = Field(min_length=1, alias="itemname")
    item_cost: float | None = Field(default=None, ge=0, alias="itemcost")
    quantity: int = Field(default=1, ge=1)
    supplier_shop: str | None = None
    supplier_gst: str | None = None
    vendor_name: str = Field(min_length=1)
    vendor_shop: str = Field(min_length=1)
    vendor_gst: str = Field(min_length=1)
