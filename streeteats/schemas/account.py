"""Account Pydantic schemas (registration, login, admin views)."""


from datetime import datetime

from pydantic import Field, StrictBool

from streeteats.schemas.common import CamelModel

class AccountCreate(CamelModel):
    full_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    password: str = Field(min_length=1)
    government_id: str | None = Field(default=None, alias="aadhar")
    tax_id: str | None = Field(default=None, alias="gst")
    shop_location: str | None = Field(default=None, alias="shoploc")
    shop_name: str | None = Field(default=None, alias="shopname")

class AccountOut(CamelModel):
    """Account as exposed to clients: never carries the password."""
    id: str
    full_name: str
    email: str
    phone: str
    government_id: str | None = Field(default=None, alias="aadhar")
    tax_id: str | None = Field(default=None, alias="gst")
    shop_location: str | None = Field(default=None, alias="shoploc")
    shop_name: str | None = Field(default=None, alias="shopname")
    verified: bool
    created_at: datetime

class SupplierOut(AccountOut):
    shop_status: bool

class AccountsByRole(CamelModel):
    """`{ vendors: [...], suppliers: [...] }` listing used by the admin views."""
    vendors: list[AccountOut]
    suppliers: list[SupplierOut]

class LoginRequest(CamelModel):
    user_id: str = Field(min_length=1, description="Email or phone")
    password: str

class LoginResponse(CamelModel):
    message: str = "Login successful"
    role: str
    name: str
    tax_id: str | None = Field(default=None, alias="gst")
    shop_name: str | None = Field(default=None, alias="shopname")
    phone: str

class ShopStatusUpdate(CamelModel):
    phone: str = Field(min_length=1)
    status: StrictBool

class ShopStatusResponse(CamelModel):
    message: str = "Shop status updated successfully"
    is_shop_open: bool
