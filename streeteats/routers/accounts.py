"""Account endpoints: registration, login, supplier shop status."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.core.config import Settings, get_settings
from streeteats.core.security import get_verifier
from streeteats.db.base import get_db
from streeteats.domain.account import Role
from streeteats.schemas.account import (
    AccountCreate,
    LoginRequest,
    LoginResponse,
    ShopStatusResponse,
    ShopStatusUpdate,
)
from streeteats.schemas.common import MessageResponse
from streeteats.services.account import AccountService

router = APIRouter(tags=["Accounts"])


def _svc(
    session: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AccountService:
    return AccountService(
        session,
        get_verifier(settings.credential_scheme),
        require_verified=settings.login_requires_verification,
    )


# ------------------------------------------------------------------
# Registration
# ------------------------------------------------------------------

@router.post("/register", response_model=MessageResponse)
async def register_vendor(body: AccountCreate, svc: AccountService = Depends(_svc)):
    await svc.register(Role.VENDOR, body)
    return {"message": "Vendor registered"}


@router.post("/supplier/register", response_model=MessageResponse)
async def register_supplier(body: AccountCreate, svc: AccountService = Depends(_svc)):
    await svc.register(Role.SUPPLIER, body)
    return {"message": "Supplier registered"}


# ------------------------------------------------------------------
# Login
# ------------------------------------------------------------------

async def _login(svc: AccountService, role: Role, body: LoginRequest) -> LoginResponse:
    account = await svc.login(role, body.user_id, body.password)
    return LoginResponse(
        role=role.value,
        name=account.full_name,
        tax_id=account.tax_id,
        shop_name=account.shop_name,
        phone=account.phone,
    )


@router.post("/vendor/login", response_model=LoginResponse)
async def login_vendor(body: LoginRequest, svc: AccountService = Depends(_svc)):
    return await _login(svc, Role.VENDOR, body)


@router.post("/supplier/login", response_model=LoginResponse)
async def login_supplier(body: LoginRequest, svc: AccountService = Depends(_svc)):
    return await _login(svc, Role.SUPPLIER, body)


# ------------------------------------------------------------------
# Supplier shop status
# ------------------------------------------------------------------

@router.post("/supplier/shop-status", response_model=ShopStatusResponse)
async def update_shop_status(body: ShopStatusUpdate, svc: AccountService = Depends(_svc)):
    supplier = await svc.set_shop_status(body.phone, body.status)
    return ShopStatusResponse(is_shop_open=supplier.shop_status)
