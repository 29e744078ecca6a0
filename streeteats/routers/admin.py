"""Administrative verification endpoints: pending list, approve, reject."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from streeteats.db.base import get_db
from streeteats.schemas.account import AccountOut, AccountsByRole, SupplierOut
from streeteats.schemas.common import CamelModel, MessageResponse
from streeteats.services.verification import VerificationService

router = APIRouter(tags=["Verification"])


class VerifyUserRequest(CamelModel):
    user_type: str
    id: str


def _svc(session: AsyncSession = Depends(get_db)) -> VerificationService:
    return VerificationService(session)


def _by_role(vendors, suppliers) -> AccountsByRole:
    return AccountsByRole(
        vendors=[AccountOut.model_validate(v) for v in vendors],
        suppliers=[SupplierOut.model_validate(s) for s in suppliers],
    )


@router.get("/unverified-users", response_model=AccountsByRole)
async def list_unverified_users(svc: VerificationService = Depends(_svc)):
    """Every vendor and supplier still waiting for approval."""
    return _by_role(*await svc.list_pending())


@router.get("/all-users", response_model=AccountsByRole)
async def list_all_users(svc: VerificationService = Depends(_svc)):
    return _by_role(*await svc.list_all())


@router.post("/verify-user", response_model=MessageResponse)
async def verify_user(body: VerifyUserRequest, svc: VerificationService = Depends(_svc)):
    await svc.approve(body.user_type, body.id)
    return {"message": "User verified"}


@router.delete("/reject-user/{user_type}/{user_id}", response_model=MessageResponse)
async def reject_user(
    user_type: str,
    user_id: str,
    svc: VerificationService = Depends(_svc),
):
    await svc.reject(user_type, user_id)
    return {"message": "User rejected and deleted"}
