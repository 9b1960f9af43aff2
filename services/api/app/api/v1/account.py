from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_credit_ledger, require_session
from app.core.errors import UnknownPlanError
from app.schemas.account import Account, AccountResponse, Plan, PlanChangeRequest
from app.services.accounts import SessionContext
from app.services.credits import PLANS, CreditLedger, plan_max_credits

router = APIRouter()


def _account_response(account: Account) -> AccountResponse:
    max_credits = plan_max_credits(account.plan)
    return AccountResponse(
        account=account,
        plan_max_credits=max_credits,
        credits_used=max(0, max_credits - account.credits),
    )


@router.get("/plans", response_model=list[Plan])
async def list_plans() -> list[Plan]:
    return list(PLANS.values())


@router.get("/account", response_model=AccountResponse)
async def get_account(session: SessionContext = Depends(require_session)):
    return _account_response(session.account)


@router.post("/account/credits/refresh", response_model=AccountResponse)
async def refresh_credits(
    session: SessionContext = Depends(require_session),
    ledger: CreditLedger = Depends(get_credit_ledger),
):
    return _account_response(await ledger.refresh(session.account))


@router.post("/account/plan", response_model=AccountResponse)
async def change_plan(
    body: PlanChangeRequest,
    session: SessionContext = Depends(require_session),
    ledger: CreditLedger = Depends(get_credit_ledger),
):
    try:
        account = await ledger.change_plan(session.account, body.plan)
    except UnknownPlanError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _account_response(account)
