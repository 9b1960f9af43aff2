from __future__ import annotations

from app.core.errors import InsufficientCreditsError, UnknownPlanError
from app.core.logging import get_logger
from app.schemas.account import Account, Plan
from app.services.accounts import AccountService

logger = get_logger(__name__)

REFRESH_CREDITS = 5

PLANS: dict[str, Plan] = {
    "free": Plan(
        id="free",
        name="Free",
        description="Try out the basics",
        price_monthly=0,
        price_annual=0,
        credits=15,
        features=["15 credits", "Basic humanization", "Standard writing styles"],
    ),
    "basic": Plan(
        id="basic",
        name="Basic",
        description="For casual writers",
        price_monthly=9.99,
        price_annual=7.99,
        credits=50,
        features=["50 credits/month", "All writing styles", "Enhanced humanization"],
    ),
    "pro": Plan(
        id="pro",
        name="Pro",
        description="For content creators",
        price_monthly=19.99,
        price_annual=16.99,
        credits=150,
        features=["150 credits/month", "All writing styles", "Premium humanization", "Priority support"],
        most_popular=True,
    ),
    "enterprise": Plan(
        id="enterprise",
        name="Enterprise",
        description="For teams and agencies",
        price_monthly=49.99,
        price_annual=39.99,
        credits=500,
        features=["500 credits/month", "All writing styles", "Maximum humanization", "24/7 priority support"],
    ),
}

# Credits granted on a plan change, on top of the current balance.
PLAN_GRANTS: dict[str, int] = {"free": 0, "basic": 50, "pro": 100, "enterprise": 500}


def plan_max_credits(plan: str) -> int:
    found = PLANS.get(plan)
    return found.credits if found else PLANS["free"].credits


class CreditLedger:
    def __init__(self, accounts: AccountService) -> None:
        self.accounts = accounts

    @staticmethod
    def ensure_available(account: Account) -> None:
        if account.credits <= 0:
            raise InsufficientCreditsError()

    async def charge(self, account: Account, amount: int = 1) -> Account:
        self.ensure_available(account)
        updated = account.model_copy(update={"credits": max(0, account.credits - amount)})
        await self.accounts.save(updated)
        logger.info("credits_charged", account_id=account.id, amount=amount, remaining=updated.credits)
        return updated

    async def refresh(self, account: Account) -> Account:
        updated = account.model_copy(update={"credits": account.credits + REFRESH_CREDITS})
        await self.accounts.save(updated)
        logger.info("credits_refreshed", account_id=account.id, added=REFRESH_CREDITS)
        return updated

    async def change_plan(self, account: Account, plan: str) -> Account:
        if plan not in PLANS:
            raise UnknownPlanError(plan)
        granted = PLAN_GRANTS[plan]
        updated = account.model_copy(update={"plan": plan, "credits": account.credits + granted})
        await self.accounts.save(updated)
        logger.info("plan_changed", account_id=account.id, plan=plan, granted=granted)
        return updated
