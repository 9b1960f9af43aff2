from fastapi import Depends, Header, HTTPException, status

from app.core.config import get_settings
from app.core.http import get_http_client
from app.core.store import KeyValueStore, get_store
from app.services.accounts import AccountService, SessionContext
from app.services.credits import CreditLedger
from app.services.rewriter import Rewriter, build_rewriter


def get_optional_token(authorization: str | None = Header(default=None)) -> str | None:
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    return authorization.split(" ", 1)[1].strip() or None


def get_bearer_token(token: str | None = Depends(get_optional_token)) -> str:
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Bearer token required")
    return token


async def get_account_service(store: KeyValueStore = Depends(get_store)) -> AccountService:
    return AccountService(store)


async def get_credit_ledger(accounts: AccountService = Depends(get_account_service)) -> CreditLedger:
    return CreditLedger(accounts)


async def get_optional_session(
    token: str | None = Depends(get_optional_token),
    accounts: AccountService = Depends(get_account_service),
) -> SessionContext | None:
    if token is None:
        return None
    session = await accounts.resolve_session(token)
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Session expired or invalid")
    return session


async def require_session(session: SessionContext | None = Depends(get_optional_session)) -> SessionContext:
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Bearer token required")
    return session


async def get_rewriter() -> Rewriter:
    return build_rewriter(get_settings(), await get_http_client())
