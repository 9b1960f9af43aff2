from __future__ import annotations

import time
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.api.deps import get_credit_ledger, get_optional_session, get_rewriter
from app.core.config import get_settings
from app.core.errors import EmptyInputError, InsufficientCreditsError
from app.core.logging import get_logger
from app.core.rate_limit import enforce_sliding_window
from app.core.redis import get_redis
from app.schemas.rewrite import RewriteRequest, RewriteResponse, StyleInfo
from app.services.accounts import SessionContext
from app.services.credits import CreditLedger
from app.services.rewriter import Rewriter
from app.services.style_mapper import STYLE_MAPPINGS
from app.utils.http import client_ip

router = APIRouter()
logger = get_logger(__name__)


@router.post("/rewrite", response_model=RewriteResponse)
async def rewrite_text(
    request: Request,
    body: RewriteRequest,
    session: SessionContext | None = Depends(get_optional_session),
    rewriter: Rewriter = Depends(get_rewriter),
    ledger: CreditLedger = Depends(get_credit_ledger),
):
    try:
        Rewriter.validate(body.text)
    except EmptyInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    settings = get_settings()
    rl = await enforce_sliding_window(
        await get_redis(),
        key=f"rl:rewrite:{client_ip(request)}",
        limit=settings.rewrite_rate_limit,
        window_seconds=60,
    )
    if not rl.allowed:
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="Rewrite rate limit exceeded")

    start = time.perf_counter()
    account = session.account if session is not None else None
    try:
        if account is not None:
            ledger.ensure_available(account)

        result = await rewriter.rewrite(body.text, body.style)

        charged = account is not None and (result.source != "fallback" or settings.charge_fallback_rewrites)
        if charged:
            account = await ledger.charge(account)
    except InsufficientCreditsError as exc:
        raise HTTPException(status_code=status.HTTP_402_PAYMENT_REQUIRED, detail=str(exc)) from exc
    latency_ms = round((time.perf_counter() - start) * 1000, 3)

    logger.info(
        "rewrite_completed",
        source=result.source,
        style=body.style,
        charged=charged,
        demo=account is None,
        latency_ms=latency_ms,
    )
    return RewriteResponse(
        rewrite_id=uuid.uuid4().hex,
        rewritten_text=result.text,
        source=result.source,
        credits_remaining=account.credits if account is not None else None,
        latency_ms=latency_ms,
    )


@router.get("/styles", response_model=list[StyleInfo])
async def list_styles() -> list[StyleInfo]:
    return [StyleInfo(style=style, **mapping.as_payload()) for style, mapping in STYLE_MAPPINGS.items()]
