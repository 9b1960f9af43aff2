from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_account_service, get_bearer_token
from app.core.errors import AccountExistsError, InvalidCredentialsError
from app.schemas.account import LoginRequest, SessionResponse, SignupRequest
from app.services.accounts import AccountService

router = APIRouter()


@router.post("/auth/login", response_model=SessionResponse)
async def login(body: LoginRequest, accounts: AccountService = Depends(get_account_service)):
    try:
        session = await accounts.login(body.email, body.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return SessionResponse(session_token=session.token, account=session.account)


@router.post("/auth/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def signup(body: SignupRequest, accounts: AccountService = Depends(get_account_service)):
    try:
        session = await accounts.signup(body.email, body.username, body.password)
    except AccountExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return SessionResponse(session_token=session.token, account=session.account)


@router.post("/auth/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str = Depends(get_bearer_token),
    accounts: AccountService = Depends(get_account_service),
) -> Response:
    await accounts.logout(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
