"""Mock accounts and sessions.

Accounts live in the key-value store as JSON documents keyed by id, with an
email index and an argon2 password hash next to them. Sessions map an opaque
token to an account id. The two demo users are checked against a fixed
credential table instead.
"""

from __future__ import annotations

import secrets
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from app.core.errors import AccountExistsError, InvalidCredentialsError
from app.core.logging import get_logger
from app.core.security import hash_password, verify_password
from app.core.store import KeyValueStore
from app.schemas.account import Account

logger = get_logger(__name__)

SESSION_TTL_SECONDS = 7 * 24 * 3600
SIGNUP_CREDITS = 15

_MOCK_USERS: list[dict] = [
    {
        "id": "1",
        "email": "test@example.com",
        "username": "testuser",
        "password": "password123",
        "plan": "free",
        "credits": 10,
    },
    {
        "id": "2",
        "email": "pro@example.com",
        "username": "prouser",
        "password": "password123",
        "plan": "pro",
        "credits": 100,
    },
]


@dataclass(frozen=True)
class SessionContext:
    token: str
    account: Account


def _account_key(account_id: str) -> str:
    return f"account:{account_id}"


def _email_key(email: str) -> str:
    return f"account-email:{email.strip().lower()}"


def _credential_key(account_id: str) -> str:
    return f"credential:{account_id}"


def _session_key(token: str) -> str:
    return f"session:{token}"


def _find_mock_user(email: str) -> dict | None:
    normalized = email.strip().lower()
    return next((user for user in _MOCK_USERS if user["email"] == normalized), None)


class AccountService:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    async def get(self, account_id: str) -> Account | None:
        raw = await self.store.get(_account_key(account_id))
        if raw is None:
            return None
        return Account.model_validate_json(raw)

    async def save(self, account: Account) -> None:
        await self.store.set(_account_key(account.id), account.model_dump_json())
        await self.store.set(_email_key(account.email), account.id)

    async def _open_session(self, account: Account) -> SessionContext:
        token = secrets.token_urlsafe(32)
        await self.store.set(_session_key(token), account.id, ttl_seconds=SESSION_TTL_SECONDS)
        return SessionContext(token=token, account=account)

    async def login(self, email: str, password: str) -> SessionContext:
        mock = _find_mock_user(email)
        if mock is not None:
            if mock["password"] != password:
                raise InvalidCredentialsError()
            account = await self.get(mock["id"])
            if account is None:
                fields = {key: value for key, value in mock.items() if key != "password"}
                account = Account(**fields, created_at=datetime.now(timezone.utc))
                await self.save(account)
        else:
            account_id = await self.store.get(_email_key(email))
            hashed = await self.store.get(_credential_key(account_id)) if account_id else None
            if hashed is None or not verify_password(password, hashed):
                raise InvalidCredentialsError()
            account = await self.get(account_id)
            if account is None:
                raise InvalidCredentialsError()

        logger.info("login_succeeded", account_id=account.id)
        return await self._open_session(account)

    async def signup(self, email: str, username: str, password: str) -> SessionContext:
        if _find_mock_user(email) is not None or await self.store.get(_email_key(email)) is not None:
            raise AccountExistsError()

        account = Account(
            id=f"user-{uuid.uuid4().hex[:12]}",
            email=email.strip().lower(),
            username=username.strip(),
            plan="free",
            credits=SIGNUP_CREDITS,
            created_at=datetime.now(timezone.utc),
        )
        await self.save(account)
        await self.store.set(_credential_key(account.id), hash_password(password))
        logger.info("signup_succeeded", account_id=account.id)
        return await self._open_session(account)

    async def resolve_session(self, token: str) -> SessionContext | None:
        account_id = await self.store.get(_session_key(token))
        if account_id is None:
            return None
        account = await self.get(account_id)
        if account is None:
            return None
        return SessionContext(token=token, account=account)

    async def logout(self, token: str) -> None:
        await self.store.delete(_session_key(token))
        logger.info("logout_succeeded")
