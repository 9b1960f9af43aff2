import pytest

from app.core.errors import (
    AccountExistsError,
    InsufficientCreditsError,
    InvalidCredentialsError,
    UnknownPlanError,
)
from app.core.store import InMemoryStore
from app.services.accounts import AccountService
from app.services.credits import CreditLedger, plan_max_credits


@pytest.fixture
def accounts() -> AccountService:
    return AccountService(InMemoryStore())


@pytest.mark.asyncio
async def test_login_with_demo_user(accounts):
    session = await accounts.login("test@example.com", "password123")

    assert session.account.username == "testuser"
    assert session.account.plan == "free"
    assert session.account.credits == 10
    assert "password" not in session.account.model_dump()

    resolved = await accounts.resolve_session(session.token)
    assert resolved is not None
    assert resolved.account.id == "1"


@pytest.mark.asyncio
@pytest.mark.parametrize(("email", "password"), [("test@example.com", "wrong"), ("nobody@example.com", "password123")])
async def test_login_rejects_bad_credentials(accounts, email, password):
    with pytest.raises(InvalidCredentialsError):
        await accounts.login(email, password)


@pytest.mark.asyncio
async def test_signup_then_login(accounts):
    created = await accounts.signup("New@Example.com", "newbie", "hunter22")

    assert created.account.email == "new@example.com"
    assert created.account.credits == 15
    assert created.account.plan == "free"

    again = await accounts.login("new@example.com", "hunter22")
    assert again.account.id == created.account.id
    assert again.token != created.token

    with pytest.raises(InvalidCredentialsError):
        await accounts.login("new@example.com", "not-it")


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["pro@example.com", "taken@example.com"])
async def test_signup_rejects_existing_email(accounts, email):
    await accounts.signup("taken@example.com", "first", "secret1")

    with pytest.raises(AccountExistsError):
        await accounts.signup(email, "second", "secret2")


@pytest.mark.asyncio
async def test_logout_drops_session(accounts):
    session = await accounts.login("pro@example.com", "password123")

    await accounts.logout(session.token)

    assert await accounts.resolve_session(session.token) is None


@pytest.mark.asyncio
async def test_charge_decrements_and_persists(accounts):
    ledger = CreditLedger(accounts)
    session = await accounts.login("test@example.com", "password123")

    updated = await ledger.charge(session.account)

    assert updated.credits == 9
    assert (await accounts.get("1")).credits == 9


@pytest.mark.asyncio
async def test_charge_with_no_credits_raises(accounts):
    ledger = CreditLedger(accounts)
    session = await accounts.login("test@example.com", "password123")
    broke = session.account.model_copy(update={"credits": 0})

    with pytest.raises(InsufficientCreditsError):
        await ledger.charge(broke)


@pytest.mark.asyncio
async def test_refresh_adds_five(accounts):
    ledger = CreditLedger(accounts)
    session = await accounts.login("test@example.com", "password123")

    updated = await ledger.refresh(session.account)

    assert updated.credits == 15


@pytest.mark.asyncio
@pytest.mark.parametrize(("plan", "expected_credits"), [("basic", 60), ("pro", 110), ("enterprise", 510), ("free", 10)])
async def test_change_plan_grants_credits(accounts, plan, expected_credits):
    ledger = CreditLedger(accounts)
    session = await accounts.login("test@example.com", "password123")

    updated = await ledger.change_plan(session.account, plan)

    assert updated.plan == plan
    assert updated.credits == expected_credits


@pytest.mark.asyncio
async def test_change_plan_unknown(accounts):
    ledger = CreditLedger(accounts)
    session = await accounts.login("test@example.com", "password123")

    with pytest.raises(UnknownPlanError):
        await ledger.change_plan(session.account, "platinum")


@pytest.mark.parametrize(("plan", "expected"), [("free", 15), ("basic", 50), ("pro", 150), ("enterprise", 500), ("odd", 15)])
def test_plan_max_credits(plan, expected):
    assert plan_max_credits(plan) == expected


@pytest.mark.asyncio
async def test_in_memory_store_expires_keys():
    now = [100.0]
    store = InMemoryStore(clock=lambda: now[0])

    await store.set("k", "v", ttl_seconds=10)
    await store.set("forever", "v")
    assert await store.get("k") == "v"

    now[0] = 200.0

    assert await store.get("k") is None
    assert await store.get("forever") == "v"
