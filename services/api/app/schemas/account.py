from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

PlanId = Literal["free", "basic", "pro", "enterprise"]


class Account(BaseModel):
    id: str
    email: str
    username: str
    plan: PlanId = "free"
    credits: int = 0
    created_at: datetime


class LoginRequest(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class SignupRequest(BaseModel):
    email: str = Field(min_length=3)
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=6)


class SessionResponse(BaseModel):
    session_token: str
    token_type: str = "bearer"
    account: Account


class AccountResponse(BaseModel):
    account: Account
    plan_max_credits: int
    credits_used: int


class PlanChangeRequest(BaseModel):
    plan: str


class Plan(BaseModel):
    id: PlanId
    name: str
    description: str
    price_monthly: float
    price_annual: float
    credits: int
    features: list[str]
    most_popular: bool = False
