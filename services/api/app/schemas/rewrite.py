from pydantic import BaseModel, Field

from app.services.style_mapper import DEFAULT_STYLE


class RewriteRequest(BaseModel):
    text: str = Field(max_length=50_000)
    style: str = Field(default=DEFAULT_STYLE, max_length=32)


class RewriteResponse(BaseModel):
    rewrite_id: str
    rewritten_text: str
    source: str
    credits_remaining: int | None = None
    latency_ms: float


class StyleInfo(BaseModel):
    style: str
    readability: str
    purpose: str
    strength: str
