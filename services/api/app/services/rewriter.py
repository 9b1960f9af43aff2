from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal, Protocol

import httpx

from app.core.config import Settings
from app.core.errors import EmptyInputError, ResponseFormatError
from app.core.logging import get_logger
from app.services.style_mapper import map_style
from app.utils.text import is_blank, rejoin_sentences

logger = get_logger(__name__)

RewriteSource = Literal["relay", "direct", "fallback"]

# Accepted result fields, in priority order.
RELAY_RESULT_FIELDS: tuple[str, ...] = ("rewrittenText", "secondApiData")
DIRECT_RESULT_FIELDS: tuple[str, ...] = ("humanized_text", "result")


@dataclass(frozen=True)
class RewriteResult:
    text: str
    source: RewriteSource


@dataclass(frozen=True)
class AttemptOutcome:
    source: RewriteSource
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def success(cls, source: RewriteSource, text: str) -> AttemptOutcome:
        return cls(source=source, text=text)

    @classmethod
    def failure(cls, source: RewriteSource, error: str) -> AttemptOutcome:
        return cls(source=source, error=error)


class RewriteAttempt(Protocol):
    source: RewriteSource

    async def run(self, text: str, style: str) -> AttemptOutcome: ...


def extract_result(payload: Any, fields: Sequence[str]) -> str | None:
    if not isinstance(payload, dict):
        return None
    for field in fields:
        value = payload.get(field)
        if isinstance(value, str) and value:
            return value
    return None


def require_result(payload: Any, fields: Sequence[str]) -> str:
    value = extract_result(payload, fields)
    if value is None:
        raise ResponseFormatError(f"Unexpected API response format, expected one of {list(fields)}")
    return value


def coerce_body(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, ensure_ascii=False)


async def _post_json(
    client: httpx.AsyncClient,
    source: RewriteSource,
    url: str,
    body: dict[str, Any],
) -> tuple[Any, AttemptOutcome | None]:
    """POST ``body`` and decode the JSON answer, or describe why the attempt failed."""
    try:
        response = await client.post(url, json=body)
    except httpx.HTTPError as exc:
        return None, AttemptOutcome.failure(source, f"transport_error:{exc.__class__.__name__}")

    if not response.is_success:
        return None, AttemptOutcome.failure(source, f"status_{response.status_code}")
    if not response.content.strip():
        return None, AttemptOutcome.failure(source, "empty_body")

    try:
        payload = response.json()
    except ValueError:
        return None, AttemptOutcome.failure(source, "malformed_body")

    if payload is None or payload == "":
        return None, AttemptOutcome.failure(source, "empty_body")
    return payload, None


class RelayAttempt:
    source: RewriteSource = "relay"

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self.client = client
        self.url = url

    async def run(self, text: str, style: str) -> AttemptOutcome:
        if not self.url:
            return AttemptOutcome.failure(self.source, "relay_not_configured")

        payload, failed = await _post_json(
            self.client,
            self.source,
            self.url,
            {"inputText": text, "selectedStyle": style},
        )
        if failed is not None:
            return failed

        rewritten = extract_result(payload, RELAY_RESULT_FIELDS)
        if rewritten is None:
            logger.info("relay_body_coerced", fields=list(RELAY_RESULT_FIELDS))
            rewritten = coerce_body(payload)
        return AttemptOutcome.success(self.source, rewritten)


class DirectAttempt:
    source: RewriteSource = "direct"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    def build_body(self, text: str, style: str) -> dict[str, str]:
        return {
            "id": self.settings.humanizer_client_id,
            "content": text,
            **map_style(style).as_payload(),
            "model": self.settings.humanizer_model,
            "user_agent": self.settings.humanizer_user_agent,
            "document_type": self.settings.humanizer_document_type,
            "url": self.settings.humanizer_source_url,
        }

    async def run(self, text: str, style: str) -> AttemptOutcome:
        if not self.settings.humanizer_api_url:
            return AttemptOutcome.failure(self.source, "direct_not_configured")

        payload, failed = await _post_json(
            self.client,
            self.source,
            self.settings.humanizer_api_url,
            self.build_body(text, style),
        )
        if failed is not None:
            return failed

        try:
            return AttemptOutcome.success(self.source, require_result(payload, DIRECT_RESULT_FIELDS))
        except ResponseFormatError as exc:
            return AttemptOutcome.failure(self.source, str(exc))


class FallbackAttempt:
    source: RewriteSource = "fallback"

    async def run(self, text: str, style: str) -> AttemptOutcome:
        return AttemptOutcome.success(self.source, rejoin_sentences(text))


async def first_success(
    attempts: Sequence[RewriteAttempt],
    text: str,
    style: str,
    *,
    timeout: float | None = None,
) -> RewriteResult:
    """Run ``attempts`` one at a time and return the first successful outcome."""
    for attempt in attempts:
        try:
            outcome = await asyncio.wait_for(attempt.run(text, style), timeout=timeout)
        except asyncio.TimeoutError:
            outcome = AttemptOutcome.failure(attempt.source, "timeout")
        except Exception as exc:
            logger.warning("rewrite_attempt_raised", source=attempt.source, exc_info=True)
            outcome = AttemptOutcome.failure(attempt.source, f"error:{exc.__class__.__name__}")

        if outcome.ok:
            logger.info("rewrite_attempt_succeeded", source=outcome.source)
            return RewriteResult(text=outcome.text, source=outcome.source)
        logger.warning("rewrite_attempt_failed", source=outcome.source, reason=outcome.error)

    raise LookupError("No rewrite attempt succeeded")


class Rewriter:
    def __init__(self, attempts: Sequence[RewriteAttempt], attempt_timeout: float | None = None) -> None:
        if not attempts or attempts[-1].source != "fallback":
            raise ValueError("The last rewrite attempt must be the local fallback")
        self.attempts = list(attempts)
        self.attempt_timeout = attempt_timeout

    @staticmethod
    def validate(text: str) -> None:
        if is_blank(text):
            raise EmptyInputError()

    async def rewrite(self, text: str, style: str) -> RewriteResult:
        self.validate(text)
        return await first_success(self.attempts, text, style, timeout=self.attempt_timeout)


def build_rewriter(settings: Settings, client: httpx.AsyncClient) -> Rewriter:
    return Rewriter(
        [
            RelayAttempt(client, settings.relay_url),
            DirectAttempt(client, settings),
            FallbackAttempt(),
        ],
        attempt_timeout=settings.rewrite_attempt_timeout_seconds,
    )
