from functools import lru_cache
import json
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="TextHuman API", alias="APP_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    api_prefix: str = Field(default="/v1", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    redis_url: str = Field(default="", alias="REDIS_URL")

    cors_allowed_origins: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        alias="CORS_ALLOWED_ORIGINS",
    )
    cors_allow_origin_regex: str = Field(default="", alias="CORS_ALLOW_ORIGIN_REGEX")

    relay_url: str = Field(default="", alias="RELAY_URL")
    humanizer_api_url: str = Field(default="https://humanize.undetectable.ai/submit", alias="HUMANIZER_API_URL")
    humanizer_client_id: str = Field(default="79b84da7-bb2a-4e36-a135-e77e0f3e5144", alias="HUMANIZER_CLIENT_ID")
    humanizer_model: str = Field(default="v2", alias="HUMANIZER_MODEL")
    humanizer_user_agent: str = Field(default="TextHuman Web App", alias="HUMANIZER_USER_AGENT")
    humanizer_document_type: str = Field(default="Text", alias="HUMANIZER_DOCUMENT_TYPE")
    humanizer_source_url: str = Field(default="https://example.com/", alias="HUMANIZER_SOURCE_URL")
    rewrite_attempt_timeout_seconds: float = Field(default=5.0, alias="REWRITE_ATTEMPT_TIMEOUT_SECONDS")
    relay_word_swap: bool = Field(default=False, alias="RELAY_WORD_SWAP")

    charge_fallback_rewrites: bool = Field(default=True, alias="CHARGE_FALLBACK_REWRITES")
    rewrite_rate_limit: int = Field(default=10, alias="REWRITE_RATE_LIMIT")

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")

    @field_validator("rewrite_attempt_timeout_seconds", mode="before")
    @classmethod
    def clamp_attempt_timeout(cls, value: object) -> object:
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            return 5.0
        return max(0.5, min(30.0, seconds))

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return "INFO"
        normalized = value.strip().upper()
        if normalized in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            return normalized
        return "INFO"

    @staticmethod
    def _normalize_origin(origin: str) -> str:
        candidate = origin.strip().strip("'\"")
        if not candidate:
            return ""

        if "://" not in candidate:
            candidate = f"https://{candidate}"

        parsed = urlsplit(candidate)
        if not parsed.scheme or not parsed.netloc:
            return ""

        # CORS matching is exact on scheme+host+port; paths must be removed.
        return f"{parsed.scheme}://{parsed.netloc}".rstrip("/")

    @property
    def cors_origins(self) -> list[str]:
        raw = self.cors_allowed_origins.strip()
        if not raw:
            return []

        values: list[str]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
                if isinstance(parsed, list):
                    values = [str(item) for item in parsed]
                else:
                    values = [raw]
            except json.JSONDecodeError:
                values = [raw]
        else:
            values = raw.split(",")

        normalized = [self._normalize_origin(value) for value in values]
        return [origin for origin in normalized if origin]

    @property
    def cors_origin_regex(self) -> str | None:
        value = self.cors_allow_origin_regex.strip()
        return value or None


@lru_cache
def get_settings() -> Settings:
    return Settings()
