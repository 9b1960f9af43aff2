import pytest

from app.core.config import Settings


@pytest.mark.parametrize(
    ("raw_origins", "expected"),
    [
        ("https://texthuman.app/", ["https://texthuman.app"]),
        ("texthuman.app", ["https://texthuman.app"]),
        (
            "https://texthuman.app, http://localhost:5173/",
            ["https://texthuman.app", "http://localhost:5173"],
        ),
        (
            '["https://texthuman.app/","http://localhost:5173"]',
            ["https://texthuman.app", "http://localhost:5173"],
        ),
        ("", []),
    ],
)
def test_settings_normalizes_cors_origins(monkeypatch, raw_origins, expected):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", raw_origins)

    settings = Settings()

    assert settings.cors_origins == expected


def test_settings_reads_cors_origin_regex(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGIN_REGEX", r"^https://.*\.texthuman\.app$")

    settings = Settings()

    assert settings.cors_origin_regex == r"^https://.*\.texthuman\.app$"


def test_settings_defaults_point_at_humanizer():
    settings = Settings()

    assert settings.humanizer_api_url == "https://humanize.undetectable.ai/submit"
    assert settings.humanizer_model == "v2"
    assert settings.relay_url == ""
    assert settings.charge_fallback_rewrites is True


@pytest.mark.parametrize(("raw", "expected"), [("0.01", 0.5), ("3", 3.0), ("600", 30.0), ("soon", 5.0)])
def test_settings_clamps_attempt_timeout(monkeypatch, raw, expected):
    monkeypatch.setenv("REWRITE_ATTEMPT_TIMEOUT_SECONDS", raw)

    settings = Settings()

    assert settings.rewrite_attempt_timeout_seconds == expected


@pytest.mark.parametrize(("raw", "expected"), [("debug", "DEBUG"), (" warning ", "WARNING"), ("loud", "INFO")])
def test_settings_normalizes_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)

    assert Settings().log_level == expected
