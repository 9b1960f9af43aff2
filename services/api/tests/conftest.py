import pytest

from app.core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    for name in ("REDIS_URL", "RELAY_URL", "HUMANIZER_API_URL", "CHARGE_FALLBACK_REWRITES", "RELAY_WORD_SWAP"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
