"""Shared fixtures for the weather API tests.

Settings are rebuilt from a controlled environment for every test so a
developer's local `.env` never leaks into assertions. Upstream calls are
intercepted with respx; nothing here reaches the network.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.weather_client import WeatherClient

API_KEY = "test-api-key"
BASE_URL = "https://api.openweathermap.org/data/2.5"
WEATHER_URL = f"{BASE_URL}/weather"
FORECAST_URL = f"{BASE_URL}/forecast"

_MANAGED_ENV = (
    "APP_NAME",
    "ENV",
    "API_PREFIX",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "OPENWEATHERMAP_API_KEY",
    "OPENWEATHER_BASE_URL",
    "WEATHER_TIMEOUT_SECONDS",
    "DEFAULT_FORECAST_CITY",
    "CORS_ALLOW_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
    "FRONTEND_DIST",
)


@pytest.fixture
def make_settings(monkeypatch: pytest.MonkeyPatch) -> Callable[..., Settings]:
    """Build Settings from a clean environment plus the given overrides."""

    def _make(**env: str) -> Settings:
        for name in _MANAGED_ENV:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("OPENWEATHERMAP_API_KEY", API_KEY)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return Settings()

    return _make


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    return make_settings()


@pytest.fixture
async def weather_client(settings: Settings) -> AsyncIterator[WeatherClient]:
    """Gateway with a real httpx client for respx mocking."""
    async with httpx.AsyncClient() as http_client:
        yield WeatherClient.from_settings(settings, http_client=http_client)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client running the full app, startup and shutdown included."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
