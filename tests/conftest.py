from collections.abc import AsyncIterator
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from gemini_stubs import DummyClient
from voice_expense.api.deps import get_today
from voice_expense.core.config import get_settings
from voice_expense.main import app

REFERENCE_DATE = date(2024, 6, 15)


@pytest.fixture
def install_gemini_client(monkeypatch: pytest.MonkeyPatch):
    def _install(response: object) -> DummyClient:
        dummy = DummyClient(response)
        monkeypatch.setattr(
            "voice_expense.services.ai.gemini_provider.httpx.AsyncClient",
            lambda *args, **kwargs: dummy,
        )
        return dummy

    return _install


@pytest.fixture
def ai_settings(monkeypatch: pytest.MonkeyPatch):
    settings = get_settings()
    monkeypatch.setattr(settings, "ai_enabled", True, raising=False)
    monkeypatch.setattr(settings, "ai_provider", "gemini", raising=False)
    monkeypatch.setattr(settings, "gemini_api_key", SecretStr("gm-test-key-123456"), raising=False)
    monkeypatch.setattr(settings, "gemini_model", "gemini-2.0-flash", raising=False)
    monkeypatch.setattr(settings, "expense_categories", "Food,Travel,Miscellaneous", raising=False)
    monkeypatch.setattr(settings, "default_currency", "usd", raising=False)
    monkeypatch.setattr(settings, "voice_max_upload_mb", 10, raising=False)
    return settings


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_today] = lambda: REFERENCE_DATE

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as test_client:
        yield test_client

    app.dependency_overrides.clear()
