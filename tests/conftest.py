import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setenv("APP_ENV", "test")

    from rucpy.core.settings import get_settings

    get_settings.cache_clear()

    from rucpy.main import app

    with TestClient(app) as test_client:
        yield test_client

    get_settings.cache_clear()
