from typing import Optional

import pytest

from app.config import get_settings
from billingo import BillingoClient, Credentials
from tests.helpers import API_KEY, BASE_URL, Recorder


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the real ~/.billingohu.json and environment."""
    monkeypatch.chdir(tmp_path)
    for name in ("BILLINGO_API_KEY", "BILLINGO_BASE_URL", "BILLINGO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BILLINGO_CONFIG_FILE", str(tmp_path / "config.json"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def make_client(credentials):
    def _make(recorder: Recorder, creds: Optional[Credentials] = None) -> BillingoClient:
        return BillingoClient(creds or credentials, transport=recorder.transport)

    return _make
