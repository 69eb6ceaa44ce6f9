import json

import pytest

from app.config import ConfigFileError, ConfigStore, Settings, get_settings
from billingo import DEFAULT_BASE_URL


def test_unconfigured_store_has_defaults(tmp_path) -> None:
    store = ConfigStore(tmp_path / "config.json")

    assert store.get("apiKey") is None
    assert store.get("baseUrl") == DEFAULT_BASE_URL
    assert store.is_configured() is False
    assert store.source("apiKey") == "unset"
    assert store.source("baseUrl") == "default"


def test_set_persists_json_file(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    store = ConfigStore(path)

    store.set("apiKey", "secret")
    store.set("baseUrl", "https://sandbox.billingo.test/v3")

    assert json.loads(path.read_text()) == {
        "apiKey": "secret",
        "baseUrl": "https://sandbox.billingo.test/v3",
    }
    reloaded = ConfigStore(path)
    assert reloaded.get("apiKey") == "secret"
    assert reloaded.is_configured() is True
    assert reloaded.source("apiKey") == "file"


def test_environment_overrides_stored_values(tmp_path, monkeypatch) -> None:
    path = tmp_path / "config.json"
    ConfigStore(path).set("apiKey", "from-file")
    monkeypatch.setenv("BILLINGO_API_KEY", "from-env")
    get_settings.cache_clear()

    store = ConfigStore(path)

    assert store.get("apiKey") == "from-env"
    assert store.stored("apiKey") == "from-file"
    assert store.source("apiKey") == "env"


def test_explicit_base_url_overrides_default(tmp_path) -> None:
    store = ConfigStore(tmp_path / "config.json")
    store.set("apiKey", "k")
    store.set("baseUrl", "https://proxy.example.com/v3")

    credentials = store.credentials()

    assert credentials.api_key == "k"
    assert credentials.base_url == "https://proxy.example.com/v3"


def test_unset_removes_stored_value(tmp_path) -> None:
    store = ConfigStore(tmp_path / "config.json")
    store.set("apiKey", "k")

    assert store.unset("apiKey") is True
    assert store.unset("apiKey") is False
    assert store.is_configured() is False


def test_unknown_key_is_rejected(tmp_path) -> None:
    store = ConfigStore(tmp_path / "config.json")

    with pytest.raises(KeyError):
        store.set("timeout", "5")
    with pytest.raises(KeyError):
        store.get("timeout")


def test_settings_read_config_file_path_from_env(tmp_path, monkeypatch) -> None:
    target = tmp_path / "elsewhere.json"
    monkeypatch.setenv("BILLINGO_CONFIG_FILE", str(target))

    assert Settings().config_file == target
    assert ConfigStore(settings=Settings()).path == target


@pytest.mark.parametrize("content", ["{corrupt", "[1, 2]"])
def test_unreadable_config_file_raises_config_file_error(tmp_path, content) -> None:
    path = tmp_path / "config.json"
    path.write_text(content)

    with pytest.raises(ConfigFileError, match="Config file"):
        ConfigStore(path).get("apiKey")
