import json

import pytest
from pydantic import ValidationError

from config.loader import load_client_config
from config.schemas.client_schema import ClientConfig
from infrastructure.adapters.configuration_adapter import ConfigurationAdapter


def test_defaults() -> None:
    config = ClientConfig()

    assert config.region == "us-east-1"
    assert config.max_retries == 3
    assert config.retry_mode == "standard"
    assert config.max_workers == 50
    assert config.log_format == "console"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(max_workers=0)
    with pytest.raises(ValidationError):
        ClientConfig(retry_mode="aggressive")


def test_load_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("AWSBIND_REGION", "eu-west-2")
    monkeypatch.setenv("AWSBIND_MAX_WORKERS", "8")

    config = load_client_config()

    assert config.region == "eu-west-2"
    assert config.max_workers == 8


def test_load_from_settings_file(tmp_path) -> None:
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"region": "ap-southeast-2", "read_timeout": 30}))

    config = load_client_config([str(settings_file)])

    assert config.region == "ap-southeast-2"
    assert config.read_timeout == 30


def test_overrides_win(monkeypatch) -> None:
    monkeypatch.setenv("AWSBIND_REGION", "eu-west-2")

    config = load_client_config(region="us-west-2", profile=None)

    assert config.region == "us-west-2"
    assert config.profile is None


def test_adapter_loads_once(monkeypatch) -> None:
    monkeypatch.setenv("AWSBIND_REGION", "eu-central-1")
    adapter = ConfigurationAdapter()

    first = adapter.get_client_config()
    monkeypatch.setenv("AWSBIND_REGION", "eu-north-1")

    assert adapter.get_client_config() is first
    assert first.region == "eu-central-1"
