import pytest
from pydantic import ValidationError

from gh_rest.config import ClientConfig


def test_defaults():
    config = ClientConfig()
    assert config.base_url == "https://api.github.com"
    assert config.api_version == "2022-11-28"
    assert config.accept == "application/vnd.github+json"


def test_base_url_trailing_slash_is_stripped():
    assert ClientConfig(base_url="https://ghe.example.com/api/v3/").base_url == (
        "https://ghe.example.com/api/v3"
    )


def test_config_is_read_only():
    config = ClientConfig()
    with pytest.raises(ValidationError):
        config.base_url = "https://elsewhere.example.com"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        ClientConfig(timeout=0)


def test_from_env(monkeypatch):
    monkeypatch.setenv("GH_REST_BASE_URL", "https://ghe.example.com/api/v3")
    monkeypatch.setenv("GH_REST_TIMEOUT", "5")
    monkeypatch.delenv("GH_REST_API_VERSION", raising=False)
    config = ClientConfig.from_env()
    assert config.base_url == "https://ghe.example.com/api/v3"
    assert config.timeout == 5.0
    assert config.api_version == "2022-11-28"
