from __future__ import annotations

import dataclasses

import pytest

from webservice_client.config import ClientConfig, ResponseMode
from webservice_client.errors import ConfigurationError
from webservice_client.serialization import deserialize, serialize


def test_defaults() -> None:
    cfg = ClientConfig(base_url="https://api.example.com")
    assert cfg.timeout == 10.0
    assert cfg.max_retries == 0
    assert cfg.backoff_seconds == 1.0
    assert cfg.content_type == "application/json"
    assert cfg.serializer is serialize
    assert cfg.deserializer is deserialize
    assert cfg.logger is None
    assert cfg.response_mode is ResponseMode.RAW
    assert cfg.headers == {}


def test_config_is_immutable() -> None:
    cfg = ClientConfig(base_url="https://api.example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.max_retries = 3  # type: ignore[misc]


def test_replace_returns_new_config() -> None:
    cfg = ClientConfig(base_url="https://api.example.com")
    other = cfg.replace(max_retries=2)
    assert other.max_retries == 2
    assert cfg.max_retries == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_url": ""},
        {"base_url": None},
        {"base_url": "https://x", "max_retries": -1},
        {"base_url": "https://x", "backoff_seconds": -0.5},
        {"base_url": "https://x", "timeout": 0},
        {"base_url": "https://x", "headers": ["X-Foo"]},
        {"base_url": "https://x", "response_mode": "streaming"},
    ],
)
def test_invalid_config(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        ClientConfig(**kwargs)


def test_response_mode_accepts_strings() -> None:
    cfg = ClientConfig(base_url="https://x", response_mode="wrapped")
    assert cfg.response_mode is ResponseMode.WRAPPED


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("WEBSERVICE_CLIENT_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("WEBSERVICE_CLIENT_TIMEOUT", "2.5")
    monkeypatch.setenv("WEBSERVICE_CLIENT_RETRIES", "4")
    monkeypatch.setenv("WEBSERVICE_CLIENT_BACKOFF_SECONDS", "0")
    monkeypatch.setenv("WEBSERVICE_CLIENT_CONTENT_TYPE", "application/vnd.api+json")
    cfg = ClientConfig.from_env()
    assert cfg.base_url == "https://env.example.com"
    assert cfg.timeout == 2.5
    assert cfg.max_retries == 4
    assert cfg.backoff_seconds == 0
    assert cfg.content_type == "application/vnd.api+json"


def test_from_env_overrides_and_prefix(monkeypatch) -> None:
    monkeypatch.setenv("WIDGETS_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("WIDGETS_RETRIES", "4")
    cfg = ClientConfig.from_env("WIDGETS_", max_retries=1)
    assert cfg.base_url == "https://env.example.com"
    assert cfg.max_retries == 1


def test_from_env_requires_base_url(monkeypatch) -> None:
    monkeypatch.delenv("WEBSERVICE_CLIENT_BASE_URL", raising=False)
    with pytest.raises(ConfigurationError):
        ClientConfig.from_env()


def test_from_env_rejects_bad_numbers(monkeypatch) -> None:
    monkeypatch.setenv("WEBSERVICE_CLIENT_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("WEBSERVICE_CLIENT_RETRIES", "lots")
    with pytest.raises(ConfigurationError):
        ClientConfig.from_env()


def test_headers_are_copied_and_frozen() -> None:
    headers = {"X-Auth-Token": "abc"}
    cfg = ClientConfig(base_url="https://x", headers=headers)
    headers["X-Auth-Token"] = "changed"
    assert cfg.headers["X-Auth-Token"] == "abc"
    with pytest.raises(TypeError):
        cfg.headers["X-Auth-Token"] = "changed"  # type: ignore[index]
    copy = cfg.replace(max_retries=1)
    assert copy.headers == {"X-Auth-Token": "abc"}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_retries": "2"},
        {"max_retries": None},
        {"max_retries": 1.5},
        {"max_retries": True},
        {"timeout": None},
        {"timeout": "10"},
        {"backoff_seconds": None},
    ],
)
def test_non_numeric_settings_are_configuration_errors(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        ClientConfig(base_url="https://x", **kwargs)
