"""Tests for client configuration loading and validation."""

import json

import pydantic
import pytest

from tigerbay import Client, ClientConfig, EnvCredentials
from tigerbay.config import CONFIG_ENV_VAR, DEFAULT_TIMEOUT, load_config


def _noop_credentials():
    raise AssertionError("credentials should not be requested")


def test_client_config_defaults():
    """Timeout defaults and auth_url falls back to base_url."""
    config = ClientConfig(base_url="https://api.test", credentials=_noop_credentials)

    assert config.timeout == DEFAULT_TIMEOUT
    assert config.resolved_auth_url == "https://api.test"


def test_client_config_separate_auth_url():
    """An explicit auth_url is used for authentication."""
    config = ClientConfig(
        base_url="https://api.test/nimble",
        auth_url="https://auth.test",
        credentials=_noop_credentials,
    )

    assert config.resolved_auth_url == "https://auth.test"


def test_client_config_rejects_empty_base_url():
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(base_url="", credentials=_noop_credentials)


def test_client_config_rejects_non_positive_timeout():
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(
            base_url="https://api.test", timeout=0, credentials=_noop_credentials
        )


def test_client_config_rejects_non_callable_credentials():
    with pytest.raises(pydantic.ValidationError):
        ClientConfig(base_url="https://api.test", credentials="not-callable")


# ---------------------------------------------------------------------------
# Settings files
# ---------------------------------------------------------------------------


def test_load_config_reads_json(tmp_path):
    """Settings are read from JSON with defaults for omitted keys."""
    path = tmp_path / "tigerbay.json"
    path.write_text(json.dumps({"base_url": "https://api.test", "timeout": 5}))

    settings = load_config(path)

    assert settings.base_url == "https://api.test"
    assert settings.timeout == 5
    assert settings.credentials_env_prefix == "TB"
    assert settings.log_level == "INFO"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="not found"):
        load_config(tmp_path / "absent.json")


def test_settings_build_env_credentials(tmp_path):
    """Settings produce a config whose credentials come from the environment."""
    path = tmp_path / "tigerbay.json"
    path.write_text(
        json.dumps({"base_url": "https://api.test", "credentials_env_prefix": "ACME"})
    )

    config = load_config(path).to_client_config()

    assert isinstance(config.credentials, EnvCredentials)
    assert config.credentials.prefix == "ACME"


def test_from_config_file_uses_env_var(tmp_path, monkeypatch):
    """Client.from_config_file falls back to TIGERBAY_CONFIG_PATH."""
    path = tmp_path / "tigerbay.json"
    path.write_text(
        json.dumps(
            {
                "base_url": "https://api.test",
                "auth_url": "https://auth.test",
                "log_level": "WARNING",
            }
        )
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    with Client.from_config_file() as client:
        assert client.config.base_url == "https://api.test"
        assert client.authenticator.token_url == (
            "https://auth.test/security/users/authenticate"
        )


def test_from_config_file_without_path(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    with pytest.raises(FileNotFoundError, match=CONFIG_ENV_VAR):
        Client.from_config_file()
