from __future__ import annotations

import pytest

import initiative_status.config as config
from initiative_status.config import DEFAULT_TEAM_ID, LINEAR_API_URL, TABS, LinearSettings
from initiative_status.data.exceptions import ConfigurationError


def _fake_secrets(values):
    return lambda name, default=None: values.get(name, default)


def test_settings_defaults(monkeypatch):
    monkeypatch.setattr(config, "get_secret", _fake_secrets({"LINEAR_API_KEY": "lin_api_x"}))

    settings = LinearSettings.from_env()

    assert settings.api_key == "lin_api_x"
    assert settings.team_id == DEFAULT_TEAM_ID
    assert settings.api_url == LINEAR_API_URL
    assert settings.timeout_seconds == config.DEFAULT_TIMEOUT_SECONDS


def test_settings_overrides(monkeypatch):
    monkeypatch.setattr(
        config,
        "get_secret",
        _fake_secrets(
            {
                "LINEAR_API_KEY": "k",
                "LINEAR_TEAM_ID": "team-1",
                "LINEAR_API_URL": "https://linear.test/graphql",
                "LINEAR_TIMEOUT_SECONDS": "3.5",
            }
        ),
    )

    settings = LinearSettings.from_env()

    assert settings.team_id == "team-1"
    assert settings.api_url == "https://linear.test/graphql"
    assert settings.timeout_seconds == 3.5


def test_invalid_timeout_falls_back_to_default(monkeypatch):
    monkeypatch.setattr(config, "get_secret", _fake_secrets({"LINEAR_TIMEOUT_SECONDS": "soon"}))

    assert LinearSettings.from_env().timeout_seconds == config.DEFAULT_TIMEOUT_SECONDS


def test_require_api_key_raises_when_missing():
    with pytest.raises(ConfigurationError, match="LINEAR_API_KEY"):
        LinearSettings(api_key=None).require_api_key()
    assert LinearSettings(api_key="k").require_api_key() == "k"


def test_get_secret_prefers_environment(monkeypatch):
    monkeypatch.setenv("LINEAR_TEAM_ID", "from-env")

    assert config.get_secret("LINEAR_TEAM_ID") == "from-env"


def test_get_secret_default_when_unset(monkeypatch):
    monkeypatch.delenv("INITIATIVE_STATUS_UNSET", raising=False)
    monkeypatch.setattr(config.st, "secrets", None, raising=False)

    assert config.get_secret("INITIATIVE_STATUS_UNSET", "fallback") == "fallback"


def test_tabs_are_unique():
    keys = [tab.key for tab in TABS]
    assert len(keys) == len(set(keys))
