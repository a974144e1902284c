# ABOUTME: Tests for environment-driven application configuration
# ABOUTME: Validates defaults, the FANDOM_FOLIO_ prefix and reload behaviour

import pytest
from pydantic import ValidationError

from fandom_folio.config import Config, get_config, reload_config


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reload_config()


def test_defaults(monkeypatch):
    for name in ("USER_AGENT", "REQUEST_TIMEOUT", "MAX_RETRIES", "LOG_LEVEL", "IMAGE_HOSTS"):
        monkeypatch.delenv(f"FANDOM_FOLIO_{name}", raising=False)

    config = Config(_env_file=None)

    assert "fandom-folio" in config.user_agent
    assert config.request_timeout == 20.0
    assert config.max_retries == 3
    assert config.log_level == "INFO"
    assert config.image_hosts == ["wikia.nocookie.net", "fandom.com"]


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("FANDOM_FOLIO_MAX_RETRIES", "5")
    monkeypatch.setenv("FANDOM_FOLIO_IMAGE_HOSTS", '["example.org"]')

    config = Config(_env_file=None)

    assert config.max_retries == 5
    assert config.image_hosts == ["example.org"]


def test_invalid_retry_count(monkeypatch):
    monkeypatch.setenv("FANDOM_FOLIO_MAX_RETRIES", "0")
    with pytest.raises(ValidationError):
        Config(_env_file=None)


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_reload_config_picks_up_changes(monkeypatch):
    get_config()
    monkeypatch.setenv("FANDOM_FOLIO_LOG_LEVEL", "DEBUG")

    assert reload_config().log_level == "DEBUG"
    assert get_config().log_level == "DEBUG"
