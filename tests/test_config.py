"""Tests for settings and startup-time configuration checks."""

import logging

import pytest

from app.core.config import Settings
from app.core.hashids import HashIdLookup
from app.core.logging import configure_logging
from app.exceptions import ConfigurationError
from app.main import create_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_KEY", "HASHID_SALT", "HASHID_MIN_LENGTH", "HASHID_ALPHABET", "HASHID_LOOKUP"):
        monkeypatch.delenv(name, raising=False)


def test_hashid_salt_falls_back_to_app_key() -> None:
    settings = Settings(_env_file=None, app_key="base64:appkey")
    assert settings.hashid_options().salt == "base64:appkey"


def test_dedicated_hashid_salt_wins() -> None:
    settings = Settings(_env_file=None, app_key="base64:appkey", hashid_salt="dedicated")
    assert settings.hashid_options().salt == "dedicated"


def test_missing_salt_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="HASHID_SALT"):
        Settings(_env_file=None).hashid_options()


def test_create_app_fails_fast_without_salt() -> None:
    with pytest.raises(ConfigurationError):
        create_app(Settings(_env_file=None))


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HASHID_SALT", "from-env")
    monkeypatch.setenv("HASHID_MIN_LENGTH", "16")
    monkeypatch.setenv("HASHID_LOOKUP", "column")

    settings = Settings(_env_file=None)
    options = settings.hashid_options()

    assert options.salt == "from-env"
    assert options.min_length == 16
    assert settings.hashid_lookup is HashIdLookup.COLUMN


def test_configure_logging_tolerates_unknown_level(mocker) -> None:
    basic_config = mocker.patch("logging.basicConfig")
    configure_logging(Settings(_env_file=None, log_level="LOUD"))
    assert basic_config.call_args.kwargs["level"] == logging.INFO


def test_configure_logging_debug_overrides_level(mocker) -> None:
    basic_config = mocker.patch("logging.basicConfig")
    configure_logging(Settings(_env_file=None, debug=True, log_level="ERROR"))
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
