"""Tests for environment-driven settings and log setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from json_to_typescript_generator.logging_config import ExtrasFormatter, build_log_config
from json_to_typescript_generator.settings import ConverterSettings

_ENV_NAMES = (
    "JSON_TO_TS_TIMEOUT_SECONDS",
    "JSON_TO_TS_FOLLOW_REDIRECTS",
    "JSON_TO_TS_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Run from an empty directory with no ``JSON_TO_TS_*`` variables set."""
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = ConverterSettings()
    assert settings.timeout_seconds == 30.0
    assert settings.follow_redirects is True
    assert settings.log_level == "WARNING"


def test_environment_overrides(clean_env: pytest.MonkeyPatch) -> None:
    """``JSON_TO_TS_*`` variables replace the defaults."""
    clean_env.setenv("JSON_TO_TS_TIMEOUT_SECONDS", "5")
    clean_env.setenv("JSON_TO_TS_FOLLOW_REDIRECTS", "false")
    clean_env.setenv("JSON_TO_TS_LOG_LEVEL", "DEBUG")

    settings = ConverterSettings()

    assert settings.timeout_seconds == 5.0
    assert settings.follow_redirects is False
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_read(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A ``.env`` file in the working directory is honoured."""
    (tmp_path / ".env").write_text("JSON_TO_TS_TIMEOUT_SECONDS=12.5\n", encoding="utf-8")

    assert ConverterSettings().timeout_seconds == 12.5


@pytest.mark.parametrize("raw", ["0", "-1", "soon"])
def test_invalid_timeout_is_rejected(clean_env: pytest.MonkeyPatch, raw: str) -> None:
    """Timeouts must be positive numbers."""
    clean_env.setenv("JSON_TO_TS_TIMEOUT_SECONDS", raw)

    with pytest.raises(ValidationError):
        ConverterSettings()


def test_settings_are_frozen(clean_env: pytest.MonkeyPatch) -> None:
    settings = ConverterSettings()
    with pytest.raises(ValidationError):
        settings.timeout_seconds = 1.0  # type: ignore[misc]


def test_build_log_config_uppercases_level() -> None:
    config = build_log_config("debug")
    package_logger = config["loggers"]["json_to_typescript_generator"]
    assert package_logger["level"] == "DEBUG"
    assert package_logger["propagate"] is False


def test_extras_formatter_appends_data() -> None:
    """Structured ``data`` extras are appended as compact JSON."""
    formatter = ExtrasFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "fetching payload", None, None)
    record.data = {"url": "https://api.example.test", "method": "GET"}

    assert formatter.format(record) == (
        'INFO fetching payload | data={"method":"GET","url":"https://api.example.test"}'
    )


def test_extras_formatter_without_data() -> None:
    formatter = ExtrasFormatter("%(message)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", None, None)

    assert formatter.format(record) == "plain"
