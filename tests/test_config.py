"""Tests for settings loading and logging setup."""

import logging

import pytest

from recordbook.config import Settings, configure_logging, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # set-then-delete so teardown also clears values written by load_dotenv
    for name in ("RECORDBOOK_LOG_LEVEL", "RECORDBOOK_PHONE_REGION"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_defaults_without_env_or_file():
    assert load_settings() == Settings(log_level="INFO", phone_region="US")


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RECORDBOOK_LOG_LEVEL", " debug ")
    monkeypatch.setenv("RECORDBOOK_PHONE_REGION", "it")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.phone_region == "IT"


def test_reads_env_file(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("RECORDBOOK_LOG_LEVEL=WARNING\nRECORDBOOK_PHONE_REGION=GB\n")
    settings = load_settings(env_file)
    assert settings == Settings(log_level="WARNING", phone_region="GB")


def test_environment_wins_over_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("RECORDBOOK_PHONE_REGION=GB\n")
    monkeypatch.setenv("RECORDBOOK_PHONE_REGION", "US")
    assert load_settings().phone_region == "US"


def test_unknown_log_level_raises(monkeypatch):
    monkeypatch.setenv("RECORDBOOK_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="Unknown log level"):
        load_settings()


def test_configure_logging_sets_root_level(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)
    configure_logging(Settings(log_level="DEBUG"))
    assert root.level == logging.DEBUG
    assert root.handlers
