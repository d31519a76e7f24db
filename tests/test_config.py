"""Tests for settings loading and the user .env file."""

import pytest
from pydantic import ValidationError

from cli.session import load_settings
from core.config import AppSettings, write_user_env_vars


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.username == ""
    assert settings.password == ""
    assert settings.scheme == "https"
    assert settings.effective_port == 443
    assert settings.verify_tls is False


def test_reads_mt_prefixed_environment(monkeypatch):
    monkeypatch.setenv("MT_USERNAME", "admin")
    monkeypatch.setenv("MT_PASSWORD", "s3cret")
    monkeypatch.setenv("MT_USE_TLS", "false")
    monkeypatch.setenv("MT_TIMEOUT_SECONDS", "2.5")

    settings = AppSettings(_env_file=None)

    assert (settings.username, settings.password) == ("admin", "s3cret")
    assert settings.effective_port == 80
    assert settings.timeout_seconds == 2.5


def test_reads_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("MT_USERNAME=from-file\nMT_PORT=8443\n", encoding="utf-8")

    settings = AppSettings()

    assert settings.username == "from-file"
    assert settings.effective_port == 8443


def test_invalid_port_is_rejected(monkeypatch):
    monkeypatch.setenv("MT_PORT", "70000")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_load_settings_applies_overrides(monkeypatch):
    monkeypatch.setenv("MT_USERNAME", "admin")

    settings = load_settings(port=8729, http=True, verify_tls=True, timeout=1.0)

    assert settings.username == "admin"
    assert settings.scheme == "http"
    assert settings.effective_port == 8729
    assert settings.verify_tls is True
    assert settings.timeout_seconds == 1.0


def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    monkeypatch.setattr("core.config.get_user_config_dir", lambda: tmp_path / "cfg")
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nMT_USERNAME=old\nMT_PORT=8443\n", encoding="utf-8")

    written = write_user_env_vars({"MT_USERNAME": "admin", "MT_PASSWORD": "pw", "MT_PORT": None})

    assert written == env_path
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["MT_PASSWORD=pw", "MT_PORT=8443", "MT_USERNAME=admin"]
    assert env_path.stat().st_mode & 0o777 == 0o600
