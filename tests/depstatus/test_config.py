"""Tests for settings resolution."""

from __future__ import annotations

import pytest

from depstatus.core.config import DEFAULT_BASE_URL, Settings, load_settings


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings({}) == Settings(
            base_url=DEFAULT_BASE_URL,
            gauges_site_id=None,
            log_level="INFO",
            log_format="console",
        )
        assert DEFAULT_BASE_URL == "http://localhost:8080"

    def test_from_environ(self):
        settings = load_settings(
            {
                "DEPSTATUS_BASE_URL": "https://deps.rs/",
                "DEPSTATUS_GAUGES_SITE_ID": "site-1",
                "DEPSTATUS_LOG_LEVEL": "debug",
                "DEPSTATUS_LOG_FORMAT": "JSON",
            }
        )
        assert settings.base_url == "https://deps.rs"
        assert settings.gauges_site_id == "site-1"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_blank_site_id_is_unset(self):
        assert load_settings({"DEPSTATUS_GAUGES_SITE_ID": "  "}).gauges_site_id is None

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("DEPSTATUS_BASE_URL", "https://status.example.org")
        assert load_settings().base_url == "https://status.example.org"

    def test_settings_are_frozen(self):
        with pytest.raises(AttributeError):
            Settings().base_url = "x"  # type: ignore[misc]
