"""Unit tests for ClientSettings."""

import pytest

from expense_client.config.settings import ClientSettings


class TestClientSettings:
    def test_defaults_are_correct(self):
        settings = ClientSettings()

        assert settings.api_base_url == "http://localhost:8000"
        assert settings.request_timeout_seconds is None
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_env_prefix_is_expense(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EXPENSE_API_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("EXPENSE_REQUEST_TIMEOUT_SECONDS", "7.5")
        monkeypatch.setenv("EXPENSE_LOG_JSON", "true")

        settings = ClientSettings()

        assert settings.api_base_url == "https://api.example.com"
        assert settings.request_timeout_seconds == 7.5
        assert settings.log_json is True

    def test_unprefixed_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_BASE_URL", "https://wrong.example.com")

        assert ClientSettings().api_base_url == "http://localhost:8000"

    def test_timeout_must_be_positive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EXPENSE_REQUEST_TIMEOUT_SECONDS", "0")

        with pytest.raises(Exception):
            ClientSettings()

    def test_empty_base_url_rejected(self):
        with pytest.raises(Exception):
            ClientSettings(api_base_url="")
