"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from finboard_config.settings import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_database_url_from_components(self):
        settings = Settings(
            postgres_user="finboard",
            postgres_password="pw",
            postgres_host="db",
            postgres_port=5433,
            postgres_db="finboard_test",
        )

        assert settings.database_url == (
            "postgresql+asyncpg://finboard:pw@db:5433/finboard_test"
        )

    def test_database_url_override_wins(self):
        settings = Settings(database_url_override="sqlite+aiosqlite:///:memory:")
        assert settings.database_url == "sqlite+aiosqlite:///:memory:"

    def test_cors_origins_are_split(self):
        settings = Settings(api_cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_plaid_base_url_follows_environment(self):
        assert Settings(plaid_env="sandbox").plaid_base_url == (
            "https://sandbox.plaid.com"
        )
        assert Settings(plaid_env="production").plaid_base_url == (
            "https://production.plaid.com"
        )

    def test_unknown_plaid_environment_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(plaid_env="staging")

    def test_country_code_is_normalized(self):
        assert Settings(plaid_country_code=" us ").plaid_country_code == "US"

    def test_invalid_country_code_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(plaid_country_code="USA")

    def test_secret_is_not_exposed(self):
        settings = Settings(plaid_secret="top-secret")
        assert "top-secret" not in repr(settings)


class TestGetSettings:
    def test_reads_environment_and_caches(self, monkeypatch):
        monkeypatch.setenv("PLAID_CLIENT_ID", "from-env")
        clear_settings_cache()

        try:
            first = get_settings()
            monkeypatch.setenv("PLAID_CLIENT_ID", "changed")
            assert get_settings() is first
            assert first.plaid_client_id == "from-env"
        finally:
            clear_settings_cache()
