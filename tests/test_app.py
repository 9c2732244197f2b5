"""
QuickNote Backend: Configuration & Health Tests
==================================================

What:  Settings parsing/validation and the /health endpoint.
"""

import pytest
from pydantic import ValidationError as SettingsValidationError

from quicknote.config import Settings
from quicknote.services.validation import ValidationLimits


class TestSettings:

    def test_default_validation_limits(self, monkeypatch):
        monkeypatch.delenv("MAX_TITLE_LENGTH", raising=False)
        monkeypatch.delenv("MAX_CONTENT_LENGTH", raising=False)

        settings = Settings(_env_file=None)

        assert settings.validation_limits == ValidationLimits(max_title=255, max_content=10_000)

    def test_limits_from_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_CONTENT_LENGTH", "500")

        settings = Settings(_env_file=None)

        assert settings.validation_limits.max_content == 500

    def test_title_limit_cannot_exceed_column_size(self):
        with pytest.raises(SettingsValidationError):
            Settings(_env_file=None, max_title_length=256)

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(
            _env_file=None, cors_origins="http://localhost:3000, https://notes.example.com"
        )

        assert settings.cors_origins_list == [
            "http://localhost:3000",
            "https://notes.example.com",
        ]

    def test_is_sqlite(self):
        assert Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:").is_sqlite
        assert not Settings(
            _env_file=None, database_url="postgresql+asyncpg://u:p@db/notes"
        ).is_sqlite


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["message"] == "QuickNote API is running"
        assert body["database"] == "connected"
        assert body["version"]
