"""
Unit Tests for Settings
"""
from wellness_correlation.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("APP_NAME", "LOG_LEVEL", "LOG_FILE", "CORS_ORIGINS", "PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()
        assert settings.app_name == "Wellness Correlation API"
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.cors_origins == ["*"]
        assert settings.port == 8000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
        monkeypatch.setenv("PORT", "9001")

        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["https://a.example", "https://b.example"]
        assert settings.port == 9001
