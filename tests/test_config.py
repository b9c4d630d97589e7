"""Tests for environment settings."""

from pathlib import Path

from senametrics.config import DEFAULT_CORS_ORIGINS, DEFAULT_DB_PATH, load_settings


class TestLoadSettings:
    """Test reading settings from the environment."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SENAMETRICS_DB_PATH", raising=False)
        monkeypatch.delenv("SENAMETRICS_DATA_FILE", raising=False)
        monkeypatch.delenv("SENAMETRICS_CORS_ORIGINS", raising=False)

        settings = load_settings()
        assert settings.db_path == DEFAULT_DB_PATH
        assert settings.data_file == Path("data/data.json")
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("SENAMETRICS_DB_PATH", "/tmp/x.db")
        monkeypatch.setenv("SENAMETRICS_DATA_FILE", "/tmp/x.json")
        monkeypatch.setenv("SENAMETRICS_CORS_ORIGINS", "https://a.example, https://b.example,")

        settings = load_settings()
        assert settings.db_path == Path("/tmp/x.db")
        assert settings.data_file == Path("/tmp/x.json")
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_server_address(self, monkeypatch):
        monkeypatch.setenv("SENAMETRICS_HOST", "0.0.0.0")
        monkeypatch.setenv("SENAMETRICS_PORT", "9000")

        settings = load_settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
