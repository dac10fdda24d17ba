"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chroma_text import config
from chroma_text.config import Settings, get_settings, load_settings


class TestSettings:
    def test_defaults(self, settings: Settings):
        assert settings.escape_lead == "§"
        assert settings.gradients_enabled is True
        assert settings.approximate_colors is False
        assert settings.log_level == "WARNING"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHROMA_TEXT_ESCAPE_LEAD", "&")
        monkeypatch.setenv("CHROMA_TEXT_GRADIENTS", "false")
        monkeypatch.setenv("CHROMA_TEXT_APPROXIMATE", "true")

        settings = Settings(_env_file=None)

        assert settings.escape_lead == "&"
        assert settings.gradients_enabled is False
        assert settings.approximate_colors is True

    def test_by_field_name(self):
        settings = Settings(_env_file=None, escape_lead="&", gradients_enabled=False)

        assert settings.escape_lead == "&"
        assert settings.gradients_enabled is False

    def test_escape_lead_must_be_single_character(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, escape_lead="&&")
        with pytest.raises(ValidationError):
            Settings(_env_file=None, escape_lead="")


class TestGlobalSettings:
    def test_get_settings_is_cached(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(config, "_settings", None)

        assert get_settings() is get_settings()

    def test_load_settings_from_env_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ):
        monkeypatch.setattr(config, "_settings", None)
        env_file = tmp_path / "custom.env"
        env_file.write_text("CHROMA_TEXT_ESCAPE_LEAD=&\nCHROMA_TEXT_LOG_LEVEL=DEBUG\n")

        settings = load_settings(env_file)

        assert settings.escape_lead == "&"
        assert settings.log_level == "DEBUG"
        assert get_settings() is settings
