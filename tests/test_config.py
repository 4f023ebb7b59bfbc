"""
Tests de la configuración
"""
from datetime import date

import pydantic
import pytest

from app.config import Settings


class TestSettings:

    def test_unknown_timezone_fails_on_load(self):
        with pytest.raises(pydantic.ValidationError) as exc:
            Settings(timezone="Mars/Base")
        assert "Mars/Base" in str(exc.value)

    def test_today_uses_configured_timezone(self):
        settings = Settings(timezone="Asia/Vladivostok")
        assert settings.timezone == "Asia/Vladivostok"
        assert isinstance(settings.today(), date)

    def test_timezone_from_environment(self, monkeypatch):
        monkeypatch.setenv("TIMEZONE", "Europe/Rome")
        assert Settings().timezone == "Europe/Rome"
