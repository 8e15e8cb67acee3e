import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from boxoffice.core.config import Settings, get_settings
from boxoffice.core.logging import configure_logging


def test_settings_defaults():
    settings = Settings()

    assert settings.app_name == "Box Office"
    assert settings.log_level == "INFO"
    assert settings.demo_price == Decimal("49.99")
    assert settings.demo_sector == "C"


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("BOXOFFICE_DEMO_PRICE", "12.30")
    monkeypatch.setenv("BOXOFFICE_DEMO_SECTOR", "A")
    monkeypatch.setenv("BOXOFFICE_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.demo_price == Decimal("12.30")
    assert settings.demo_sector == "A"
    assert settings.log_level == "debug"


def test_settings_reject_negative_demo_price(monkeypatch):
    monkeypatch.setenv("BOXOFFICE_DEMO_PRICE", "-1")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_uses_settings_level():
    settings = Settings(app_name="box-office-test", log_level="debug")

    logger = configure_logging(settings)

    assert logger.name == "box-office-test"
    assert logger.level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_falls_back_to_info_for_unknown_level():
    settings = Settings(app_name="box-office-test", log_level="chatty")

    logger = configure_logging(settings)

    assert logger.level == logging.INFO
