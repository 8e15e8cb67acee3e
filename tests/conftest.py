import logging
from datetime import datetime, timezone

import pytest

from boxoffice.core.config import get_settings


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 10, 30, 11, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
