# PW/pager/tests/conftest.py
import pytest

from pager.services.window_config import WindowConfig
from pager.services.pagination import PageWindow

@pytest.fixture
def pager_settings(settings):
    """Дефолты процесса как в settings.py, чтобы локальный .env не влиял на тесты."""
    settings.PAGER = {
        "WINDOW": 4,
        "OUTER_WINDOW": 1,
        "LEFT": 0,
        "RIGHT": 0,
        "DECADE": 0,
        "DECADE_LEFT": 0,
        "DECADE_RIGHT": 0,
        "MAX_WINDOW": 50,
    }
    return settings

@pytest.fixture
def make_window(pager_settings):
    """Фабрика: make_window(total_pages=…, current_page=…, window=…) → PageWindow."""
    def _make(**options):
        return PageWindow(WindowConfig.from_options(**options))
    return _make
