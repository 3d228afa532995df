# PW/pager/conf.py
# --- Дефолты окна пагинации уровня процесса ---

from typing import Dict

from django.conf import settings

# Встроенная таблица; settings.PAGER накладывается поверх неё
DEFAULTS: Dict[str, int] = {
    "WINDOW": 4,
    "OUTER_WINDOW": 1,
    "LEFT": 0,
    "RIGHT": 0,
    "DECADE": 0,
    "DECADE_LEFT": 0,
    "DECADE_RIGHT": 0,
    "MAX_WINDOW": 50,
}


def get_defaults() -> Dict[str, object]:
    """Дефолты в виде {"window": 4, "outer_window": 1, ...}.

    Читаем settings при каждом вызове, чтобы override_settings работал в тестах.
    Значения не приводим — это делает WindowConfig.from_options.
    """
    merged = dict(DEFAULTS)
    merged.update(getattr(settings, "PAGER", None) or {})
    return {key.lower(): value for key, value in merged.items()}


def get_max_window() -> int:
    """Потолок размеров окон, которые можно запросить через API."""
    from pager.services.window_config import non_negative

    return non_negative("max_window", get_defaults()["max_window"])
