# pager/apps.py
from django.apps import AppConfig
from django.core import checks


def check_pager_settings(app_configs=None, **kwargs):
    """
    Проверяем settings.PAGER при старте (manage.py check / runserver).
    Ловим опечатки в ключах и значения, которые WindowConfig не примет
    (тем же приведением, что и при рендере: "3" подходит, True и 2.5 — нет).
    """
    from django.conf import settings
    from pager.conf import DEFAULTS
    from pager.services.window_config import InvalidConfiguration, non_negative

    errors = []
    overrides = getattr(settings, "PAGER", None) or {}
    for key, value in overrides.items():
        if key not in DEFAULTS:
            errors.append(checks.Error(
                f"Неизвестный ключ PAGER[{key!r}]",
                hint=f"Допустимые ключи: {', '.join(sorted(DEFAULTS))}",
                id="pager.E001",
            ))
            continue
        try:
            non_negative(key.lower(), value)
        except InvalidConfiguration as exc:
            errors.append(checks.Error(
                f"PAGER[{key!r}] должен быть целым >= 0, получено {value!r}",
                hint=str(exc),
                id="pager.E002",
            ))
    return errors


class PagerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pager"
    verbose_name = "Окно пагинации"

    def ready(self):
        checks.register(check_pager_settings)
