# PW/pager/services/window_config.py
"""Сборка неизменяемой конфигурации окна пагинации из опций вызова и дефолтов.

Порядок разрешения для каждого поля: явная опция → опция-синоним
(inner_window для window, num_pages для total_pages) → дефолт процесса.
Опция со значением None считается незаданной.

Особое правило: для left/right/decade_left/decade_right значение 0 означает
«взять outer_window / decade», а не «окна нет». Выключить внешнее окно можно
только через outer_window=0 (см. DESIGN.md).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from pager.conf import get_defaults
from .decades import left_decade, right_decade

logger = logging.getLogger(__name__)

KNOWN_OPTIONS = frozenset({
    "window", "inner_window", "outer_window",
    "left", "right",
    "decade", "decade_left", "decade_right",
    "total_pages", "num_pages", "current_page",
})


class InvalidConfiguration(ValueError):
    """Опции окна нельзя превратить в корректную конфигурацию."""


def _as_int(name: str, value: Any) -> int:
    # True → 1 и 2.7 → 2 молча не проходят; inf/nan тоже сюда
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}") from exc


def non_negative(name: str, value: Any) -> int:
    """Целое >= 0 из значения опции или настройки, иначе InvalidConfiguration."""
    number = _as_int(name, value)
    if number < 0:
        raise InvalidConfiguration(f"{name} must be >= 0, got {number}")
    return number


def _pick(options: Mapping[str, Any], *names: str) -> Any:
    """Первое заданное (не None) значение среди имён."""
    for name in names:
        value = options.get(name)
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class WindowConfig:
    total_pages: int
    current_page: int
    window: int
    left: int
    right: int
    decade_left: int
    decade_right: int
    # считаются один раз на рендер, от текущей страницы не зависят
    left_decade: Tuple[int, ...] = field(init=False, repr=False)
    right_decade: Tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for name in ("total_pages", "window", "left", "right", "decade_left", "decade_right"):
            object.__setattr__(self, name, non_negative(name, getattr(self, name)))

        current = _as_int("current_page", self.current_page)
        clamped = max(1, min(current, max(self.total_pages, 1)))
        if clamped != current:
            logger.debug("current_page %s clamped to %s (total_pages=%s)", current, clamped, self.total_pages)
        object.__setattr__(self, "current_page", clamped)

        object.__setattr__(self, "left_decade", left_decade(self.decade_left, self.total_pages))
        object.__setattr__(self, "right_decade", right_decade(self.decade_right, self.total_pages))

    @classmethod
    def from_options(cls, defaults: Optional[Mapping[str, Any]] = None, **options: Any) -> "WindowConfig":
        """Собрать конфигурацию из именованных опций.

        defaults — словарь в нижнем регистре ({"window": 4, ...}); по умолчанию
        берётся из settings.PAGER через pager.conf.get_defaults().

        Raises:
            InvalidConfiguration: неизвестная опция, total_pages не задан,
                нецелые или отрицательные размеры окон.
        """
        unknown = set(options) - KNOWN_OPTIONS
        if unknown:
            raise InvalidConfiguration(f"unknown options: {', '.join(sorted(unknown))}")

        if defaults is None:
            defaults = get_defaults()

        def resolve(*names: str) -> int:
            value = _pick(options, *names)
            if value is None:
                value = defaults.get(names[0])
            return non_negative(names[0], value)

        total_pages = _pick(options, "total_pages", "num_pages")
        if total_pages is None:
            raise InvalidConfiguration("total_pages is required")

        current_page = _pick(options, "current_page")
        window = resolve("window", "inner_window")
        outer_window = resolve("outer_window")
        decade = resolve("decade")

        sides = {
            "left": resolve("left"),
            "right": resolve("right"),
            "decade_left": resolve("decade_left"),
            "decade_right": resolve("decade_right"),
        }
        fallbacks = {"left": outer_window, "right": outer_window,
                     "decade_left": decade, "decade_right": decade}
        for name, value in sides.items():
            if value == 0:
                # ноль не выключает окно, а берёт общий дефолт
                sides[name] = fallbacks[name]
                logger.debug("%s=0 resolved to %s", name, fallbacks[name])

        return cls(
            total_pages=non_negative("total_pages", total_pages),
            current_page=1 if current_page is None else _as_int("current_page", current_page),
            window=window,
            **sides,
        )
