# PW/pager/services/pagination.py
"""Выбор «значимых» страниц вокруг текущей.

Полный диапазон 1..total_pages никогда не строится: берём только внешние окна
(+1 страница под тег разрыва), внутреннее окно (+1 с каждой стороны) и
страницы декад. Стоимость зависит от размеров окон, а не от total_pages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from .page_proxy import PageProxy
from .window_config import WindowConfig


def _clipped(start: int, stop: int, total: int) -> range:
    """range(start, stop + 1), обрезанный до [1, total]."""
    return range(max(start, 1), min(stop, total) + 1)


def relevant_pages(config: WindowConfig) -> List[int]:
    """Отсортированные уникальные номера страниц, которые нужно показать.

    Parameters
    ----------
    config : WindowConfig
        Разрешённая конфигурация окна.

    Returns
    -------
    List[int]
        Строго возрастающий список из [1, total_pages]; пустой при total_pages == 0.
    """
    total = config.total_pages
    current = config.current_page
    pages = set(_clipped(1, config.left + 1, total))
    pages.update(_clipped(total - config.right, total, total))
    pages.update(_clipped(current - config.window - 1, current + config.window + 1, total))
    pages.update(p for p in config.left_decade if 1 <= p <= total)
    pages.update(p for p in config.right_decade if 1 <= p <= total)
    return sorted(pages)


@dataclass(frozen=True)
class Gap:
    """Пропущенные страницы start..end (включительно) между двумя показанными."""
    start: int
    end: int

    is_gap = True

    @property
    def size(self) -> int:
        return self.end - self.start + 1


Entry = Union[PageProxy, Gap]


class PageWindow:
    """Окно пагинации для одного рендера.

    Итерация ленивая и перезапускаемая: каждый проход заново строит PageProxy
    по relevant_pages(config).
    """

    def __init__(self, config: WindowConfig):
        self.config = config

    @classmethod
    def from_options(cls, **options) -> "PageWindow":
        return cls(WindowConfig.from_options(**options))

    def relevant_pages(self) -> List[int]:
        return relevant_pages(self.config)

    def __iter__(self) -> Iterator[PageProxy]:
        for number in relevant_pages(self.config):
            yield PageProxy(self.config, number)

    def each_relevant_page(self) -> Iterator[PageProxy]:
        return iter(self)

    each_page = each_relevant_page

    def entries(self) -> Iterator[Entry]:
        """Страницы вперемешку с Gap там, где соседние номера не подряд."""
        previous: Optional[PageProxy] = None
        for page in self:
            if page.was_truncated(previous):
                yield Gap(start=previous.number + 1, end=page.number - 1)
            yield page
            previous = page

    @property
    def should_render(self) -> bool:
        """При одной странице (или нуле) контролы пагинации не рисуются."""
        return self.config.total_pages > 1

    @property
    def current_page(self) -> PageProxy:
        return PageProxy(self.config, self.config.current_page)

    def _page_or_none(self, number: int) -> Optional[PageProxy]:
        if 1 <= number <= self.config.total_pages:
            return PageProxy(self.config, number)
        return None

    @property
    def first_page(self) -> Optional[PageProxy]:
        return self._page_or_none(1)

    @property
    def last_page(self) -> Optional[PageProxy]:
        return self._page_or_none(self.config.total_pages)

    @property
    def prev_page(self) -> Optional[PageProxy]:
        return self._page_or_none(self.config.current_page - 1)

    @property
    def next_page(self) -> Optional[PageProxy]:
        return self._page_or_none(self.config.current_page + 1)
