# PW/pager/services/page_proxy.py
from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .window_config import WindowConfig


def _number(other: Any) -> Optional[int]:
    if isinstance(other, PageProxy):
        return other.number
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


@total_ordering
class PageProxy:
    """Номер страницы + конфигурация окна; отвечает, каким тегом её рисовать.

    Все предикаты — свойства, чтобы их можно было звать из шаблона:
    {% if page.current %} … {% elif page.left_outer %} …
    """

    __slots__ = ("config", "number")

    is_gap = False

    def __init__(self, config: "WindowConfig", number: int):
        self.config = config
        self.number = int(number)

    # ---------- классификация ----------
    @property
    def current(self) -> bool:
        return self.number == self.config.current_page

    @property
    def first(self) -> bool:
        return self.number == 1

    @property
    def last(self) -> bool:
        return self.number == self.config.total_pages

    @property
    def prev(self) -> bool:
        return self.number == self.config.current_page - 1

    @property
    def next(self) -> bool:
        return self.number == self.config.current_page + 1

    @property
    def left_outer(self) -> bool:
        """Внутри левого внешнего окна (страницы декады сюда не входят)."""
        return self.number <= self.config.left and not self.left_decade

    @property
    def right_outer(self) -> bool:
        """Внутри правого внешнего окна (страницы декады сюда не входят)."""
        return self.config.total_pages - self.number < self.config.right and not self.right_decade

    @property
    def inside_window(self) -> bool:
        return abs(self.config.current_page - self.number) <= self.config.window

    @property
    def left_decade(self) -> bool:
        return self.number in self.config.left_decade

    @property
    def right_decade(self) -> bool:
        return self.number in self.config.right_decade

    def was_truncated(self, previous: Any) -> bool:
        """Перед этой страницей рисовался разрыв: предыдущая не соседняя.

        previous — предыдущая выведенная страница (PageProxy или int) либо None.
        """
        before = _number(previous)
        return before is not None and self.number - before > 1

    # ---------- числовое поведение ----------
    def __int__(self) -> int:
        return self.number

    __index__ = __int__

    def __str__(self) -> str:
        return str(self.number)

    def __repr__(self) -> str:
        return f"PageProxy({self.number})"

    def __add__(self, other: Any) -> int:
        value = _number(other)
        if value is None:
            return NotImplemented
        return self.number + value

    __radd__ = __add__

    def __sub__(self, other: Any) -> int:
        value = _number(other)
        if value is None:
            return NotImplemented
        return self.number - value

    def __rsub__(self, other: Any) -> int:
        value = _number(other)
        if value is None:
            return NotImplemented
        return value - self.number

    def __eq__(self, other: Any) -> bool:
        value = _number(other)
        if value is None:
            return NotImplemented
        return self.number == value

    def __lt__(self, other: Any) -> bool:
        value = _number(other)
        if value is None:
            return NotImplemented
        return self.number < value

    def __hash__(self) -> int:
        return hash(self.number)
