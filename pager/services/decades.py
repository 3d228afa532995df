# PW/pager/services/decades.py
from __future__ import annotations
from typing import Tuple


def left_decade(decade_left: int, total_pages: int) -> Tuple[int, ...]:
    """«Круглые» страницы от начала: 1, 10, 20, … до decade_left * 10.

    Parameters
    ----------
    decade_left : int
        Размер окна в десятках; 0 — окна нет.
    total_pages : int
        Общее число страниц.

    Returns
    -------
    Tuple[int, ...]
        Номера по возрастанию, только из [1, total_pages].
        Граница decade_left * 10 включается.
    """
    if decade_left <= 0 or total_pages < 1:
        return ()
    limit = min(decade_left * 10, total_pages)
    return (1,) + tuple(range(10, limit + 1, 10))


def right_decade(decade_right: int, total_pages: int) -> Tuple[int, ...]:
    """«Круглые» страницы от конца: total_pages и кратные десяти вниз до total_pages - decade_right * 10.

    Parameters
    ----------
    decade_right : int
        Размер окна в десятках; 0 — окна нет.
    total_pages : int
        Общее число страниц.

    Returns
    -------
    Tuple[int, ...]
        Номера по возрастанию (считаем вниз, храним вверх), только из [1, total_pages].
        Нижняя граница включается, если она кратна десяти.
    """
    if decade_right <= 0 or total_pages < 1:
        return ()
    limit = max(total_pages - decade_right * 10, 1)
    top = total_pages // 10 * 10
    pages = set(range(top, limit - 1, -10))
    pages.add(total_pages)
    return tuple(sorted(p for p in pages if p >= 1))
