import pytest

from pager.services.page_proxy import PageProxy
from pager.services.window_config import WindowConfig


@pytest.fixture
def config():
    # 100 страниц, текущая 50, окно 2, внешние 3, декады по 2 десятка
    return WindowConfig(total_pages=100, current_page=50, window=2, left=3, right=3, decade_left=2, decade_right=2)


def flags(page):
    names = ("current", "first", "last", "prev", "next", "left_outer", "right_outer",
             "inside_window", "left_decade", "right_decade")
    return {name for name in names if getattr(page, name)}


@pytest.mark.parametrize("number, expected", [
    (1, {"first", "left_decade"}),            # 1 в декаде → не left_outer
    (2, {"left_outer"}),
    (3, {"left_outer"}),
    (4, set()),
    (10, {"left_decade"}),
    (20, {"left_decade"}),
    (48, {"inside_window"}),
    (49, {"prev", "inside_window"}),
    (50, {"current", "inside_window"}),
    (51, {"next", "inside_window"}),
    (53, set()),
    (80, {"right_decade"}),
    (90, {"right_decade"}),
    (98, {"right_outer"}),
    (99, {"right_outer"}),
    (100, {"last", "right_decade"}),          # total в правой декаде → не right_outer
])
def test_classification(config, number, expected):
    assert flags(PageProxy(config, number)) == expected


def test_outer_window_without_decades():
    cfg = WindowConfig(total_pages=10, current_page=1, window=2, left=1, right=1, decade_left=0, decade_right=0)
    assert PageProxy(cfg, 1).left_outer
    assert not PageProxy(cfg, 2).left_outer
    assert PageProxy(cfg, 10).right_outer
    assert not PageProxy(cfg, 9).right_outer


def test_was_truncated_is_adjacency(config):
    page = PageProxy(config, 10)
    assert page.was_truncated(PageProxy(config, 3))
    assert page.was_truncated(8)
    assert not page.was_truncated(9)
    assert not page.was_truncated(None)


def test_arithmetic_returns_plain_int(config):
    a, b = PageProxy(config, 7), PageProxy(config, 3)
    assert a + 1 == 8 and type(a + 1) is int
    assert 1 + a == 8
    assert a - b == 4 and type(a - b) is int
    assert 10 - a == 3
    assert a + b == 10


def test_ordering_and_equality(config):
    a, b = PageProxy(config, 7), PageProxy(config, 3)
    assert b < a
    assert a >= 7
    assert a == 7
    assert a != b
    assert sorted([a, b]) == [3, 7]
    assert max(a, b) is a
    assert len({a, PageProxy(config, 7)}) == 1


def test_conversions(config):
    page = PageProxy(config, 12)
    assert int(page) == 12
    assert str(page) == "12"
    assert list(range(30))[page] == 12
    assert not page.is_gap


def test_foreign_types_are_not_comparable(config):
    page = PageProxy(config, 12)
    assert page != "12"
    with pytest.raises(TypeError):
        page + "1"
    with pytest.raises(TypeError):
        page < "13"
