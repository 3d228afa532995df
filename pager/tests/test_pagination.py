import pytest

from pager.services.pagination import Gap, PageWindow, relevant_pages
from pager.services.page_proxy import PageProxy


def test_small_collection_scenario(make_window):
    win = make_window(total_pages=10, current_page=1, window=2, left=1, right=1, decade=0)
    assert win.relevant_pages() == [1, 2, 3, 4, 9, 10]

    first, *_, last = list(win)
    assert first.first and first.current and first.left_outer
    assert last.last and not last.current


def test_decade_scenario(make_window):
    win = make_window(total_pages=100, current_page=50, window=2, left=2, right=2, decade_left=1, decade_right=1)
    pages = win.relevant_pages()
    assert {1, 2, 3, 10, 48, 49, 50, 51, 52, 90, 98, 99, 100} <= set(pages)
    assert pages == [1, 2, 3, 10, 47, 48, 49, 50, 51, 52, 53, 90, 98, 99, 100]

    gaps = [entry for entry in win.entries() if entry.is_gap]
    assert gaps == [Gap(4, 9), Gap(11, 46), Gap(54, 89), Gap(91, 97)]


@pytest.mark.parametrize("total", [0, 1])
def test_single_page_is_not_rendered(make_window, total):
    win = make_window(total_pages=total, current_page=1)
    assert win.relevant_pages() in ([], [1])
    assert not win.should_render


def test_zero_pages_yield_nothing(make_window):
    win = make_window(total_pages=0)
    assert list(win) == []
    assert list(win.entries()) == []
    assert win.first_page is None
    assert win.last_page is None


def test_huge_collection_is_not_enumerated(make_window):
    win = make_window(total_pages=10 ** 12, current_page=5 * 10 ** 11, window=1, left=1, right=1)
    pages = win.relevant_pages()
    assert len(pages) == 2 + 2 + 5
    assert pages[0] == 1
    assert pages[-1] == 10 ** 12


def test_huge_outer_window_is_clipped(make_window):
    win = make_window(total_pages=5, current_page=3, window=10 ** 9, left=10 ** 9, right=10 ** 9)
    assert win.relevant_pages() == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("total", [1, 2, 7, 10, 33, 100, 1001])
@pytest.mark.parametrize("current", [1, 2, 5, 17, 50, 1001])
@pytest.mark.parametrize("window", [0, 1, 4])
@pytest.mark.parametrize("decade", [0, 1, 3])
def test_window_properties(make_window, total, current, window, decade):
    win = make_window(total_pages=total, current_page=current, window=window, decade=decade)
    cfg = win.config
    pages = win.relevant_pages()

    # строго по возрастанию и в диапазоне
    assert all(a < b for a, b in zip(pages, pages[1:]))
    assert all(1 <= p <= total for p in pages)
    # края всегда на месте
    assert pages[0] == 1
    assert pages[-1] == total
    # внутреннее окно целиком внутри
    for i in range(cfg.current_page - window, cfg.current_page + window + 1):
        if 1 <= i <= total:
            assert i in pages
    # повторный вызов даёт то же самое
    assert relevant_pages(cfg) == pages
    # текущая страница ровно одна
    assert sum(1 for p in win if p.current) == 1
    for page in win:
        assert not (page.left_outer and page.left_decade)
        assert not (page.right_outer and page.right_decade)
        if page.first:
            assert page.number == 1


def test_iteration_is_restartable(make_window):
    win = make_window(total_pages=40, current_page=20, window=1)
    assert [int(p) for p in win] == [int(p) for p in win]
    assert list(win.each_page()) == list(win.each_relevant_page())
    assert all(isinstance(p, PageProxy) for p in win)


def test_entries_insert_gap_between_non_adjacent_pages(make_window):
    win = make_window(total_pages=20, current_page=10, window=1, left=1, right=1)
    rendered = ["…" if e.is_gap else str(e) for e in win.entries()]
    assert rendered == ["1", "2", "…", "8", "9", "10", "11", "12", "…", "19", "20"]


def test_no_gap_when_pages_are_adjacent(make_window):
    win = make_window(total_pages=6, current_page=3, window=1, left=1, right=1)
    assert not any(e.is_gap for e in win.entries())


def test_page_after_gap_was_truncated(make_window):
    win = make_window(total_pages=20, current_page=10, window=1, left=1, right=1)
    items = list(win.entries())
    previous = None
    for before, entry in zip([None] + items, items):
        if entry.is_gap:
            continue
        # разрыв перед страницей <=> предыдущая показанная страница не соседняя
        assert entry.was_truncated(previous) == (before is not None and before.is_gap)
        previous = entry
    assert [e.size for e in items if e.is_gap] == [5, 6]


def test_navigation_pages(make_window):
    win = make_window(total_pages=10, current_page=1)
    assert win.prev_page is None
    assert win.next_page == 2
    assert win.first_page == 1
    assert win.last_page == 10
    assert win.current_page.current

    win = make_window(total_pages=10, current_page=10)
    assert win.next_page is None
    assert win.prev_page == 9


def test_from_options_uses_settings(make_window, pager_settings):
    pager_settings.PAGER = {**pager_settings.PAGER, "WINDOW": 0, "OUTER_WINDOW": 0}
    win = PageWindow.from_options(total_pages=100, current_page=50)
    assert win.relevant_pages() == [1, 49, 50, 51, 100]
