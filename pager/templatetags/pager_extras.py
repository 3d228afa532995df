from django import template

from pager.services.pagination import PageWindow
from pager.services.window_config import InvalidConfiguration

register = template.Library()

PAGE_OBJ_OPTIONS = frozenset({"total_pages", "num_pages", "current_page"})

@register.simple_tag
def page_window(page_obj, **options):
    """
    Окно пагинации для django.core.paginator.Page.
    Разметку рисует шаблон; тег отдаёт только страницы, разрывы и флаги.
    Использование в шаблоне:
      {% load pager_extras %}
      {% page_window page_obj window=2 outer_window=1 as win %}
      {% if win.show %}{% for entry in win.entries %}
        {% if entry.is_gap %}…{% elif entry.current %}[{{ entry }}]{% else %}{{ entry }}{% endif %}
      {% endfor %}{% endif %}
    """
    # число страниц и текущая берутся только из page_obj
    clashing = sorted(PAGE_OBJ_OPTIONS & set(options))
    if clashing:
        raise InvalidConfiguration(f"page_window takes {', '.join(clashing)} from page_obj, not from tag arguments")

    window = PageWindow.from_options(
        total_pages=page_obj.paginator.num_pages,
        current_page=page_obj.number,
        **options,
    )
    show = window.should_render  # одна страница — контролы не рисуем
    return {
        "show": show,
        "entries": list(window.entries()) if show else [],
        "pages": list(window) if show else [],
        "current": window.current_page,
        "first": window.first_page,
        "last": window.last_page,
        "prev": window.prev_page,
        "next": window.next_page,
        "total_pages": window.config.total_pages,
    }
