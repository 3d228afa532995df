import logging
from typing import Any, Dict

from django.core.management.base import BaseCommand, CommandError, CommandParser

from pager.services.pagination import PageWindow
from pager.services.window_config import InvalidConfiguration

logger = logging.getLogger(__name__)

GAP_MARK = "…"

OPTION_NAMES = (
    "window", "outer_window", "left", "right",
    "decade", "decade_left", "decade_right",
)


def format_window(window: PageWindow) -> str:
    """Окно одной строкой: «1 2 … 9 [10] 11 … 20»."""
    parts = []
    for entry in window.entries():
        if entry.is_gap:
            parts.append(GAP_MARK)
        elif entry.current:
            parts.append(f"[{entry}]")
        else:
            parts.append(str(entry))
    return " ".join(parts)


class Command(BaseCommand):
    help = "Показать окно пагинации для заданных total/current и размеров окон (без настроек — дефолты PAGER)."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--total", type=int, required=True, help="Всего страниц")
        parser.add_argument("--current", type=int, default=1, help="Текущая страница (вне диапазона — зажимается)")
        parser.add_argument("--window", type=int, default=None)
        parser.add_argument("--outer-window", type=int, default=None)
        parser.add_argument("--left", type=int, default=None)
        parser.add_argument("--right", type=int, default=None)
        parser.add_argument("--decade", type=int, default=None)
        parser.add_argument("--decade-left", type=int, default=None)
        parser.add_argument("--decade-right", type=int, default=None)

    def handle(self, *args, **opts):
        options: Dict[str, Any] = {name: opts.get(name) for name in OPTION_NAMES}
        try:
            window = PageWindow.from_options(
                total_pages=opts["total"],
                current_page=opts["current"],
                **options,
            )
        except InvalidConfiguration as exc:
            raise CommandError(f"Неверные параметры окна: {exc}") from exc

        if not window.should_render:
            self.stdout.write(self.style.WARNING("! Страниц меньше двух — пагинация не рисуется"))
            return

        line = format_window(window)
        logger.info("Page window for %s/%s: %s", window.config.current_page, window.config.total_pages, line)
        self.stdout.write(line)
