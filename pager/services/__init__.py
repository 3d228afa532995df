from .window_config import InvalidConfiguration, WindowConfig
from .decades import left_decade, right_decade
from .page_proxy import PageProxy
from .pagination import Gap, PageWindow, relevant_pages

__all__ = [
    "InvalidConfiguration",
    "WindowConfig",
    "left_decade",
    "right_decade",
    "PageProxy",
    "Gap",
    "PageWindow",
    "relevant_pages",
]
