# PW/pager/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PW/pager/api_urls.py
# Назначение: маршруты API окна пагинации
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path                                    # функции маршрутизации
from . import api_views                                         # импорт функций API

urlpatterns = [
    path("page-window/", api_views.api_page_window, name="page_window"),  # окно пагинации
]
